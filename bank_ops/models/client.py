"""Client model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Client:
    """Bank client identity data."""

    name: str
    national_id: str  # CPF, XXX.XXX.XXX-XX
    address: str
    phone: str

    def info(self) -> str:
        """One-line summary used by listings."""
        return f"{self.name} | CPF: {self.national_id} | {self.phone}"
