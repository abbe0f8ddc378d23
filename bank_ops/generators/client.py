"""Client generator."""

from __future__ import annotations

from typing import Iterator

from bank_ops.generators.base import BaseGenerator
from bank_ops.models import Client


class ClientGenerator(BaseGenerator):
    """Generate synthetic bank clients."""

    def generate(self) -> Client:
        """Generate a single client.

        Returns
        -------
        Client
            Generated client.
        """
        return Client(
            name=self.fake.name(),
            national_id=self._national_id(),
            address=self.fake.address().replace("\n", ", "),
            phone=self.fake.phone_number(),
        )

    def generate_batch(self, count: int) -> Iterator[Client]:
        """Generate multiple clients.

        Parameters
        ----------
        count : int
            Number of clients to generate.

        Yields
        ------
        Client
            Generated clients.
        """
        for _ in range(count):
            yield self.generate()

    def _national_id(self) -> str:
        """CPF for Brazilian locales, the locale's SSN format otherwise."""
        if hasattr(self.fake, "cpf"):
            return self.fake.cpf()
        return self.fake.ssn()
