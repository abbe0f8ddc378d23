"""Scenarios for building ready-to-use sample banks."""

from bank_ops.scenarios.sample_bank import SampleBank, SampleBankScenario

__all__ = ["SampleBank", "SampleBankScenario"]
