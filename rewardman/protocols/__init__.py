"""Rewardman protocols."""

from rewardman.protocols.customer import CustomerProfile
from rewardman.protocols.verification import VerificationBackend

__all__ = [
    # Customer
    "CustomerProfile",
    # Identity provider
    "VerificationBackend",
]
