"""Verification protocol for the external identity provider."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class VerificationBackend(Protocol):
    """
    Protocol for sending account verification to a new customer.

    Called by services.customer.register() after the customer is stored.
    Implemented by adapters/mail.py.

    Configuration in settings.py:
        REWARDMAN = {
            "VERIFICATION_BACKEND": "rewardman.adapters.mail.MailVerificationBackend",
        }
    """

    def send_verification(self, customer) -> bool:
        """
        Ask the customer to verify their email.

        Args:
            customer: Newly registered Customer

        Returns:
            True if the verification was dispatched
        """
        ...
