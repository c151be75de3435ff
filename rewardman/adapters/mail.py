"""Django mail VerificationBackend adapter."""

from django.core.mail import send_mail


class MailVerificationBackend:
    """
    Adapter that implements VerificationBackend with django.core.mail.

    Configuration in settings.py:
        REWARDMAN = {
            "VERIFICATION_BACKEND": "rewardman.adapters.mail.MailVerificationBackend",
            "DEFAULT_FROM_EMAIL": "rewards@example.com",
        }
    """

    subject = "Verify your email"
    body = (
        "Hi {name},\n\n"
        "Thanks for joining our rewards program. Please verify your email "
        "address to activate your loyalty card.\n"
    )

    def send_verification(self, customer) -> bool:
        from rewardman.conf import rewardman_settings

        sent = send_mail(
            self.subject,
            self.body.format(name=customer.full_name),
            rewardman_settings.DEFAULT_FROM_EMAIL or None,
            [customer.email],
        )
        return bool(sent)
