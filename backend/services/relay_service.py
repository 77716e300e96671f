import logging
from models.submission import ContactSubmission, InquirySubmission
from utils.validators import CONTACT_RULES, ValidationError, inquiry_rules, validate_form
from utils.email_templates import compose_contact_email, compose_inquiry_email

logger = logging.getLogger(__name__)


class RelayService:
    """
    Validates a form submission and relays it as one email.

    Holds no per-request state; a single instance is shared by all requests.
    """

    def __init__(self, sender, recipient, charger_types=None):
        self.sender = sender
        self.recipient = recipient
        self.contact_rules = CONTACT_RULES
        self.inquiry_rules = inquiry_rules(charger_types)

    @classmethod
    def from_app(cls, app, sender):
        return cls(
            sender=sender,
            recipient=app.config.get('RECIPIENT_EMAIL'),
            charger_types=app.config.get('CHARGER_TYPES'),
        )

    def _relay(self, data, rules, submission_cls, compose):
        cleaned, errors = validate_form(data, rules)
        if errors:
            raise ValidationError(errors)

        submission = submission_cls.from_dict(cleaned)
        email = compose(submission)

        # DeliveryError propagates to the caller untouched
        self.sender.send(self.recipient, email)
        return submission

    def submit_contact(self, data):
        """
        Relay a contact form submission.

        Returns:
            ContactSubmission: the cleaned submission that was sent

        Raises:
            ValidationError: one or more fields broke their rule
            DeliveryError: the transport did not accept the email
        """
        submission = self._relay(data, self.contact_rules, ContactSubmission, compose_contact_email)
        logger.info(f"Contact form relayed for {submission.email}")
        return submission

    def submit_inquiry(self, data):
        """Relay a product inquiry; raises like submit_contact"""
        submission = self._relay(data, self.inquiry_rules, InquirySubmission, compose_inquiry_email)
        logger.info(f"Product inquiry for {submission.charger_type} relayed for {submission.email}")
        return submission
