import logging
from flask import Blueprint
from api.utils import success_response, error_response, get_relay_service, with_form_data
from utils.email import DeliveryError
from utils.validators import ValidationError

logger = logging.getLogger(__name__)

contact_bp = Blueprint('contact', __name__)


@contact_bp.route('/send-email', methods=['POST'])
@with_form_data
def send_contact_email(data):
    """Submit contact form"""
    try:
        get_relay_service().submit_contact(data)
    except ValidationError as e:
        logger.info(f"Contact form rejected: {e}")
        return error_response("Validation failed", 400, errors=e.errors)
    except DeliveryError:
        logger.exception("Error sending email")
        return error_response("Failed to send email", 500)

    return success_response("Email sent successfully")
