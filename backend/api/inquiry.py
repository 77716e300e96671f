import logging
from flask import Blueprint
from api.utils import success_response, error_response, get_relay_service, with_form_data
from utils.email import DeliveryError
from utils.validators import ValidationError

logger = logging.getLogger(__name__)

inquiry_bp = Blueprint('inquiry', __name__)


@inquiry_bp.route('/send-inquiry', methods=['POST'])
@with_form_data
def send_product_inquiry(data):
    """Submit product inquiry form"""
    try:
        get_relay_service().submit_inquiry(data)
    except ValidationError as e:
        logger.info(f"Product inquiry rejected: {e}")
        return error_response("Validation failed", 400, errors=e.errors)
    except DeliveryError:
        logger.exception("Error sending inquiry")
        return error_response("Failed to send inquiry", 500)

    return success_response("Inquiry sent successfully")
