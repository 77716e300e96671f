from flask import Blueprint
from werkzeug.exceptions import HTTPException

api = Blueprint('api', __name__)

# Import Blueprints
from .contact import contact_bp
from .inquiry import inquiry_bp
from .health import health_bp
from .utils import error_response

# Register Blueprints
api.register_blueprint(contact_bp)
api.register_blueprint(inquiry_bp)
api.register_blueprint(health_bp)


def register_error_handlers(app):
    """Answer routing and protocol errors with the same JSON shape as the forms"""
    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        return error_response(e.name, e.code)
