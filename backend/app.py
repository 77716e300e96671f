import logging
import os
from flask import Flask
from flask_cors import CORS
from config import Config
from services.relay_service import RelayService
from utils.email import SmtpMailSender


def configure_logging(level_name):
    """Centralized logging configuration"""
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def create_app(config_object=Config, sender=None):
    """
    Application factory

    Args:
        config_object: Configuration class (Config or TestingConfig)
        sender: Mail sender to relay submissions through. Defaults to an
            SmtpMailSender built from the SMTP_* settings.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)

    configure_logging(app.config.get('LOG_LEVEL', 'INFO'))

    # Only the configured frontend may call the API
    CORS(app, resources={
        r"/*": {
            "origins": [app.config['CORS_ORIGIN']],
            "methods": ["GET", "POST", "OPTIONS"],
            "allow_headers": ["Content-Type"],
        }
    })

    if sender is None:
        sender = SmtpMailSender.from_settings(app.config)
        if app.config.get('VERIFY_SMTP_ON_STARTUP'):
            sender.verify_in_background()

    app.extensions['mail_sender'] = sender
    app.extensions['relay_service'] = RelayService.from_app(app, sender)

    # Register API blueprints
    from api import api, register_error_handlers
    app.register_blueprint(api)
    register_error_handlers(app)

    return app


if __name__ == '__main__':
    # Development server only
    app = create_app()
    host = os.environ.get('FLASK_HOST', '0.0.0.0')
    port = int(os.environ.get('PORT') or os.environ.get('FLASK_PORT', 5000))
    app.logger.info(f"Server running on port {port}")
    app.run(debug=app.config['DEBUG'], host=host, port=port)
