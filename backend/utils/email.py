"""
SMTP Email Utility for the form relay

Delivers one notification per call through an authenticated SMTP server.
It supports both SSL (port 465) and TLS (port 587) connections.

Gmail SMTP Settings (the default transport):
- Server: smtp.gmail.com
- SSL Port: 465 (uses SMTP_SSL)
- TLS Port: 587 (uses STARTTLS)
- Authentication: Required (account address and an App Password)

Failures raise DeliveryError and are never retried here.
"""

import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from email.utils import formataddr
import logging
import socket
import ssl
import threading

# Configure logging
logger = logging.getLogger(__name__)


class DeliveryError(Exception):
    """The transport refused the message or could not be reached"""


# Name used by callers that think in terms of a failed send
SendFailure = DeliveryError


def get_smtp_config(settings):
    """
    Build the SMTP configuration from application settings.

    Args:
        settings: Mapping with the SMTP_* keys (usually app.config)

    Returns:
        dict: SMTP configuration containing all necessary settings
    """
    username = settings.get('SMTP_USER', '')
    config = {
        'host': settings.get('SMTP_SERVER', 'smtp.gmail.com'),
        'port': int(settings.get('SMTP_PORT', 465)),
        'username': username,
        'password': settings.get('SMTP_PASS', ''),
        'from_email': settings.get('SMTP_FROM_EMAIL') or username,
        'from_name': settings.get('SMTP_FROM_NAME', ''),
        'encryption': settings.get('SMTP_ENCRYPTION', 'ssl'),  # 'ssl', 'tls', or 'none'
        'timeout': int(settings.get('SMTP_TIMEOUT', 30)),
    }
    return config


def create_smtp_connection(config):
    """
    Create and return an SMTP connection based on configuration.

    - SSL on port 465: Use SMTP_SSL
    - TLS on port 587: Use SMTP with STARTTLS

    Args:
        config: Dictionary containing SMTP configuration

    Returns:
        smtplib.SMTP or smtplib.SMTP_SSL: Connected and authenticated SMTP server
    """
    host = config['host']
    port = config['port']
    encryption = config.get('encryption', 'ssl')
    timeout = config.get('timeout', 30)
    username = config['username']
    password = config['password']

    if not username or not password:
        raise DeliveryError("SMTP credentials not configured")

    # Create SSL context for secure connections
    context = ssl.create_default_context()

    logger.debug(f"Connecting to SMTP server: {host}:{port} with encryption: {encryption}")

    if encryption == 'ssl' or (port == 465 and encryption != 'none'):
        server = smtplib.SMTP_SSL(host, port, context=context, timeout=timeout)
        use_starttls = False
    else:
        server = smtplib.SMTP(host, port, timeout=timeout)
        use_starttls = encryption == 'tls' or port == 587

    try:
        server.ehlo()
        if use_starttls:
            server.starttls(context=context)
            server.ehlo()
        server.login(username, password)
    except (smtplib.SMTPException, OSError):
        # The socket is open; don't leave it for the garbage collector
        server.close()
        raise

    return server


def build_message(from_email, from_name, to_email, email):
    """Assemble the multipart/alternative message for a ComposedEmail"""
    msg = MIMEMultipart('alternative')
    msg['From'] = formataddr((from_name, from_email)) if from_name else from_email
    msg['To'] = to_email
    msg['Subject'] = email.subject
    # Replies reach the submitter, not the relay account
    msg['Reply-To'] = email.reply_to

    msg.attach(MIMEText(email.text, 'plain', 'utf-8'))
    msg.attach(MIMEText(email.html, 'html', 'utf-8'))
    return msg


class SmtpMailSender:
    """
    Sends composed notifications through one preconfigured SMTP account.

    The sender holds only immutable settings; each send opens its own
    connection, so one instance can serve concurrent requests.
    """

    def __init__(self, config):
        self.config = dict(config)

    @classmethod
    def from_settings(cls, settings):
        return cls(get_smtp_config(settings))

    @property
    def from_email(self):
        return self.config['from_email']

    def send(self, to_email, email):
        """
        Send one email.

        Args:
            to_email: Recipient address
            email: ComposedEmail with subject, bodies and reply-to

        Raises:
            DeliveryError: the message was not accepted by the transport
        """
        if not to_email:
            raise DeliveryError("No recipient email address configured")

        msg = build_message(self.from_email, self.config.get('from_name'), to_email, email)
        server = None

        try:
            server = create_smtp_connection(self.config)
            server.sendmail(self.from_email, [to_email], msg.as_string())
            logger.info(f"Email sent successfully to {to_email}")

        except smtplib.SMTPAuthenticationError as e:
            raise DeliveryError(f"SMTP authentication failed: {e}") from e

        except smtplib.SMTPConnectError as e:
            raise DeliveryError(f"Failed to connect to SMTP server: {e}") from e

        except smtplib.SMTPServerDisconnected as e:
            raise DeliveryError(f"SMTP server disconnected unexpectedly: {e}") from e

        except smtplib.SMTPRecipientsRefused as e:
            raise DeliveryError(f"Recipient refused: {e}") from e

        except smtplib.SMTPException as e:
            raise DeliveryError(f"SMTP error: {e}") from e

        except (OSError, socket.timeout) as e:
            raise DeliveryError(f"Connection to SMTP server failed: {e}") from e

        finally:
            if server:
                try:
                    server.quit()
                except (smtplib.SMTPException, OSError):
                    pass

    def verify(self):
        """
        Test the SMTP connection with current settings.

        Returns:
            tuple: (success: bool, message: str)
        """
        config = self.config

        if not config['username'] or not config['password']:
            return False, "SMTP credentials not configured"

        try:
            server = create_smtp_connection(config)
            server.quit()
            return True, f"Successfully connected to {config['host']}:{config['port']}"

        except smtplib.SMTPAuthenticationError:
            return False, "Authentication failed. Check username and password."

        except smtplib.SMTPConnectError as e:
            return False, f"Connection failed: {e}"

        except (smtplib.SMTPException, DeliveryError, OSError) as e:
            return False, f"Error: {e}"

    def verify_in_background(self):
        """
        Check the transport on a daemon thread and log the outcome.

        The result never gates individual sends.
        """
        def verify_task():
            ok, message = self.verify()
            if ok:
                logger.info(f"Email transporter is ready to send messages ({message})")
            else:
                logger.error(f"Email transporter error: {message}")

        thread = threading.Thread(target=verify_task, name='smtp-verify', daemon=True)
        thread.start()
        return thread
