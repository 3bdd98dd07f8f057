"""
Contact Routes - Contact form relay
"""

from flask import request, jsonify, current_app
from pydantic import ValidationError
from models import ContactRequest
from extensions import mailer
from utils.decorators import rate_limited
from utils.errors import ContactValidationError, UnauthorizedError, MailTransportError
from utils.helpers import build_operator_email, build_acknowledgment_email
from utils.notifications import relay_contact_messages
from utils.security import get_client_ip, verify_shared_secret
from . import contact_bp


def _validation_errors(error):
    """Flatten pydantic errors into {field, message} pairs"""
    errors = []
    for item in error.errors():
        field = '.'.join(str(part) for part in item.get('loc', ())) or 'body'
        errors.append({'field': field, 'message': item.get('msg', 'Invalid value')})
    return errors


def parse_contact_request():
    """Validate the JSON body in one pass, raising ContactValidationError"""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ContactValidationError(errors=[{'field': 'body', 'message': 'Expected a JSON object'}])

    try:
        return ContactRequest.from_payload(payload)
    except ValidationError as e:
        raise ContactValidationError(errors=_validation_errors(e)) from e


@contact_bp.route('/sendMessage', methods=['POST'])
@rate_limited('contact')
def send_message():
    """Validate, authorize and relay a contact submission by email"""
    client_ip = get_client_ip()

    try:
        contact = parse_contact_request()
    except ContactValidationError as e:
        current_app.logger.warning(f"Rejected contact payload from {client_ip}: {e.errors}")
        raise

    if not verify_shared_secret(contact.shared_secret):
        current_app.logger.warning(f"Unauthorized contact attempt from {client_ip}")
        raise UnauthorizedError()

    if contact.is_spam:
        current_app.logger.warning(f"Honeypot triggered by {client_ip}, message dropped")
        return jsonify({'success': True, 'message': 'Message sent successfully!'})

    messages = [
        build_operator_email(mailer, contact, current_app.config.get('RECIPIENT_EMAIL') or mailer.sender),
        build_acknowledgment_email(mailer, contact, current_app.config.get('SITE_OWNER_NAME', '')),
    ]

    try:
        relay_contact_messages(mailer, messages)
    except MailTransportError as e:
        current_app.logger.error(f"Email error: {str(e)}")
        return jsonify({'success': False, 'error': 'Failed to send message'}), 500

    current_app.logger.info(f"Email sent from {contact.name} ({contact.email})")
    return jsonify({'success': True, 'message': 'Message sent successfully!'})
