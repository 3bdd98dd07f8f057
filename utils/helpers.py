"""
Helpers Module - Contact mail composition
"""

from datetime import datetime
from markupsafe import escape


def format_timestamp(moment=None):
    """Server-side timestamp shown in the operator notification"""
    moment = moment or datetime.now()
    return moment.strftime('%Y-%m-%d %H:%M:%S')


def build_operator_email(mailer, contact, recipient, sent_at=None):
    """
    Notification for the site owner carrying the full submission

    Args:
        mailer (Mailer): Transport used to build the message
        contact (ContactRequest): Validated submission
        recipient (str): Operator address
        sent_at (datetime, optional): Timestamp override

    Returns:
        MIMEMultipart: Message ready to send
    """
    phone = contact.phone or 'Not provided'
    timestamp = format_timestamp(sent_at)

    html_body = f"""
        <h2>New Contact Form Message</h2>
        <p><strong>Name:</strong> {escape(contact.name)}</p>
        <p><strong>Email:</strong> {escape(contact.email)}</p>
        <p><strong>Phone:</strong> {escape(phone)}</p>
        <p><strong>Message:</strong></p>
        <p>{escape(contact.message)}</p>
        <hr>
        <p><small>Sent on {timestamp}</small></p>
    """
    text_body = (
        f"New Contact Form Message\n\n"
        f"Name: {contact.name}\n"
        f"Email: {contact.email}\n"
        f"Phone: {phone}\n\n"
        f"Message:\n{contact.message}\n\n"
        f"Sent on {timestamp}"
    )
    return mailer.build_message(recipient, f"New Contact: {contact.name}", html_body, text_body)


def build_acknowledgment_email(mailer, contact, owner_name):
    """Thank-you message sent back to the submitter"""
    html_body = f"""
        <h2>Thank You {escape(contact.name)}!</h2>
        <p>I received your message and I will get back to you soon.</p>
        <p>Best regards,<br>{escape(owner_name)}</p>
    """
    text_body = (
        f"Thank You {contact.name}!\n\n"
        f"I received your message and I will get back to you soon.\n\n"
        f"Best regards,\n{owner_name}"
    )
    return mailer.build_message(
        contact.email,
        'Thanks for contacting me, Hope you are Fine!',
        html_body,
        text_body
    )
