"""
Notifications Module - SMTP mail transport for the contact relay
"""

import smtplib
from email.errors import MessageError
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from flask import current_app
from .errors import MailTransportError


class Mailer:
    """
    SMTP transport bound to the application configuration

    Every send opens its own connection with the configured timeout and
    raises MailTransportError instead of returning a status flag.
    """

    def __init__(self, app=None):
        self.host = None
        self.port = 587
        self.username = None
        self.password = None
        self.use_tls = True
        self.timeout = 10.0
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.host = app.config.get('SMTP_HOST')
        self.port = int(app.config.get('SMTP_PORT', 587))
        self.username = app.config.get('EMAIL_USER')
        self.password = app.config.get('EMAIL_PASS')
        self.use_tls = app.config.get('SMTP_USE_TLS', True)
        self.timeout = float(app.config.get('MAIL_SEND_TIMEOUT', 10))
        app.extensions['mailer'] = self

    @property
    def sender(self):
        return self.username

    @property
    def is_configured(self):
        return all([self.host, self.port, self.username, self.password])

    def build_message(self, recipient, subject, html_body, text_body=None):
        """
        Build a multipart message from the configured sender

        Args:
            recipient (str): Email recipient
            subject (str): Email subject
            html_body (str): HTML part
            text_body (str, optional): Plain text alternative

        Returns:
            MIMEMultipart: Message ready for send()
        """
        msg = MIMEMultipart('alternative')
        msg['Subject'] = subject
        msg['From'] = self.sender or ''
        msg['To'] = recipient

        if text_body:
            msg.attach(MIMEText(text_body, 'plain', 'utf-8'))
        msg.attach(MIMEText(html_body, 'html', 'utf-8'))
        return msg

    def send(self, msg):
        """Deliver one message, raising MailTransportError on any failure"""
        if not self.is_configured:
            raise MailTransportError('SMTP credentials are not configured')

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                if self.use_tls:
                    server.starttls()
                server.login(self.username, self.password)
                server.send_message(msg)
        except (smtplib.SMTPException, MessageError, OSError) as e:
            raise MailTransportError(f"Error sending email to {msg['To']}: {str(e)}") from e

        current_app.logger.info(f"Email sent to {msg['To']}")


def relay_contact_messages(mailer, messages):
    """
    Send messages strictly in order

    The first failure propagates and the remaining messages are never
    attempted.
    """
    for msg in messages:
        mailer.send(msg)


__all__ = ['Mailer', 'relay_contact_messages']
