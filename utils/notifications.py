"""
Notifications Module - Contact form email composition and delivery
"""

import asyncio
import smtplib
import ssl
from email.mime.text import MIMEText
from flask import current_app

from models import MailMessage, OutcomeView


class SMTPTransport:
    """
    One authenticated SMTP session over implicit TLS.

    A transport is created for a single send and closed right after;
    sessions are never shared between requests.
    """

    def __init__(self, settings):
        self.settings = settings

    def send(self, mail):
        """Deliver ``mail`` synchronously; smtplib errors propagate to the caller"""
        msg = MIMEText(mail.body, 'plain', 'utf-8')
        msg['Subject'] = mail.subject
        msg['From'] = mail.sender
        msg['To'] = mail.recipient

        context = ssl.create_default_context()
        with smtplib.SMTP_SSL(self.settings.host, self.settings.port,
                              timeout=self.settings.timeout,
                              context=context) as server:
            server.login(self.settings.username, self.settings.password)
            server.send_message(msg)


def compose_contact_message(submission, settings):
    """
    Build the email for a contact form submission.

    The site owner's mailbox is both sender and recipient; the submitter's
    name and address only appear in the body.
    """
    body = f"{submission.name} ({submission.email}) says: {submission.message}"
    return MailMessage(
        sender=settings.username,
        recipient=settings.username,
        subject=settings.subject,
        body=body,
    )


async def deliver(mail, settings, transport_factory=SMTPTransport):
    """Send ``mail`` once through a fresh transport without blocking the event loop"""
    transport = transport_factory(settings)
    await asyncio.to_thread(transport.send, mail)


async def handle_submission(submission, settings, transport_factory=SMTPTransport):
    """
    Turn a contact submission into an outcome view.

    Exactly one delivery attempt is made. Any transport error is logged and
    reported back in the outcome instead of propagating.
    """
    mail = compose_contact_message(submission, settings)
    try:
        await deliver(mail, settings, transport_factory)
    except Exception as e:
        current_app.logger.error(f"Contact email delivery failed via {settings.host}:{settings.port}: {str(e)}")
        return OutcomeView.failed(e)

    current_app.logger.info(f"Contact email from {submission.email or 'unknown sender'} delivered to {mail.recipient}")
    return OutcomeView.sent()
