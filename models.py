"""
Models - Request-scoped data passed between the contact view and the mailer.
Nothing here is persisted; every instance lives for a single request.
"""

from dataclasses import dataclass
from typing import Optional


CONTACT_TITLE = 'Contact'
SUCCESS_MESSAGE = 'Message Sent!'


@dataclass(frozen=True)
class ContactSubmission:
    """Raw, unvalidated fields from the public contact form"""

    name: str = ''
    email: str = ''
    message: str = ''

    @classmethod
    def from_form(cls, form):
        """Build a submission from a form mapping; absent fields become empty text"""
        return cls(
            name=form.get('name', ''),
            email=form.get('email', ''),
            message=form.get('message', ''),
        )


@dataclass(frozen=True)
class MailMessage:
    """Outbound email composed from one submission"""

    sender: str
    recipient: str
    subject: str
    body: str


@dataclass(frozen=True)
class OutcomeView:
    """
    Result shown on the contact page after a send attempt.

    Use ``sent()`` or ``failed()`` to build one: exactly one of
    ``success_message`` / ``error_detail`` is set. ``blank()`` is the empty
    form shown before anything was submitted.
    """

    title: str = CONTACT_TITLE
    success_message: Optional[str] = None
    error_detail: Optional[str] = None

    @classmethod
    def sent(cls):
        return cls(success_message=SUCCESS_MESSAGE)

    @classmethod
    def failed(cls, error):
        return cls(error_detail=f'Message could not be sent: {error}')

    @classmethod
    def blank(cls):
        return cls()

    @property
    def succeeded(self):
        return self.success_message is not None

    def as_context(self):
        """Template variables for pages/contact.html"""
        return {
            'title': self.title,
            'message': self.success_message,
            'error': self.error_detail,
        }
