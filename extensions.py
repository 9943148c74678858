"""
Extensions Module - Centralized initialization of Flask extensions
Decouples extensions from the main app.py to avoid circular imports
and enable better testing.
"""

from flask import current_app

from config import MailSettings
from utils.notifications import SMTPTransport


class ContactMailer:
    """
    Holds the validated mail settings and transport factory for each app.

    Settings are read once in ``init_app``; a missing mailbox account or
    password raises ``ConfigurationError`` so the app never starts serving.
    """

    extension_name = 'contact_mailer'

    def __init__(self, app=None, transport_factory=SMTPTransport):
        self.transport_factory = transport_factory
        if app is not None:
            self.init_app(app)

    def init_app(self, app, transport_factory=None):
        settings = MailSettings.from_config(app.config)
        app.extensions[self.extension_name] = {
            'settings': settings,
            'transport_factory': transport_factory or self.transport_factory,
        }
        app.logger.info(f"Contact mailer ready for {settings.username} via {settings.host}:{settings.port}")

    def _state(self, app=None):
        app = app or current_app
        return app.extensions[self.extension_name]

    def settings(self, app=None):
        return self._state(app)['settings']

    def transport_factory_for(self, app=None):
        return self._state(app)['transport_factory']


# Initialize extensions without binding to app
mailer = ContactMailer()

__all__ = ['mailer', 'ContactMailer']
