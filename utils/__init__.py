"""
Utils Package - Centralized utility modules initialization
"""

from .notifications import (
    SMTPTransport,
    compose_contact_message,
    deliver,
    handle_submission
)
from .security import (
    get_client_ip,
    init_https_enforcement,
    add_security_headers
)
from .ui_helpers import (
    get_nav_items,
    get_page_specific_class,
    inject_ui_context
)

__all__ = [
    # Notifications
    'SMTPTransport',
    'compose_contact_message',
    'deliver',
    'handle_submission',

    # Security
    'get_client_ip',
    'init_https_enforcement',
    'add_security_headers',

    # UI Helpers
    'get_nav_items',
    'get_page_specific_class',
    'inject_ui_context'
]
