"""
UI Helper Functions - navigation and per-page styling for templates
"""

from flask import request, url_for
from typing import Dict, List, Optional


# Order of links in the site header; (endpoint, label)
NAV_ITEMS = [
    ('pages.index', 'Home'),
    ('pages.about', 'About'),
    ('pages.skills', 'Skills'),
    ('pages.portfolio', 'Portfolio'),
    ('pages.events', 'Events'),
    ('pages.blog', 'Blog'),
    ('pages.interests', 'Interests'),
    ('pages.photos', 'Photos'),
    ('contact.contact', 'Contact'),
]


def get_nav_items(current_endpoint: Optional[str] = None) -> List[Dict]:
    """
    Build the header navigation.

    Args:
        current_endpoint: endpoint of the page being rendered

    Returns:
        list: dicts with ``url``, ``label`` and ``active`` keys
    """
    return [
        {
            'url': url_for(endpoint),
            'label': label,
            'active': endpoint == current_endpoint,
        }
        for endpoint, label in NAV_ITEMS
    ]


def get_page_specific_class(blueprint_name: Optional[str], endpoint_name: Optional[str]) -> str:
    """
    CSS class for the <body> tag of the current page

    Example:
        >>> get_page_specific_class('pages', 'about')
        'page-pages page-about'
    """
    classes = []
    if blueprint_name:
        classes.append(f'page-{blueprint_name}')
    if endpoint_name:
        classes.append(f'page-{endpoint_name}')
    return ' '.join(classes)


def inject_ui_context() -> Dict:
    """Template variables shared by every page"""
    endpoint = request.endpoint
    endpoint_name = endpoint.split('.')[-1] if endpoint else None
    return {
        'nav_items': get_nav_items(endpoint),
        'page_class': get_page_specific_class(request.blueprint, endpoint_name),
    }
