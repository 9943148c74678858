"""
Contact Blueprint - Contact form display and submission
"""

from flask import Blueprint

contact_bp = Blueprint('contact', __name__, url_prefix='')

from . import routes
