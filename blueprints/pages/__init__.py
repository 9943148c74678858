"""
Pages Blueprint - Public static pages
Handles: Home, About, Skills, Portfolio, Events, Blog, Interests, Photos, Site Map
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
