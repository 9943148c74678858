"""
WSGI entry point for gunicorn: ``gunicorn -c gunicorn.conf.py wsgi:app``
"""

import logging

from dotenv import load_dotenv

from app import create_app

load_dotenv()
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Create app instance for gunicorn
app = create_app()
