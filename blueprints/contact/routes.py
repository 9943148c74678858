"""
Contact Routes - Contact form and email submission
"""

from flask import render_template, request, current_app
from extensions import mailer
from models import ContactSubmission, OutcomeView
from utils.notifications import handle_submission
from utils.security import get_client_ip
from . import contact_bp


@contact_bp.route('/contact', methods=['GET'])
def contact():
    """Contact form with no prior outcome"""
    return render_template('pages/contact.html', **OutcomeView.blank().as_context())


@contact_bp.route('/contact', methods=['POST'])
async def submit():
    """Send the submitted form to the site owner and render the outcome"""
    submission = ContactSubmission.from_form(request.form)
    current_app.logger.info(f"Contact form submitted from {get_client_ip()}")

    outcome = await handle_submission(
        submission,
        mailer.settings(),
        mailer.transport_factory_for(),
    )
    if not outcome.succeeded:
        current_app.logger.warning(f"Contact form from {get_client_ip()} was not delivered")

    return render_template('pages/contact.html', **outcome.as_context())
