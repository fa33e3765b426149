# app/utils/mailer.py

import logging
from typing import Optional

from python_http_client.exceptions import HTTPError
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from app.utils.errors import DeliveryError, MissingRecipient
from app.utils.newsletter_renderer import render_email_html

logger = logging.getLogger(__name__)

SUCCESS_STATUS = (200, 201, 202)


class Mailer:
    """Envia um e-mail HTML pelo SendGrid. Uma tentativa por chamada."""

    def __init__(self, client: SendGridAPIClient, from_email: str, from_name: Optional[str] = None):
        self.client = client
        self.from_email = from_email
        self.from_name = from_name

    def send(self, to: str, subject: str, html: str) -> str:
        message = Mail(
            from_email=(self.from_email, self.from_name),
            to_emails=to,
            subject=subject,
            html_content=html,
        )

        try:
            response = self.client.send(message)
        except (HTTPError, OSError) as e:
            logger.error("SendGrid rejected email to %s: %s", to, e)
            raise DeliveryError(f"sendgrid error: {e}") from e

        if response.status_code not in SUCCESS_STATUS:
            logger.error("SendGrid returned status %s for %s", response.status_code, to)
            raise DeliveryError(f"sendgrid status {response.status_code}")

        headers = response.headers or {}
        message_id = headers.get("X-Message-Id") or ""
        logger.info("Email sent to %s (message id %r)", to, message_id)
        return message_id


def email_subject(child) -> str:
    return f"📰 {child.name}'s Daily Discovery Newsletter"


def deliver_newsletter(newsletter, child, recipient: Optional[str], mailer: Mailer) -> str:
    """Renderiza e envia a newsletter para o e-mail do responsável."""
    if not recipient or not recipient.strip():
        raise MissingRecipient(f"child {child.id} has no parent email")

    html = render_email_html(newsletter, child)
    return mailer.send(recipient.strip(), email_subject(child), html)
