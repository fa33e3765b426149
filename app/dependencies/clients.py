# app/dependencies/clients.py
#
# Clientes externos entregues às rotas via Depends, para os testes
# poderem trocar por fakes com app.dependency_overrides.

from openai import OpenAI, OpenAIError
from sendgrid import SendGridAPIClient

from config.settings import (
    OPENAI_API_KEY,
    OPENAI_MODEL,
    SENDGRID_API_KEY,
    MAIL_FROM_EMAIL,
    MAIL_FROM_NAME,
)
from app.utils.content_generator import NewsletterContentGenerator
from app.utils.errors import UpstreamGenerationError
from app.utils.mailer import Mailer
from app.utils.newsletter_renderer import ResponseRenderer


def get_content_generator() -> NewsletterContentGenerator:
    try:
        client = OpenAI(api_key=OPENAI_API_KEY)
    except OpenAIError as e:
        # sem OPENAI_API_KEY o SDK recusa criar o cliente
        raise UpstreamGenerationError(f"openai client unavailable: {e}") from e
    return NewsletterContentGenerator(client, model=OPENAI_MODEL)


def get_mailer() -> Mailer:
    client = SendGridAPIClient(api_key=SENDGRID_API_KEY)
    return Mailer(client, from_email=MAIL_FROM_EMAIL, from_name=MAIL_FROM_NAME)


def get_print_renderer() -> ResponseRenderer:
    return ResponseRenderer()
