# app/utils/newsletter_renderer.py

from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader

from app.schemas.newsletter_schema import parse_content

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

EMAIL_TEMPLATE = "newsletter_email.html"
PRINT_TEMPLATE = "newsletter_print.html"

LINE_BREAK = "<br>"

# Marcadores em volta do corpo, para o texto poder ser recuperado do documento
CONTENT_START = "<!-- newsletter-content:start -->"
CONTENT_END = "<!-- newsletter-content:end -->"

# Só substituição: o texto do modelo entra no HTML sem escape
_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=False,
)


def text_to_html(text: str) -> str:
    """Cada quebra de linha vira um <br>. Nenhum escape nem markdown."""
    return text.replace("\n", LINE_BREAK)


def _content_block(newsletter) -> str:
    text = parse_content(newsletter.content).text
    return f"{CONTENT_START}{text_to_html(text)}{CONTENT_END}"


def _render(template_name: str, newsletter, child) -> str:
    template = _env.get_template(template_name)
    return template.render(
        title=newsletter.title,
        child_name=child.name,
        content_block=_content_block(newsletter),
    )


def extract_lines(document: str) -> List[str]:
    """
    Devolve as linhas do corpo de um documento gerado por este módulo.

    Como o texto não é escapado, um "<br>" que já vinha escrito no texto do
    modelo fica igual a uma quebra de linha e também separa linhas aqui.
    A volta só é exata para textos sem "<br>" literal.
    """
    _, found, rest = document.partition(CONTENT_START)
    if not found:
        raise ValueError("document has no newsletter content block")
    body, found, _ = rest.rpartition(CONTENT_END)
    if not found:
        raise ValueError("document has no newsletter content block")
    return body.split(LINE_BREAK)


def render_email_html(newsletter, child) -> str:
    return _render(EMAIL_TEMPLATE, newsletter, child)


def render_print_html(newsletter, child) -> str:
    """
    Documento autocontido para impressão: abre o diálogo de impressão
    quando termina de carregar e fecha a janela depois.
    """
    return _render(PRINT_TEMPLATE, newsletter, child)


class Renderer:
    """Destino do documento de impressão (janela do navegador, resposta HTTP...)."""

    def render(self, document: str) -> None:
        raise NotImplementedError


class ResponseRenderer(Renderer):
    """Guarda o documento para ser devolvido como resposta text/html."""

    def __init__(self):
        self.document: Optional[str] = None

    def render(self, document: str) -> None:
        self.document = document


def print_newsletter(newsletter, child, renderer: Renderer) -> None:
    renderer.render(render_print_html(newsletter, child))
