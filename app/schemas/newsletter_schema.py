# app/schemas/newsletter_schema.py

from pydantic import BaseModel, ConfigDict, field_validator
from datetime import datetime
from typing import Any, Dict, Literal, Optional, Type, Union


class PlainText(BaseModel):
    type: Literal["text"] = "text"
    text: str


# Por enquanto só existe texto puro; novos formatos entram aqui e em CONTENT_TYPES
NewsletterContent = Union[PlainText]

CONTENT_TYPES: Dict[str, Type[BaseModel]] = {
    "text": PlainText,
}


def parse_content(raw: Any) -> NewsletterContent:
    """Lê o envelope gravado na coluna `content`.

    Linhas antigas foram gravadas como {"text": ...} sem a tag "type" e são
    lidas como PlainText. Coluna vazia vira texto vazio.
    """
    if raw is None:
        return PlainText(text="")
    if isinstance(raw, BaseModel):
        return raw
    if isinstance(raw, str):
        return PlainText(text=raw)

    tag = raw.get("type", "text")
    model = CONTENT_TYPES.get(tag)
    if model is None:
        raise ValueError(f"Unknown newsletter content type: {tag!r}")
    return model.model_validate(raw)


def plain_text(text: str) -> Dict[str, str]:
    """Envelope gravado para o texto gerado pelo modelo."""
    return PlainText(text=text).model_dump()


class NewsletterResponse(BaseModel):
    id: int
    child_id: int
    title: str
    content: NewsletterContent
    created_at: Optional[datetime]
    sent_at: Optional[datetime]
    pdf_url: Optional[str]

    @field_validator("content", mode="before")
    @classmethod
    def read_envelope(cls, value):
        return parse_content(value)

    model_config = ConfigDict(from_attributes=True)


class GenerateResponse(BaseModel):
    success: bool
    newsletter: NewsletterResponse
    content: str


class SendResponse(BaseModel):
    success: bool
    newsletter_id: int
    message_id: str
