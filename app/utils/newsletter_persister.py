# app/utils/newsletter_persister.py

import logging
from datetime import date
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.newsletter_model import Newsletter
from app.schemas.newsletter_schema import plain_text
from app.utils.errors import PersistenceError

logger = logging.getLogger(__name__)


def build_title(child_name: str, day: date) -> str:
    return f"{child_name}'s Daily Discovery - {day.isoformat()}"


def save_newsletter(db: Session, child, text: str, today: Optional[date] = None) -> Newsletter:
    """
    Grava uma nova newsletter para a criança e devolve a linha criada.
    A data do título é a do momento da gravação, não a do início da geração.
    """
    day = today or date.today()

    newsletter = Newsletter(
        child_id=child.id,
        title=build_title(child.name, day),
        content=plain_text(text),
    )

    try:
        db.add(newsletter)
        db.commit()
        db.refresh(newsletter)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Could not save newsletter for child %s: %s", child.id, e)
        raise PersistenceError(f"newsletter insert failed: {e}") from e

    logger.info("Saved newsletter %s (%s)", newsletter.id, newsletter.title)
    return newsletter
