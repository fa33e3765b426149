# app/utils/newsletter_workflow.py

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.auth_models import User
from app.models.child_model import Child
from app.models.newsletter_model import Newsletter
from app.utils.content_generator import NewsletterContentGenerator
from app.utils.errors import ChildInactive, NotFound
from app.utils.mailer import Mailer, deliver_newsletter
from app.utils.newsletter_persister import save_newsletter

logger = logging.getLogger(__name__)


def find_child(db: Session, child_id: int, parent_id: int) -> Child:
    try:
        child = db.query(Child).filter_by(id=child_id, parent_id=parent_id).first()
    except SQLAlchemyError as e:
        logger.error("Child lookup failed for %s: %s", child_id, e)
        raise NotFound("Child not found") from e
    if not child:
        raise NotFound("Child not found")
    return child


def find_newsletter(db: Session, newsletter_id: int, parent_id: int) -> Newsletter:
    newsletter = (
        db.query(Newsletter)
        .join(Child, Newsletter.child_id == Child.id)
        .filter(Newsletter.id == newsletter_id, Child.parent_id == parent_id)
        .first()
    )
    if not newsletter:
        raise NotFound("Newsletter not found")
    return newsletter


def latest_newsletter(db: Session, child_id: int) -> Newsletter:
    newsletter = (
        db.query(Newsletter)
        .filter_by(child_id=child_id)
        .order_by(Newsletter.created_at.desc(), Newsletter.id.desc())
        .first()
    )
    if not newsletter:
        raise NotFound("No newsletter found")
    return newsletter


def generate_newsletter(
    db: Session,
    child_id: int,
    parent_id: int,
    generator: NewsletterContentGenerator,
) -> Newsletter:
    """
    Gera e grava uma newsletter:
    - busca a criança do responsável logado
    - pede o texto ao modelo
    - grava a nova linha (o título usa a data do momento da gravação)

    Duas chamadas simultâneas para a mesma criança criam duas linhas.
    """
    child = find_child(db, child_id, parent_id)
    if not child.is_active:
        raise ChildInactive(f"{child.name}'s newsletters are paused")

    text = generator.generate(child)
    return save_newsletter(db, child, text)


def send_newsletter(db: Session, newsletter: Newsletter, mailer: Mailer) -> str:
    child = newsletter.child
    parent = db.get(User, child.parent_id)
    recipient = parent.email if parent else None

    message_id = deliver_newsletter(newsletter, child, recipient, mailer)
    logger.info("Newsletter %s delivered to parent %s", newsletter.id, child.parent_id)
    return message_id
