from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session
from typing import List, Optional

from config.database import get_db
from app.models.auth_models import User
from app.models.child_model import Child
from app.models.newsletter_model import Newsletter
from app.dependencies.auth import get_current_user
from app.dependencies.clients import get_content_generator, get_mailer, get_print_renderer
from app.schemas.newsletter_schema import (
    GenerateResponse,
    NewsletterResponse,
    SendResponse,
    parse_content,
)
from app.utils.content_generator import NewsletterContentGenerator
from app.utils.mailer import Mailer
from app.utils.newsletter_renderer import ResponseRenderer, print_newsletter
from app.utils.newsletter_workflow import (
    find_child,
    find_newsletter,
    generate_newsletter,
    latest_newsletter,
    send_newsletter,
)

router = APIRouter(prefix="/newsletters", tags=["newsletters"])


@router.post("/generate", response_model=GenerateResponse)
def generate(
    child_id: int = Query(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    generator: NewsletterContentGenerator = Depends(get_content_generator),
):
    """
    Gera uma nova newsletter para a criança e grava no banco.
    Não há deduplicação: cada chamada cria uma linha nova.
    """
    newsletter = generate_newsletter(db, child_id, current_user.id, generator)

    return {
        "success": True,
        "newsletter": NewsletterResponse.model_validate(newsletter),
        "content": parse_content(newsletter.content).text,
    }


@router.get("", response_model=List[NewsletterResponse])
def list_newsletters(
    child_id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = (
        db.query(Newsletter)
        .join(Child, Newsletter.child_id == Child.id)
        .filter(Child.parent_id == current_user.id)
    )
    if child_id is not None:
        query = query.filter(Newsletter.child_id == child_id)

    return query.order_by(Newsletter.created_at.desc(), Newsletter.id.desc()).all()


@router.get("/latest", response_model=NewsletterResponse)
def get_latest_newsletter(
    child_id: int = Query(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    child = find_child(db, child_id, current_user.id)
    return latest_newsletter(db, child.id)


@router.get("/{newsletter_id}/print", response_class=HTMLResponse)
def print_view(
    newsletter_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    renderer: ResponseRenderer = Depends(get_print_renderer),
):
    """Documento HTML que abre o diálogo de impressão ao carregar."""
    newsletter = find_newsletter(db, newsletter_id, current_user.id)
    print_newsletter(newsletter, newsletter.child, renderer)
    return HTMLResponse(content=renderer.document)


@router.post("/send", response_model=SendResponse)
def send_latest(
    child_id: int = Query(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    mailer: Mailer = Depends(get_mailer),
):
    """Envia por e-mail a newsletter mais recente da criança."""
    child = find_child(db, child_id, current_user.id)
    newsletter = latest_newsletter(db, child.id)
    message_id = send_newsletter(db, newsletter, mailer)

    return {"success": True, "newsletter_id": newsletter.id, "message_id": message_id}


@router.post("/{newsletter_id}/send", response_model=SendResponse)
def send_one(
    newsletter_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    mailer: Mailer = Depends(get_mailer),
):
    newsletter = find_newsletter(db, newsletter_id, current_user.id)
    message_id = send_newsletter(db, newsletter, mailer)

    return {"success": True, "newsletter_id": newsletter.id, "message_id": message_id}
