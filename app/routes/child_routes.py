from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.models.child_model import Child
from app.models.auth_models import User
from app.schemas.child_schema import ChildCreate, ChildUpdate, ChildActiveUpdate, ChildResponse
from config.database import get_db
from app.dependencies.auth import get_current_user
from app.utils.newsletter_workflow import find_child
from typing import List

router = APIRouter(prefix="/children", tags=["children"])

# campos obrigatórios no banco: null no PUT significa "não mexer"
REQUIRED_FIELDS = {"name", "age", "delivery_schedule", "interests"}


def _get_own_child(db: Session, child_id: int, user: User) -> Child:
    # mesma busca (e mesmo 404) das rotas de newsletter
    return find_child(db, child_id, user.id)

# POST: cadastra uma nova criança
@router.post("", response_model=ChildResponse, status_code=status.HTTP_201_CREATED)
def create_child(
    child: ChildCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    new_child = Child(
        parent_id=current_user.id,
        name=child.name,
        age=child.age,
        grade=child.grade,
        interests=child.all_interests(),
        favorite_shows=child.favorite_shows,
        hobbies=child.hobbies,
        delivery_schedule=child.delivery_schedule,
        is_active=True,
    )
    db.add(new_child)
    db.commit()
    db.refresh(new_child)
    return new_child

# GET: crianças do usuário logado, mais recentes primeiro
@router.get("/me", response_model=List[ChildResponse])
def get_my_children(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return (
        db.query(Child)
        .filter(Child.parent_id == current_user.id)
        .order_by(Child.created_at.desc(), Child.id.desc())
        .all()
    )

@router.get("/{child_id}", response_model=ChildResponse)
def get_child(
    child_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return _get_own_child(db, child_id, current_user)

# PUT: atualiza só os campos enviados
@router.put("/{child_id}", response_model=ChildResponse)
def update_child(
    child_id: int,
    child_data: ChildUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    child = _get_own_child(db, child_id, current_user)

    for field, value in child_data.model_dump(exclude_unset=True).items():
        if value is None and field in REQUIRED_FIELDS:
            continue
        setattr(child, field, value)

    db.commit()
    db.refresh(child)
    return child

# PATCH: pausa/reativa as newsletters (última escrita vence)
@router.patch("/{child_id}/active", response_model=ChildResponse)
def set_child_active(
    child_id: int,
    data: ChildActiveUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    child = _get_own_child(db, child_id, current_user)
    child.is_active = data.is_active

    db.commit()
    db.refresh(child)
    return child
