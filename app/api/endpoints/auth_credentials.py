# app/api/endpoints/auth_credentials.py

import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from config.database import get_db
from app.models.auth_models import User
from app.schemas.auth_schema import AuthRequest, SignupRequest
from app.utils.security import hash_password, verify_password, jwt_for_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/cadastro", status_code=status.HTTP_201_CREATED)
def signup(data: SignupRequest, db: Session = Depends(get_db)):
    # 1) Verifica se já existe usuário
    existing_user = db.query(User).filter_by(email=data.email).first()
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered."
        )

    # 2) Cria o responsável no banco
    user = User(
        email=data.email,
        password_hash=hash_password(data.password),
        parent_name=data.parent_name.strip(),
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info("Parent account %s created", user.id)
    return {
        "msg": "Account created successfully.",
        "user_id": user.id,
        "email": user.email,
        "parent_name": user.parent_name,
    }

@router.post("/login")
def login(data: AuthRequest, db: Session = Depends(get_db)):
    user = db.query(User).filter_by(email=data.email).first()
    if not user or not verify_password(data.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = jwt_for_user(email=user.email)

    return {
        "access_token": token,
        "token_type": "bearer",
        "user_id": user.id,
        "parent_name": user.parent_name,
    }
