from pydantic import BaseModel, EmailStr, Field

# Modelo para login
class AuthRequest(BaseModel):
    email: EmailStr
    password: str

# Cadastro: login + nome do responsável
class SignupRequest(AuthRequest):
    parent_name: str = Field(..., min_length=1)
