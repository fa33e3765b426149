#config/settings

import os
from dotenv import load_dotenv

# Carregar as variáveis do arquivo .env
load_dotenv()

# Configurações JWT
JWT_SECRET = os.getenv("JWT_SECRET", "change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRE_DAYS = int(os.getenv("JWT_EXPIRE_DAYS", "3"))


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./kids_newsletter.db")

# Geração de conteúdo (OpenAI)
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

# Envio de e-mail (SendGrid)
SENDGRID_API_KEY = os.getenv("SENDGRID_API_KEY")
MAIL_FROM_EMAIL = os.getenv("MAIL_FROM_EMAIL", "newsletters@kidsnewsletter.com")
MAIL_FROM_NAME = os.getenv("MAIL_FROM_NAME", "Kids Newsletter")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
