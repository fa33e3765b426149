import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.database import Base, engine
from config.logging_config import setup_logging
from config.settings import CORS_ORIGINS

from app.api.endpoints.auth_credentials import router as auth_cred_routes

from app.routes.child_routes import router as child_routes
from app.routes.newsletter_routes import router as newsletter_routes
from app.utils.errors import NewsletterError

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Cria as tabelas que ainda não existem
    Base.metadata.create_all(bind=engine)
    yield


# Cria a instância do FastAPI
app = FastAPI(
    title="Kids Newsletter API",
    version="0.1.0",
    description="Backend das newsletters personalizadas para crianças",
    lifespan=lifespan,
)

# Configura CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NewsletterError)
async def newsletter_error_handler(request: Request, exc: NewsletterError):
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.detail)
    detail = exc.detail if exc.expose_detail else exc.message
    return JSONResponse(status_code=exc.status_code, content={"detail": detail})


# Cria o roteador principal com prefixo /api
routerAPI = APIRouter(prefix="/api")

routerAPI.include_router(auth_cred_routes)
routerAPI.include_router(child_routes)
routerAPI.include_router(newsletter_routes)
# Anexa o roteador à aplicação principal
app.include_router(routerAPI)



@app.get("/", tags=["Root"])
async def read_root():
    return {"status": "Kids Newsletter API is up!"}
