"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from offbase_admin.api import pages
from offbase_admin.api.v1 import router as v1_router
from offbase_admin.api.v1.admin_auth import credentials_body_error_handler
from offbase_admin.core.config import settings
from offbase_admin.core.middleware import AdminGateMiddleware
from offbase_admin.core.security import get_token_codec
from offbase_admin.services.accounts import lookup_user_role

app = FastAPI(
    title="Off-Base Admin API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_exception_handler(RequestValidationError, credentials_body_error_handler)

app.add_middleware(
    AdminGateMiddleware,
    codec=get_token_codec(),
    role_lookup=lookup_user_role,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(v1_router, prefix=settings.API_V1_PREFIX)
app.include_router(pages.router, tags=["pages"])
