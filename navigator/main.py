"""Thailand Navigator – FastAPI application."""
# Load .env before any app code that might read config
from dotenv import load_dotenv
from pathlib import Path
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from navigator.config import get_settings
from navigator.routers import rules, tax, legal, quotes

settings = get_settings()
app = FastAPI(title=settings.app_name, debug=settings.debug)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(rules.router)
app.include_router(tax.router)
app.include_router(legal.router)
app.include_router(quotes.router)


@app.on_event("startup")
def startup():
    logging.getLogger("uvicorn.error").info(
        "%s starting (env=%s, thb_per_foreign_unit=%s)",
        settings.app_name, settings.app_env, settings.thb_per_foreign_unit,
    )


@app.get("/")
def root():
    return {"app": settings.app_name, "status": "ok"}


@app.get("/health")
def health():
    return {"status": "healthy"}
