# Training enrollment backend entrypoint: FastAPI app, routers and startup hooks.

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from backend.app.core.exceptions import register_exception_handlers
from backend.app.core.logging_config import setup_logging
from backend.app.core.settings import get_settings
from backend.app.api import register
from backend.app.api import login
from backend.app.api import courses
from backend.app.api import students
from backend.app.api import training_schedules
from backend.app.api import training_opt
from backend.app.core.dev_seed import ensure_default_admin
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine

setup_logging()
logger = logging.getLogger(__name__)

settings = get_settings()
app = FastAPI(title=settings.app_name, version=settings.api_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(register.router)
app.include_router(login.router)
app.include_router(courses.router)
app.include_router(students.router)
app.include_router(training_schedules.router)
app.include_router(training_opt.router)


@app.get("/")
def read_root():
    return {"app": settings.app_name, "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def init_database():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        ensure_default_admin(db)
    finally:
        db.close()
    logger.info("%s started (%s)", settings.app_name, settings.environment)
