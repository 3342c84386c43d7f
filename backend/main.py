import logging
from contextlib import asynccontextmanager
from typing import Optional, Sequence

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from faq.knowledge_base import get_knowledge_base
from faq.matcher import FAQEntry, FAQMatcher
from faq.templates import fallback_message

from .config import Settings, get_settings
from .database import create_db_engine, create_session_factory
from .models import Base
from .routers import faq_router, operator_router

logger = logging.getLogger(__name__)


def build_matcher(settings: Settings, knowledge_base: Optional[Sequence[FAQEntry]] = None) -> FAQMatcher:
    if knowledge_base is None:
        knowledge_base = get_knowledge_base(settings.faq_path)
    return FAQMatcher(
        knowledge_base,
        threshold=settings.faq_threshold,
        category_weight=settings.faq_category_weight,
        keyword_weight=settings.faq_keyword_weight,
        fallback=fallback_message(settings.support_email),
    )


def create_app(
    settings: Optional[Settings] = None,
    knowledge_base: Optional[Sequence[FAQEntry]] = None,
) -> FastAPI:
    """
    Build the FAQ service. The matcher index is constructed here, once, and
    shared read-only by every request through ``app.state``.
    """
    settings = settings or get_settings()

    engine = create_db_engine(settings.database_url)
    Base.metadata.create_all(bind=engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        engine.dispose()
        logger.info("Database engine disposed")

    app = FastAPI(title="Internship Portal FAQ", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.faq_matcher = build_matcher(settings, knowledge_base)
    app.state.session_factory = create_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(faq_router)
    app.include_router(operator_router)

    @app.get("/health")
    def healthcheck():
        return {"status": "ok"}

    logger.info("FAQ service ready with %s entries", len(app.state.faq_matcher))
    return app


def run() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run("backend.main:create_app", factory=True, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
