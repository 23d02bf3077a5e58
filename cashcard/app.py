"""FastAPI app initialization, exception handling"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cashcard.config import Config, get_config
from cashcard.errors.handler import register_exception_handlers
from cashcard.routes.cash_card import cash_card_router

logger = logging.getLogger(__name__)


def app_factory() -> FastAPI:
    config: Config = get_config()
    app = FastAPI(title=config.app_name, version=config.app_version)
    app.add_middleware(
        CORSMiddleware,
        allow_credentials=True,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )
    if not config.secret_key:
        logger.warning("CASHCARD_SECRET_KEY is not set, every X-Token will be rejected")
    register_exception_handlers(app)
    app.include_router(cash_card_router)
    return app


app = app_factory()
