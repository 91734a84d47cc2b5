from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from .container import build_container
from .reconcile.controller import register as register_reconcile
from .settings import get_settings_module

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("attendance-reconciler settings=%s", settings_module)

    container = build_container(settings=settings)
    app.extensions["reconciler_container"] = container

    register_reconcile(app, container)

    return app
