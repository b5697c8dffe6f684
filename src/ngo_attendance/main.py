from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import Container, build_container
from .participants.controller import register as register_participants
from .sessions.controller import register as register_sessions


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    storage_config = getattr(settings, "STORAGE_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if app.config["DEBUG"]:
        logging.basicConfig(level=logging.INFO)
        print(
            "[ngo-attendance] settings=", settings_module,
            " storage=", f"{storage_config.get('backend')}:{storage_config.get('directory', '-')}",
        )

    if container is None:
        container = build_container(storage_config=storage_config)

    register_participants(app, container)
    register_sessions(app, container)

    return app
