from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.datetime_utils import format_display, to_iso
from .container import build_container
from .store.bootstrap import seed_demo_data
from .dashboard.controller import register as register_dashboard
from .infractions.controller import register as register_infractions
from .inspections.controller import register as register_inspections
from .notifications.controller import register as register_notifications

REPO_ROOT = Path(__file__).resolve().parents[3]

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    api_url = str(getattr(settings, "RECORDS_API_URL", "") or "").strip()
    store_dir = Path(getattr(settings, "LOCAL_STORE_DIR", None) or REPO_ROOT / "data")
    holidays_file = getattr(settings, "HOLIDAYS_FILE", None)

    container = build_container(
        api_url=api_url,
        api_timeout_seconds=int(getattr(settings, "API_TIMEOUT_SECONDS", 30)),
        local_store_dir=store_dir,
        holidays_file=Path(holidays_file) if holidays_file else None,
    )
    logger.info("settings=%s backend=%s", settings_module, container.backend)

    if container.backend == "local" and bool(getattr(settings, "SEED_DEMO_DATA", False)):
        if seed_demo_data(container.local_store):
            logger.info("Demo data seeded into %s", store_dir)

    app.extensions["registry_container"] = container
    app.jinja_env.filters["fecha"] = format_display
    app.jinja_env.filters["iso"] = to_iso

    register_notifications(app, container)
    register_infractions(app, container)
    register_inspections(app, container)
    register_dashboard(app, container)

    return app
