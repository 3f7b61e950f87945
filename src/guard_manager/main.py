from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendance.controller import register as register_attendance
from .container import build_container
from .core.exceptions import NotFoundError, StoreError, ValidationError
from .dashboard.controller import register as register_dashboard
from .expenses.controller import register as register_expenses
from .guards.controller import register as register_guards
from .invoices.controller import register as register_invoices
from .payroll.controller import register as register_payroll
from .settings import get_settings_module
from .sites.controller import register as register_sites

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    store_path = getattr(settings, "STORE_PATH")

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("settings=%s store=%s", settings_module, store_path)

    container = build_container(
        store_path=store_path,
        seed_demo=bool(getattr(settings, "SEED_DEMO_DATA", False)),
        company=getattr(settings, "COMPANY", None),
        bank_details=getattr(settings, "BANK_DETAILS", None),
    )
    app.extensions["guard_manager"] = container

    _register_error_handlers(app)
    register_dashboard(app, container)
    register_sites(app, container)
    register_guards(app, container)
    register_attendance(app, container)
    register_expenses(app, container)
    register_payroll(app, container)
    register_invoices(app, container)

    return app


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404

    @app.errorhandler(StoreError)
    def _store_error(e: StoreError):
        logger.error("Record store unavailable: %s", e)
        return jsonify({"success": False, "message": "Local database is unavailable"}), 500
