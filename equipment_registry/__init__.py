"""Flask application factory.

Creates and configures the Flask app, registers extensions, error
handlers and API namespaces, and runs the one-time certification
registry initialization when a deployer identity is configured.
"""

import logging
import os

from flask import Flask
from flask_restx import Api

from equipment_registry.config.settings import CONFIG_MAP
from equipment_registry.extensions import db, migrate


def create_app(config_name: str | None = None) -> Flask:
    """Build and configure the Flask application.

    Args:
        config_name: One of 'development', 'testing', 'production'.
                     Defaults to the FLASK_ENV environment variable.
    """
    app = Flask(__name__)

    # --- Configuration ---
    config_name = config_name or os.getenv("FLASK_ENV", "development")
    app.config.from_object(CONFIG_MAP[config_name])

    # --- Logging ---
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # --- Extensions ---
    db.init_app(app)
    migrate.init_app(app, db)

    from equipment_registry.domain import models  # noqa: F401 register tables

    with app.app_context():
        db.create_all()
        _initialize_registry(app)

    # --- API ---
    api = Api(
        app,
        title="Equipment Registry",
        version="1.0",
        description="Asset ownership and technician certification registries",
    )

    # Register namespaces
    from equipment_registry.api.assets import ns as assets_ns
    from equipment_registry.api.certifications import ns as certifications_ns

    api.add_namespace(assets_ns, path="/assets")
    api.add_namespace(certifications_ns, path="/certifications")

    # --- Global error handler ---
    _register_error_handlers(app)

    return app


def _initialize_registry(app: Flask) -> None:
    """Seed the certification registry owner once, if one is configured."""
    from equipment_registry.services.certification_service import CertificationService

    owner = app.config.get("REGISTRY_OWNER")
    if not owner:
        return

    service = CertificationService()
    if service.is_initialized():
        logging.getLogger(__name__).info(
            "Certification registry already owned by %s", service.get_contract_owner(),
        )
        return
    service.initialize(owner)


def _register_error_handlers(app: Flask) -> None:
    """Map application exceptions to JSON responses."""
    from equipment_registry.domain.exceptions import AppError  # noqa: avoid circular import

    @app.errorhandler(AppError)
    def handle_app_error(error: AppError):
        from equipment_registry.schemas.response import error_response
        return error_response(error.message, error.error_code, error.status_code)

    @app.errorhandler(404)
    def handle_not_found(_error):
        from equipment_registry.schemas.response import error_response
        return error_response("Resource not found", "NOT_FOUND", 404)

    @app.errorhandler(500)
    def handle_internal(_error):
        from equipment_registry.schemas.response import error_response
        logging.getLogger(__name__).exception("Unhandled server error")
        return error_response("Internal server error", "INTERNAL_ERROR", 500)
