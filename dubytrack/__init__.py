import logging

from flask import Flask
from dubytrack.extensions import db, cors, migrate, sheets
from dubytrack.routes import register_routes


def create_app(test_config=None, sheets_client=None):
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")), logging.INFO))

    # Import models so metadata is complete before create_all / migrations
    from dubytrack import models  # noqa: F401

    db.init_app(app)
    migrate.init_app(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS") or ["http://localhost:5173"],
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization"])

    # Spreadsheet client is built once here and reused by every request
    sheets.init_app(app, client=sheets_client)

    @app.after_request
    def disable_caching(response):
        response.headers["Cache-Control"] = "no-store"
        return response

    register_routes(app)

    return app
