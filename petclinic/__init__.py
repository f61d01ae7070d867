from __future__ import annotations

import logging
import os
import sqlite3
from datetime import date

from flask import Flask, render_template

from sqlalchemy import event
from sqlalchemy.engine import Engine

from .extensions import db, migrate, csrf


@event.listens_for(Engine, "connect")
def _set_sqlite_pragmas(dbapi_connection, connection_record) -> None:
    if isinstance(dbapi_connection, sqlite3.Connection):
        cur = dbapi_connection.cursor()
        cur.execute("PRAGMA foreign_keys=ON")
        cur.execute("PRAGMA journal_mode=WAL")
        cur.execute("PRAGMA synchronous=NORMAL")
        cur.execute("PRAGMA busy_timeout=30000")
        cur.close()


def _configure_logging(app: Flask) -> None:
    level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger("petclinic").setLevel(level)


def create_app(test_config: dict | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if test_config:
        app.config.update(test_config)

    os.makedirs(app.instance_path, exist_ok=True)

    uri = app.config.get("SQLALCHEMY_DATABASE_URI", "")
    if uri.startswith("sqlite:"):
        opts = dict(app.config.get("SQLALCHEMY_ENGINE_OPTIONS", {}))
        ca = dict(opts.get("connect_args", {}))
        ca.setdefault("check_same_thread", False)
        ca.setdefault("timeout", 30)
        opts["connect_args"] = ca
        app.config["SQLALCHEMY_ENGINE_OPTIONS"] = opts

    _configure_logging(app)

    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    from .models.owner import Owner
    from .models.pet import Pet, PetType
    from .models.visit import Visit
    from .models.vet import Vet, Specialty

    from .repositories import init_repositories
    init_repositories(app)

    from .errors import register_error_handlers
    register_error_handlers(app)

    from .owners.routes import owners_bp
    app.register_blueprint(owners_bp)

    from .pets.routes import pets_bp
    app.register_blueprint(pets_bp)

    from .visits.routes import visits_bp
    app.register_blueprint(visits_bp)

    from .vets.routes import vets_bp
    app.register_blueprint(vets_bp)

    from .cli import init_db_cmd, reset_db_cmd, seed_demo_cmd

    app.cli.add_command(init_db_cmd)
    app.cli.add_command(reset_db_cmd)
    app.cli.add_command(seed_demo_cmd)

    @app.get("/")
    def index():
        return render_template("welcome.html")

    @app.context_processor
    def inject_helpers():
        from .messages import message_for

        def fmt_date(value):
            try:
                return value.strftime("%Y-%m-%d")
            except AttributeError:
                return ""

        return dict(
            error_message=message_for,
            fmt_date=fmt_date,
            current_year=date.today().year,
        )

    @app.teardown_request
    def _teardown_request(_exc):
        try:
            if _exc is not None:
                db.session.rollback()
        finally:
            db.session.remove()

    return app
