import os

# Relative SQLite paths resolve against the Flask instance folder.
DEFAULT_DATABASE_URI = "sqlite:///petclinic.db"


def _get_database_uri() -> str:
    return os.environ.get("DATABASE_URL") or DEFAULT_DATABASE_URI


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-change-me")
    SQLALCHEMY_DATABASE_URI = _get_database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    OWNERS_PER_PAGE = 5
    VETS_PER_PAGE = 5
