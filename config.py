from dotenv import load_dotenv
import os

load_dotenv()


def _env_bool(name, default=False):
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY") or "dev-secret"
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI") or "sqlite:///duby.db"
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Test connection before use; recycle idle connections every 5 minutes
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
        "pool_recycle": 300,
    }

    # Session cookie holding the signed token
    AUTH_COOKIE_NAME = os.getenv("AUTH_COOKIE_NAME") or "session"
    TOKEN_TTL_DAYS = int(os.getenv("TOKEN_TTL_DAYS") or "7")
    COOKIE_SECURE = _env_bool("COOKIE_SECURE")

    CORS_ORIGINS = [
        origin.strip()
        for origin in (os.getenv("CORS_ORIGINS") or "http://localhost:5173").split(",")
        if origin.strip()
    ]

    # Spreadsheet mirror; disabled unless an id and credentials are present
    GOOGLE_SHEETS_ID = os.getenv("GOOGLE_SHEETS_ID")
    GOOGLE_SERVICE_ACCOUNT_JSON = os.getenv("GOOGLE_SERVICE_ACCOUNT_JSON")
    GOOGLE_APPLICATION_CREDENTIALS = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
    SHEETS_TEMPLATE_NAME = os.getenv("SHEETS_TEMPLATE_NAME") or "UserTemplate"

    # "database" or "sheets": which store answers dashboard and food search reads
    LEDGER_SOURCE = (os.getenv("LEDGER_SOURCE") or "database").strip().lower()

    LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").upper()
