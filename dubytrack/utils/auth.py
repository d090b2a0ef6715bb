import datetime as dt
from functools import wraps
from typing import Optional
from flask import request, current_app
import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from dubytrack.extensions import db
from dubytrack.models.user import User
from dubytrack.utils.http import error

DEMO_EMAIL = "demo@example.com"
DEMO_NAME = "Demo"


def hash_password(plain: str) -> str:
    return generate_password_hash(plain)


def create_token(user_id: int) -> str:
    now = dt.datetime.now(dt.timezone.utc)
    ttl = dt.timedelta(days=int(current_app.config.get("TOKEN_TTL_DAYS", 7)))
    payload = {
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
    }
    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm="HS256")


def decode_token(token: str):
    return jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=["HS256"])


def set_session_cookie(response, user_id: int):
    max_age = int(current_app.config.get("TOKEN_TTL_DAYS", 7)) * 24 * 60 * 60
    response.set_cookie(
        current_app.config.get("AUTH_COOKIE_NAME", "session"),
        create_token(user_id),
        max_age=max_age,
        httponly=True,
        secure=bool(current_app.config.get("COOKIE_SECURE")),
        samesite="Lax",
        path="/",
    )
    return response


def clear_session_cookie(response):
    response.delete_cookie(current_app.config.get("AUTH_COOKIE_NAME", "session"), path="/")
    return response


def _token_from_request() -> Optional[str]:
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header.split(" ", 1)[1].strip() or None
    return request.cookies.get(current_app.config.get("AUTH_COOKIE_NAME", "session")) or None


def session_user_id() -> Optional[int]:
    """User id carried by the session token, or None when absent or invalid."""
    token = _token_from_request()
    if not token:
        return None
    try:
        payload = decode_token(token)
        return int(payload["sub"])
    except (jwt.PyJWTError, KeyError, ValueError):
        return None


def get_or_create_demo_user() -> User:
    user = User.query.filter_by(email=DEMO_EMAIL).first()
    if not user:
        # Placeholder hash never matches a real password
        user = User(name=DEMO_NAME, email=DEMO_EMAIL, password_hash="x")
        db.session.add(user)
        db.session.flush()
    return user


def require_auth(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        user_id = session_user_id()
        if user_id is None or db.session.get(User, user_id) is None:
            return error("UNAUTHORIZED", "unauthorized", 401)
        request.user_id = user_id  # type: ignore
        return f(*args, **kwargs)
    return wrapper


def resolve_user(f):
    """Attach the session user id, falling back to the shared demo user."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        user_id = session_user_id()
        if user_id is not None and db.session.get(User, user_id) is None:
            user_id = None
        request.user_id = user_id  # type: ignore
        return f(*args, **kwargs)
    return wrapper


__all__ = [
    "hash_password", "check_password_hash", "create_token", "decode_token",
    "set_session_cookie", "clear_session_cookie", "session_user_id",
    "get_or_create_demo_user", "require_auth", "resolve_user",
]
