from marshmallow import ValidationError
from sqlalchemy.exc import IntegrityError

from dubytrack.extensions import db
from dubytrack.models.user import User
from dubytrack.schemas.user_schema import RegisterSchema, LoginSchema
from dubytrack.services.mirror_service import mirror_new_user
from dubytrack.utils.auth import check_password_hash, clear_session_cookie, hash_password, set_session_cookie
from dubytrack.utils.http import ok, error, json_body


def register_handler():
    try:
        data = RegisterSchema().load(json_body())
    except ValidationError:
        return error("VALIDATION_ERROR", "Invalid input", 400)

    name = data["name"].strip()
    email = data["email"].strip().lower()
    if User.query.filter_by(email=email).first():
        return error("EMAIL_IN_USE", "Email already in use", 409)

    try:
        user = User(name=name, email=email, password_hash=hash_password(data["password"]))
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        db.session.rollback()
        return error("EMAIL_IN_USE", "Email already in use", 409)
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)

    mirror_new_user(user)

    resp, status = ok(user.to_public(), 201)
    set_session_cookie(resp, user.id)
    return resp, status


def login_handler():
    try:
        data = LoginSchema().load(json_body())
    except ValidationError:
        return error("VALIDATION_ERROR", "Invalid input", 400)

    user = User.query.filter_by(email=data["email"].strip().lower()).first()
    if not user:
        return error("INVALID_CREDENTIALS", "invalid credentials", 401)

    try:
        ok_pw = check_password_hash(user.password_hash, data["password"])
    except ValueError:
        # Unrecognised hash format, e.g. the demo user's placeholder
        ok_pw = False
    if not ok_pw:
        return error("INVALID_CREDENTIALS", "invalid credentials", 401)

    resp, status = ok(user.to_public())
    set_session_cookie(resp, user.id)
    return resp, status


def logout_handler():
    resp, status = ok({"ok": True})
    clear_session_cookie(resp)
    return resp, status
