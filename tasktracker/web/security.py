"""Request authentication: HTTP Basic plus a session-backed login form.

Every request outside the public path prefixes needs either a valid Basic
``Authorization`` header or a session created through ``/login``. Browsers
(requests that explicitly accept ``text/html``) are sent to the login form;
everything else gets a Basic challenge.
"""
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from urllib.parse import urlsplit

from flask import (
    Blueprint,
    Flask,
    Response,
    current_app,
    g,
    redirect,
    render_template,
    request,
    session,
    url_for,
)
from werkzeug.security import check_password_hash, generate_password_hash

logger = logging.getLogger(__name__)

REALM = "tasktracker"
SESSION_USER_KEY = "user"

bp = Blueprint("auth", __name__)


@dataclass(frozen=True)
class Credentials:
    username: str
    password_hash: str

    def matches(self, username: str | None, password: str | None) -> bool:
        if username is None or password is None:
            return False
        same_user = secrets.compare_digest(username.encode(), self.username.encode())
        return check_password_hash(self.password_hash, password) and same_user


def build_credentials(username: str, password: str | None) -> Credentials:
    if password is None:
        password = secrets.token_urlsafe(16)
        logger.warning("Using generated password for user '%s': %s", username, password)
    return Credentials(username=username, password_hash=generate_password_hash(password))


def _credentials() -> Credentials:
    return current_app.extensions["credentials"]


def _is_public(path: str, public_paths: tuple[str, ...]) -> bool:
    for prefix in public_paths:
        if path == prefix or path.startswith(prefix.rstrip("/") + "/"):
            return True
    return False


def _prefers_html() -> bool:
    # wildcard Accept headers (curl, API clients) get the Basic challenge
    return any(mimetype == "text/html" for mimetype, _quality in request.accept_mimetypes)


def _challenge() -> Response:
    return Response(
        "Authentication required",
        status=401,
        headers={"WWW-Authenticate": f'Basic realm="{REALM}"'},
    )


def current_user() -> str | None:
    if "user" in g:
        return g.user
    user = session.get(SESSION_USER_KEY)
    if not user:
        auth = request.authorization
        if auth is not None and auth.type == "basic" and _credentials().matches(auth.username, auth.password):
            user = auth.username
    g.user = user or None
    return g.user


def require_login():
    if _is_public(request.path, current_app.config["PUBLIC_PATHS"]):
        return None
    if current_user() is not None:
        return None
    if request.authorization is not None:
        logger.info("Rejected credentials for %s %s", request.method, request.path)
    if _prefers_html():
        return redirect(url_for("auth.login", next=request.full_path.rstrip("?")))
    return _challenge()


def _safe_next(target: str | None) -> str:
    # only same-site relative targets
    if target and target.startswith("/") and not urlsplit(target).netloc and not target.startswith("//"):
        return target
    return url_for("tasks.list_tasks")


@bp.route("/login", methods=["GET", "POST"])
def login():
    error = None
    if request.method == "POST":
        username = request.form.get("username", "")
        password = request.form.get("password", "")
        if _credentials().matches(username, password):
            session.clear()
            session[SESSION_USER_KEY] = username
            logger.info("User '%s' logged in", username)
            return redirect(_safe_next(request.form.get("next")))
        error = "Bad credentials"
    return render_template("login.html", error=error, next=request.values.get("next", ""))


@bp.route("/logout", methods=["POST"])
def logout():
    session.pop(SESSION_USER_KEY, None)
    return redirect(url_for("auth.login"))


def init_security(app: Flask, username: str, password: str | None, public_paths: tuple[str, ...]) -> None:
    app.extensions["credentials"] = build_credentials(username, password)
    app.config["PUBLIC_PATHS"] = public_paths
    app.before_request(require_login)
    app.register_blueprint(bp)
