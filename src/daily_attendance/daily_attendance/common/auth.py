from __future__ import annotations

import hmac
from functools import wraps

from flask import Response, request
from werkzeug.security import check_password_hash, generate_password_hash

REALM = "Admin Area"


class BasicAuth:
    """HTTP Basic auth for the admin pages (single configured account)."""

    def __init__(self, username: str, password: str):
        self._username = username
        self._password_hash = generate_password_hash(password)

    def check(self, username: str | None, password: str | None) -> bool:
        if not username or password is None:
            return False
        if not hmac.compare_digest(username, self._username):
            return False
        return check_password_hash(self._password_hash, password)

    def challenge(self) -> Response:
        return Response(
            "Authentication required.",
            401,
            {"WWW-Authenticate": f'Basic realm="{REALM}"'},
        )

    def required(self, view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            auth = request.authorization
            if auth is None or not self.check(auth.username, auth.password):
                return self.challenge()
            return view(*args, **kwargs)

        return wrapper
