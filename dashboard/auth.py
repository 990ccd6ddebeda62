# dashboard/auth.py
"""
Credential sign-in and the login form action.

``authenticate`` only maps classified sign-in failures to a message for the
login form. Anything the sign-in capability raises that is not an
``AuthError`` (a store outage, a bug) propagates unchanged.
"""

import logging
from typing import Any, Callable, Mapping, MutableMapping, Optional

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.engine import Engine

from dashboard.actions.base import read_form_fields
from dashboard.db.schema import users
from dashboard.models.auth import LoginCredentials

logger = logging.getLogger(__name__)

CREDENTIALS_SIGNIN = "CredentialsSignin"

SignIn = Callable[[str, Mapping[str, Any]], None]


class AuthError(Exception):
    def __init__(self, error_type: str, message: Optional[str] = None) -> None:
        super().__init__(message or error_type)
        self.type = error_type


def hash_password(password: str) -> str:
    return PasswordHasher().hash(password)


class CredentialsProvider:
    """Signs a user in by email and password, recording them in the session."""

    def __init__(
        self,
        engine: Engine,
        session: MutableMapping[str, Any],
        hasher: Optional[PasswordHasher] = None,
    ) -> None:
        self.engine = engine
        self.session = session
        self.hasher = hasher or PasswordHasher()

    def __call__(self, provider: str, credentials: Mapping[str, Any]) -> None:
        if provider != "credentials":
            raise AuthError("InvalidProvider", f"Unknown sign-in provider {provider!r}")

        try:
            parsed = LoginCredentials.model_validate(
                read_form_fields(LoginCredentials, credentials)
            )
        except ValidationError:
            raise AuthError(CREDENTIALS_SIGNIN)

        with self.engine.connect() as conn:
            user = conn.execute(
                select(users.c.id, users.c.email, users.c.password)
                .where(users.c.email == parsed.email)
            ).mappings().first()

        if user is None:
            logger.info("Sign-in failed: unknown email")
            raise AuthError(CREDENTIALS_SIGNIN)

        try:
            self.hasher.verify(user["password"], parsed.password)
        except VerifyMismatchError:
            logger.info("Sign-in failed: wrong password for user %s", user["id"])
            raise AuthError(CREDENTIALS_SIGNIN)
        except (InvalidHashError, VerificationError):
            logger.error("Stored password hash for user %s could not be verified", user["id"])
            raise AuthError("CallbackRouteError")

        self.session["user_id"] = user["id"]
        self.session["email"] = user["email"]
        logger.info("User %s signed in", user["id"])


def authenticate(form: Mapping[str, Any], *, sign_in: SignIn) -> Optional[str]:
    """Return an error message for the login form, or None once signed in."""
    try:
        sign_in("credentials", form)
    except AuthError as error:
        if error.type == CREDENTIALS_SIGNIN:
            return "Invalid credentials."
        return "Something went wrong."
    return None
