from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.context import RequestContext
from ..common.validators import require_email, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ..events.bus import PROFILE_UPDATED, DomainEvent, EventBus
from ..roles.repository import RoleAssignmentRepository
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: int
    email: str
    full_name: str
    role: Role


class AuthService:
    """Use case: register and authenticate accounts."""

    def __init__(self, users: UserRepository, roles: RoleAssignmentRepository):
        self._users = users
        self._roles = roles

    def register(self, *, email: str, password: str, full_name: str) -> SessionUser:
        email = require_email(email)
        full_name = require_non_empty(full_name, "Full name")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_email(email):
            raise ValidationError("An account with this email already exists")

        assignment = self._roles.get(email)
        role = assignment.role if assignment else Role.EMPLOYEE

        user_id = self._users.create_user(
            email=email,
            full_name=full_name,
            password_hash=generate_password_hash(password),
            role=role,
        )
        logger.info("Registered user_id=%s with role=%s", user_id, role.value)
        return SessionUser(user_id=user_id, email=email, full_name=full_name, role=role)

    def authenticate(self, email: str, password: str) -> SessionUser:
        user = self._users.get_by_email(str(email or "").strip().lower())
        if not user or not user.is_active:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(user.password_hash, str(password or ""))
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password")

        return SessionUser(user_id=user.user_id, email=user.email, full_name=user.full_name, role=user.role)


class UserService:
    """Use case: the caller's own profile."""

    def __init__(self, users: UserRepository, *, events: Optional[EventBus] = None):
        self._users = users
        self._events = events

    def get_profile(self, ctx: RequestContext) -> User:
        user = self._users.get_by_id(ctx.user_id)
        if not user:
            raise NotFoundError("User does not exist")
        return user

    def update_profile_picture(self, ctx: RequestContext, image_ref: str) -> User:
        image_ref = require_non_empty(image_ref, "Image reference")
        self.get_profile(ctx)
        if not self._users.set_profile_pic(ctx.user_id, image_ref):
            raise ValidationError("Failed to update profile picture")
        if self._events:
            self._events.publish(DomainEvent(name=PROFILE_UPDATED, user_id=ctx.user_id, payload={"profile_pic_ref": image_ref}))
        return self.get_profile(ctx)
