# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Session-based authentication service.

Credential checks happen upstream; this module only issues and resolves
the opaque session tokens the API accepts.
"""

import uuid
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from src.config import settings
from src.database import store_read
from src.models import User
from src.models.session import Session as SessionModel


def create_session(db: Session, user_id: uuid.UUID) -> str:
    """Create a new session for a user."""
    token = str(uuid.uuid4())
    expires_at = datetime.utcnow() + timedelta(days=settings.session_expiry_days)

    session = SessionModel(
        user_id=user_id,
        token=token,
        expires_at=expires_at,
    )
    db.add(session)
    db.commit()
    return token


@store_read
def get_session(db: Session, token: str) -> SessionModel | None:
    """Get a valid session by token, dropping it if it has expired."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if not session:
        return None
    if session.is_expired:
        db.delete(session)
        db.commit()
        return None
    return session


@store_read
def get_user_by_id(db: Session, user_id: uuid.UUID) -> User | None:
    """Get a user by ID."""
    return db.query(User).filter(User.id == user_id).first()

