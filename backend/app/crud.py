import logging

from pydantic import ValidationError

from app.core.db import Database
from app.models import UserCreate, UserPublic, UserUpdate

logger = logging.getLogger(__name__)

_SELECT_COLUMNS = "SELECT id, name, email, age FROM users"


def create_user(*, db: Database, user_create: UserCreate) -> UserPublic:
    result = db.execute(
        "INSERT INTO users (name, email, age) VALUES (:name, :email, :age)",
        {"name": user_create.name, "email": user_create.email, "age": user_create.age},
    )
    return UserPublic(id=result.lastrowid, **user_create.model_dump())


def list_users(*, db: Database) -> list[UserPublic]:
    """All users in store order. Rows that don't fit the public shape are skipped."""
    users: list[UserPublic] = []
    with db.query(_SELECT_COLUMNS) as rows:
        for row in rows.mappings():
            try:
                users.append(UserPublic.model_validate(dict(row)))
            except ValidationError as e:
                logger.warning("Skipping unreadable users row (id=%s): %s", row.get("id"), e)
    return users


def get_user(*, db: Database, user_id: int) -> UserPublic | None:
    row = db.query_one(f"{_SELECT_COLUMNS} WHERE id = :id", {"id": user_id})
    if row is None:
        return None
    return UserPublic.model_validate(dict(row._mapping))


def update_user(*, db: Database, user_id: int, user_in: UserUpdate) -> UserPublic | None:
    """Overwrite all mutable fields; None when no row has ``user_id``."""
    result = db.execute(
        "UPDATE users SET name = :name, email = :email, age = :age WHERE id = :id",
        {"name": user_in.name, "email": user_in.email, "age": user_in.age, "id": user_id},
    )
    if result.rowcount == 0:
        return None
    return UserPublic(id=user_id, **user_in.model_dump())


def delete_user(*, db: Database, user_id: int) -> bool:
    result = db.execute("DELETE FROM users WHERE id = :id", {"id": user_id})
    return result.rowcount > 0
