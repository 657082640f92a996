from typing import Any

from fastapi import APIRouter, Response, status

from app import crud
from app.api.deps import DatabaseDep
from app.core.errors import UserNotFoundError, store_errors
from app.core.user_validate import parse_user_id, validate_user
from app.models import UserCreate, UserPublic, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserPublic)
def create_user(*, db: DatabaseDep, user_in: UserCreate) -> Any:
    """
    Create new user. The store assigns the id.
    """
    validate_user(user_in)
    with store_errors("Failed to create user", "create user"):
        return crud.create_user(db=db, user_create=user_in)


@router.get("", response_model=list[UserPublic])
def read_users(db: DatabaseDep) -> Any:
    """
    Retrieve all users.
    """
    with store_errors("Failed to list users", "list users"):
        return crud.list_users(db=db)


@router.get("/{user_id}", response_model=UserPublic)
def read_user_by_id(user_id: str, db: DatabaseDep) -> Any:
    """
    Get a specific user by id.
    """
    id_ = parse_user_id(user_id)
    with store_errors("Failed to get user", "get user", id_):
        user = crud.get_user(db=db, user_id=id_)
    if user is None:
        raise UserNotFoundError()
    return user


@router.put("/{user_id}", response_model=UserPublic)
def update_user(*, db: DatabaseDep, user_id: str, user_in: UserUpdate) -> Any:
    """
    Replace name, email and age of a user. The id in the path wins over the body.
    """
    id_ = parse_user_id(user_id)
    validate_user(user_in)
    with store_errors("Failed to update user", "update user", id_):
        user = crud.update_user(db=db, user_id=id_, user_in=user_in)
    if user is None:
        raise UserNotFoundError()
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: str, db: DatabaseDep) -> Response:
    """
    Delete a user.
    """
    id_ = parse_user_id(user_id)
    with store_errors("Failed to delete user", "delete user", id_):
        deleted = crud.delete_user(db=db, user_id=id_)
    if not deleted:
        raise UserNotFoundError()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
