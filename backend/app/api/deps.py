from typing import Annotated

from fastapi import Depends, Request

from app.core.db import Database


def get_db(request: Request) -> Database:
    return request.app.state.database


DatabaseDep = Annotated[Database, Depends(get_db)]
