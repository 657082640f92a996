from pydantic import StrictInt
from sqlalchemy import BigInteger, Column, Integer, String
from sqlalchemy.dialects import mysql
from sqlmodel import Field, SQLModel

# Unsigned on MySQL; SQLite only auto-increments a plain INTEGER primary key.
_ID_TYPE = (
    BigInteger()
    .with_variant(mysql.BIGINT(unsigned=True), "mysql")
    .with_variant(Integer(), "sqlite")
)
_AGE_TYPE = Integer().with_variant(mysql.INTEGER(unsigned=True), "mysql")
AGE_MAX = 2**32 - 1  # INT UNSIGNED


# Shared properties
class UserBase(SQLModel):
    name: str = Field(default="", max_length=255)
    email: str = Field(default="", max_length=255)
    age: StrictInt = Field(default=0, ge=0, le=AGE_MAX)


# Properties to receive via API on creation; a client-supplied id is ignored
class UserCreate(UserBase):
    pass


# Properties to receive via API on update; the id comes from the path
class UserUpdate(UserBase):
    pass


# Database model, database table inferred from class name
class User(UserBase, table=True):
    __tablename__ = "users"

    id: int | None = Field(
        default=None,
        sa_column=Column(_ID_TYPE, primary_key=True, autoincrement=True),
    )
    name: str = Field(sa_column=Column(String(255), nullable=False))
    email: str = Field(sa_column=Column(String(255), nullable=False))
    age: int = Field(default=0, sa_column=Column(_AGE_TYPE, nullable=False))


# Properties to return via API, id is always required
class UserPublic(UserBase):
    id: int


class HealthStatus(SQLModel):
    status: str
