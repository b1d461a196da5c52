from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from schemas.common import PartialUpdate


class UserBase(BaseModel):
    username: str = Field(min_length=1, max_length=255)
    first_name: str
    last_name: str
    email: str
    date_of_birth: datetime | None = None
    gender: str | None = None
    height: float | None = None
    target_weight: float | None = None
    target_steps: int | None = None
    target_water_intake: float | None = None
    target_sleep: float | None = None
    profile_picture: str | None = None


class UserCreate(UserBase):
    password: str = Field(min_length=1)


class UserUpdate(PartialUpdate):
    not_null = ("first_name", "last_name", "email", "password")

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = Field(default=None, min_length=1)
    date_of_birth: datetime | None = None
    gender: str | None = None
    height: float | None = None
    target_weight: float | None = None
    target_steps: int | None = None
    target_water_intake: float | None = None
    target_sleep: float | None = None
    profile_picture: str | None = None


class UserOut(UserBase):
    model_config = ConfigDict(from_attributes=True)

    id: int


class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""
