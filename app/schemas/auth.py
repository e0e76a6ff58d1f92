"""Pydantic schemas for register / login."""
from pydantic import BaseModel


class RegisterSchema(BaseModel):
    email: str
    password: str
    name: str | None = None


class LoginSchema(BaseModel):
    email: str
    password: str


class TokenSchema(BaseModel):
    access_token: str
    token_type: str = "bearer"


class ProfileSchema(BaseModel):
    id: int
    email: str
    name: str | None = None
    current_streak: int
    longest_streak: int
    effective_streak: int
