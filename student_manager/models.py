"""Pydantic models for student records."""

from pydantic import BaseModel, Field, field_validator


class StudentIn(BaseModel):
    """Mutable student fields as entered on the console."""
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    age: int = Field(ge=0, le=150)

    @field_validator("name", "email")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def _looks_like_email(cls, value: str) -> str:
        if "@" not in value:
            raise ValueError("must contain '@'")
        return value


class Student(StudentIn):
    """A stored student row."""
    id: int
