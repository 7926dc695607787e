"""User domain entity."""

from pydantic import Field

from src.lms.entities._base import Entity


class User(Entity):
    """A library patron.

    ``password`` holds the encoded password hash, never the plain password.
    """

    name: str = Field(description="Display name")
    password: str = Field(repr=False, description="Encoded password hash")
