"""Entity: Pay."""

from pydantic import Field

from src.lms.entities._base import Entity


class Pay(Entity):
    """A fine owed by a user; ``done`` becomes 1 once the gateway confirms payment."""

    user_id: int = Field(description="User who owes the fine")
    amount: int = Field(description="Amount in the smallest currency unit")
    done: int = Field(default=0, description="0 pending, 1 settled")

    @property
    def settled(self) -> bool:
        return self.done == 1
