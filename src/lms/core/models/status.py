"""Status enumerations and the result contract returned by mutations."""

from enum import IntEnum

from pydantic import BaseModel, Field


class BookStatus(IntEnum):
    """Availability of a book derived from its open reserve/borrow rows."""

    IDLE = 0
    RESERVED = 1
    BORROWED = 2


class StatusCode(IntEnum):
    """Outcome of an operation; Failed/OK values come in pairs per operation."""

    OK = 0
    LOGIN_ID_NOT_EXIST = 1
    LOGIN_ID_OR_PASSWORD_ERROR = 2
    LOGIN_OK = 3
    REGISTER_FAILED = 4
    REGISTER_OK = 5
    RESERVE_FAILED = 6
    RESERVE_OK = 7
    CANCEL_RESERVE_FAILED = 8
    CANCEL_RESERVE_OK = 9
    BORROW_FAILED = 10
    BORROW_OK = 11
    RETURN_FAILED = 12
    RETURN_OK = 13
    ADD_FAILED = 14
    ADD_OK = 15
    UPDATE_FAILED = 16
    UPDATE_OK = 17
    DELETE_FAILED = 18
    DELETE_OK = 19
    UPDATE_PASSWORD_FAILED = 20
    UPDATE_PASSWORD_OK = 21
    DELETE_USER_FAILED = 22
    DELETE_USER_OK = 23
    ADD_CATEGORY_FAILED = 24
    ADD_CATEGORY_OK = 25
    ADD_LOCATION_FAILED = 26
    ADD_LOCATION_OK = 27


class StatusResult(BaseModel):
    """Result of a mutation: numeric code, human-readable message and outcome."""

    code: int = Field(default=200, description="HTTP-style result code")
    message: str = Field(default="", description="Human-readable message")
    status: StatusCode = Field(default=StatusCode.OK, description="Enumerated outcome")

    @property
    def ok(self) -> bool:
        return self.code < 300

    @classmethod
    def success(cls, status: StatusCode, message: str) -> "StatusResult":
        return cls(code=200, message=message, status=status)

    @classmethod
    def failure(cls, status: StatusCode, message: str, code: int = 400) -> "StatusResult":
        return cls(code=code, message=message, status=status)
