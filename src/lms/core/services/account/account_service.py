"""User registration, login and password changes."""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from src.lms.core.exceptions import LibraryError, NotFoundError, ValidationError
from src.lms.core.models import StatusCode, StatusResult
from src.lms.core.security import hash_password, verify_password
from src.lms.core.services.database.db_session import DbSessionService
from src.lms.entities.core.user import UserRepository


class AccountService:
    def __init__(self, db_service: DbSessionService):
        self._db = db_service

    def update_password(self, user_id: int, old_password: str, new_password: str) -> StatusResult:
        """Replace a user's password after verifying the current one.

        The lookup, check and write share one transaction; any failure rolls
        it back and leaves the stored hash untouched.
        """
        try:
            with self._db.session_scope() as session:
                repository = UserRepository(session)
                user = repository.get(user_id)
                if user is None:
                    raise NotFoundError(f"user {user_id} does not exist")
                if not verify_password(old_password, user.password):
                    raise ValidationError("old password is incorrect")
                if not new_password:
                    raise ValidationError("new password must not be empty")
                repository.update_password(user_id, hash_password(new_password))
        except LibraryError as e:
            logger.info("Password update rejected for user {}: {}", user_id, e.message)
            return StatusResult.failure(
                StatusCode.UPDATE_PASSWORD_FAILED,
                f"Failed to update password: {e.message}",
                code=e.code,
            )
        except SQLAlchemyError:
            return StatusResult.failure(
                StatusCode.UPDATE_PASSWORD_FAILED, "Failed to update password", code=500
            )

        logger.info("Password updated for user {}", user_id)
        return StatusResult.success(StatusCode.UPDATE_PASSWORD_OK, "Password updated")

    def register(self, name: str, password: str) -> StatusResult:
        if not name.strip() or not password:
            return StatusResult.failure(
                StatusCode.REGISTER_FAILED, "Name and password are required"
            )
        try:
            with self._db.session_scope() as session:
                user = UserRepository(session).create(name.strip(), hash_password(password))
        except SQLAlchemyError:
            return StatusResult.failure(StatusCode.REGISTER_FAILED, "Registration failed", code=500)

        logger.info("Registered user {}", user.id)
        return StatusResult.success(StatusCode.REGISTER_OK, f"Registered user {user.id}")

    def login(self, user_id: int, password: str) -> StatusResult:
        try:
            with self._db.get_session() as session:
                user = UserRepository(session).get(user_id)
        except SQLAlchemyError as e:
            logger.bind(error_type=type(e).__name__).error("User lookup failed: {}", e)
            return StatusResult.failure(
                StatusCode.LOGIN_ID_OR_PASSWORD_ERROR, "Login failed", code=500
            )

        if user is None:
            return StatusResult.failure(
                StatusCode.LOGIN_ID_NOT_EXIST, f"User {user_id} does not exist", code=404
            )
        if not verify_password(password, user.password):
            return StatusResult.failure(
                StatusCode.LOGIN_ID_OR_PASSWORD_ERROR, "Incorrect user id or password", code=401
            )
        return StatusResult.success(StatusCode.LOGIN_OK, "Login succeeded")
