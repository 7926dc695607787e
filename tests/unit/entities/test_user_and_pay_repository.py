"""Unit tests for the user and payment entity packages."""

from sqlmodel import Session

from src.lms.entities.core.user import User, UserRepository
from src.lms.entities.service.payment import Pay, PayRepository


class TestUserRepository:
    def test_create_and_get(self, session: Session):
        repo = UserRepository(session)

        user = repo.create("alice", "hash")

        assert repo.get(user.id) == User(id=user.id, name="alice", password="hash")

    def test_password_not_in_repr(self, session: Session):
        user = UserRepository(session).create("alice", "very-secret-hash")

        assert "very-secret-hash" not in repr(user)

    def test_update_password(self, session: Session):
        repo = UserRepository(session)
        user = repo.create("alice", "old")

        assert repo.update_password(user.id, "new") is True
        assert repo.get(user.id).password == "new"
        assert repo.update_password(999, "new") is False


class TestPayRepository:
    def test_create_starts_pending(self, session: Session):
        pay = PayRepository(session).create(user_id=1, amount=5)

        assert pay.done == 0
        assert pay.settled is False

    def test_mark_done_only_once(self, session: Session):
        repo = PayRepository(session)
        pay = repo.create(user_id=1, amount=5)

        assert repo.mark_done(pay.id) is True
        assert repo.mark_done(pay.id) is False
        assert repo.get(pay.id).settled is True

    def test_mark_done_unknown_id(self, session: Session):
        assert PayRepository(session).mark_done(404) is False

    def test_list_by_user(self, session: Session):
        repo = PayRepository(session)
        paid = repo.create(user_id=1, amount=2)
        unpaid = repo.create(user_id=1, amount=3)
        repo.create(user_id=2, amount=4)
        repo.mark_done(paid.id)

        assert [p.id for p in repo.list_by_user(1)] == [paid.id, unpaid.id]
        assert repo.list_by_user(1, unpaid_only=True) == [
            Pay(id=unpaid.id, user_id=1, amount=3, done=0)
        ]
