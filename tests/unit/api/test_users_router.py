"""Tests for account and circulation HTTP endpoints."""

from fastapi.testclient import TestClient

from src.lms.core.models import StatusCode


def _register(client: TestClient, name: str = "alice", password: str = "secret") -> int:
    body = client.post("/users", json={"name": name, "password": password}).json()
    assert body["status"] == StatusCode.REGISTER_OK
    return int(body["message"].rsplit(" ", 1)[-1])


class TestAccountEndpoints:
    def test_register_and_login(self, client: TestClient):
        user_id = _register(client)

        ok = client.post("/users/login", json={"user_id": user_id, "password": "secret"})
        bad = client.post("/users/login", json={"user_id": user_id, "password": "nope"})

        assert ok.json()["status"] == StatusCode.LOGIN_OK
        assert bad.json()["status"] == StatusCode.LOGIN_ID_OR_PASSWORD_ERROR
        assert bad.json()["code"] == 401

    def test_update_password(self, client: TestClient):
        user_id = _register(client)

        wrong = client.put(
            f"/users/{user_id}/password",
            json={"old_password": "guess", "new_password": "new"},
        ).json()
        right = client.put(
            f"/users/{user_id}/password",
            json={"old_password": "secret", "new_password": "new"},
        ).json()

        assert wrong["status"] == StatusCode.UPDATE_PASSWORD_FAILED
        assert right["status"] == StatusCode.UPDATE_PASSWORD_OK
        login = client.post("/users/login", json={"user_id": user_id, "password": "new"})
        assert login.json()["status"] == StatusCode.LOGIN_OK

    def test_update_password_unknown_user(self, client: TestClient):
        body = client.put(
            "/users/404/password", json={"old_password": "a", "new_password": "b"}
        ).json()

        assert body["status"] == StatusCode.UPDATE_PASSWORD_FAILED
        assert body["code"] == 404


class TestCirculationEndpoints:
    def test_reserve_borrow_return(self, client: TestClient, make_book):
        user_id = _register(client)
        book_id = make_book("Dune")

        reserved = client.post(f"/users/{user_id}/reservations/{book_id}").json()
        assert reserved["status"] == StatusCode.RESERVE_OK
        assert client.get(f"/books/{book_id}").json()["status"] == 1

        listing = client.get(f"/users/{user_id}/reservations").json()
        assert [r["id"] for r in listing] == [book_id]
        assert listing[0]["end_time"] is None

        borrowed = client.post(f"/users/{user_id}/borrows/{book_id}").json()
        assert borrowed["status"] == StatusCode.BORROW_OK
        assert client.get(f"/books/{book_id}").json()["status"] == 2

        borrows = client.get(f"/users/{user_id}/borrows").json()
        assert borrows[0]["fine"] == 0
        assert borrows[0]["deadline"]

        returned = client.delete(f"/users/{user_id}/borrows/{book_id}").json()
        assert returned["status"] == StatusCode.RETURN_OK
        assert client.get(f"/books/{book_id}").json()["status"] == 0

    def test_cancel_reservation(self, client: TestClient, make_book):
        user_id = _register(client)
        book_id = make_book()
        client.post(f"/users/{user_id}/reservations/{book_id}")

        cancelled = client.delete(f"/users/{user_id}/reservations/{book_id}").json()
        again = client.delete(f"/users/{user_id}/reservations/{book_id}").json()

        assert cancelled["status"] == StatusCode.CANCEL_RESERVE_OK
        assert again["status"] == StatusCode.CANCEL_RESERVE_FAILED

    def test_conflicts_are_reported_in_body(self, client: TestClient, make_book):
        alice = _register(client, "alice")
        bob = _register(client, "bob")
        book_id = make_book()
        client.post(f"/users/{alice}/borrows/{book_id}")

        response = client.post(f"/users/{bob}/borrows/{book_id}")

        assert response.status_code == 200
        assert response.json()["status"] == StatusCode.BORROW_FAILED
        assert response.json()["code"] == 409

    def test_fines(self, client: TestClient, reconciliation_service):
        user_id = _register(client)
        pay = reconciliation_service.issue_fine(user_id, 4)

        fines = client.get(f"/users/{user_id}/fines").json()

        assert fines == [{"id": pay.id, "user_id": user_id, "amount": 4, "done": 0}]
        assert client.get(f"/users/{user_id}/fines?unpaid_only=true").json() == fines
