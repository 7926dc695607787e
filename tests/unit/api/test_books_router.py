"""Tests for the catalog HTTP endpoints."""

from fastapi.testclient import TestClient


class TestBooksEndpoints:
    def test_empty_catalog(self, client: TestClient):
        assert client.get("/books/pages").json() == {"pages": 0}
        assert client.get("/books", params={"page": 1}).json() == []

    def test_pages_and_listing(self, client: TestClient, make_book, shelf):
        ids = [make_book(f"Book {i}", **shelf) for i in range(3)]

        assert client.get("/books/pages").json() == {"pages": 2}

        first = client.get("/books", params={"page": 1}).json()
        assert [b["id"] for b in first] == ids[:2]
        assert first[0]["category"] == "Science Fiction"
        assert first[0]["location"] == "Shelf A"
        assert first[0]["status"] == 0

        second = client.get("/books?page=2").json()
        assert [b["id"] for b in second] == ids[2:]

    def test_page_defaults_to_first(self, client, make_book):
        make_book("Only")

        assert client.get("/books").json() == client.get("/books?page=0").json()

    def test_single_book(self, client, make_book):
        book_id = make_book("Dune", author="Frank Herbert")

        response = client.get(f"/books/{book_id}")

        assert response.status_code == 200
        assert response.json()["author"] == "Frank Herbert"
        assert client.get("/books/999").status_code == 404

    def test_non_numeric_page_is_rejected(self, client):
        assert client.get("/books?page=abc").status_code == 422


class TestCategoryAndLocationEndpoints:
    def test_lists(self, client, shelf):
        assert client.get("/categories").json() == [
            {"id": shelf["category_id"], "name": "Science Fiction"}
        ]
        assert client.get("/locations").json() == [{"id": shelf["location_id"], "name": "Shelf A"}]

    def test_filtered_listings(self, client, make_book, shelf):
        for i in range(3):
            make_book(f"SF {i}", category_id=shelf["category_id"])
        make_book("Shelved", location_id=shelf["location_id"])

        category = shelf["category_id"]
        location = shelf["location_id"]
        assert client.get(f"/categories/{category}/books/pages").json() == {"pages": 2}
        assert len(client.get(f"/categories/{category}/books?page=2").json()) == 1
        assert client.get(f"/locations/{location}/books/pages").json() == {"pages": 1}
        assert [b["name"] for b in client.get(f"/locations/{location}/books").json()] == ["Shelved"]
