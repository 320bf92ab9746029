"""
Integration tests for the GraphQL endpoint, the legacy REST routes and health
"""

import pytest
from fastapi.testclient import TestClient

from tinyhouse.api.app import create_app

TIMESTAMP = "01/01/2020, 9:00:00 AM"


@pytest.fixture
def client(shared_db):
    """HTTP client against an app using the shared in-memory database."""
    _ = shared_db
    return TestClient(create_app())


def graphql(client: TestClient, query: str, variables: dict | None = None, name: str | None = None):
    payload = {"query": query, "variables": variables or {}}
    if name:
        payload["operationName"] = name
    return client.post("/api", json=payload)


@pytest.mark.integration
class TestGraphQLEndpoint:
    def test_listings_query(self, client):
        resp = graphql(client, "query Listings { listings { id numOfBookings } }", name="Listings")

        assert resp.status_code == 200, resp.text
        assert resp.json()["data"]["listings"] == [
            {"id": "001", "numOfBookings": 0},
            {"id": "002", "numOfBookings": 0},
        ]

    def test_create_booking_then_refetch(self, client):
        resp = graphql(
            client,
            """
            mutation CreateBooking($id: ID!, $timestamp: String!) {
              createBooking(id: $id, timestamp: $timestamp) { id timestamp }
            }
            """,
            {"id": "001", "timestamp": TIMESTAMP},
        )
        assert resp.status_code == 200, resp.text
        assert resp.json()["data"]["createBooking"]["timestamp"] == TIMESTAMP

        listings = graphql(client, "{ listings { id numOfBookings } }").json()["data"]["listings"]
        assert listings[0] == {"id": "001", "numOfBookings": 1}

    def test_favorite_unknown_listing_reports_error(self, client):
        resp = graphql(
            client,
            "mutation FavoriteListing($id: ID!) { favoriteListing(id: $id) { id } }",
            {"id": "nope"},
        )

        body = resp.json()
        assert body["data"] is None
        assert body["errors"][0]["message"] == "failed to favorite listing"


@pytest.mark.integration
class TestLegacyRestEndpoints:
    def test_get_listings(self, client):
        resp = client.get("/listings")

        assert resp.status_code == 200
        first = resp.json()[0]
        assert first["id"] == "001"
        assert first["numOfGuests"] == 2
        assert first["numOfBookings"] == 0
        assert first["favorite"] is False

    def test_create_booking(self, client):
        resp = client.post("/create-booking", json={"id": "001", "timestamp": TIMESTAMP})

        assert resp.status_code == 200, resp.text
        booking = resp.json()
        assert booking["title"] == "Listing 001"
        assert booking["timestamp"] == TIMESTAMP

        bookings = client.get("/bookings").json()
        assert [b["id"] for b in bookings] == [booking["id"]]

        listing = client.get("/listings").json()[0]
        assert listing["bookings"] == [booking["id"]]
        assert listing["numOfBookings"] == 1

    def test_create_booking_unknown_listing(self, client):
        resp = client.post("/create-booking", json={"id": "999", "timestamp": TIMESTAMP})

        assert resp.status_code == 404
        assert resp.json() == {
            "error": {"kind": "not_found", "message": "listing can't be found"}
        }
        assert client.get("/bookings").json() == []

    def test_create_booking_requires_timestamp(self, client):
        resp = client.post("/create-booking", json={"id": "001"})

        assert resp.status_code == 422

    def test_favorite_listing(self, client):
        first = client.post("/favorite-listing", json={"id": "002"}).json()
        second = client.post("/favorite-listing", json={"id": "002"}).json()

        assert first["favorite"] is True
        assert second["favorite"] is False

    def test_delete_listing(self, client):
        resp = client.post("/delete-listing", json={"id": "001"})

        assert resp.status_code == 200
        assert resp.json()["id"] == "001"
        assert [l["id"] for l in client.get("/listings").json()] == ["002"]

        again = client.post("/delete-listing", json={"id": "001"})
        assert again.status_code == 404
        assert again.json()["error"]["message"] == "failed to delete listing"


def test_health_check(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "healthy"
    assert body["store_backend"] == "memory"
    assert body["store_error"] is None


def test_rest_routes_can_be_disabled(shared_db, monkeypatch):
    from tinyhouse.config import settings

    monkeypatch.setattr(settings, "rest_api_enabled", False)
    client = TestClient(create_app())

    assert client.get("/listings").status_code == 404
    assert client.get("/health").status_code == 200


def test_graphiql_served_on_get(client):
    resp = client.get("/api", headers={"Accept": "text/html"})

    assert resp.status_code == 200
    assert "<html" in resp.text.lower()


def test_graphiql_can_be_disabled(shared_db, monkeypatch):
    from tinyhouse.config import settings

    monkeypatch.setattr(settings, "graphiql", False)
    client = TestClient(create_app())

    assert client.get("/api", headers={"Accept": "text/html"}).status_code == 404
    resp = client.post("/api", json={"query": "{ listings { id } }"})
    assert resp.status_code == 200


def test_empty_timestamp_rejected_on_both_surfaces(client):
    rest = client.post("/create-booking", json={"id": "001", "timestamp": ""})
    gql = graphql(
        client,
        "mutation B($id: ID!, $timestamp: String!) "
        "{ createBooking(id: $id, timestamp: $timestamp) { id } }",
        {"id": "001", "timestamp": ""},
    )

    assert rest.status_code == 422
    assert gql.json()["errors"][0]["message"] == "timestamp must not be empty"
    assert client.get("/bookings").json() == []
