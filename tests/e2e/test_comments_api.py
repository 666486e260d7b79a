"""End-to-end tests for the comment endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from eventtalk.interface.api.app import create_app
from eventtalk.persistence.repository.inmemory import InMemoryCommentRepository
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance)


def _create(client, **overrides):
    body = {
        "content": "¡Excelente evento! Muy recomendable",
        "authorId": str(uuid4()),
        "eventId": str(uuid4()),
    }
    body.update(overrides)
    return client.post("/comments", json=body)


class TestCommentLifecycle:
    """Create, like, update, delete through the HTTP API."""

    def test_full_lifecycle(self, client):
        """A comment goes through its whole life and then is gone."""
        # Create
        response = _create(client)
        assert response.status_code == 201
        created = response.json()
        assert created["likeCount"] == 0
        assert "createdAt" in created
        comment_id = created["id"]

        # Like twice
        assert client.put(f"/comments/{comment_id}/like").status_code == 200
        response = client.put(f"/comments/{comment_id}/like")
        assert response.json()["likeCount"] == 2

        # Update content, likes untouched
        response = client.put(f"/comments/{comment_id}", json={"content": "Editado"})
        assert response.status_code == 200
        assert response.json()["content"] == "Editado"
        assert response.json()["likeCount"] == 2
        assert response.json()["createdAt"] == created["createdAt"]

        # Delete returns the last state
        response = client.delete(f"/comments/{comment_id}")
        assert response.status_code == 200
        assert response.json()["content"] == "Editado"

        # Gone
        response = client.get(f"/comments/{comment_id}")
        assert response.status_code == 404
        assert response.json()["detail"] == "Comment not found"


class TestCommentReads:
    """Listing, search and single reads."""

    def test_list_returns_envelope(self, client):
        """List returns records newest first with paging metadata."""
        # Arrange
        for i in range(3):
            _create(
                client,
                content=f"Comentario {i}",
                createdAt=f"2024-05-0{i + 1}T10:00:00Z",
            )

        # Act
        response = client.get("/comments", params={"page": 1, "limit": 2})

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 3
        assert body["page"] == 1
        assert body["totalPages"] == 2
        assert [r["content"] for r in body["records"]] == [
            "Comentario 2",
            "Comentario 1",
        ]

    def test_non_numeric_paging_uses_defaults(self, client):
        """Garbage page/limit values don't fail the request."""
        # Arrange
        _create(client)

        # Act
        response = client.get("/comments", params={"page": "abc", "limit": "-5"})

        # Assert
        assert response.status_code == 200
        assert response.json()["page"] == 1
        assert response.json()["total"] == 1

    def test_event_without_comments_is_empty(self, client):
        """Unknown event gives an empty envelope."""
        # Act
        response = client.get(f"/comments/event/{uuid4()}")

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "records": [],
            "total": 0,
            "page": 1,
            "totalPages": 0,
        }

    def test_event_listing_filters(self, client):
        """Only the event's comments come back."""
        # Arrange
        event_id = str(uuid4())
        _create(client, eventId=event_id, content="Aquí")
        _create(client, content="Allá")

        # Act
        response = client.get(f"/comments/event/{event_id}")

        # Assert
        body = response.json()
        assert body["total"] == 1
        assert body["records"][0]["content"] == "Aquí"
        assert body["records"][0]["eventId"] == event_id

    def test_search_is_case_insensitive(self, client):
        """Search finds content regardless of case."""
        # Arrange
        _create(client)
        _create(client, content="Regular")

        # Act
        response = client.get("/comments/search", params={"q": "excelente"})

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1
        assert body["records"][0]["content"] == "¡Excelente evento! Muy recomendable"

    def test_search_without_query_is_rejected(self, client):
        """Missing q is a client error."""
        # Act
        response = client.get("/comments/search")

        # Assert
        assert response.status_code == 400
        assert response.json()["detail"] == "Query parameter 'q' is required"

    def test_get_unknown_comment_is_not_found(self, client):
        """Well-formed unknown id is a 404."""
        # Act
        response = client.get(f"/comments/{uuid4()}")

        # Assert
        assert response.status_code == 404

    def test_get_dangling_references_serialize_as_null(self, client):
        """Author and event are null when they don't exist."""
        # Arrange
        comment_id = _create(client).json()["id"]

        # Act
        response = client.get(f"/comments/{comment_id}")

        # Assert
        assert response.status_code == 200
        assert response.json()["author"] is None
        assert response.json()["event"] is None


class TestCommentErrors:
    """Client errors map to 400."""

    def test_malformed_id_is_bad_request(self, client):
        """Malformed comment id is a 400 on every single-comment route."""
        assert client.get("/comments/not-an-id").status_code == 400
        assert client.put("/comments/not-an-id/like").status_code == 400
        assert client.delete("/comments/not-an-id").status_code == 400
        assert (
            client.put("/comments/not-an-id", json={"content": "x"}).status_code == 400
        )

    def test_missing_fields_are_bad_request(self, client):
        """Create without required fields is rejected and stores nothing."""
        # Act
        response = client.post("/comments", json={"content": "Solo texto"})

        # Assert
        assert response.status_code == 400
        assert "Missing required fields" in response.json()["detail"]
        assert client.get("/comments").json()["total"] == 0

    def test_too_long_content_is_bad_request(self, client):
        """Content over 500 characters is rejected."""
        # Act
        response = _create(client, content="x" * 501)

        # Assert
        assert response.status_code == 400

    def test_malformed_body_is_bad_request(self, client):
        """Wrongly typed body fields are a 400, not a 422."""
        # Act
        response = _create(client, likeCount="many")

        # Assert
        assert response.status_code == 400

    def test_health(self, client):
        """Health endpoint answers."""
        # Act
        response = client.get("/health")

        # Assert
        assert response.status_code == 200

    def test_backend_failure_is_bad_request(self, client, monkeypatch):
        """Database errors reach the caller as a 400 with the backend message."""

        # Arrange
        async def _unreachable(self, query):
            raise OperationalError(
                "SELECT count(*)", {}, Exception("connection refused")
            )

        monkeypatch.setattr(InMemoryCommentRepository, "count", _unreachable)

        # Act
        response = client.get("/comments")

        # Assert
        assert response.status_code == 400
        assert response.json() == {"detail": "connection refused"}


class TestRawRecordResponses:
    """Create and delete return the stored record without summaries."""

    def test_create_omits_author_and_event(self, client):
        """Created comment carries no author/event keys."""
        # Act
        body = _create(client).json()

        # Assert
        assert "author" not in body
        assert "event" not in body
        assert body["likeCount"] == 0

    def test_delete_omits_author_and_event(self, client):
        """Deleted comment carries no author/event keys."""
        # Arrange
        comment_id = _create(client).json()["id"]

        # Act
        body = client.delete(f"/comments/{comment_id}").json()

        # Assert
        assert body["id"] == comment_id
        assert "author" not in body
        assert "event" not in body
