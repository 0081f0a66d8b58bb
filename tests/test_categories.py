"""Tests for category API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from noteswise import models
from tests.conftest import (
    OWNER_A,
    create_test_category,
    create_test_flashcard,
    create_test_note,
)


class TestCreateCategory:
    def test_create_category_success(
        self, client: TestClient, db_session: Session, owner_a_headers: dict[str, str]
    ) -> None:
        """Test creating a category stamps the caller as owner."""
        response = client.post(
            "/api/categories",
            json={"name": "Biology", "color": "#3B82F6"},
            headers=owner_a_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["name"] == "Biology"
        assert data["color"] == "#3B82F6"
        assert data["ownerId"] == OWNER_A
        assert data["createdAt"] is not None
        assert data["updatedAt"] is not None

        db_category = db_session.query(models.Category).filter_by(id=data["id"]).first()
        assert db_category is not None
        assert db_category.owner_id == OWNER_A

    def test_create_category_ignores_owner_in_body(
        self, client: TestClient, owner_a_headers: dict[str, str]
    ) -> None:
        category = create_test_category(client, owner_a_headers, ownerId="someone-else")
        assert category["ownerId"] == OWNER_A

    def test_create_category_empty_name(
        self, client: TestClient, owner_a_headers: dict[str, str]
    ) -> None:
        response = client.post("/api/categories", json={"name": ""}, headers=owner_a_headers)
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_create_category_blank_name(
        self, client: TestClient, owner_a_headers: dict[str, str]
    ) -> None:
        response = client.post("/api/categories", json={"name": "   "}, headers=owner_a_headers)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Category name cannot be empty"


class TestReadCategories:
    def test_round_trip(self, client: TestClient, owner_a_headers: dict[str, str]) -> None:
        """Test a created category reads back with the same fields."""
        created = create_test_category(client, owner_a_headers, name="History", color="#F59E0B")

        response = client.get(f"/api/categories/{created['id']}", headers=owner_a_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == created

    def test_list_only_returns_own_categories(
        self,
        client: TestClient,
        owner_a_headers: dict[str, str],
        owner_b_headers: dict[str, str],
    ) -> None:
        create_test_category(client, owner_a_headers, name="Zoology")
        create_test_category(client, owner_a_headers, name="Art")
        create_test_category(client, owner_b_headers, name="Secret")

        response = client.get("/api/categories", headers=owner_a_headers)

        assert response.status_code == status.HTTP_200_OK
        assert [c["name"] for c in response.json()] == ["Art", "Zoology"]

    def test_get_other_owners_category_returns_404(
        self,
        client: TestClient,
        owner_a_headers: dict[str, str],
        owner_b_headers: dict[str, str],
    ) -> None:
        category = create_test_category(client, owner_a_headers)

        response = client.get(f"/api/categories/{category['id']}", headers=owner_b_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": f"Category with id {category['id']} not found"}

    def test_get_missing_category_returns_404(
        self, client: TestClient, owner_a_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/categories/99999", headers=owner_a_headers)
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestUpdateCategory:
    def test_update_name_only_keeps_color(
        self, client: TestClient, owner_a_headers: dict[str, str]
    ) -> None:
        category = create_test_category(client, owner_a_headers, name="Bio", color="#10B981")

        response = client.put(
            f"/api/categories/{category['id']}",
            json={"name": "Biology"},
            headers=owner_a_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        reread = client.get(f"/api/categories/{category['id']}", headers=owner_a_headers).json()
        assert reread["name"] == "Biology"
        assert reread["color"] == "#10B981"
        assert reread["ownerId"] == category["ownerId"]
        assert reread["createdAt"] == category["createdAt"]

    def test_update_color_null_clears_color(
        self, client: TestClient, owner_a_headers: dict[str, str]
    ) -> None:
        category = create_test_category(client, owner_a_headers, color="#10B981")

        response = client.put(
            f"/api/categories/{category['id']}", json={"color": None}, headers=owner_a_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["color"] is None
        assert response.json()["name"] == category["name"]

    def test_update_without_fields_returns_400(
        self, client: TestClient, owner_a_headers: dict[str, str]
    ) -> None:
        category = create_test_category(client, owner_a_headers)

        response = client.put(f"/api/categories/{category['id']}", json={}, headers=owner_a_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_other_owners_category_returns_404(
        self,
        client: TestClient,
        owner_a_headers: dict[str, str],
        owner_b_headers: dict[str, str],
    ) -> None:
        category = create_test_category(client, owner_a_headers, name="Mine")

        response = client.put(
            f"/api/categories/{category['id']}", json={"name": "Stolen"}, headers=owner_b_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        reread = client.get(f"/api/categories/{category['id']}", headers=owner_a_headers).json()
        assert reread["name"] == "Mine"


class TestDeleteCategory:
    def test_delete_keeps_notes_and_clears_their_category(
        self,
        client: TestClient,
        db_session: Session,
        owner_a_headers: dict[str, str],
    ) -> None:
        """Test the default policy detaches notes instead of deleting them."""
        category = create_test_category(client, owner_a_headers)
        note = create_test_note(client, owner_a_headers, categoryId=category["id"])
        create_test_flashcard(client, owner_a_headers, note["id"])

        response = client.delete(f"/api/categories/{category['id']}", headers=owner_a_headers)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        gone = client.get(f"/api/categories/{category['id']}", headers=owner_a_headers)
        assert gone.status_code == status.HTTP_404_NOT_FOUND

        reread = client.get(f"/api/notes/{note['id']}", headers=owner_a_headers)
        assert reread.status_code == status.HTTP_200_OK
        assert reread.json()["categoryId"] is None
        assert db_session.query(models.Flashcard).filter_by(note_id=note["id"]).count() == 1

    def test_delete_with_cascade_removes_notes_and_flashcards(
        self,
        client: TestClient,
        db_session: Session,
        owner_a_headers: dict[str, str],
    ) -> None:
        category = create_test_category(client, owner_a_headers)
        filed = create_test_note(client, owner_a_headers, categoryId=category["id"])
        create_test_flashcard(client, owner_a_headers, filed["id"])
        unfiled = create_test_note(client, owner_a_headers, title="Loose note")

        response = client.delete(
            f"/api/categories/{category['id']}?cascade=true", headers=owner_a_headers
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/api/notes/{filed['id']}", headers=owner_a_headers).status_code == 404
        assert client.get(f"/api/notes/{unfiled['id']}", headers=owner_a_headers).status_code == 200
        assert db_session.query(models.Flashcard).filter_by(note_id=filed["id"]).count() == 0

    def test_delete_other_owners_category_returns_404(
        self,
        client: TestClient,
        owner_a_headers: dict[str, str],
        owner_b_headers: dict[str, str],
    ) -> None:
        category = create_test_category(client, owner_a_headers)
        note = create_test_note(client, owner_a_headers, categoryId=category["id"])

        response = client.delete(
            f"/api/categories/{category['id']}?cascade=true", headers=owner_b_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        kept = client.get(f"/api/categories/{category['id']}", headers=owner_a_headers)
        assert kept.status_code == status.HTTP_200_OK
        reread = client.get(f"/api/notes/{note['id']}", headers=owner_a_headers).json()
        assert reread["categoryId"] == category["id"]

    def test_delete_missing_category_returns_404(
        self, client: TestClient, owner_a_headers: dict[str, str]
    ) -> None:
        response = client.delete("/api/categories/99999", headers=owner_a_headers)
        assert response.status_code == status.HTTP_404_NOT_FOUND
