"""Tests for deck API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.orm import Session

from flashdeck import models
from flashdeck.domain.identity import THREE_DECK_LIMIT, UNLIMITED_DECKS
from tests.conftest import (
    OTHER_USER_ID,
    OWNER_ID,
    auth_headers,
    create_test_card,
    create_test_deck,
)


class TestListDecks:
    """Test suite for GET /decks endpoint."""

    def test_lists_only_own_decks_with_card_counts(
        self, client: TestClient, db_session: Session, owner_headers: dict[str, str]
    ) -> None:
        deck = create_test_deck(db_session, title="Mine")
        create_test_card(db_session, deck)
        create_test_card(db_session, deck, front="Q2", back="A2")
        create_test_deck(db_session, user_id=OTHER_USER_ID, title="Theirs")

        response = client.get("/api/v1/decks", headers=owner_headers)

        assert response.status_code == status.HTTP_200_OK
        decks = response.json()["decks"]
        assert len(decks) == 1
        assert decks[0]["title"] == "Mine"
        assert decks[0]["card_count"] == 2
        assert decks[0]["user_id"] == OWNER_ID

    def test_most_recently_updated_first(
        self, client: TestClient, db_session: Session, owner_headers: dict[str, str]
    ) -> None:
        first = create_test_deck(db_session, title="First")
        create_test_deck(db_session, title="Second")

        client.put(
            f"/api/v1/decks/{first.id}", json={"title": "First again"}, headers=owner_headers
        )
        response = client.get("/api/v1/decks", headers=owner_headers)

        titles = [d["title"] for d in response.json()["decks"]]
        assert titles == ["First again", "Second"]

    def test_unauthenticated(self, client: TestClient) -> None:
        response = client.get("/api/v1/decks")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Unauthorized"


class TestCreateDeck:
    """Test suite for POST /decks endpoint."""

    def test_create_deck_success(
        self, client: TestClient, db_session: Session, owner_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/decks",
            json={"title": "Spanish Basics", "description": "Common words"},
            headers=owner_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["success"] is True
        assert data["deck"]["title"] == "Spanish Basics"
        assert data["deck"]["description"] == "Common words"
        assert data["deck"]["user_id"] == OWNER_ID

        db_deck = db_session.execute(
            select(models.Deck).where(models.Deck.id == data["deck"]["id"])
        ).scalar_one()
        assert db_deck.user_id == OWNER_ID

    def test_title_of_100_characters_is_accepted(
        self, client: TestClient, owner_headers: dict[str, str]
    ) -> None:
        response = client.post("/api/v1/decks", json={"title": "a" * 100}, headers=owner_headers)

        assert response.status_code == status.HTTP_201_CREATED

    def test_title_of_101_characters_is_rejected(
        self, client: TestClient, db_session: Session, owner_headers: dict[str, str]
    ) -> None:
        response = client.post("/api/v1/decks", json={"title": "a" * 101}, headers=owner_headers)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert "Title" in response.json()["detail"]
        assert db_session.execute(select(models.Deck)).first() is None

    def test_reports_every_violation(
        self, client: TestClient, owner_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/decks",
            json={"title": "", "description": "d" * 501},
            headers=owner_headers,
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["detail"] == (
            "Validation failed: Title is required, Description is too long"
        )

    def test_missing_title_is_reported_with_other_violations(
        self, client: TestClient, owner_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/decks", json={"description": "d" * 600}, headers=owner_headers
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["detail"] == (
            "Validation failed: Title is required, Description is too long"
        )

    def test_unauthenticated_writes_nothing(
        self, client: TestClient, db_session: Session
    ) -> None:
        response = client.post("/api/v1/decks", json={"title": "Sneaky"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert db_session.execute(select(models.Deck)).first() is None

    def test_limited_plan_denied_at_three_decks(
        self, client: TestClient, db_session: Session
    ) -> None:
        headers = auth_headers(OWNER_ID, features=[THREE_DECK_LIMIT])
        for i in range(3):
            create_test_deck(db_session, title=f"Deck {i}")

        response = client.post("/api/v1/decks", json={"title": "Fourth"}, headers=headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert "maximum of 3 decks" in response.json()["detail"]
        assert len(db_session.execute(select(models.Deck)).all()) == 3

    def test_limited_plan_allowed_at_two_decks(
        self, client: TestClient, db_session: Session
    ) -> None:
        headers = auth_headers(OWNER_ID, features=[THREE_DECK_LIMIT])
        for i in range(2):
            create_test_deck(db_session, title=f"Deck {i}")

        response = client.post("/api/v1/decks", json={"title": "Third"}, headers=headers)

        assert response.status_code == status.HTTP_201_CREATED


class TestDeckQuota:
    """Test suite for GET /decks/quota endpoint."""

    def test_quota_status_for_limited_plan(
        self, client: TestClient, db_session: Session
    ) -> None:
        headers = auth_headers(OWNER_ID, features=[THREE_DECK_LIMIT])
        for i in range(3):
            create_test_deck(db_session, title=f"Deck {i}")

        response = client.get("/api/v1/decks/quota", headers=headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["allowed"] is False
        assert data["deck_count"] == 3
        assert data["reason"].startswith("You have reached the maximum")

    def test_quota_status_for_unlimited_plan(
        self, client: TestClient, db_session: Session
    ) -> None:
        headers = auth_headers(OWNER_ID, features=[UNLIMITED_DECKS])
        for i in range(5):
            create_test_deck(db_session, title=f"Deck {i}")

        response = client.get("/api/v1/decks/quota", headers=headers)

        assert response.json() == {"allowed": True, "reason": None, "deck_count": 5}


class TestGetDeck:
    """Test suite for GET /decks/:id endpoint."""

    def test_owner_gets_deck(
        self, client: TestClient, test_deck: models.Deck, owner_headers: dict[str, str]
    ) -> None:
        response = client.get(f"/api/v1/decks/{test_deck.id}", headers=owner_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["deck"]["title"] == test_deck.title

    def test_other_user_gets_not_found(
        self, client: TestClient, test_deck: models.Deck, other_headers: dict[str, str]
    ) -> None:
        response = client.get(f"/api/v1/decks/{test_deck.id}", headers=other_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "Test Deck" not in response.text

    def test_non_positive_id_is_a_validation_error(
        self, client: TestClient, owner_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/decks/0", headers=owner_headers)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["detail"] == "Validation failed: Deck id must be a positive integer"


class TestUpdateDeck:
    """Test suite for PUT /decks/:id endpoint."""

    def test_partial_update_keeps_other_fields(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        owner_headers: dict[str, str],
    ) -> None:
        previous_updated_at = test_deck.updated_at

        response = client.put(
            f"/api/v1/decks/{test_deck.id}", json={"title": "Renamed"}, headers=owner_headers
        )

        assert response.status_code == status.HTTP_200_OK
        deck = response.json()["deck"]
        assert deck["title"] == "Renamed"
        assert deck["description"] == "A deck for tests"

        db_session.refresh(test_deck)
        assert test_deck.updated_at > previous_updated_at

    def test_null_description_clears_it(
        self, client: TestClient, test_deck: models.Deck, owner_headers: dict[str, str]
    ) -> None:
        response = client.put(
            f"/api/v1/decks/{test_deck.id}", json={"description": None}, headers=owner_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["deck"]["description"] is None
        assert response.json()["deck"]["title"] == "Test Deck"

    def test_other_user_cannot_update(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        other_headers: dict[str, str],
    ) -> None:
        response = client.put(
            f"/api/v1/decks/{test_deck.id}", json={"title": "Hijacked"}, headers=other_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Deck not found or unauthorized"
        db_session.refresh(test_deck)
        assert test_deck.title == "Test Deck"


class TestDeleteDeck:
    """Test suite for DELETE /decks/:id endpoint."""

    def test_delete_cascades_to_cards(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        owner_headers: dict[str, str],
    ) -> None:
        deck_id = test_deck.id
        create_test_card(db_session, test_deck)
        create_test_card(db_session, test_deck, front="Q2", back="A2")

        response = client.delete(f"/api/v1/decks/{deck_id}", headers=owner_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True, "message": "Deck deleted successfully"}
        assert db_session.execute(select(models.Deck)).first() is None
        orphans = db_session.execute(
            select(models.Card).where(models.Card.deck_id == deck_id)
        ).all()
        assert orphans == []

    def test_other_user_cannot_delete(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        other_headers: dict[str, str],
    ) -> None:
        response = client.delete(f"/api/v1/decks/{test_deck.id}", headers=other_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert db_session.execute(select(models.Deck)).first() is not None
