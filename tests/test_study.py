"""Tests for the study set endpoint."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from flashdeck import models
from tests.conftest import create_test_card


class TestStudySet:
    """Test suite for GET /decks/:id/study endpoint."""

    def test_returns_deck_and_cards(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        owner_headers: dict[str, str],
    ) -> None:
        create_test_card(db_session, test_deck, front="Q1", back="A1")
        create_test_card(db_session, test_deck, front="Q2", back="A2")

        response = client.get(f"/api/v1/decks/{test_deck.id}/study", headers=owner_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["deck"]["id"] == test_deck.id
        assert {c["front"] for c in data["cards"]} == {"Q1", "Q2"}

    def test_shuffle_keeps_the_same_cards(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        owner_headers: dict[str, str],
    ) -> None:
        card_ids = {create_test_card(db_session, test_deck, front=f"Q{i}").id for i in range(10)}

        response = client.get(
            f"/api/v1/decks/{test_deck.id}/study", params={"shuffle": True}, headers=owner_headers
        )

        assert response.status_code == status.HTTP_200_OK
        returned = [c["id"] for c in response.json()["cards"]]
        assert len(returned) == 10
        assert set(returned) == card_ids

    def test_empty_deck(
        self, client: TestClient, test_deck: models.Deck, owner_headers: dict[str, str]
    ) -> None:
        response = client.get(f"/api/v1/decks/{test_deck.id}/study", headers=owner_headers)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["detail"] == "This deck has no cards to study yet"

    def test_foreign_deck(
        self, client: TestClient, test_card: models.Card, other_headers: dict[str, str]
    ) -> None:
        response = client.get(f"/api/v1/decks/{test_card.deck_id}/study", headers=other_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Deck not found or unauthorized"
