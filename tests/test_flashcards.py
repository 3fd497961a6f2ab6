"""Tests for flashcard CRUD, review, practice and enumeration endpoints."""

from collections.abc import Callable
from typing import Any

from fastapi import status
from fastapi.testclient import TestClient

CreateFlashcard = Callable[..., dict[str, Any]]


def _ids(client: TestClient, url: str, **params: Any) -> list[int]:
    return [f["id"] for f in client.get(url, params=params).json()]


class TestListFlashcards:
    """Test suite for GET /flashcards endpoint."""

    def test_list_empty(self, client: TestClient) -> None:
        """Test listing when no flashcards exist."""
        response = client.get("/api/flashcards")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_ordered_by_id(
        self, client: TestClient, sample_flashcards: list[dict[str, Any]]
    ) -> None:
        """Test flashcards come back in id order."""
        response = client.get("/api/flashcards")

        assert response.status_code == status.HTTP_200_OK
        assert [f["id"] for f in response.json()] == [1, 2, 3, 4]

    def test_list_pagination(
        self, client: TestClient, sample_flashcards: list[dict[str, Any]]
    ) -> None:
        """Test page 2 with page size 2 returns the third and fourth cards."""
        response = client.get("/api/flashcards", params={"page_number": 2, "page_size": 2})

        assert response.status_code == status.HTTP_200_OK
        assert [f["id"] for f in response.json()] == [3, 4]

    def test_list_page_past_end(
        self, client: TestClient, sample_flashcards: list[dict[str, Any]]
    ) -> None:
        """Test a page beyond the last one is empty."""
        response = client.get("/api/flashcards", params={"page_number": 3, "page_size": 2})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_default_page_size(
        self, client: TestClient, create_flashcard: CreateFlashcard
    ) -> None:
        """Test the default page holds ten flashcards."""
        for i in range(12):
            create_flashcard(meaning=f"Word {i}")

        response = client.get("/api/flashcards")

        assert len(response.json()) == 10

    def test_filter_by_category(
        self, client: TestClient, sample_flashcards: list[dict[str, Any]]
    ) -> None:
        """Test filtering by category code."""
        response = client.get("/api/flashcards", params={"category": 0})

        assert response.status_code == status.HTTP_200_OK
        assert [f["meaning"] for f in response.json()] == ["Good morning", "Computer"]

    def test_filters_are_combined(
        self, client: TestClient, sample_flashcards: list[dict[str, Any]]
    ) -> None:
        """Test every supplied filter must hold."""
        response = client.get("/api/flashcards", params={"word_type": 2, "difficulty": 2})

        assert [f["meaning"] for f in response.json()] == ["Computer"]

    def test_filter_by_favorite(
        self, client: TestClient, sample_flashcards: list[dict[str, Any]]
    ) -> None:
        """Test filtering by the favorite flag."""
        client.put("/api/flashcards/2", json={"is_favorite": True})

        favorites = client.get("/api/flashcards", params={"is_favorite": "true"}).json()
        others = client.get("/api/flashcards", params={"is_favorite": "false"}).json()

        assert [f["id"] for f in favorites] == [2]
        assert [f["id"] for f in others] == [1, 3, 4]

    def test_list_page_number_beyond_storage_range(
        self, client: TestClient, sample_flashcards: list[dict[str, Any]]
    ) -> None:
        """Test an absurdly large page number is just an empty page."""
        response = client.get("/api/flashcards", params={"page_number": 10**19, "page_size": 10})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_huge_page_size(
        self, client: TestClient, sample_flashcards: list[dict[str, Any]]
    ) -> None:
        """Test a page size past the storage range returns every flashcard."""
        response = client.get("/api/flashcards", params={"page_size": 10**20})

        assert response.status_code == status.HTTP_200_OK
        assert [f["id"] for f in response.json()] == [1, 2, 3, 4]

    def test_search_meaning_case_insensitive(
        self, client: TestClient, sample_flashcards: list[dict[str, Any]]
    ) -> None:
        """Test the search term matches meaning regardless of case."""
        response = client.get("/api/flashcards", params={"search_term": "COFF"})

        assert [f["meaning"] for f in response.json()] == ["Coffee"]

    def test_search_written_forms(
        self, client: TestClient, sample_flashcards: list[dict[str, Any]]
    ) -> None:
        """Test the search term matches kanji, hiragana and katakana."""
        assert _ids(client, "/api/flashcards", search_term="犬") == [1]
        assert _ids(client, "/api/flashcards", search_term="いぬ") == [1]
        assert _ids(client, "/api/flashcards", search_term="コー") == [2]

    def test_search_treats_wildcards_literally(
        self, client: TestClient, sample_flashcards: list[dict[str, Any]]
    ) -> None:
        """Test LIKE wildcards in the search term match nothing special."""
        response = client.get("/api/flashcards", params={"search_term": "%"})

        assert response.json() == []

    def test_invalid_category_code(self, client: TestClient) -> None:
        """Test an undefined category code is rejected."""
        response = client.get("/api/flashcards", params={"category": 42})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "category" in response.json()["detail"]

    def test_invalid_page_number(self, client: TestClient) -> None:
        """Test page numbers start at 1."""
        response = client.get("/api/flashcards", params={"page_number": 0})

        assert response.status_code == 422


class TestGetFlashcard:
    """Test suite for GET /flashcards/:id endpoint."""

    def test_get_flashcard(self, client: TestClient, create_flashcard: CreateFlashcard) -> None:
        """Test fetching one flashcard."""
        created = create_flashcard(kanji="猫", hiragana="ねこ", meaning="Cat", category=1)

        response = client.get(f"/api/flashcards/{created['id']}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["kanji"] == "猫"
        assert data["hiragana"] == "ねこ"
        assert data["meaning"] == "Cat"
        assert data["category"] == 1

    def test_get_flashcard_not_found(self, client: TestClient) -> None:
        """Test fetching a missing flashcard."""
        response = client.get("/api/flashcards/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_huge_id_not_found(self, client: TestClient) -> None:
        """Test ids past the storage range are simply not found."""
        huge_id = 10**20

        assert client.get(f"/api/flashcards/{huge_id}").status_code == 404
        assert client.put(f"/api/flashcards/{huge_id}", json={"meaning": "X"}).status_code == 404
        assert client.delete(f"/api/flashcards/{huge_id}").status_code == 404
        assert client.post(f"/api/flashcards/{huge_id}/review").status_code == 404

    def test_get_flashcard_invalid_id(self, client: TestClient) -> None:
        """Test ids start at 1."""
        response = client.get("/api/flashcards/0")

        assert response.status_code == 422


class TestCreateFlashcard:
    """Test suite for POST /flashcards endpoint."""

    def test_create_flashcard_success(self, client: TestClient) -> None:
        """Test a new flashcard starts unreviewed and not favorite."""
        response = client.post(
            "/api/flashcards",
            json={
                "kanji": "桜",
                "hiragana": "さくら",
                "meaning": "Cherry blossom",
                "example": "桜が咲いた。",
                "word_type": 0,
                "difficulty": 2,
                "category": 4,
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["id"] >= 1
        assert data["katakana"] == ""
        assert data["example"] == "桜が咲いた。"
        assert data["difficulty"] == 2
        assert data["category"] == 4
        assert data["review_count"] == 0
        assert data["is_favorite"] is False
        assert data["last_reviewed_date"] is None
        assert data["created_date"] is not None

    def test_create_with_defaults(self, client: TestClient) -> None:
        """Test only the meaning is required."""
        response = client.post("/api/flashcards", json={"meaning": "Something"})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["word_type"] == 0
        assert data["difficulty"] == 1
        assert data["category"] == 0
        assert data["example"] is None

    def test_create_empty_meaning(self, client: TestClient) -> None:
        """Test creating a flashcard with empty meaning fails."""
        response = client.post("/api/flashcards", json={"kanji": "水", "meaning": ""})

        assert response.status_code == 422

    def test_create_blank_meaning(self, client: TestClient) -> None:
        """Test a whitespace-only meaning breaks the flashcard rules."""
        response = client.post("/api/flashcards", json={"kanji": "水", "meaning": "   "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_invalid_difficulty(self, client: TestClient) -> None:
        """Test undefined enumeration codes are rejected."""
        response = client.post("/api/flashcards", json={"meaning": "Water", "difficulty": 9})

        assert response.status_code == 422

    def test_created_flashcard_is_listed(
        self, client: TestClient, create_flashcard: CreateFlashcard
    ) -> None:
        """Test a created flashcard shows up in the list."""
        created = create_flashcard(meaning="Water")

        listed = client.get("/api/flashcards").json()

        assert [f["id"] for f in listed] == [created["id"]]


class TestUpdateFlashcard:
    """Test suite for PUT /flashcards/:id endpoint."""

    def test_partial_update(self, client: TestClient, create_flashcard: CreateFlashcard) -> None:
        """Test only the supplied fields change."""
        created = create_flashcard(kanji="犬", hiragana="いぬ", meaning="Dog", category=1)

        response = client.put(
            f"/api/flashcards/{created['id']}", json={"meaning": "Hound", "difficulty": 3}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["meaning"] == "Hound"
        assert data["difficulty"] == 3
        assert data["kanji"] == "犬"
        assert data["hiragana"] == "いぬ"
        assert data["category"] == 1

    def test_empty_strings_leave_forms_unchanged(
        self, client: TestClient, create_flashcard: CreateFlashcard
    ) -> None:
        """Test empty written forms and meaning are ignored."""
        created = create_flashcard(kanji="犬", hiragana="いぬ", meaning="Dog")

        response = client.put(
            f"/api/flashcards/{created['id']}",
            json={"kanji": "", "hiragana": "", "katakana": "", "meaning": ""},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["kanji"] == "犬"
        assert data["hiragana"] == "いぬ"
        assert data["meaning"] == "Dog"

    def test_empty_example_clears_it(
        self, client: TestClient, create_flashcard: CreateFlashcard
    ) -> None:
        """Test the example is replaced even by an empty string."""
        created = create_flashcard(meaning="Dog", example="犬がいる。")

        response = client.put(f"/api/flashcards/{created['id']}", json={"example": ""})

        assert response.json()["example"] == ""

    def test_update_is_idempotent(
        self, client: TestClient, create_flashcard: CreateFlashcard
    ) -> None:
        """Test applying the same update twice gives the same flashcard."""
        created = create_flashcard(meaning="Dog")
        payload = {"meaning": "Puppy", "is_favorite": True, "category": 1}

        first = client.put(f"/api/flashcards/{created['id']}", json=payload).json()
        second = client.put(f"/api/flashcards/{created['id']}", json=payload).json()

        assert first == second

    def test_update_keeps_review_state(
        self, client: TestClient, create_flashcard: CreateFlashcard
    ) -> None:
        """Test updates never touch id, creation date or review count."""
        created = create_flashcard(meaning="Dog")
        client.post(f"/api/flashcards/{created['id']}/review")

        data = client.put(f"/api/flashcards/{created['id']}", json={"meaning": "Hound"}).json()

        assert data["id"] == created["id"]
        assert data["created_date"] == created["created_date"]
        assert data["review_count"] == 1

    def test_update_not_found(self, client: TestClient) -> None:
        """Test updating a missing flashcard."""
        response = client.put("/api/flashcards/99999", json={"meaning": "Nothing"})

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteFlashcard:
    """Test suite for DELETE /flashcards/:id endpoint."""

    def test_delete_flashcard(self, client: TestClient, create_flashcard: CreateFlashcard) -> None:
        """Test a deleted flashcard is gone."""
        created = create_flashcard(meaning="Dog")

        response = client.delete(f"/api/flashcards/{created['id']}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b""
        assert client.get(f"/api/flashcards/{created['id']}").status_code == (
            status.HTTP_404_NOT_FOUND
        )

    def test_delete_twice(self, client: TestClient, create_flashcard: CreateFlashcard) -> None:
        """Test deleting an already deleted flashcard is not found."""
        created = create_flashcard(meaning="Dog")
        client.delete(f"/api/flashcards/{created['id']}")

        response = client.delete(f"/api/flashcards/{created['id']}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_ids_are_not_reused(
        self, client: TestClient, create_flashcard: CreateFlashcard
    ) -> None:
        """Test a new flashcard never takes a deleted id."""
        create_flashcard(meaning="One")
        second = create_flashcard(meaning="Two")
        client.delete(f"/api/flashcards/{second['id']}")

        third = create_flashcard(meaning="Three")

        assert third["id"] > second["id"]


class TestReviewFlashcard:
    """Test suite for POST /flashcards/:id/review endpoint."""

    def test_mark_reviewed(self, client: TestClient, create_flashcard: CreateFlashcard) -> None:
        """Test each review bumps the count and stamps the date."""
        created = create_flashcard(meaning="Dog")

        first = client.post(f"/api/flashcards/{created['id']}/review")
        second = client.post(f"/api/flashcards/{created['id']}/review")

        assert first.status_code == status.HTTP_200_OK
        assert first.json()["review_count"] == 1
        assert first.json()["last_reviewed_date"] is not None
        assert second.json()["review_count"] == 2

        stored = client.get(f"/api/flashcards/{created['id']}").json()
        assert stored["review_count"] == 2
        assert stored["last_reviewed_date"] is not None

    def test_mark_reviewed_not_found(self, client: TestClient) -> None:
        """Test reviewing a missing flashcard."""
        response = client.post("/api/flashcards/99999/review")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestRandomFlashcards:
    """Test suite for GET /flashcards/random endpoint."""

    def test_random_returns_whole_small_pool(
        self, client: TestClient, sample_flashcards: list[dict[str, Any]]
    ) -> None:
        """Test asking for more cards than exist returns each card once."""
        response = client.get("/api/flashcards/random", params={"count": 5})

        assert response.status_code == status.HTTP_200_OK
        ids = [f["id"] for f in response.json()]
        assert len(ids) == 4
        assert sorted(ids) == [1, 2, 3, 4]

    def test_random_count(
        self, client: TestClient, sample_flashcards: list[dict[str, Any]]
    ) -> None:
        """Test the requested number of distinct cards comes back."""
        ids = _ids(client, "/api/flashcards/random", count=2)

        assert len(ids) == 2
        assert len(set(ids)) == 2

    def test_random_filtered(
        self, client: TestClient, sample_flashcards: list[dict[str, Any]]
    ) -> None:
        """Test the pool honours category and difficulty."""
        response = client.get(
            "/api/flashcards/random", params={"count": 10, "category": 0, "difficulty": 2}
        )

        assert [f["meaning"] for f in response.json()] == ["Computer"]

    def test_random_empty_store(self, client: TestClient) -> None:
        """Test an empty store gives an empty sample."""
        response = client.get("/api/flashcards/random")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_random_count_out_of_range(self, client: TestClient) -> None:
        """Test counts outside 1..50 are rejected."""
        assert client.get("/api/flashcards/random", params={"count": 0}).status_code == (
            status.HTTP_400_BAD_REQUEST
        )
        assert client.get("/api/flashcards/random", params={"count": 51}).status_code == (
            status.HTTP_400_BAD_REQUEST
        )

    def test_random_count_bounds_accepted(
        self, client: TestClient, sample_flashcards: list[dict[str, Any]]
    ) -> None:
        """Test 1 and 50 are valid counts."""
        assert len(client.get("/api/flashcards/random", params={"count": 1}).json()) == 1
        assert len(client.get("/api/flashcards/random", params={"count": 50}).json()) == 4


class TestEnumerations:
    """Test suite for the classification listing endpoints."""

    def test_word_types(self, memory_client: TestClient) -> None:
        """Test word types are listed in code order with descriptions."""
        response = memory_client.get("/api/flashcards/wordtypes")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [(o["value"], o["name"]) for o in data] == [
            (0, "Native"),
            (1, "SinoJapanese"),
            (2, "Foreign"),
            (3, "Mixed"),
        ]
        assert all(o["description"] for o in data)

    def test_difficulties(self, memory_client: TestClient) -> None:
        """Test difficulty levels run from 1 to 4."""
        data = memory_client.get("/api/flashcards/difficulties").json()

        assert [(o["value"], o["name"]) for o in data] == [
            (1, "Beginner"),
            (2, "Intermediate"),
            (3, "Advanced"),
            (4, "Expert"),
        ]

    def test_categories(self, memory_client: TestClient) -> None:
        """Test the twelve categories without descriptions."""
        data = memory_client.get("/api/flashcards/categories").json()

        assert len(data) == 12
        assert data[0] == {"value": 0, "name": "General", "description": None}
        assert data[-1]["value"] == 11
        assert data[-1]["name"] == "Adjectives"
