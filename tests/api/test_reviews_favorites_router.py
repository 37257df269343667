"""
Test suite for the reviews and favorites routers.

System role: Verification of review/favorite HTTP contracts
"""

from types import SimpleNamespace
from uuid import uuid4

from coursehub.core.exceptions import ConflictError, NotFoundError, ValidationError
from coursehub.core.nodes import NodeKind


class TestReviews:
    def test_add_review(self, client, mock_review_service, user_headers, user_id, records) -> None:
        course_id = uuid4()
        mock_review_service.add_review.return_value = records.review(
            resource_id=course_id, user_id=user_id, rating=5, comment="Great"
        )

        response = client.post(
            "/api/v1/reviews",
            json={
                "resource_kind": "Course",
                "resource_id": str(course_id),
                "rating": 5,
                "comment": "Great",
            },
            headers=user_headers,
        )

        assert response.status_code == 201
        assert response.json()["rating"] == 5
        args = mock_review_service.add_review.call_args.args
        assert args[1:] == (NodeKind.COURSE, course_id, 5, "Great")

    def test_duplicate_review_gets_409(self, client, mock_review_service, user_headers) -> None:
        mock_review_service.add_review.side_effect = ConflictError(
            "You have already reviewed this resource"
        )

        response = client.post(
            "/api/v1/reviews",
            json={"resource_kind": "File", "resource_id": str(uuid4()), "rating": 3},
            headers=user_headers,
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "You have already reviewed this resource"

    def test_folder_review_gets_400(self, client, mock_review_service, user_headers) -> None:
        mock_review_service.add_review.side_effect = ValidationError(
            "Invalid resource type: Folder", field="resource_kind"
        )

        response = client.post(
            "/api/v1/reviews",
            json={"resource_kind": "Folder", "resource_id": str(uuid4()), "rating": 3},
            headers=user_headers,
        )

        assert response.status_code == 400

    def test_unknown_kind_gets_422(self, client, user_headers) -> None:
        response = client.post(
            "/api/v1/reviews",
            json={"resource_kind": "Session", "resource_id": str(uuid4()), "rating": 3},
            headers=user_headers,
        )

        assert response.status_code == 422

    def test_list_reviews(self, client, mock_review_service, records) -> None:
        file_id = uuid4()
        mock_review_service.list_reviews.return_value = [
            records.review(resource_kind=NodeKind.FILE, resource_id=file_id)
        ]

        response = client.get(f"/api/v1/reviews?resource_kind=File&resource_id={file_id}")

        assert response.status_code == 200
        assert len(response.json()) == 1
        mock_review_service.list_reviews.assert_called_once_with(NodeKind.FILE, file_id)

    def test_delete_review(self, client, mock_review_service, user_headers) -> None:
        review_id = uuid4()

        response = client.delete(f"/api/v1/reviews/{review_id}", headers=user_headers)

        assert response.status_code == 204
        assert mock_review_service.delete_review.call_args.args[1] == review_id

    def test_delete_missing_review_gets_404(self, client, mock_review_service, user_headers) -> None:
        review_id = uuid4()
        mock_review_service.delete_review.side_effect = NotFoundError("Review", review_id)

        response = client.delete(f"/api/v1/reviews/{review_id}", headers=user_headers)

        assert response.status_code == 404


class TestFavorites:
    def test_list_favorites(self, client, mock_favorites_index, user_headers, user_id, records) -> None:
        mock_favorites_index.list_favorites.return_value = SimpleNamespace(
            courses=[records.course()], files=[records.file(), records.file()]
        )

        response = client.get("/api/v1/users/me/favorites", headers=user_headers)

        assert response.status_code == 200
        assert len(response.json()["courses"]) == 1
        assert len(response.json()["files"]) == 2
        mock_favorites_index.list_favorites.assert_called_once_with(user_id)

    def test_add_favorite(self, client, mock_favorites_index, user_headers, user_id) -> None:
        file_id = uuid4()

        response = client.post(
            "/api/v1/users/me/favorites",
            json={"resource_kind": "File", "resource_id": str(file_id)},
            headers=user_headers,
        )

        assert response.status_code == 204
        mock_favorites_index.add_favorite.assert_called_once_with(user_id, NodeKind.FILE, file_id)

    def test_remove_favorite(self, client, mock_favorites_index, user_headers, user_id) -> None:
        course_id = uuid4()

        response = client.delete(
            f"/api/v1/users/me/favorites/Course/{course_id}", headers=user_headers
        )

        assert response.status_code == 204
        mock_favorites_index.remove_favorite.assert_called_once_with(
            user_id, NodeKind.COURSE, course_id
        )

    def test_favorites_require_identity(self, client) -> None:
        response = client.get("/api/v1/users/me/favorites")

        assert response.status_code == 401
