"""
Integration tests for /api/blogs endpoints.
"""
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from bloglist.di.container import DIContainer, set_container
from bloglist.domain.exceptions import StoreError

pytestmark = pytest.mark.integration


NEW_BLOG = {
    "_id": "5a422bc61b54a676234d1722",
    "title": "Test Blog 1",
    "author": "Test Blog 1 again",
    "url": "http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html",
    "likes": 0,
    "__v": 0,
}


def _blogs(client):
    response = client.get("/api/blogs")
    assert response.status_code == 200
    return response.json()


class TestListBlogs:

    def test_correct_amount_returned_as_json(self, client, initial_blogs):
        response = client.get("/api/blogs")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert len(response.json()) == len(initial_blogs)

    def test_identifier_is_named_id(self, client):
        blogs = _blogs(client)
        assert all(blog.get("id") for blog in blogs)
        assert all("_id" not in blog and "__v" not in blog for blog in blogs)


class TestCreateBlog:

    def test_valid_blog_added(self, client, initial_blogs):
        response = client.post("/api/blogs", json=NEW_BLOG)
        assert response.status_code == 201
        assert response.headers["content-type"].startswith("application/json")

        blogs = _blogs(client)
        assert len(blogs) == len(initial_blogs) + 1
        assert any(blog["title"] == "Test Blog 1" for blog in blogs)

    def test_supplied_id_ignored(self, client):
        created = client.post("/api/blogs", json={**NEW_BLOG, "id": NEW_BLOG["_id"]}).json()
        assert created["id"] != NEW_BLOG["_id"]
        assert "_id" not in created

    def test_likes_default_to_zero(self, client):
        payload = {"title": "No likes", "url": "http://nolikes"}
        response = client.post("/api/blogs", json=payload)
        assert response.status_code == 201
        assert response.json()["likes"] == 0

    @pytest.mark.parametrize("missing", ["title", "url"])
    def test_missing_required_field_is_400(self, client, initial_blogs, missing):
        payload = {k: v for k, v in NEW_BLOG.items() if k != missing}
        response = client.post("/api/blogs", json=payload)
        assert response.status_code == 400
        assert missing in response.json()["detail"]
        assert len(_blogs(client)) == len(initial_blogs)

    @pytest.mark.parametrize("likes", [-1, "lots", True, "5", 3.0])
    def test_malformed_likes_is_400(self, client, initial_blogs, likes):
        response = client.post("/api/blogs", json={**NEW_BLOG, "likes": likes})
        assert response.status_code == 400
        assert len(_blogs(client)) == len(initial_blogs)

    def test_anonymous_blog_has_no_owner(self, client):
        created = client.post("/api/blogs", json=NEW_BLOG).json()
        assert created["owner"] is None

    def test_token_holder_becomes_owner(self, client):
        client.post("/api/users", json={"username": "root", "name": "Superuser", "password": "sekret"})
        token = client.post("/api/login", json={"username": "root", "password": "sekret"}).json()["token"]

        response = client.post(
            "/api/blogs", json=NEW_BLOG, headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 201
        assert response.json()["owner"]["username"] == "root"

        [user] = client.get("/api/users").json()
        assert [blog["title"] for blog in user["blogs"]] == ["Test Blog 1"]

    def test_invalid_token_is_401(self, client, initial_blogs):
        response = client.post(
            "/api/blogs", json=NEW_BLOG, headers={"Authorization": "Bearer not.a.token"}
        )
        assert response.status_code == 401
        assert len(_blogs(client)) == len(initial_blogs)


class TestGetBlog:

    def test_found(self, client):
        first = _blogs(client)[0]
        response = client.get(f"/api/blogs/{first['id']}")
        assert response.status_code == 200
        assert response.json() == first

    @pytest.mark.parametrize("blog_id", ["5a422bc61b54a676234d1799", "not-an-id"])
    def test_unknown_is_404(self, client, blog_id):
        assert client.get(f"/api/blogs/{blog_id}").status_code == 404


class TestUpdateBlog:

    def test_update_likes_keeps_other_fields(self, client):
        created = client.post("/api/blogs", json={**NEW_BLOG, "title": "X"}).json()

        response = client.put(f"/api/blogs/{created['id']}", json={"likes": 9001})
        assert response.status_code == 200
        updated = response.json()
        assert updated["likes"] == 9001
        assert updated["title"] == "X"
        assert updated["author"] == created["author"]
        assert updated["url"] == created["url"]

    def test_unknown_is_404(self, client):
        response = client.put("/api/blogs/5a422bc61b54a676234d1799", json={"likes": 1})
        assert response.status_code == 404

    def test_negative_likes_is_400_and_not_applied(self, client):
        target = _blogs(client)[0]
        response = client.put(f"/api/blogs/{target['id']}", json={"title": "Changed", "likes": -4})
        assert response.status_code == 400
        assert client.get(f"/api/blogs/{target['id']}").json() == target

    @pytest.mark.parametrize("likes", [True, "5", 3.0])
    def test_non_integer_likes_is_400_and_not_applied(self, client, likes):
        target = _blogs(client)[0]
        response = client.put(f"/api/blogs/{target['id']}", json={"likes": likes})
        assert response.status_code == 400
        assert client.get(f"/api/blogs/{target['id']}").json() == target


class TestDeleteBlog:

    def test_delete_existing(self, client, initial_blogs):
        target = _blogs(client)[0]

        response = client.delete(f"/api/blogs/{target['id']}")
        assert response.status_code == 204

        blogs = _blogs(client)
        assert len(blogs) == len(initial_blogs) - 1
        assert target["title"] not in [blog["title"] for blog in blogs]

    def test_delete_absent_is_still_204(self, client, initial_blogs):
        target = _blogs(client)[0]
        assert client.delete(f"/api/blogs/{target['id']}").status_code == 204
        assert client.delete(f"/api/blogs/{target['id']}").status_code == 204
        assert len(_blogs(client)) == len(initial_blogs) - 1


class TestStoreFailure:

    def test_store_error_is_generic_500(self):
        from bloglist.main import app

        failing_store = AsyncMock()
        failing_store.find_all.side_effect = StoreError(
            "Document store operation failed", details={"collection": "blogs"}
        )
        set_container(DIContainer(store=failing_store))
        try:
            with TestClient(app) as c:
                response = c.get("/api/blogs")
        finally:
            set_container(None)

        assert response.status_code == 500
        assert response.json() == {"detail": "Storage is currently unavailable"}

    def test_invalid_stored_blog_is_generic_500(self, client, seeded_store):
        [blog_id] = seeded_store.seed("blogs", [{"title": "No url", "likes": 1}])

        listed = client.get("/api/blogs")
        assert listed.status_code == 500
        assert listed.json() == {"detail": "Storage is currently unavailable"}

        fetched = client.get(f"/api/blogs/{blog_id}")
        assert fetched.status_code == 500
        assert fetched.json() == {"detail": "Storage is currently unavailable"}
