import pytest
from fastapi import HTTPException

from application.rest.routers.router_posts import get_posts
from utils.dependencies import get_post_service

TOO_LARGE_ID = 99999999999999999999


class FailingPostService:
    async def list_posts(self, db_session):
        raise RuntimeError("connection reset by peer")


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "blog-associations"}


def test_list_authors(client):
    response = client.get("/authors")
    assert response.status_code == 200
    assert response.json() == [{"id": 1, "name": "Leeroy Jenkins"}]


def test_unknown_author_is_404(client):
    response = client.get("/authors/42")
    assert response.status_code == 404
    assert response.json()["detail"] == "Author with ID 42 not found"


def test_author_posts(client):
    response = client.get("/authors/1/posts")
    assert response.status_code == 200
    assert [post["title"] for post in response.json()] == [
        "Web Development for Cats",
        "Web Development for Dogs",
    ]
    assert {post["author_id"] for post in response.json()} == {1}


def test_create_post_under_author(client):
    response = client.post(
        "/authors/1/posts",
        json={"title": "Web Development for Birds", "content": "Tweet tweet"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["author_id"] == 1
    assert body["content"] == "Tweet tweet"

    titles = [post["title"] for post in client.get("/authors/1/posts").json()]
    assert "Web Development for Birds" in titles


def test_create_post_under_unknown_author(client):
    response = client.post("/authors/5/posts", json={"title": "Lost"})
    assert response.status_code == 404


def test_create_post_with_blank_title(client):
    response = client.post("/authors/1/posts", json={"title": "   "})
    assert response.status_code == 400


def test_create_post_validation(client):
    response = client.post("/authors/1/posts", json={"content": "no title"})
    assert response.status_code == 422


def test_author_profile(client):
    response = client.get("/authors/1/profile")
    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "ljenk"
    assert body["author_id"] == 1


def test_second_profile_is_rejected(client):
    response = client.post("/authors/1/profile", json={"username": "again"})
    assert response.status_code == 400


def test_new_author_profile_flow(client):
    author = client.post("/authors", json={"name": "Ada Lovelace"}).json()

    assert client.get(f"/authors/{author['id']}/profile").status_code == 404

    created = client.post(
        f"/authors/{author['id']}/profile",
        json={"username": "ada", "email": "ada@example.com"},
    )
    assert created.status_code == 201
    profile = created.json()
    assert profile["author_id"] == author["id"]

    parent = client.get(f"/profiles/{profile['id']}/author")
    assert parent.json() == author


def test_post_endpoints(client):
    assert len(client.get("/posts").json()) == 2
    assert client.get("/posts/2").json()["title"] == "Web Development for Dogs"
    assert client.get("/posts/2/author").json()["name"] == "Leeroy Jenkins"
    assert client.get("/posts/9").status_code == 404
    assert client.get("/posts/9/author").status_code == 404


def test_post_tags(client):
    response = client.get("/posts/1/tags")
    assert response.status_code == 200
    assert [tag["name"] for tag in response.json()] == ["Internet", "Cats"]


def test_tag_post_round_trip(client):
    response = client.post("/posts/1/tags", json={"tag_id": 3})
    assert response.status_code == 201
    assert response.json()["post_id"] == 1
    assert response.json()["tag_id"] == 3

    assert 3 in [tag["id"] for tag in client.get("/posts/1/tags").json()]
    assert 1 in [post["id"] for post in client.get("/tags/3/posts").json()]


def test_tag_post_twice_returns_same_row(client):
    first = client.post("/posts/2/tags", json={"tag_id": 2})
    second = client.post("/posts/2/tags", json={"tag_id": 2})

    assert first.status_code == 201
    assert second.status_code == 200
    assert first.json() == second.json()


def test_tag_post_with_seeded_pair_returns_200(client):
    response = client.post("/posts/1/tags", json={"tag_id": 1})
    assert response.status_code == 200
    assert response.json()["id"] == 1


def test_tag_post_unknown_tag(client):
    response = client.post("/posts/1/tags", json={"tag_id": 77})
    assert response.status_code == 404
    assert response.json()["detail"] == "Tag with ID 77 not found"


def test_tags(client):
    assert [tag["name"] for tag in client.get("/tags").json()] == [
        "Cats",
        "Dogs",
        "Internet",
    ]
    assert client.get("/tags/2").json() == {"id": 2, "name": "Cats"}
    assert client.get("/tags/20").status_code == 404
    assert [post["id"] for post in client.get("/tags/1/posts").json()] == [1, 2]


def test_create_tag(client):
    response = client.post("/tags", json={"name": "Birds"})
    assert response.status_code == 201
    assert response.json()["name"] == "Birds"

    duplicate = client.post("/tags", json={"name": "birds"})
    assert duplicate.status_code == 400


def test_profile_lookup(client):
    assert client.get("/profiles/1").json()["email"] == "ljenk@aol.com"
    assert client.get("/profiles/2").status_code == 404


def test_unknown_post_tags_is_404(client):
    response = client.get("/posts/9/tags")
    assert response.status_code == 404
    assert response.json()["detail"] == "Post with ID 9 not found"


def test_profile_of_unknown_author_is_404(client):
    response = client.get("/authors/42/profile")
    assert response.status_code == 404
    assert response.json()["detail"] == "Author with ID 42 not found"


def test_post_with_missing_author_is_404(client, orphan_rows):
    post_id = orphan_rows["post_id"]

    response = client.get(f"/posts/{post_id}/author")
    assert response.status_code == 404
    assert response.json()["detail"] == (
        f"Author with ID 999 of post {post_id} not found"
    )


def test_profile_with_missing_author_is_404(client, orphan_rows):
    profile_id = orphan_rows["profile_id"]

    response = client.get(f"/profiles/{profile_id}/author")
    assert response.status_code == 404
    assert response.json()["detail"] == (
        f"Author with ID 999 of profile {profile_id} not found"
    )


@pytest.mark.parametrize(
    "path",
    [
        f"/authors/{TOO_LARGE_ID}",
        f"/authors/{TOO_LARGE_ID}/posts",
        f"/authors/{TOO_LARGE_ID}/profile",
        f"/posts/{TOO_LARGE_ID}",
        f"/posts/{TOO_LARGE_ID}/author",
        f"/posts/{TOO_LARGE_ID}/tags",
        f"/profiles/{TOO_LARGE_ID}",
        f"/profiles/{TOO_LARGE_ID}/author",
        f"/tags/{TOO_LARGE_ID}",
        f"/tags/{TOO_LARGE_ID}/posts",
        "/authors/0",
        "/tags/-1",
    ],
)
def test_out_of_range_ids_are_rejected(client, path):
    response = client.get(path)
    assert response.status_code == 422


def test_out_of_range_ids_in_bodies_are_rejected(client):
    tagged = client.post("/posts/1/tags", json={"tag_id": TOO_LARGE_ID})
    assert tagged.status_code == 422

    created = client.post(f"/authors/{TOO_LARGE_ID}/posts", json={"title": "Lost"})
    assert created.status_code == 422

    assert client.get("/authors/1").status_code == 200


def test_unexpected_error_is_500(client):
    app = client.app
    app.dependency_overrides[get_post_service] = lambda: FailingPostService()

    response = client.get("/posts")
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to retrieve posts"


async def test_unexpected_error_keeps_its_cause(db_session):
    with pytest.raises(HTTPException) as exc_info:
        await get_posts(db=db_session, post_service=FailingPostService())

    assert exc_info.value.status_code == 500
    assert isinstance(exc_info.value.__cause__, RuntimeError)
