"""End-to-end tests for posts, comments and votes."""

from uuid import uuid4

import pytest

from tests.harness import create_client_fixture

# E2E test fixture
client = create_client_fixture()


def _auth(client, username: str) -> dict:
    client.post("/auth/sign-up", json={"username": username, "password": "password1"})
    token = client.post(
        "/auth/log-in", json={"username": username, "password": "password1"}
    ).json()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(client):
    return _auth(client, "alice")


@pytest.fixture
def bob(client):
    return _auth(client, "bob")


@pytest.fixture
def carol(client):
    return _auth(client, "carol")


@pytest.fixture
def post(client, alice):
    response = client.post(
        "/posts", json={"title": "Hello", "content": "World"}, headers=alice
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def comment(client, post, bob):
    response = client.post(
        f"/posts/{post['id']}/comments", json={"content": "Nice post"}, headers=bob
    )
    assert response.status_code == 201
    return response.json()


def _vote(client, headers, post_id, vote_type, comment_id=None):
    path = f"/posts/{post_id}/vote"
    if comment_id:
        path = f"/posts/{post_id}/comments/{comment_id}/vote"
    return client.post(path, json={"voteType": vote_type}, headers=headers)


class TestPosts:
    """Tests for the post routes."""

    def test_new_post_has_zero_counts(self, post):
        assert post["title"] == "Hello"
        assert post["content"] == "World"
        assert post["author"]["username"] == "alice"
        assert (post["upvotes"], post["downvotes"], post["score"]) == (0, 0, 0)
        assert post["comments"] == []

    def test_create_requires_token(self, client):
        response = client.post("/posts", json={"title": "Hello"})

        assert response.status_code == 401
        assert response.json() == {"message": "No token provided"}

    def test_create_requires_title(self, client, alice):
        response = client.post("/posts", json={"content": "No title"}, headers=alice)

        assert response.status_code == 400
        assert response.json() == {"message": "title is required"}

    def test_list_is_public_and_newest_first(self, client, alice, post):
        client.post("/posts", json={"title": "Second"}, headers=alice)

        response = client.get("/posts")

        assert response.status_code == 200
        assert [p["title"] for p in response.json()] == ["Second", "Hello"]

    def test_my_posts(self, client, post, bob):
        client.post("/posts", json={"title": "Bob's"}, headers=bob)

        response = client.get("/my-posts", headers=bob)

        assert [p["title"] for p in response.json()] == ["Bob's"]

    def test_get_unknown_post(self, client):
        response = client.get(f"/posts/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"message": "Post not found"}

    def test_malformed_post_id_is_not_found(self, client):
        response = client.get("/posts/not-an-id")

        assert response.status_code == 404
        assert response.json() == {"message": "Post not found"}

    def test_missing_token_wins_over_missing_body(self, client):
        response = client.post("/posts")

        assert response.status_code == 401
        assert response.json() == {"message": "No token provided"}

    def test_owner_edits(self, client, alice, post):
        response = client.put(
            f"/posts/{post['id']}", json={"title": "Hello again"}, headers=alice
        )

        assert response.status_code == 200
        assert response.json()["title"] == "Hello again"
        assert response.json()["content"] == "World"

    def test_non_owner_cannot_edit(self, client, bob, post):
        response = client.put(
            f"/posts/{post['id']}", json={"title": "Hijacked"}, headers=bob
        )

        assert response.status_code == 403
        assert response.json() == {"message": "not authorized to edit post"}

    def test_non_owner_cannot_delete(self, client, bob, post):
        response = client.delete(f"/posts/{post['id']}", headers=bob)

        assert response.status_code == 403
        assert client.get(f"/posts/{post['id']}").status_code == 200

    def test_owner_deletes_with_comments(self, client, alice, post, comment):
        response = client.delete(f"/posts/{post['id']}", headers=alice)

        assert response.status_code == 200
        assert client.get(f"/posts/{post['id']}").status_code == 404


class TestComments:
    """Tests for the comment routes."""

    def test_comment_appears_on_post(self, client, post, comment):
        response = client.get(f"/posts/{post['id']}")

        [listed] = response.json()["comments"]
        assert listed["id"] == comment["id"]
        assert listed["author"]["username"] == "bob"
        assert listed["score"] == 0

    def test_comment_on_unknown_post(self, client, bob):
        response = client.post(
            f"/posts/{uuid4()}/comments", json={"content": "Hi"}, headers=bob
        )

        assert response.status_code == 404

    def test_author_edits(self, client, post, comment, bob):
        response = client.put(
            f"/posts/{post['id']}/comments/{comment['id']}",
            json={"content": "Edited"},
            headers=bob,
        )

        assert response.status_code == 200
        assert response.json()["content"] == "Edited"

    def test_post_owner_cannot_edit(self, client, post, comment, alice):
        response = client.put(
            f"/posts/{post['id']}/comments/{comment['id']}",
            json={"content": "Edited"},
            headers=alice,
        )

        assert response.status_code == 403

    @pytest.mark.parametrize("deleter", ["alice", "bob"])
    def test_comment_or_post_owner_deletes(self, client, post, comment, deleter, request):
        headers = request.getfixturevalue(deleter)

        response = client.delete(
            f"/posts/{post['id']}/comments/{comment['id']}", headers=headers
        )

        assert response.status_code == 200
        assert client.get(f"/posts/{post['id']}").json()["comments"] == []

    def test_malformed_comment_id_is_not_found(self, client, post, bob):
        response = client.put(
            f"/posts/{post['id']}/comments/42", json={"content": "Edit"}, headers=bob
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Comment not found"}

    def test_third_party_cannot_delete(self, client, post, comment, carol):
        response = client.delete(
            f"/posts/{post['id']}/comments/{comment['id']}", headers=carol
        )

        assert response.status_code == 403
        assert response.json() == {"message": "not authorized to delete comment"}


class TestVotes:
    """Tests for the vote routes."""

    def test_upvote_then_upvote_again(self, client, post, bob):
        first = _vote(client, bob, post["id"], "upvote")
        second = _vote(client, bob, post["id"], "upvote")

        assert first.status_code == 200
        assert first.json()["score"] == 1
        assert first.json()["user_vote"] == "upvote"
        assert second.json()["score"] == 0
        assert second.json()["user_vote"] is None

    def test_upvote_then_downvote(self, client, post, bob):
        _vote(client, bob, post["id"], "upvote")
        response = _vote(client, bob, post["id"], "downvote")

        data = response.json()
        assert (data["upvotes"], data["downvotes"], data["score"]) == (0, 1, -1)
        assert client.get(f"/posts/{post['id']}").json()["score"] == -1

    def test_votes_from_several_users(self, client, post, alice, bob, carol):
        _vote(client, alice, post["id"], "upvote")
        _vote(client, bob, post["id"], "upvote")
        _vote(client, carol, post["id"], "downvote")

        view = client.get(f"/posts/{post['id']}").json()
        assert (view["upvotes"], view["downvotes"], view["score"]) == (2, 1, 1)

    def test_comment_vote(self, client, post, comment, carol):
        response = _vote(client, carol, post["id"], "downvote", comment["id"])

        assert response.status_code == 200
        assert response.json()["score"] == -1
        [listed] = client.get(f"/posts/{post['id']}").json()["comments"]
        assert listed["downvotes"] == 1

    def test_invalid_vote_type(self, client, post, bob):
        response = _vote(client, bob, post["id"], "sideways")

        assert response.status_code == 400
        assert response.json() == {"message": "invalid vote type"}

    def test_vote_requires_token(self, client, post):
        response = client.post(f"/posts/{post['id']}/vote", json={"voteType": "upvote"})

        assert response.status_code == 401

    def test_vote_on_unknown_post(self, client, bob):
        response = _vote(client, bob, str(uuid4()), "upvote")

        assert response.status_code == 404

    def test_missing_token_wins_over_missing_body(self, client, post):
        response = client.post(f"/posts/{post['id']}/vote")

        assert response.status_code == 401
        assert response.json() == {"message": "No token provided"}

    def test_vote_on_malformed_ids(self, client, post, bob):
        response = _vote(client, bob, "not-an-id", "upvote")

        assert response.status_code == 404
        assert response.json() == {"message": "Post not found"}

        response = _vote(client, bob, post["id"], "upvote", comment_id="not-an-id")

        assert response.status_code == 404
        assert response.json() == {"message": "Comment not found"}
