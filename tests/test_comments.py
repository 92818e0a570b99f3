def test_add_comment_returns_ordered_list(client, author, make_user, create_post):
    _, headers = author
    post = create_post(headers)
    _, other = make_user("janedoe")

    first = client.post(f"/posts/{post['id']}/comments", json={"content": "First!"}, headers=other)
    second = client.post(f"/posts/{post['id']}/comments", json={"content": "  Second  "}, headers=headers)

    assert first.status_code == 201
    assert second.status_code == 201
    comments = second.get_json()["data"]
    assert [c["content"] for c in comments] == ["First!", "Second"]
    assert [c["author"]["username"] for c in comments] == ["janedoe", "johndoe"]


def test_comment_content_is_required(client, author, create_post):
    _, headers = author
    post = create_post(headers)

    for payload in ({}, {"content": ""}, {"content": "   "}):
        resp = client.post(f"/posts/{post['id']}/comments", json=payload, headers=headers)
        assert resp.status_code == 400
        assert resp.get_json()["message"] == "Comment content is required"


def test_comment_length_limit(client, author, create_post):
    _, headers = author
    post = create_post(headers)

    resp = client.post(f"/posts/{post['id']}/comments", json={"content": "c" * 1001}, headers=headers)
    assert resp.status_code == 400


def test_comment_on_missing_post(client, author):
    _, headers = author
    resp = client.post("/posts/999/comments", json={"content": "Hello"}, headers=headers)

    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Post not found"


def test_comment_requires_auth(client, author, create_post):
    _, headers = author
    post = create_post(headers)

    resp = client.post(f"/posts/{post['id']}/comments", json={"content": "Anonymous"})
    assert resp.status_code == 401


def test_list_comments(client, author, create_post):
    _, headers = author
    post = create_post(headers)
    client.post(f"/posts/{post['id']}/comments", json={"content": "One"}, headers=headers)

    resp = client.get(f"/posts/{post['id']}/comments")

    assert resp.status_code == 200
    assert [c["content"] for c in resp.get_json()["data"]] == ["One"]
    assert client.get("/posts/999/comments").status_code == 404


def test_comments_go_away_with_their_post(app, client, author, create_post):
    from blogapi.models import Comment

    _, headers = author
    post = create_post(headers)
    client.post(f"/posts/{post['id']}/comments", json={"content": "Bye"}, headers=headers)

    client.delete(f"/posts/{post['id']}", headers=headers)

    assert Comment.query.filter_by(post_id=post["id"]).count() == 0
