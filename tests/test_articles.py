import io
import os
import sqlite3

from sqlalchemy.exc import OperationalError

from lottonews.repositories.article_repository import ArticleRepository


def _create(client, **data):
    return client.post("/api/articles", json=data)


def test_list_articles_empty(client):
    response = client.get("/api/articles")
    assert response.status_code == 200
    assert response.get_json() == []


def test_create_article_returns_record(client):
    response = _create(client, title="Draw night", content="Numbers announced at 9pm")
    assert response.status_code == 200

    body = response.get_json()
    assert isinstance(body["id"], int)
    assert body["title"] == "Draw night"
    assert body["content"] == "Numbers announced at 9pm"
    assert body["image"] is None
    assert body["created_at"]


def test_new_articles_get_increasing_ids_and_are_listed_first(client):
    first = _create(client, title="One", content="first").get_json()
    second = _create(client, title="Two", content="second").get_json()
    assert second["id"] > first["id"]

    listed = client.get("/api/articles").get_json()
    assert [a["id"] for a in listed] == [second["id"], first["id"]]


def test_create_article_accepts_form_fields(client):
    response = client.post(
        "/api/articles",
        data={"title": "Form post", "content": "sent as multipart"},
        content_type="multipart/form-data",
    )
    assert response.status_code == 200
    assert response.get_json()["title"] == "Form post"


def test_missing_title_or_content_is_rejected(client):
    for payload in ({"content": "no title"}, {"title": "no content"}, {"title": "", "content": "x"}, {}):
        response = _create(client, **payload)
        assert response.status_code == 400
        assert response.get_json()["error"] == "Title and content are required"

    assert client.get("/api/articles").get_json() == []


def test_create_article_with_image_upload(client, public_dir):
    response = client.post(
        "/api/articles",
        data={
            "title": "With picture",
            "content": "see attached",
            "image": (io.BytesIO(b"fake-png-bytes"), "photo.PNG"),
        },
        content_type="multipart/form-data",
    )
    assert response.status_code == 200

    image = response.get_json()["image"]
    assert image.startswith("uploads/image-")
    assert image.endswith(".png")
    assert os.path.isfile(os.path.join(public_dir, image))

    # Uploaded files are served from the server root.
    served = client.get("/" + image)
    assert served.status_code == 200
    assert served.data == b"fake-png-bytes"
    served.close()


def test_rejected_article_does_not_store_upload(client, public_dir):
    response = client.post(
        "/api/articles",
        data={"content": "missing title", "image": (io.BytesIO(b"x"), "a.jpg")},
        content_type="multipart/form-data",
    )
    assert response.status_code == 400
    assert not os.path.exists(os.path.join(public_dir, "uploads"))


def test_storage_failure_is_reported_as_500(client, monkeypatch):
    def _boom(self, session):
        raise OperationalError("SELECT * FROM articles", {}, Exception("disk I/O error"))

    monkeypatch.setattr(ArticleRepository, "list_articles", _boom)

    response = client.get("/api/articles")
    assert response.status_code == 500
    body = response.get_json()
    assert body["error"] == "disk I/O error"
    assert body["code"] == "storage_error"


def test_failed_insert_does_not_leave_image_behind(client, public_dir, monkeypatch):
    def _boom(self, session, **kwargs):
        raise OperationalError("INSERT INTO articles", {}, Exception("disk I/O error"))

    monkeypatch.setattr(ArticleRepository, "create", _boom)

    response = client.post(
        "/api/articles",
        data={"title": "t", "content": "c", "image": (io.BytesIO(b"img"), "a.png")},
        content_type="multipart/form-data",
    )
    assert response.status_code == 500
    assert response.get_json()["error"] == "disk I/O error"
    assert os.listdir(os.path.join(public_dir, "uploads")) == []


def test_locked_database_at_commit_is_a_json_500_and_recovers(client, db_path):
    # A second connection holding a read transaction keeps a SHARED lock,
    # so the INSERT succeeds but its COMMIT cannot take the write lock.
    reader = sqlite3.connect(db_path, isolation_level=None)
    try:
        reader.execute("BEGIN")
        reader.execute("SELECT * FROM articles").fetchall()

        response = client.post("/api/articles", json={"title": "Blocked", "content": "by a reader"})
        assert response.status_code == 500
        body = response.get_json()
        assert body["code"] == "storage_error"
        assert "locked" in body["error"]
    finally:
        reader.execute("ROLLBACK")
        reader.close()

    listed = client.get("/api/articles")
    assert listed.status_code == 200
    assert listed.get_json() == []

    created = client.post("/api/articles", json={"title": "After", "content": "lock released"})
    assert created.status_code == 200
    assert [a["title"] for a in client.get("/api/articles").get_json()] == ["After"]
