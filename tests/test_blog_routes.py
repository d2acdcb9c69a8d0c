from datetime import datetime

from conftest import login

from content_admin.extensions import db
from content_admin.models import BlogPost


def test_blog_lifecycle(client, admin):
    r = login(client, "admin", "admin-pass")
    assert r.status_code == 200

    r = client.post("/api/admin/blog", json={"title": "Hello World!", "content": "<p>hi</p>"})
    assert r.status_code == 201
    post = r.get_json()
    assert post["slug"] == "hello-world"
    assert post["authorId"] == admin.id
    assert post["published"] is False

    r = client.get("/api/blog/hello-world")
    assert r.status_code == 200
    assert r.get_json() == post

    r = client.get(f"/api/blog/{post['id']}")
    assert r.get_json() == post

    r = client.put(f"/api/admin/blog/{post['id']}", json={"title": "Hello Again"})
    assert r.status_code == 200
    updated = r.get_json()
    assert updated["slug"] == "hello-again"
    assert updated["createdAt"] == post["createdAt"]
    assert updated["content"] == "<p>hi</p>"

    r = client.delete(f"/api/admin/blog/{post['id']}")
    assert r.status_code == 200

    assert client.get("/api/blog/hello-again").status_code == 404
    assert client.get(f"/api/blog/{post['id']}").status_code == 404


def test_access_control(client, admin, editor):
    r = login(client, "admin", "wrong")
    assert r.status_code == 401

    assert client.get("/api/user").status_code == 401

    r = client.post("/api/admin/blog", json={"title": "x", "content": "y"})
    assert r.status_code == 401

    login(client, "editor", "editor-pass")
    r = client.post("/api/admin/blog", json={"title": "x", "content": "y"})
    assert r.status_code == 403
    assert r.get_json()["error"] == "Admin access required"


def test_public_list_is_newest_first(admin_client):
    admin_client.post("/api/admin/blog", json={"title": "First", "content": "a"})
    admin_client.post("/api/admin/blog", json={"title": "Second", "content": "b"})

    admin_client.post("/api/logout")
    r = admin_client.get("/api/blog")
    assert r.status_code == 200
    assert [p["slug"] for p in r.get_json()] == ["second", "first"]


def test_create_validation(admin_client):
    r = admin_client.post("/api/admin/blog", json={"title": "No content"})
    assert r.status_code == 400
    assert r.get_json()["error"] == "Invalid payload"

    r = admin_client.post("/api/admin/blog", json={"content": "No title"})
    assert r.status_code == 400


def test_unknown_fields_are_rejected(admin_client):
    r = admin_client.post("/api/admin/blog", json={"title": "T", "content": "c", "author": "me"})
    assert r.status_code == 400
    assert r.get_json()["details"][0]["loc"] == ["author"]


def test_create_with_metadata(admin_client):
    r = admin_client.post("/api/admin/blog", json={
        "title": "Tagged",
        "content": "<p>x</p>",
        "slug": "my-own-slug",
        "excerpt": "short",
        "tags": ["health", "sleep"],
        "image_urls": ["https://img.example/1.png"],
        "thumbnail_url": "https://img.example/t.png",
        "published": True,
    })
    assert r.status_code == 201
    post = r.get_json()
    assert post["slug"] == "my-own-slug"
    assert post["tags"] == ["health", "sleep"]
    assert post["imageUrls"] == ["https://img.example/1.png"]
    assert post["published"] is True


def test_duplicate_slug_conflict(admin_client):
    admin_client.post("/api/admin/blog", json={"title": "Twice", "content": "a"})
    r = admin_client.post("/api/admin/blog", json={"title": "Twice", "content": "b"})
    assert r.status_code == 409
    assert "error" in r.get_json()


def test_update_errors(admin_client):
    assert admin_client.put("/api/admin/blog/abc", json={"title": "x"}).status_code == 400
    assert admin_client.put("/api/admin/blog/999", json={"title": "x"}).status_code == 404

    r = admin_client.post("/api/admin/blog", json={"title": "Keep", "content": "a"})
    post_id = r.get_json()["id"]
    r = admin_client.put(f"/api/admin/blog/{post_id}", json={"title": None})
    assert r.status_code == 400


def test_update_with_explicit_slug(admin_client):
    r = admin_client.post("/api/admin/blog", json={"title": "Original", "content": "a"})
    post_id = r.get_json()["id"]

    r = admin_client.put(f"/api/admin/blog/{post_id}", json={"title": "Renamed", "slug": "still-original"})
    assert r.get_json()["slug"] == "still-original"


def test_delete_missing_post(admin_client):
    r = admin_client.delete("/api/admin/blog/12345")
    assert r.status_code == 404
    assert admin_client.delete("/api/admin/blog/not-an-id").status_code == 400


def test_numeric_slug_loses_to_id(admin_client):
    first = admin_client.post("/api/admin/blog", json={"title": "First", "content": "a"}).get_json()
    admin_client.post("/api/admin/blog", json={
        "title": "Numeric", "content": "b", "slug": str(first["id"]),
    })

    r = admin_client.get(f"/api/blog/{first['id']}")
    assert r.get_json()["title"] == "First"


def test_create_and_update_with_camel_case_fields(admin_client):
    r = admin_client.post("/api/admin/blog", json={
        "title": "Editor Post",
        "content": "<p>x</p>",
        "excerpt": "short",
        "thumbnailUrl": "https://img.example/t.png",
        "imageUrls": ["https://img.example/a.png"],
    })
    assert r.status_code == 201
    post = r.get_json()
    assert post["thumbnailUrl"] == "https://img.example/t.png"
    assert post["imageUrls"] == ["https://img.example/a.png"]


    r = admin_client.put(f"/api/admin/blog/{post['id']}", json={"id": post["id"], "thumbnailUrl": None})
    assert r.status_code == 200
    assert r.get_json()["thumbnailUrl"] is None

    r = admin_client.put(f"/api/admin/blog/{post['id']}", json={"id": post["id"] + 1, "title": "Other"})
    assert r.status_code == 400


def test_update_refreshes_updated_at(admin_client):
    post = admin_client.post("/api/admin/blog", json={"title": "Old News", "content": "a"}).get_json()

    record = db.session.get(BlogPost, post["id"])
    record.updated_at = datetime(2000, 1, 1)
    db.session.commit()

    r = admin_client.put(f"/api/admin/blog/{post['id']}", json={"content": "b"})
    assert datetime.fromisoformat(r.get_json()["updatedAt"]).replace(tzinfo=None) > datetime(2000, 1, 1)
    assert r.get_json()["createdAt"] == post["createdAt"]
