import pytest
from pymongo.errors import ServerSelectionTimeoutError

import database
import security
from schemas import CONTACT_INFO, PERSONAL_INFO, PROJECT, REVOKED_TOKEN, SKILL, TESTIMONIAL

DEMO_PROJECT = {
    "title": "Demo",
    "description": "A demo project",
    "icon": "Zap",
    "color": "from-primary to-secondary",
    "glow_class": "glow-cyan",
    "tech": ["TypeScript"],
}


class TestAuth:
    def test_login_returns_token(self, client, admin):
        res = client.post("/api/auth/login", json=admin)
        assert res.status_code == 200
        body = res.json()
        assert body["token_type"] == "bearer"
        assert body["username"] == admin["username"]

    @pytest.mark.parametrize("username,password", [
        ("magdy", "wrong"),
        ("nobody", "correct horse battery staple"),
        ("", ""),
    ])
    def test_bad_credentials_get_generic_message(self, client, admin, username, password):
        res = client.post("/api/auth/login", json={"username": username, "password": password})
        assert res.status_code == 401
        assert res.json()["detail"] == "Invalid credentials."

    def test_store_error_during_login_is_generic(self, client, admin, monkeypatch):
        def boom():
            raise ServerSelectionTimeoutError("down")

        monkeypatch.setattr(database, "get_db", boom)
        res = client.post("/api/auth/login", json=admin)
        assert res.status_code == 401
        assert res.json()["detail"] == "Invalid credentials."

    def test_env_credentials_used_without_stored_admin(self, client, store, monkeypatch):
        monkeypatch.setattr(security, "ADMIN_USERNAME", "owner")
        monkeypatch.setattr(security, "_env_password_hash", security.hash_password("pa55"))
        assert security.verify_admin_credentials("owner", "pa55") is True
        assert security.verify_admin_credentials("owner", "nope") is False
        assert client.post("/api/auth/login", json={"username": "owner", "password": "pa55"}).status_code == 200

    def test_env_credentials_disabled_once_admin_stored(self, client, admin, monkeypatch):
        monkeypatch.setattr(security, "ADMIN_USERNAME", "admin")
        monkeypatch.setattr(security, "_env_password_hash", security.hash_password("admin123"))
        res = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
        assert res.status_code == 401
        assert res.json()["detail"] == "Invalid credentials."
        assert client.post("/api/auth/login", json=admin).status_code == 200

    def test_admin_routes_require_token(self, client, store):
        assert client.get("/api/admin/projects").status_code == 401
        res = client.get("/api/admin/projects", headers={"Authorization": "Bearer garbage"})
        assert res.status_code == 401
        assert res.json()["detail"] == "Invalid token"

    def test_me(self, client, auth_headers):
        assert client.get("/api/auth/me", headers=auth_headers).json() == {"username": "magdy", "role": "admin"}

    def test_logout_revokes_token(self, client, auth_headers):
        assert client.post("/api/auth/logout", headers=auth_headers).json() == {"ok": True}
        res = client.get("/api/admin/projects", headers=auth_headers)
        assert res.status_code == 401
        assert res.json()["detail"] == "Token revoked"


class TestProjects:
    def test_demo_project_round_trip(self, client, store, auth_headers):
        res = client.post("/api/admin/projects", json=DEMO_PROJECT, headers=auth_headers)
        assert res.status_code == 200
        body = res.json()
        assert body["ok"] is True
        assert body["message"] == "Project created successfully."
        assert body["reload_after_ms"] == 1000

        rows = list(store[PROJECT].find())
        assert len(rows) == 1
        row = rows[0]
        assert str(row["_id"]) == body["id"]
        assert row["tech"] == ["TypeScript"]
        for field in ("title_ar", "description_ar", "detailed_description", "detailed_description_ar",
                      "live_demo_url", "github_url"):
            assert field in row and row[field] is None
        for field in ("images", "advantages", "disadvantages", "features", "technologies_used"):
            assert row[field] == []

    def test_validation_errors_are_per_field(self, client, auth_headers):
        res = client.post("/api/admin/projects", json={"title": "", "description": ""}, headers=auth_headers)
        assert res.status_code == 422
        locs = {tuple(e["loc"]) for e in res.json()["detail"]}
        assert ("body", "title") in locs and ("body", "description") in locs

    def test_update_and_list(self, client, auth_headers):
        pid = client.post("/api/admin/projects", json=DEMO_PROJECT, headers=auth_headers).json()["id"]
        changed = dict(DEMO_PROJECT, title="Demo 2", github_url="https://github.com/me/demo")
        res = client.put(f"/api/admin/projects/{pid}", json=changed, headers=auth_headers)
        assert res.json()["message"] == "Project updated successfully."
        items = client.get("/api/admin/projects", headers=auth_headers).json()
        assert [(p["id"], p["title"], p["github_url"]) for p in items] == [(pid, "Demo 2", "https://github.com/me/demo")]
        assert client.get(f"/api/admin/projects/{pid}", headers=auth_headers).json()["title"] == "Demo 2"

    def test_update_unknown_project(self, client, auth_headers):
        res = client.put("/api/admin/projects/5f1d7f0e8b3c4a0012345678", json=DEMO_PROJECT, headers=auth_headers)
        assert res.status_code == 404

    def test_invalid_id(self, client, auth_headers):
        assert client.delete("/api/admin/projects/xyz", headers=auth_headers).status_code == 400

    def test_delete_removes_row(self, client, auth_headers):
        pid = client.post("/api/admin/projects", json=DEMO_PROJECT, headers=auth_headers).json()["id"]
        res = client.delete(f"/api/admin/projects/{pid}", headers=auth_headers)
        assert res.json()["message"] == "Project deleted successfully."
        assert client.get("/api/admin/projects", headers=auth_headers).json() == []
        assert client.get("/api/site/projects").json()["items"] == []
        assert client.delete(f"/api/admin/projects/{pid}", headers=auth_headers).status_code == 404

    def test_list_tokens(self, client, auth_headers):
        pid = client.post("/api/admin/projects", json=DEMO_PROJECT, headers=auth_headers).json()["id"]
        url = f"/api/admin/projects/{pid}/lists/tech"

        res = client.post(url, json={"value": " React "}, headers=auth_headers).json()
        assert res["changed"] is True and res["items"] == ["TypeScript", "React"]

        res = client.post(url, json={"value": "React"}, headers=auth_headers).json()
        assert res["changed"] is False and res["items"] == ["TypeScript", "React"]

        res = client.delete(url, params={"value": "TypeScript"}, headers=auth_headers).json()
        assert res["items"] == ["React"]

        res = client.delete(url, params={"value": "TypeScript"}, headers=auth_headers).json()
        assert res["changed"] is False

        assert client.get(f"/api/admin/projects/{pid}", headers=auth_headers).json()["tech"] == ["React"]

    def test_unknown_list_field(self, client, auth_headers):
        pid = client.post("/api/admin/projects", json=DEMO_PROJECT, headers=auth_headers).json()["id"]
        res = client.post(f"/api/admin/projects/{pid}/lists/title", json={"value": "x"}, headers=auth_headers)
        assert res.status_code == 400

    def test_store_error_surfaces_raw_message(self, client, auth_headers, monkeypatch):
        def boom(*args):
            raise ServerSelectionTimeoutError("cluster unreachable")

        monkeypatch.setattr(database, "get_documents", boom)
        res = client.get("/api/admin/projects", headers=auth_headers)
        assert res.status_code == 500
        assert "cluster unreachable" in res.json()["detail"]


class TestSkills:
    def test_create_list_delete(self, client, store, auth_headers):
        res = client.post("/api/admin/skills", json={"name": "Python", "position_x": 150, "position_y": -150, "tech": ["FastAPI"]}, headers=auth_headers)
        sid = res.json()["id"]
        items = client.get("/api/admin/skills", headers=auth_headers).json()
        assert items[0]["tech"] == ["FastAPI"]
        assert items[0]["icon"] == "Code2"
        client.post(f"/api/admin/skills/{sid}/lists/tech", json={"value": "Django"}, headers=auth_headers)
        assert store[SKILL].find_one()["tech"] == ["FastAPI", "Django"]
        client.delete(f"/api/admin/skills/{sid}", headers=auth_headers)
        assert store[SKILL].count_documents({}) == 0

    def test_position_out_of_range(self, client, auth_headers):
        res = client.post("/api/admin/skills", json={"name": "Python", "position_x": 250}, headers=auth_headers)
        assert res.status_code == 422

    def test_no_update_route(self, client, auth_headers):
        sid = client.post("/api/admin/skills", json={"name": "Python"}, headers=auth_headers).json()["id"]
        assert client.put(f"/api/admin/skills/{sid}", json={"name": "Go"}, headers=auth_headers).status_code == 405


class TestTestimonials:
    def test_rating_bounds(self, client, auth_headers):
        base = {"name": "Sara", "content": "Fantastic collaboration."}
        for rating in (0, 6):
            res = client.post("/api/admin/testimonials", json=dict(base, rating=rating), headers=auth_headers)
            assert res.status_code == 422
        res = client.post("/api/admin/testimonials", json=dict(base, rating=4), headers=auth_headers)
        assert res.status_code == 200
        assert res.json()["message"] == "Testimonial added successfully!"

    def test_null_rating_stored_as_five(self, client, store, auth_headers):
        res = client.post("/api/admin/testimonials", json={"name": "Sara", "content": "Fantastic collaboration.", "rating": None}, headers=auth_headers)
        assert res.status_code == 200
        assert store[TESTIMONIAL].find_one()["rating"] == 5

    def test_defaults_stored(self, client, store, auth_headers):
        client.post("/api/admin/testimonials", json={"name": "Sara", "content": "Fantastic collaboration.", "image_url": ""}, headers=auth_headers)
        row = store[TESTIMONIAL].find_one()
        assert row["rating"] == 5
        assert row["platform"] == "website"
        assert row["image_url"] is None

    def test_update_and_delete(self, client, auth_headers):
        tid = client.post("/api/admin/testimonials", json={"name": "Sara", "content": "Fantastic collaboration."}, headers=auth_headers).json()["id"]
        client.put(f"/api/admin/testimonials/{tid}", json={"name": "Sara K", "content": "Fantastic collaboration.", "rating": 3}, headers=auth_headers)
        items = client.get("/api/admin/testimonials", headers=auth_headers).json()
        assert (items[0]["name"], items[0]["stars"]) == ("Sara K", 3)
        client.delete(f"/api/admin/testimonials/{tid}", headers=auth_headers)
        assert client.get("/api/admin/testimonials", headers=auth_headers).json() == []


class TestSingletons:
    def test_personal_info_upsert(self, client, store, auth_headers):
        assert client.get("/api/admin/personal-info", headers=auth_headers).json() is None
        payload = {"name": "Magdy", "title": "Engineer", "bio": "", "resume_url": "https://cdn.example.com/cv.pdf"}
        first = client.put("/api/admin/personal-info", json=payload, headers=auth_headers).json()
        second = client.put("/api/admin/personal-info", json=dict(payload, title="Architect"), headers=auth_headers).json()
        assert first["id"] == second["id"]
        assert store[PERSONAL_INFO].count_documents({}) == 1
        info = client.get("/api/admin/personal-info", headers=auth_headers).json()
        assert info["title"] == "Architect"
        assert info["bio"] is None

    def test_personal_info_rejects_bad_url(self, client, auth_headers):
        res = client.put("/api/admin/personal-info", json={"name": "M", "title": "T", "resume_url": "cv.pdf"}, headers=auth_headers)
        assert res.status_code == 422

    def test_contact_info_upsert(self, client, store, auth_headers):
        client.put("/api/admin/contact-info", json={"email": "me@example.com"}, headers=auth_headers)
        res = client.put("/api/admin/contact-info", json={"email": "me@example.com", "twitter_url": "https://x.com/me"}, headers=auth_headers)
        assert res.json()["message"] == "Contact information updated successfully."
        assert store[CONTACT_INFO].count_documents({}) == 1
        links = [link["id"] for link in client.get("/api/site/contact").json()["links"]]
        assert links == ["twitter", "instagram", "email"]


class TestOptions:
    def test_form_choices(self, client, auth_headers):
        body = client.get("/api/admin/options", headers=auth_headers).json()
        assert body["project"]["icons"][0] == "Zap"
        assert "from-primary to-secondary" in body["project"]["colors"]
        assert "glow-cyan" in body["project"]["glow_classes"]
        assert body["skill"]["icons"][0] == "Code2"
        assert "text-primary" in body["skill"]["colors"]
        assert body["platforms"] == ["website", "twitter", "linkedin", "email", "other"]
        assert body["list_fields"]["skill"] == ["tech"]
        assert body["upload_folders"] == ["portfolio/projects", "portfolio/testimonials", "portfolio/profile"]

    def test_requires_admin(self, client, store):
        assert client.get("/api/admin/options").status_code == 401


def test_revoked_tokens_expire_with_the_token(store, client, auth_headers):
    database.ensure_indexes(store)
    indexes = store[REVOKED_TOKEN].index_information()
    ttl = [info for info in indexes.values() if "expireAfterSeconds" in info]
    assert len(ttl) == 1
    assert [field for field, _ in ttl[0]["key"]] == ["expires_at"]
    assert ttl[0]["expireAfterSeconds"] == 0

    client.post("/api/auth/logout", headers=auth_headers)
    row = store[REVOKED_TOKEN].find_one()
    assert row["expires_at"] is not None
