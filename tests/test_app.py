"""
其余路由：根路径、探活、静态页、CORS 与兜底错误处理。
"""
from pathlib import Path

from fastapi.testclient import TestClient

import skillmatch.api.app as app_module
from skillmatch.api.app import app
from skillmatch.api.deps import signup_store


def test_root_greeting(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.text == "hello,world!"


def test_health(client):
    assert client.get("/health").json() == {"status": "ok", "service": "skillmatch"}


def test_static_pages_served(client):
    for page in ("/index1.html", "/signup.html"):
        r = client.get(page)
        assert r.status_code == 200
        assert "text/html" in r.headers["content-type"]
        assert "<form" in r.text


def test_static_page_missing_404(client, tmp_path, monkeypatch):
    monkeypatch.setattr(app_module, "PUBLIC_DIR", tmp_path)
    r = client.get("/signup.html")
    assert r.status_code == 404


def test_cors_allows_configured_origin_only(client):
    ok = client.get("/", headers={"Origin": "https://cmdf.onrender.com"})
    assert ok.headers.get("access-control-allow-origin") == "https://cmdf.onrender.com"
    other = client.get("/", headers={"Origin": "https://evil.example"})
    assert "access-control-allow-origin" not in other.headers


def test_unhandled_error_returns_plain_500(client):
    def _broken_store():
        raise RuntimeError("store unavailable")

    app.dependency_overrides[signup_store] = _broken_store
    raw = TestClient(app, raise_server_exceptions=False)
    r = raw.post("/signup", json={"firstName": "Ada", "email": "a@b.c", "phone": "1"})
    assert r.status_code == 500
    assert r.text == "Something went wrong!"


def test_static_mount_and_html_routes_share_public_dir():
    """显式页面路由与根路径静态挂载使用同一个导入时确定的目录。"""
    mount = next(route for route in app.routes if getattr(route, "name", None) == "public")
    assert Path(mount.app.directory) == app_module.PUBLIC_DIR
    assert app.state.cors_origin == app_module.CORS_ORIGIN


def test_static_mount_serves_other_public_files(client):
    r = client.get("/index1.html")
    assert r.status_code == 200
    r = client.get("/no-such-asset.css")
    assert r.status_code == 404


def test_unhandled_error_keeps_cors_header_for_allowed_origin(client):
    """兜底 500 在 CORS 中间件之外生成，允许的来源仍应能读到响应。"""
    def _broken_store():
        raise RuntimeError("store unavailable")

    app.dependency_overrides[signup_store] = _broken_store
    raw = TestClient(app, raise_server_exceptions=False)
    body = {"firstName": "Ada", "email": "a@b.c", "phone": "1"}

    allowed = raw.post("/signup", json=body, headers={"Origin": "https://cmdf.onrender.com"})
    assert allowed.status_code == 500
    assert allowed.headers.get("access-control-allow-origin") == "https://cmdf.onrender.com"

    other = raw.post("/signup", json=body, headers={"Origin": "https://evil.example"})
    assert other.status_code == 500
    assert "access-control-allow-origin" not in other.headers
