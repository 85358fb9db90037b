"""Tests router FastAPI — /section-layout/*."""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from section_layout import router as router_module
from section_layout.builder import SectionBuilder

from conftest import make_block


@pytest.fixture
def client(registry):
    previous = router_module.get_builder()
    router_module.set_builder(SectionBuilder(registry=registry))
    app = FastAPI()
    app.include_router(router_module.router)
    with TestClient(app) as c:
        yield c
    router_module.set_builder(previous)


MANIFEST = {
    "layout": "two-column",
    "theme": "blush",
    "contentBlocks": [
        make_block("1", 1),
        make_block("2", 2, type="Quote", props={"text": "Glow"}),
        make_block("3", 3, forceNewRow=True),
    ],
}


def test_plan(client):
    r = client.post("/section-layout/plan", json=MANIFEST)
    assert r.status_code == 200
    data = r.json()
    assert data["theme"] == "Blush"
    assert data["plan"]["strategy"] == "two-column"
    assert data["plan"]["rows"] == [["1", "2"], ["3"]]
    assert data["plan"]["entries"][0]["blockId"] == "1"


def test_render(client):
    r = client.post("/section-layout/render", json=MANIFEST)
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert '<blockquote style="color:#d4798f">Glow</blockquote>' in r.text
    assert "<style>" in r.text


def test_render_invalid_manifest_422(client):
    r = client.post("/section-layout/render", json={"contentBlocks": "nope"})
    assert r.status_code == 422


def test_themes(client):
    r = client.get("/section-layout/themes")
    assert {"standard", "midnight", "blush"} <= set(r.json()["themes"])


def test_resolve_theme_with_override(client):
    override = {"colors": {"primary": {"main": "#ff0000"}}, "spacing": {}, "typography": {}}
    r = client.post("/section-layout/themes/promo/resolve", json=override)
    assert r.status_code == 200
    assert r.json()["colors"]["primary"]["main"] == "#ff0000"


def test_resolve_theme_invalid_override_default(client):
    r = client.post("/section-layout/themes/other/resolve", json={"colors": {}})
    assert r.json()["name"] == "Glamlink Standard"


def test_catalog(client):
    r = client.get("/section-layout/catalog")
    assert r.json()["blocks"] == {"shared": ["Quote", "Text"], "maximize": ["Stats"]}
