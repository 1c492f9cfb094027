import pytest
from fastapi.testclient import TestClient

from conftest import make_category, make_product
from storefront.dependencies import get_catalog_service
from storefront.main import app


@pytest.fixture
def client(catalog):
    app.dependency_overrides[get_catalog_service] = lambda: catalog
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_check(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_featured_products_return_cards_with_cache_header(client, fake_api):
    fake_api.json = [make_product()]

    response = client.get("/api/v1/products/featured", params={"limit": 1})

    assert response.status_code == 200
    cards = response.json()
    assert cards[0]["display_price"] == "$19.99"
    assert cards[0]["sale_badge"] is True
    assert response.headers["cache-control"] == "public, max-age=3600"
    assert fake_api.requests[0].url.params["per_page"] == "1"


def test_featured_products_reject_bad_limit(client, fake_api):
    response = client.get("/api/v1/products/featured", params={"limit": 0})

    assert response.status_code == 422
    assert fake_api.calls == 0


def test_product_list_is_paginated(client, fake_api):
    fake_api.json = [make_product(id=i, slug=f"p-{i}") for i in range(2)]
    fake_api.headers = {"X-WP-Total": "5", "X-WP-TotalPages": "3"}

    response = client.get(
        "/api/v1/products/",
        params={"page": 2, "per_page": 2, "orderby": "price", "order": "asc"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 5
    assert "page=3" in body["next"]
    assert "orderby=price" in body["next"]
    assert "page=1" in body["previous"]
    assert [card["slug"] for card in body["results"]] == ["p-0", "p-1"]
    params = fake_api.requests[0].url.params
    assert params["orderby"] == "price"
    assert params["order"] == "asc"


def test_product_list_rejects_unknown_sort_key(client, fake_api):
    response = client.get("/api/v1/products/", params={"orderby": "stock"})

    assert response.status_code == 422
    assert fake_api.calls == 0


def test_product_list_failure_is_empty_not_error(client, fake_api):
    fake_api.status_code = 502

    response = client.get("/api/v1/products/")

    assert response.status_code == 200
    assert response.json() == {"count": 0, "next": None, "previous": None, "results": []}
    assert response.headers["cache-control"] == "no-store"


def test_product_by_slug(client, fake_api):
    fake_api.json = [make_product(slug="abc")]

    response = client.get("/api/v1/products/abc")

    assert response.status_code == 200
    assert response.json()["slug"] == "abc"
    assert response.json()["price"] == "19.99"


def test_product_by_slug_not_found(client, fake_api):
    fake_api.json = []

    response = client.get("/api/v1/products/missing")

    assert response.status_code == 404


def test_categories_failure_is_empty_list(client, fake_api):
    fake_api.status_code = 500

    response = client.get("/api/v1/categories/")

    assert response.status_code == 200
    assert response.json() == []


def test_categories(client, fake_api):
    fake_api.json = [make_category()]

    response = client.get("/api/v1/categories/")

    assert response.json()[0]["count"] == 42


def test_pages(client, fake_api):
    fake_api.json = [make_product()]

    home = client.get("/api/v1/pages/home").json()
    navigation = client.get("/api/v1/pages/navigation").json()
    metadata = client.get("/api/v1/pages/metadata").json()

    assert home["featured_products"][0]["slug"] == "wireless-headphones"
    assert navigation["menu"][0]["title"] == "Home"
    assert metadata["open_graph"]["site_name"] == "UPMOS"


def test_home_page_carries_cache_header(client, fake_api):
    fake_api.json = [make_product()]

    response = client.get("/api/v1/pages/home")

    assert response.status_code == 200
    assert response.headers["cache-control"] == "public, max-age=3600"
    assert fake_api.requests[0].url.params["featured"] == "true"
    assert fake_api.requests[0].url.params["per_page"] == "8"


def test_home_page_survives_catalog_failure(client, fake_api):
    fake_api.status_code = 500

    response = client.get("/api/v1/pages/home")

    assert response.status_code == 200
    assert response.json()["featured_products"] == []
    assert response.headers["cache-control"] == "no-store"


def test_product_list_ignores_empty_category(client, fake_api):
    response = client.get("/api/v1/products/", params={"category": ""})

    assert response.status_code == 200
    assert "category" not in fake_api.requests[0].url.params
