"""Pytest fixtures: fake WooCommerce catalog API served through httpx.MockTransport."""

import httpx
import pytest

from storefront.services.catalog import CatalogService

API_URL = "https://shop.test/wp-json/wc/v3"


def make_product(**overrides):
    product = {
        "id": 101,
        "name": "Wireless Headphones",
        "slug": "wireless-headphones",
        "permalink": "https://shop.test/product/wireless-headphones/",
        "description": "<p>Over-ear, noise cancelling.</p>",
        "short_description": "<p>Noise cancelling.</p>",
        "price": "19.99",
        "regular_price": "29.99",
        "sale_price": "19.99",
        "on_sale": True,
        "images": [{"id": 7, "src": "https://shop.test/img/headphones.jpg", "alt": "Headphones"}],
        "categories": [{"id": 3, "name": "Electronics", "slug": "electronics"}],
        "stock_status": "instock",
        "average_rating": "4.60",
        "rating_count": 12,
    }
    product.update(overrides)
    return product


def make_category(**overrides):
    category = {
        "id": 3,
        "name": "Electronics",
        "slug": "electronics",
        "description": "Latest tech & gadgets",
        "image": {"id": 9, "src": "https://shop.test/img/electronics.jpg", "alt": ""},
        "count": 42,
    }
    category.update(overrides)
    return category


class FakeCatalogAPI:
    """Records every request and answers with a preconfigured response."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.json = []
        self.content = None
        self.headers = {}
        self.error = None

    @property
    def calls(self):
        return len(self.requests)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(
                self.status_code,
                content=self.content,
                headers={"Content-Type": "application/json", **self.headers},
            )
        return httpx.Response(self.status_code, json=self.json, headers=self.headers)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_api():
    return FakeCatalogAPI()


@pytest.fixture
def catalog(fake_api):
    return CatalogService(
        api_url=API_URL,
        consumer_key="ck_test",
        consumer_secret="cs_test",
        revalidate=3600,
        transport=fake_api.transport(),
    )


@pytest.fixture
def catalog_without_credentials(fake_api):
    return CatalogService(
        api_url=API_URL,
        consumer_key="",
        consumer_secret="",
        transport=fake_api.transport(),
    )
