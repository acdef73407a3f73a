# tests/api/test_catalog_api.py

from decimal import Decimal

from httpx import AsyncClient

from storefront.core import locales
from storefront.crud import product as crud_product
from storefront.data.seed import seed_if_empty


async def test_list_products(client: AsyncClient, products):
    response = await client.get("/api/products")

    assert response.status_code == 200
    data = response.json()["products"]
    assert len(data) == 3
    white = next(p for p in data if p["name"] == "Basic White Shirt")
    assert white["price"] == 69.9
    assert white["stock"] == 10
    assert white["featured"] is True


async def test_list_by_category(client: AsyncClient, products):
    response = await client.get("/api/products", params={"category": "casual"})

    assert [p["name"] for p in response.json()["products"]] == ["Denim Shirt"]


async def test_list_unknown_category_is_empty(client: AsyncClient, products):
    response = await client.get("/api/products", params={"category": "jackets"})

    assert response.status_code == 200
    assert response.json() == {"products": []}


async def test_list_featured_with_limit(client: AsyncClient, products):
    response = await client.get("/api/products", params={"featured": "true", "limit": 1})

    data = response.json()["products"]
    assert len(data) == 1
    assert data[0]["featured"] is True


async def test_featured_default_limit_on_seeded_catalog(client: AsyncClient, db_session):
    seed_if_empty(db_session)

    response = await client.get("/api/products", params={"featured": "true"})

    assert len(response.json()["products"]) == 7


async def test_list_rejects_non_positive_limit(client: AsyncClient, products):
    response = await client.get("/api/products", params={"featured": "true", "limit": 0})

    assert response.status_code == 422


async def test_get_product(client: AsyncClient, products):
    response = await client.get(f"/api/products/{products[1].id}")

    assert response.status_code == 200
    assert response.json()["product"]["name"] == "Black Polo Shirt"


async def test_get_unknown_product(client: AsyncClient, products):
    response = await client.get("/api/products/unknown-id")

    assert response.status_code == 404
    assert response.json()["detail"] == locales.ERROR_PRODUCT_NOT_FOUND


async def test_health(client: AsyncClient):
    response = await client.get("/api/health")

    assert response.json() == {"status": "ok"}


async def test_featured_listing_defaults_to_eight(client: AsyncClient, db_session):
    for i in range(10):
        crud_product.create_product(
            db_session, name=f"Featured Shirt {i}", description="Featured.", price=Decimal("49.90"),
            image_url=f"/products/featured-{i}.jpg", category="basic", stock=5, featured=True,
        )

    response = await client.get("/api/products", params={"featured": "true"})

    assert len(response.json()["products"]) == 8
