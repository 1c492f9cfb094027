# storefront/api/v1/endpoints/categories.py
from fastapi import APIRouter, Depends, Response
from typing import List

from storefront.services.catalog import CatalogService
from storefront.dependencies import get_catalog_service
from storefront.models.product import Category
from storefront.utils.http_cache import apply_revalidate_hint

router = APIRouter()

@router.get(
    "/",
    response_model=List[Category],
    summary="Category list",
    description="Категории товаров из WooCommerce (до 100 штук).",
)
async def get_categories_list_endpoint(
    response: Response,
    catalog: CatalogService = Depends(get_catalog_service),
):
    result = await catalog.fetch_categories()
    apply_revalidate_hint(response, result)
    return result.data
