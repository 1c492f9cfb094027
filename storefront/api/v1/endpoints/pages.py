# storefront/api/v1/endpoints/pages.py
from fastapi import APIRouter, Depends, Response

from storefront.services.catalog import CatalogService
from storefront.dependencies import get_catalog_service
from storefront.presentation.navigation import Navigation, build_navigation
from storefront.presentation.pages import HomePage, SiteMetadata, build_home_page, build_site_metadata
from storefront.utils.http_cache import apply_revalidate_hint

router = APIRouter()

@router.get("/home", response_model=HomePage, summary="Home page")
async def get_home_page(response: Response, catalog: CatalogService = Depends(get_catalog_service)):
    """Главная: статические блоки плюс избранные товары из каталога."""
    result = await catalog.fetch_featured_products()
    apply_revalidate_hint(response, result)
    return build_home_page(result.data)

@router.get("/navigation", response_model=Navigation, summary="Header navigation")
async def get_navigation():
    return build_navigation()

@router.get("/metadata", response_model=SiteMetadata, summary="Site metadata")
async def get_site_metadata():
    return build_site_metadata()
