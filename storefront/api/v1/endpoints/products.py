# storefront/api/v1/endpoints/products.py
import logging
from fastapi import APIRouter, Depends, Query, HTTPException, status, Request, Response
from typing import List, Optional

from storefront.services.catalog import CatalogService, DEFAULT_FEATURED_LIMIT, MAX_PER_PAGE
from storefront.dependencies import get_catalog_service
from storefront.models.product import Product, ProductQuery, ProductOrderBy, SortOrder
from storefront.models.pagination import PaginatedResponse
from storefront.presentation.cards import ProductCard, build_product_cards
from storefront.utils.http_cache import apply_revalidate_hint

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/featured",
    response_model=List[ProductCard],
    summary="Featured products",
    description="Карточки избранных товаров для главной страницы и промо-блоков.",
)
async def get_featured_products_endpoint(
    response: Response,
    limit: int = Query(DEFAULT_FEATURED_LIMIT, ge=1, le=MAX_PER_PAGE, description="Количество товаров"),
    catalog: CatalogService = Depends(get_catalog_service),
):
    result = await catalog.fetch_featured_products(limit)
    apply_revalidate_hint(response, result)
    return build_product_cards(result.data)


@router.get(
    "/",
    response_model=PaginatedResponse[ProductCard],
    summary="Product list",
    description="Опубликованные товары с фильтром по категории, пагинацией и сортировкой.",
)
async def get_products_list(
    request: Request,
    response: Response,
    category: Optional[str] = Query(None, description="ID категории"),
    page: int = Query(1, ge=1, description="Номер страницы"),
    per_page: Optional[int] = Query(None, ge=1, le=MAX_PER_PAGE, description="Количество товаров на странице"),
    orderby: Optional[ProductOrderBy] = Query(None, description="Поле сортировки"),
    order: Optional[SortOrder] = Query(None, description="Направление сортировки"),
    catalog: CatalogService = Depends(get_catalog_service),
):
    query = ProductQuery(category=category, page=page, per_page=per_page, orderby=orderby, order=order)
    result = await catalog.fetch_products(query)
    apply_revalidate_hint(response, result)

    products = result.data
    # Без заголовков X-WP-* считаем по текущей странице
    total_count = result.total if result.total is not None else len(products)
    total_pages = result.total_pages if result.total_pages is not None else page

    next_url = None
    if page < total_pages:
        next_url = str(request.url.include_query_params(page=page + 1))

    previous_url = None
    if page > 1:
        previous_url = str(request.url.include_query_params(page=page - 1))

    return PaginatedResponse[ProductCard](
        count=total_count,
        next=next_url,
        previous=previous_url,
        results=build_product_cards(products),
    )


@router.get(
    "/{slug}",
    response_model=Product,
    summary="Product by slug",
    description="Детальная информация о товаре по его slug.",
)
async def get_product_details(
    slug: str,
    response: Response,
    catalog: CatalogService = Depends(get_catalog_service),
):
    result = await catalog.fetch_product_by_slug(slug)
    if result.data is None:
        logger.info(f"Product '{slug}' unavailable: {result.reason.value if result.reason else 'unknown'}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Product '{slug}' not found.")
    apply_revalidate_hint(response, result)
    return result.data
