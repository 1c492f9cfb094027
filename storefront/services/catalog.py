# storefront/services/catalog.py
import httpx
import json
import logging
from typing import Any, Dict, List, Optional, Tuple, Type
from httpx import Headers
from pydantic import BaseModel, ValidationError
from storefront.core.config import settings
from storefront.models.product import Category, Product, ProductQuery
from storefront.models.result import EmptyReason, FetchResult

logger = logging.getLogger(__name__)

# WooCommerce не отдает больше 100 записей на страницу
MAX_PER_PAGE = 100
DEFAULT_FEATURED_LIMIT = 8


class CatalogServiceError(Exception):
    """Ошибка обращения к WooCommerce API. Наружу сервиса не выходит."""
    def __init__(self, message="Ошибка при обращении к каталогу WooCommerce", status_code=None,
                 details=None, reason: EmptyReason = EmptyReason.TRANSPORT_ERROR):
        self.message = message
        self.status_code = status_code
        self.details = details
        self.reason = reason
        super().__init__(self.message)


class CatalogService:
    """
    Асинхронный клиент каталога WooCommerce (товары и категории).

    Методы fetch_* возвращают FetchResult с причиной пустого результата,
    методы get_* отдают только данные. Ни те, ни другие не бросают исключений:
    при любой ошибке возвращается пустой список или None, а причина пишется в лог.
    """
    def __init__(
        self,
        api_url: Optional[str] = None,
        consumer_key: Optional[str] = None,
        consumer_secret: Optional[str] = None,
        revalidate: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (api_url or settings.WOOCOMMERCE_API_URL).rstrip('/')
        self.consumer_key = settings.WOOCOMMERCE_KEY if consumer_key is None else consumer_key
        self.consumer_secret = settings.WOOCOMMERCE_SECRET if consumer_secret is None else consumer_secret
        self.revalidate = settings.CATALOG_REVALIDATE_SECONDS if revalidate is None else revalidate

        auth = (self.consumer_key, self.consumer_secret) if self.has_credentials else None
        timeouts = httpx.Timeout(
            settings.HTTP_TIMEOUT,
            read=settings.HTTP_READ_TIMEOUT,
            connect=settings.HTTP_CONNECT_TIMEOUT,
        )
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            auth=auth,
            headers={'Content-Type': 'application/json'},
            timeout=timeouts,
            transport=transport,
        )
        logger.info(f"CatalogService initialized for URL: {self.base_url}")

    @property
    def has_credentials(self) -> bool:
        return bool(self.consumer_key and self.consumer_secret)

    async def close_client(self):
        """Закрывает httpx клиент."""
        if hasattr(self, '_client') and self._client:
            await self._client.aclose()
            logger.info("Catalog HTTP client closed.")

    async def _request(self, endpoint: str, params: Optional[Dict] = None) -> Tuple[Any, Headers]:
        """
        GET-запрос к API. Возвращает (данные_ответа, заголовки_ответа)
        или бросает CatalogServiceError.
        """
        logger.debug(f"Requesting GET {endpoint} | Params: {params}")
        try:
            response = await self._client.get(endpoint, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error_status_code = e.response.status_code
            error_message = f"HTTP {error_status_code} {e.response.reason_phrase}"
            try:
                wc_error = e.response.json()
                if isinstance(wc_error, dict) and wc_error.get('message'):
                    error_message = f"{error_message}: {wc_error['message']}"
            except ValueError:
                logger.debug(f"Error response for GET {endpoint} is not JSON: {e.response.text[:200]}")
            raise CatalogServiceError(
                message=error_message,
                status_code=error_status_code,
                details=e.response.text[:500],
                reason=EmptyReason.HTTP_STATUS,
            ) from e
        except httpx.TimeoutException as e:
            raise CatalogServiceError(f"Request timeout: {e}") from e
        except httpx.RequestError as e:
            raise CatalogServiceError(f"Network error: {e}") from e
        except Exception as e:
            logger.exception(f"Unexpected error during catalog request to {endpoint}: {e}")
            raise CatalogServiceError("Unexpected error while calling WooCommerce API") from e

        try:
            response_data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CatalogServiceError(
                message=f"Failed to decode JSON response: {e}",
                status_code=response.status_code,
                details=response.text[:500],
                reason=EmptyReason.DECODE_ERROR,
            ) from e

        logger.debug(f"Received {response.status_code} JSON response for GET {endpoint}. Body sample: {str(response_data)[:200]}...")
        return response_data, response.headers

    async def _fetch_list(
        self,
        operation: str,
        endpoint: str,
        params: Dict,
        model: Type[BaseModel],
    ) -> FetchResult:
        """Общий путь для всех операций: запрос, проверка, разбор в модели."""
        if not self.has_credentials:
            logger.warning(f"WooCommerce API credentials not configured. Returning empty result for '{operation}'.")
            return FetchResult.empty([], EmptyReason.MISSING_CREDENTIALS)

        logger.info(f"Fetching {operation} with params: {params}")
        try:
            response_data, response_headers = await self._request(endpoint, params=params)
        except CatalogServiceError as e:
            logger.error(f"Catalog API error in '{operation}': {e.message} (status: {e.status_code})")
            return FetchResult.empty([], e.reason, status_code=e.status_code, detail=e.message)

        if not isinstance(response_data, list):
            logger.error(f"Unexpected data type received for '{operation}': {type(response_data)}. Expected list.")
            return FetchResult.empty([], EmptyReason.DECODE_ERROR, detail=f"Expected list, got {type(response_data).__name__}")

        try:
            items = [model.model_validate(item) for item in response_data]
        except ValidationError as e:
            logger.error(f"Failed to decode '{operation}' response: {e.error_count()} validation error(s). {e}")
            return FetchResult.empty([], EmptyReason.DECODE_ERROR, detail=str(e))

        return FetchResult.success(
            items,
            revalidate=self.revalidate,
            total=_header_int(response_headers, 'x-wp-total'),
            total_pages=_header_int(response_headers, 'x-wp-totalpages'),
        )

    # --- Операции каталога ---

    async def fetch_featured_products(self, limit: int = DEFAULT_FEATURED_LIMIT) -> FetchResult:
        """Избранные опубликованные товары, не больше limit штук."""
        if limit < 1:
            logger.warning(f"Featured products limit {limit} is less than 1. Returning empty list.")
            return FetchResult.success([], revalidate=self.revalidate)
        per_page = min(limit, MAX_PER_PAGE)
        if per_page != limit:
            logger.warning(f"Featured products limit {limit} exceeds WooCommerce page size, using {per_page}.")
        params = {'featured': 'true', 'per_page': per_page, 'status': 'publish'}
        result = await self._fetch_list("featured products", "products", params, Product)
        if len(result.data) > limit:
            result.data = result.data[:limit]
        return result

    async def fetch_products(self, query: Optional[ProductQuery] = None) -> FetchResult:
        """Опубликованные товары по фильтру (категория, страница, сортировка)."""
        query = query or ProductQuery()
        return await self._fetch_list("products", "products", query.to_params(), Product)

    async def fetch_product_by_slug(self, slug: str) -> FetchResult:
        """Товар по точному slug. Если совпадений несколько, берем первый."""
        if not slug:
            # Без slug WooCommerce вернет весь каталог, а не пустой ответ
            logger.warning("Empty slug passed to product lookup.")
            return FetchResult.empty(None, EmptyReason.NOT_FOUND)

        result = await self._fetch_list(f"product '{slug}'", "products", {'slug': slug}, Product)
        if not result.ok:
            return FetchResult.empty(None, result.reason, status_code=result.status_code, detail=result.detail)
        if not result.data:
            logger.info(f"Product with slug '{slug}' not found.")
            return FetchResult.empty(None, EmptyReason.NOT_FOUND)
        if len(result.data) > 1:
            logger.warning(f"Multiple products ({len(result.data)}) match slug '{slug}'. Using the first one.")
        return FetchResult.success(result.data[0], revalidate=result.revalidate)

    async def fetch_categories(self) -> FetchResult:
        """Категории товаров, одной страницей до 100 штук."""
        params = {'per_page': MAX_PER_PAGE}
        return await self._fetch_list("categories", "products/categories", params, Category)

    # --- Упрощенный интерфейс для слоя представления ---

    async def get_featured_products(self, limit: int = DEFAULT_FEATURED_LIMIT) -> List[Product]:
        return (await self.fetch_featured_products(limit)).data

    async def get_products(self, query: Optional[ProductQuery] = None) -> List[Product]:
        return (await self.fetch_products(query)).data

    async def get_product_by_slug(self, slug: str) -> Optional[Product]:
        return (await self.fetch_product_by_slug(slug)).data

    async def get_categories(self) -> List[Category]:
        return (await self.fetch_categories()).data


def _header_int(headers: Headers, name: str) -> Optional[int]:
    value = headers.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Could not parse pagination header {name}={value!r} from WooCommerce.")
        return None
