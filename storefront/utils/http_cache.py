# storefront/utils/http_cache.py
from fastapi import Response
from storefront.models.result import FetchResult


def apply_revalidate_hint(response: Response, result: FetchResult) -> None:
    """
    Переносит подсказку revalidate из результата каталога в Cache-Control.
    Пустые результаты не кешируем, чтобы сбой не залипал на час.
    """
    if result.ok and result.revalidate:
        response.headers["Cache-Control"] = f"public, max-age={result.revalidate}"
    else:
        response.headers["Cache-Control"] = "no-store"
