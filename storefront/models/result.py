# storefront/models/result.py
from enum import Enum
from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class EmptyReason(str, Enum):
    """Почему операция каталога вернула пустой результат."""
    MISSING_CREDENTIALS = 'missing_credentials'
    TRANSPORT_ERROR = 'transport_error'
    HTTP_STATUS = 'http_status'
    DECODE_ERROR = 'decode_error'
    NOT_FOUND = 'not_found'


class FetchResult(BaseModel, Generic[T]):
    """
    Результат обращения к каталогу: либо данные (ok), либо пустой результат
    с причиной. Ошибки наружу не пробрасываются, но причина не теряется.
    """
    data: T
    reason: Optional[EmptyReason] = None
    status_code: Optional[int] = None
    detail: Optional[str] = None
    # Сколько секунд вызывающий слой может переиспользовать ответ
    revalidate: Optional[int] = None
    total: Optional[int] = None
    total_pages: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def success(cls, data, revalidate: Optional[int] = None,
                total: Optional[int] = None, total_pages: Optional[int] = None) -> "FetchResult":
        return cls(data=data, revalidate=revalidate, total=total, total_pages=total_pages)

    @classmethod
    def empty(cls, data, reason: EmptyReason,
              status_code: Optional[int] = None, detail: Optional[str] = None) -> "FetchResult":
        return cls(data=data, reason=reason, status_code=status_code, detail=detail)
