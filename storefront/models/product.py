# storefront/models/product.py
from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Literal, Optional, Union

# Модели повторяют форму ответов WooCommerce REST API (wc/v3).
# Лишние поля из ответа игнорируются.

StockStatus = Literal['instock', 'outofstock', 'onbackorder']
ProductOrderBy = Literal['date', 'title', 'price', 'popularity', 'rating']
SortOrder = Literal['asc', 'desc']


class Image(BaseModel):
    id: Optional[int] = None
    src: str
    alt: str = ""


class CategoryRef(BaseModel):
    """Ссылка на категорию внутри товара."""
    id: int
    name: str
    slug: str


class Product(BaseModel):
    id: int
    name: str
    slug: str
    permalink: str = ""
    description: str = ""
    short_description: str = ""
    # Цены приходят строками ("19.99", иногда ""), в число не переводим
    price: str = ""
    regular_price: str = ""
    sale_price: str = ""
    on_sale: bool = False
    images: List[Image] = []
    categories: List[CategoryRef] = []
    stock_status: StockStatus = 'instock'
    average_rating: str = "0.00"
    rating_count: int = 0


class CategoryImage(BaseModel):
    id: Optional[int] = None
    src: str
    alt: str = ""


class Category(BaseModel):
    id: int
    name: str
    slug: str
    description: str = ""
    image: Optional[CategoryImage] = None
    count: int = 0


class ProductQuery(BaseModel):
    """
    Фильтр для списка товаров. Все поля необязательные,
    в запрос попадают только заданные.
    """
    category: Optional[str] = None
    page: Optional[int] = Field(None, ge=1)
    per_page: Optional[int] = Field(None, ge=1, le=100)
    orderby: Optional[ProductOrderBy] = None
    order: Optional[SortOrder] = None

    @field_validator('category', mode='before')
    @classmethod
    def category_to_str(cls, value: Union[int, str, None]) -> Optional[str]:
        # WooCommerce принимает ID категории, в URL он все равно строка
        if isinstance(value, int):
            return str(value)
        # Пустая категория означает "без фильтра"
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_params(self) -> Dict[str, Union[str, int]]:
        """Параметры запроса к /products. Неопубликованные товары не запрашиваем никогда."""
        params: Dict[str, Union[str, int]] = {'status': 'publish'}
        params.update(self.model_dump(exclude_none=True))
        return params
