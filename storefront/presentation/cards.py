# storefront/presentation/cards.py
import logging
from decimal import Decimal, InvalidOperation, ROUND_FLOOR, ROUND_HALF_UP
from typing import List, Optional
from pydantic import BaseModel
from storefront.core.config import settings
from storefront.models.product import Product

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = '/placeholder-product.jpg'
MAX_STARS = 5

CURRENCY_SYMBOLS = {
    'USD': '$',
    'EUR': '€',
    'GBP': '£',
}


class CardImage(BaseModel):
    src: str
    alt: str


class CardRating(BaseModel):
    filled_stars: int
    total_stars: int = MAX_STARS
    count: int


class ProductCard(BaseModel):
    """Готовые к отображению данные карточки товара."""
    id: int
    name: str
    slug: str
    url: str
    image: CardImage
    display_price: str
    # Зачеркнутая цена, только для товаров со скидкой
    regular_price_display: Optional[str] = None
    sale_badge: bool = False
    out_of_stock: bool = False
    rating: Optional[CardRating] = None
    short_description: str = ""


def parse_decimal(value: Optional[str]) -> Decimal:
    """Строковую цену/рейтинг из WooCommerce в Decimal. Пустое или мусор дает 0."""
    if not value:
        return Decimal(0)
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        logger.debug(f"Invalid decimal value {value!r}, treating as zero.")
        return Decimal(0)
    if not amount.is_finite():
        return Decimal(0)
    return amount


def format_price(price: Optional[str], currency: Optional[str] = None) -> str:
    """
    Форматирует цену как в en-US: "$1,234.50".
    Пустая или некорректная строка считается нулем.
    """
    currency = (currency or settings.STORE_CURRENCY).upper()
    try:
        amount = parse_decimal(price).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # Больше 28 значащих цифр после округления Decimal не вмещает
        logger.debug(f"Price {price!r} is out of displayable range, treating as zero.")
        amount = Decimal('0.00')
    symbol = CURRENCY_SYMBOLS.get(currency)
    number = f"{abs(amount):,.2f}"
    sign = '-' if amount < 0 else ''
    if symbol:
        return f"{sign}{symbol}{number}"
    return f"{sign}{currency} {number}"


def filled_stars(average_rating: Optional[str]) -> int:
    """Число закрашенных звезд: целая часть рейтинга в пределах 0..5."""
    stars = int(parse_decimal(average_rating).to_integral_value(rounding=ROUND_FLOOR))
    return max(0, min(stars, MAX_STARS))


def build_product_card(product: Product, currency: Optional[str] = None) -> ProductCard:
    if product.images:
        first = product.images[0]
        image = CardImage(src=first.src, alt=first.alt or product.name)
    else:
        image = CardImage(src=PLACEHOLDER_IMAGE, alt=product.name)

    regular_price_display = None
    if product.on_sale and product.regular_price:
        regular_price_display = format_price(product.regular_price, currency)

    rating = None
    if product.rating_count > 0:
        rating = CardRating(filled_stars=filled_stars(product.average_rating), count=product.rating_count)

    return ProductCard(
        id=product.id,
        name=product.name,
        slug=product.slug,
        url=f"/product/{product.slug}",
        image=image,
        display_price=format_price(product.price, currency),
        regular_price_display=regular_price_display,
        sale_badge=product.on_sale,
        out_of_stock=product.stock_status == 'outofstock',
        rating=rating,
        short_description=product.short_description,
    )


def build_product_cards(products: List[Product], currency: Optional[str] = None) -> List[ProductCard]:
    return [build_product_card(product, currency) for product in products]
