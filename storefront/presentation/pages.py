# storefront/presentation/pages.py
import logging
from pydantic import BaseModel
from typing import List
from storefront.core.config import settings
from storefront.models.product import Product
from storefront.presentation.cards import ProductCard, build_product_cards
from storefront.presentation.navigation import BRAND_NAME

logger = logging.getLogger(__name__)


class Hero(BaseModel):
    title: str
    subtitle: str
    cta_title: str
    cta_url: str


class TrustBadge(BaseModel):
    icon: str
    title: str
    text: str


class CategoryTile(BaseModel):
    title: str
    text: str
    url: str
    icon: str


class Newsletter(BaseModel):
    title: str
    text: str
    placeholder: str
    button_title: str


class HomePage(BaseModel):
    hero: Hero
    trust_badges: List[TrustBadge]
    category_tiles: List[CategoryTile]
    featured_products: List[ProductCard]
    newsletter: Newsletter


class OpenGraph(BaseModel):
    title: str
    description: str
    url: str
    site_name: str
    locale: str = "en_US"
    type: str = "website"


class SiteMetadata(BaseModel):
    title: str
    description: str
    keywords: str
    open_graph: OpenGraph


HERO = Hero(
    title=f"Welcome to {BRAND_NAME} Marketplace",
    subtitle="Discover quality products from verified vendors. Electronics, fashion, home goods, and more all in one place.",
    cta_title="Browse All Products",
    cta_url="/shop",
)

TRUST_BADGES = [
    TrustBadge(icon="shipping", title="Free Shipping", text="On orders over $50"),
    TrustBadge(icon="lock", title="Secure Payment", text="100% secure transactions"),
    TrustBadge(icon="returns", title="30-Day Returns", text="Easy return policy"),
]

CATEGORY_TILES = [
    CategoryTile(title="Electronics", text="Latest tech & gadgets", url="/shop/electronics", icon="monitor"),
    CategoryTile(title="Fashion", text="Trendy clothing & accessories", url="/shop/fashion", icon="bag"),
    CategoryTile(title="Home & Garden", text="Beautiful home essentials", url="/shop/home-garden", icon="home"),
]

NEWSLETTER = Newsletter(
    title="Stay Updated",
    text="Subscribe to our newsletter for exclusive deals and new product announcements",
    placeholder="Enter your email",
    button_title="Subscribe",
)


def build_site_metadata() -> SiteMetadata:
    title = f"{BRAND_NAME} - Your Trusted Marketplace"
    return SiteMetadata(
        title=title,
        description=(
            "Your trusted online marketplace for electronics, fashion, home goods, and more. "
            "Quality products from verified vendors."
        ),
        keywords="marketplace, online shopping, electronics, fashion, home goods, vendors",
        open_graph=OpenGraph(
            title=title,
            description="Your trusted online marketplace for electronics, fashion, home goods, and more.",
            url=settings.SITE_URL,
            site_name=BRAND_NAME,
        ),
    )


def build_home_page(featured_products: List[Product]) -> HomePage:
    """
    Собирает главную страницу. Если каталог ничего не вернул, блок избранных
    товаров просто пустой, остальная страница статична.
    """
    logger.info(f"Home page built with {len(featured_products)} featured products.")
    return HomePage(
        hero=HERO,
        trust_badges=TRUST_BADGES,
        category_tiles=CATEGORY_TILES,
        featured_products=build_product_cards(featured_products),
        newsletter=NEWSLETTER,
    )
