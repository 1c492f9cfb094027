# storefront/presentation/navigation.py
from pydantic import BaseModel
from typing import List

BRAND_NAME = "UPMOS"


class MenuItem(BaseModel):
    id: int
    title: str
    url: str
    children: List["MenuItem"] = []


class HeaderAction(BaseModel):
    title: str
    url: str
    primary: bool = False


class Navigation(BaseModel):
    brand: str
    brand_url: str = "/"
    menu: List[MenuItem]
    actions: List[HeaderAction]


# Меню шапки. Ссылки на корзину, кабинет и кабинет продавца ведут
# на страницы WooCommerce/маркетплейса, здесь они только перечислены.
MENU_ITEMS: List[MenuItem] = [
    MenuItem(id=1, title="Home", url="/"),
    MenuItem(
        id=2,
        title="Shop",
        url="/shop",
        children=[
            MenuItem(id=21, title="Electronics", url="/shop/electronics"),
            MenuItem(id=22, title="Fashion", url="/shop/fashion"),
            MenuItem(id=23, title="Home & Garden", url="/shop/home-garden"),
        ],
    ),
    MenuItem(
        id=3,
        title="Vendors",
        url="/vendors",
        children=[
            MenuItem(id=31, title="Become a Vendor", url="/vendor-register"),
            MenuItem(id=32, title="Vendor Dashboard", url="/vendor-dashboard"),
        ],
    ),
    MenuItem(id=4, title="About", url="/about"),
    MenuItem(id=5, title="Contact", url="/contact"),
]

HEADER_ACTIONS: List[HeaderAction] = [
    HeaderAction(title="Cart", url="/cart"),
    HeaderAction(title="My Account", url="/my-account", primary=True),
]


def build_navigation() -> Navigation:
    # Копии, чтобы изменения в ответе не задевали модульные константы
    return Navigation(
        brand=BRAND_NAME,
        menu=[item.model_copy(deep=True) for item in MENU_ITEMS],
        actions=[action.model_copy() for action in HEADER_ACTIONS],
    )
