# storefront/api/v1/router.py
from fastapi import APIRouter
from storefront.api.v1.endpoints import products, categories, pages

api_router_v1 = APIRouter()

api_router_v1.include_router(pages.router, prefix="/pages", tags=["Pages"])
api_router_v1.include_router(products.router, prefix="/products", tags=["Products"])
api_router_v1.include_router(categories.router, prefix="/categories", tags=["Categories"])
