# storefront/dependencies.py
import logging
from fastapi import Request, HTTPException, status
from storefront.services.catalog import CatalogService

logger = logging.getLogger(__name__)

async def get_catalog_service(request: Request) -> CatalogService:
    service = getattr(request.app.state, 'catalog_service', None)
    if not service or not isinstance(service, CatalogService):
        logger.error("Catalog service is not initialized in app state.")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Catalog service is unavailable."
        )
    return service
