# storefront/core/config.py
import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    PROJECT_NAME: str = "UPMOS Storefront Backend"
    API_V1_STR: str = "/api/v1"
    LOGGING_LEVEL: str = os.getenv("LOGGING_LEVEL", "INFO")

    # --- WooCommerce Settings ---
    # Полный адрес REST API (уже с /wp-json/wc/v3)
    WOOCOMMERCE_API_URL: str = "https://upmos.com/wp-json/wc/v3"
    # Ключи не обязательны: без них каталог просто отдает пустые результаты
    WOOCOMMERCE_KEY: str = ""
    WOOCOMMERCE_SECRET: str = ""

    # Сколько секунд вызывающий слой может переиспользовать успешный ответ
    CATALOG_REVALIDATE_SECONDS: int = 3600
    HTTP_TIMEOUT: float = 10.0
    HTTP_CONNECT_TIMEOUT: float = 5.0
    HTTP_READ_TIMEOUT: float = 20.0

    # --- Storefront Settings ---
    SITE_URL: str = "https://upmos.com"
    STORE_CURRENCY: str = "USD"
    FRONTEND_ORIGINS_STR: str = "http://localhost:3000"

    @property
    def FRONTEND_ORIGINS(self) -> List[str]:
        """Преобразует строку разрешенных origin'ов в список."""
        return [origin.strip().rstrip('/') for origin in self.FRONTEND_ORIGINS_STR.split(',') if origin.strip()]

    @property
    def HAS_WOOCOMMERCE_CREDENTIALS(self) -> bool:
        return bool(self.WOOCOMMERCE_KEY and self.WOOCOMMERCE_SECRET)

    # Настройки для Pydantic Settings
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

settings = Settings()
if not settings.HAS_WOOCOMMERCE_CREDENTIALS:
    print("WARNING: WooCommerce API credentials are not configured. Catalog requests will return empty results.")
