"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - create_app(settings) accepts an explicit Settings, so tests never touch the cache
    - Every setting has a default: the demo runs with no environment at all

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - release_stock_on_failure defaults to False: failed orders keep earlier stock
      reservations unless an operator opts in
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resultpattern.core.domain_types import DEFAULT_MAX_ORDER_TOTAL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # API
    app_title: str = "Result Pattern Demo API"
    app_version: str = "1.0.0"
    cors_origins: list[str] = ["http://localhost:5173"]
    host: str = "0.0.0.0"
    port: int = 8000

    # Orders
    max_order_total: Decimal = DEFAULT_MAX_ORDER_TOTAL
    release_stock_on_failure: bool = False

    @field_validator("max_order_total")
    @classmethod
    def positive_limit(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("max_order_total must be greater than zero")
        return v

    # Demo data
    seed_demo_data: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
