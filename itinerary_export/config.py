"""
Configuration management for the itinerary exporter.
Controls the rendering backend, day title style and page layout defaults.
"""
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings
from typing import Literal, Optional

from .models.layout import LayoutPolicy, PackingStrategy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server Configuration
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = True
    log_level: str = "INFO"

    # Rendering
    renderer: Literal["pdf", "html"] = "pdf"
    title_style: Literal["long", "short", "iso"] = "long"

    # Layout Defaults
    packing_strategy: PackingStrategy = PackingStrategy.FIXED_COUNT
    max_items_per_page: int = Field(3, ge=1)
    page_height_budget: Optional[float] = None
    item_base_height: float = 20.0
    item_height_per_event: float = 12.0

    @model_validator(mode="after")
    def check_layout(self):
        if self.packing_strategy == PackingStrategy.HEIGHT_BUDGET and self.page_height_budget is None:
            raise ValueError("packing_strategy=height_budget requires page_height_budget")
        return self

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_layout_policy() -> LayoutPolicy:
    """Get the default layout policy from settings."""
    return LayoutPolicy(
        strategy=settings.packing_strategy,
        max_items_per_page=settings.max_items_per_page,
        page_height_budget=settings.page_height_budget,
        item_base_height=settings.item_base_height,
        item_height_per_event=settings.item_height_per_event,
    )
