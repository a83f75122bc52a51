"""
Layout models - Capacity policy and the resulting page plan.
"""
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional
from enum import Enum

from .itinerary import DayViewModel, TripSummary


class PackingStrategy(str, Enum):
    """How day cards are packed onto pages."""
    FIXED_COUNT = "fixed_count"  # New page every max_items_per_page days
    HEIGHT_BUDGET = "height_budget"  # Also break when estimated height overflows


class LayoutPolicy(BaseModel):
    """Capacity policy for paginating day cards."""
    model_config = ConfigDict(populate_by_name=True)

    strategy: PackingStrategy = Field(
        default=PackingStrategy.FIXED_COUNT,
        description="Packing strategy"
    )
    max_items_per_page: int = Field(
        default=3, ge=1, alias="maxItemsPerPage",
        description="Maximum day cards per page"
    )
    page_height_budget: Optional[float] = Field(
        None, gt=0, alias="pageHeightBudget",
        description="Estimated height available per page (height_budget only)"
    )
    item_base_height: float = Field(
        default=20.0, ge=0, alias="itemBaseHeight",
        description="Height of a day card with no events"
    )
    item_height_per_event: float = Field(
        default=12.0, ge=0, alias="itemHeightPerEvent",
        description="Extra height per event line"
    )

    @model_validator(mode="after")
    def check_budget(self):
        if self.strategy == PackingStrategy.HEIGHT_BUDGET and self.page_height_budget is None:
            raise ValueError("height_budget strategy requires page_height_budget")
        return self


class Page(BaseModel):
    """One rendered page of day cards."""
    number: int = Field(..., ge=1)
    days: list[DayViewModel] = Field(default_factory=list)


class PagePlan(BaseModel):
    """Ordered pages, each an ordered run of days."""
    pages: list[Page] = Field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def day_count(self) -> int:
        return sum(len(page.days) for page in self.pages)

    def iter_days(self):
        """Yield every day in plan order."""
        for page in self.pages:
            yield from page.days


class ItineraryReport(BaseModel):
    """Everything a renderer needs: header plus paginated days."""
    summary: TripSummary
    plan: PagePlan
