"""
Paginated layout planner - Splits day cards into pages.
Works on view models only; knows nothing about the drawing backend.
"""
from typing import Iterable, Optional

from ..models.itinerary import DayViewModel
from ..models.layout import LayoutPolicy, Page, PagePlan, PackingStrategy


def estimate_height(day: DayViewModel, policy: LayoutPolicy) -> float:
    """Estimated rendered height of one day card."""
    return policy.item_base_height + len(day.events) * policy.item_height_per_event


class PaginatedLayoutPlanner:
    """Packs day view models onto pages without ever splitting a day."""

    def plan(self, days: Iterable[DayViewModel], policy: Optional[LayoutPolicy] = None) -> PagePlan:
        """
        Partition days into pages.

        A new page starts when the current one already holds
        max_items_per_page days or, under the height_budget strategy,
        when the next day would push the page past page_height_budget.
        An empty page always accepts the next day, so an oversized day
        gets a page to itself.

        Args:
            days: Day view models in trip order
            policy: Capacity policy (defaults to LayoutPolicy())

        Returns:
            PagePlan preserving the original day order
        """
        policy = policy or LayoutPolicy()
        use_budget = policy.strategy == PackingStrategy.HEIGHT_BUDGET

        pages: list[list[DayViewModel]] = []
        current: list[DayViewModel] = []
        used = 0.0

        for day in days:
            height = estimate_height(day, policy)
            if current:
                full = len(current) >= policy.max_items_per_page
                overflow = use_budget and used + height > policy.page_height_budget
                if full or overflow:
                    pages.append(current)
                    current, used = [], 0.0
            current.append(day)
            used += height

        if current:
            pages.append(current)

        return PagePlan(pages=[
            Page(number=i, days=page_days) for i, page_days in enumerate(pages, 1)
        ])
