"""Meal tracking workflow: extract, budget, scale and record."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from diet_ledger.domain.goals import GoalConfig, GoalProgress
from diet_ledger.domain.nutrients import MealSlot, NutrientItem, Totals
from diet_ledger.services.extraction import ExtractionService
from diet_ledger.services.goals import budget_for, compare_to_goals
from diet_ledger.services.ledger import DailyLedger, normalize_date_key, today_iso
from diet_ledger.services.scaling import scale_meal

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MealLogResult:
    """Outcome of recording one meal."""

    date: str
    slot: MealSlot
    budget: float
    items: tuple[NutrientItem, ...]
    totals: Totals


@dataclass(frozen=True)
class DailySummary:
    """Totals for a date, per slot, and against goals."""

    date: str
    totals: Totals
    slot_totals: dict[MealSlot, Totals]
    entry_counts: dict[MealSlot, int]
    progress: GoalProgress


@dataclass
class MealTrackingService:
    """Runs each meal through extraction, scaling and the ledger."""

    extraction_service: ExtractionService
    ledger: DailyLedger
    goals: GoalConfig
    timezone: str | None = None

    async def log_meal(
        self, text: str, slot: MealSlot | str, day: date | str | None = None
    ) -> MealLogResult:
        """Extract items from text and record them, scaled to the slot budget.

        Nothing is recorded if extraction fails.
        """
        items = await self.extraction_service.extract(text)
        return self.log_items(items, slot, day)

    def log_items(
        self,
        items: Sequence[NutrientItem],
        slot: MealSlot | str,
        day: date | str | None = None,
    ) -> MealLogResult:
        """Scale already-extracted items to the slot budget and record them."""
        resolved_slot = MealSlot(slot)
        key = self._resolve_day(day)
        budget = budget_for(self.goals, resolved_slot)
        scaled = scale_meal(items, budget)
        self.ledger.append(key, resolved_slot, scaled.items)
        _logger.info(
            "Recorded meal: date=%s slot=%s items=%s kcal=%s",
            key,
            resolved_slot,
            len(scaled.items),
            scaled.totals.kcal,
        )
        return MealLogResult(
            date=key,
            slot=resolved_slot,
            budget=budget,
            items=scaled.items,
            totals=scaled.totals,
        )

    def summary_for(self, day: date | str) -> DailySummary:
        """Return totals and goal progress for a date."""
        key = normalize_date_key(day)
        record = self.ledger.day(key)
        totals = self.ledger.totals_for_date(key)
        return DailySummary(
            date=key,
            totals=totals,
            slot_totals={
                slot: self.ledger.totals_for_slot(key, slot) for slot in MealSlot
            },
            entry_counts={slot: len(record[slot]) for slot in MealSlot},
            progress=compare_to_goals(totals, self.goals),
        )

    def today(self) -> DailySummary:
        """Return the summary for today's date."""
        return self.summary_for(today_iso(self.timezone))

    def update_goals(self, goals: GoalConfig) -> GoalConfig:
        """Replace the goals used for future budgets and comparisons."""
        self.goals = goals
        _logger.info(
            "Updated goals: daily_calories=%s split_total=%s",
            goals.daily_calories,
            goals.split.total,
        )
        return goals

    def _resolve_day(self, day: date | str | None) -> str:
        if day is None:
            return today_iso(self.timezone)
        return normalize_date_key(day)
