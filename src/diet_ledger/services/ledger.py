"""Append-only daily nutrition ledger keyed by date and meal slot."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from zoneinfo import ZoneInfo

from diet_ledger.domain.nutrients import MealSlot, NutrientItem, Totals
from diet_ledger.services.aggregation import sum_items

MealEntry = tuple[NutrientItem, ...]
DayRecord = Mapping[MealSlot, tuple[MealEntry, ...]]


def today_iso(timezone_name: str | None = None) -> str:
    """Return today's ledger key from the local clock or an IANA timezone."""
    if timezone_name:
        return datetime.now(tz=ZoneInfo(timezone_name)).date().isoformat()
    return date.today().isoformat()


def normalize_date_key(day: date | str) -> str:
    """Return an ISO "YYYY-MM-DD" key, rejecting anything else."""
    if isinstance(day, datetime):
        return day.date().isoformat()
    if isinstance(day, date):
        return day.isoformat()
    return date.fromisoformat(day).isoformat()


@dataclass
class DailyLedger:
    """In-memory store of meal entries per (date, slot).

    Entries are only ever appended. Every total is recomputed from the
    stored entries on read.
    """

    _days: dict[str, dict[MealSlot, list[MealEntry]]] = field(default_factory=dict)

    def append(
        self, day: date | str, slot: MealSlot | str, entry: Iterable[NutrientItem]
    ) -> None:
        """Append one meal entry to the date's slot, creating the date if new."""
        key = normalize_date_key(day)
        resolved_slot = MealSlot(slot)
        frozen_entry = tuple(entry)
        record = self._days.get(key)
        if record is None:
            record = {meal_slot: [] for meal_slot in MealSlot}
            self._days[key] = record
        record[resolved_slot].append(frozen_entry)

    def totals_for_date(self, day: date | str) -> Totals:
        """Return rounded totals across every slot and entry for a date."""
        record = self._days.get(normalize_date_key(day))
        if record is None:
            return Totals.zero()
        return sum_items(
            item
            for entries in record.values()
            for entry in entries
            for item in entry
        )

    def totals_for_slot(self, day: date | str, slot: MealSlot | str) -> Totals:
        """Return rounded totals for a single slot on a date."""
        resolved_slot = MealSlot(slot)
        record = self._days.get(normalize_date_key(day))
        if record is None:
            return Totals.zero()
        return sum_items(item for entry in record[resolved_slot] for item in entry)

    def day(self, day: date | str) -> DayRecord:
        """Return a read-only view of a date's entries; empty slots if absent."""
        record = self._days.get(normalize_date_key(day), {})
        return MappingProxyType(
            {slot: tuple(record.get(slot, ())) for slot in MealSlot}
        )

    def entries(self, day: date | str) -> Iterator[tuple[MealSlot, MealEntry]]:
        """Yield (slot, entry) pairs for a date in slot then insertion order."""
        record = self._days.get(normalize_date_key(day), {})
        for slot in MealSlot:
            for entry in record.get(slot, ()):
                yield slot, entry

    def dates(self) -> list[str]:
        """Return the dates that have at least one entry, oldest first."""
        return sorted(self._days)

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, date | str):
            return False
        try:
            return normalize_date_key(day) in self._days
        except ValueError:
            return False

    def __len__(self) -> int:
        return len(self._days)
