"""
Calendar aggregation: bucket a flat list of planned meals into the
7 x 4 (day, meal type) grid of a week.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

from domain.enums import MEAL_TYPES, MealType
from domain.schemas.meal_plan_schemas import MealPlanEntry
from planner.week_window import DAY_NAMES, week_dates


@dataclass(frozen=True)
class DayColumn:
    date: date
    iso_date: str
    day_name: str
    day_number: int
    is_today: bool
    meals: Dict[MealType, Optional[MealPlanEntry]] = field(default_factory=dict)

    def meal(self, meal_type: MealType) -> Optional[MealPlanEntry]:
        return self.meals.get(MealType(meal_type))


@dataclass(frozen=True)
class WeekGrid:
    week_start: date
    days: List[DayColumn]

    def day(self, day: date) -> Optional[DayColumn]:
        for column in self.days:
            if column.date == day:
                return column
        return None

    def cell(self, day: date, meal_type: MealType) -> Optional[MealPlanEntry]:
        column = self.day(day)
        return column.meal(meal_type) if column is not None else None

    def filled_cells(self) -> List[Tuple[date, MealType, MealPlanEntry]]:
        cells = []
        for column in self.days:
            for meal_type in MEAL_TYPES:
                entry = column.meals.get(meal_type)
                if entry is not None:
                    cells.append((column.date, meal_type, entry))
        return cells

    @property
    def planned_count(self) -> int:
        return len(self.filled_cells())


def build(week_start: date, entries: Iterable[MealPlanEntry], today: date) -> WeekGrid:
    """
    Build the week grid.

    Each cell holds the first entry (in input order) matching its date and
    meal type; later duplicates for the same cell are ignored. Entries
    outside the week are left out.
    """
    entries = list(entries)
    days: List[DayColumn] = []

    for index, day in enumerate(week_dates(week_start)):
        day_entries = [entry for entry in entries if entry.plan_date == day]
        meals = {
            meal_type: next((e for e in day_entries if e.meal_type == meal_type), None)
            for meal_type in MEAL_TYPES
        }
        days.append(
            DayColumn(
                date=day,
                iso_date=day.isoformat(),
                day_name=DAY_NAMES[index],
                day_number=day.day,
                is_today=day == today,
                meals=meals,
            )
        )

    return WeekGrid(week_start=week_start, days=days)
