"""
Domain enums for MealBoard application.
Contains all enumeration types used across the domain models.
"""

import enum


class MealType(str, enum.Enum):
    """Meal slots of a calendar day, in display order"""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"

    @property
    def label(self) -> str:
        return self.value.capitalize()


MEAL_TYPES = (MealType.BREAKFAST, MealType.LUNCH, MealType.DINNER, MealType.SNACK)


class WeekDirection(str, enum.Enum):
    """Week navigation direction"""

    PREVIOUS = "prev"
    NEXT = "next"
