"""Keyword and lookup-table heuristics for meals and workouts."""

from typing import get_args

from health_tracker.domain.extraction import MealType, WorkoutType
from health_tracker.services.sanitize import round_half_up, to_number

MEAL_TYPES: tuple[MealType, ...] = get_args(MealType)
WORKOUT_TYPES: tuple[WorkoutType, ...] = get_args(WorkoutType)

# Scanned in order; the first meal with a matching keyword wins.
MEAL_KEYWORDS: tuple[tuple[MealType, tuple[str, ...]], ...] = (
    (
        "breakfast",
        ("breakfast", "morning", "cereal", "eggs", "toast", "oatmeal", "pancakes"),
    ),
    ("lunch", ("lunch", "noon", "midday", "sandwich", "salad")),
    ("dinner", ("dinner", "evening", "supper", "night")),
    ("snack", ("snack", "between", "quick", "bite")),
)

# Calories burned per minute, keyed by activity or workout type.
WORKOUT_CALORIES_PER_MINUTE: dict[str, float] = {
    "running": 10,
    "walking": 4,
    "cycling": 8,
    "swimming": 11,
    "weight training": 6,
    "yoga": 3,
    "hiit": 12,
    "cardio": 10,
    "strength": 6,
    "flexibility": 3,
    "sports": 8,
}
DEFAULT_CALORIES_PER_MINUTE = 5
DEFAULT_WORKOUT_DURATION = 30
MAX_PLAUSIBLE_WORKOUT_CALORIES = 2000


def determine_meal_type(
    declared_meal: object, name: object, description: object = None
) -> MealType:
    """Resolve a meal type from the declared value or keywords in the text."""
    if declared_meal in MEAL_TYPES:
        return declared_meal  # type: ignore[return-value]
    name_text = name if isinstance(name, str) else ""
    description_text = description if isinstance(description, str) else ""
    text = f"{name_text} {description_text}".lower()
    for meal, keywords in MEAL_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return meal
    return "snack"


def validate_workout_type(value: object) -> WorkoutType:
    """Return the value if it is a known workout type, else ``other``."""
    if value in WORKOUT_TYPES:
        return value  # type: ignore[return-value]
    return "other"


def calories_per_minute(workout_type: object) -> float:
    if isinstance(workout_type, str):
        rate = WORKOUT_CALORIES_PER_MINUTE.get(workout_type.strip().lower())
        if rate is not None:
            return rate
    return DEFAULT_CALORIES_PER_MINUTE


def calculate_workout_calories(
    workout_type: object, duration: object, provided_calories: object = None
) -> int:
    """Use plausible provided calories, otherwise estimate from duration."""
    provided = to_number(provided_calories)
    if provided is not None and 0 < provided < MAX_PLAUSIBLE_WORKOUT_CALORIES:
        return round_half_up(provided)
    minutes = to_number(duration)
    if minutes is None:
        minutes = DEFAULT_WORKOUT_DURATION
    return max(0, round_half_up(max(0.0, minutes) * calories_per_minute(workout_type)))
