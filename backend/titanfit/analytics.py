"""
Derived aggregates: weight trend, daily macros, step progress and the small
helpers the coach and client screens compute from stored records.

Everything here is pure and recomputed on every read.
"""
from __future__ import annotations
import math
import re
from datetime import date, datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from dateutil import parser as date_parser

from .schemas import (
    ClientProfile,
    Exercise,
    FoodItem,
    FoodLog,
    Macros,
    MealPlan,
    MeasurementLog,
    StepProgress,
    TrendResult,
    TrendStatus,
    WeightLog,
    Workout,
)
from .seed import FOOD_DATABASE, TREND_THRESHOLDS

MACRO_FIELDS = ("calories", "protein", "carbs", "fats", "fiber")
MEASUREMENT_SITES = ("chest", "waist", "hips", "arms", "thighs")
DEFAULT_WEEKLY_STEP_GOAL = 70000
TREND_WINDOW = 4


# ---------- Dates ----------
def parse_timestamp(value: str) -> datetime:
    """Parse a stored date or ISO timestamp; naive values are taken as UTC."""
    dt = date_parser.isoparse(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def utc_today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def age_from_dob(dob: str, today: Optional[date] = None) -> int:
    born = parse_timestamp(dob).date()
    if today is None:
        today = date.today()
    years = today.year - born.year - ((today.month, today.day) < (born.month, born.day))
    return max(0, years)


# ---------- Weight trend ----------
def sort_by_date(logs: Iterable[WeightLog]) -> List[WeightLog]:
    return sorted(logs, key=lambda log: parse_timestamp(log.date))


def classify_weight_trend(logs: Sequence[WeightLog]) -> TrendResult:
    """
    Classify the recent weight trend from a fixed four-point window.

    slope is the average daily change across the last three intervals and is
    expressed as a percentage of the latest weight. Lower is always better,
    whatever the client's goal.
    """
    ordered = sort_by_date(logs)
    if len(ordered) < TREND_WINDOW:
        return TrendResult(status=TrendStatus.INSUFFICIENT_DATA, message="Need more data")

    latest = ordered[-1].weight_kg
    previous = ordered[-TREND_WINDOW].weight_kg
    slope = (latest - previous) / (TREND_WINDOW - 1)
    percent_change = slope * 100 / latest

    if percent_change <= TREND_THRESHOLDS["on_track"]:
        status, message, color = TrendStatus.ON_TRACK, "On Track", "green"
    elif percent_change > TREND_THRESHOLDS["regressing"]:
        status, message, color = TrendStatus.REGRESSING, "Regressing", "red"
    else:
        status, message, color = TrendStatus.PLATEAU, "Plateau", "amber"

    return TrendResult(
        status=status,
        message=message,
        color=color,
        slope=slope,
        percent_change=percent_change,
    )


# ---------- Nutrition ----------
def daily_macro_totals(food_logs: Iterable[FoodLog], today: Optional[str] = None) -> Macros:
    """Sum macros of logs dated today (plain prefix match on the ISO date)."""
    if today is None:
        today = utc_today()
    totals = {field: 0.0 for field in MACRO_FIELDS}
    for log in food_logs:
        if not log.date.startswith(today):
            continue
        for field in MACRO_FIELDS:
            totals[field] += getattr(log.macros, field)
    return Macros(**totals)


def scale_macros(food: FoodItem, grams: float) -> Macros:
    """Macros for `grams` of a catalog food, rounded to whole units."""
    ratio = grams / 100
    return Macros(
        calories=round(food.calories_per_100g * ratio),
        protein=round(food.protein_per_100g * ratio),
        carbs=round(food.carbs_per_100g * ratio),
        fats=round(food.fats_per_100g * ratio),
        fiber=round(food.fiber_per_100g * ratio),
    )


def per_100g(id: str, name: str, macros: Macros, grams: float, image_url: Optional[str] = None) -> FoodItem:
    """Turn totals for a serving into a per-100 g catalog entry."""
    multiplier = 100 / (grams or 100)
    return FoodItem(
        id=id,
        name=name,
        calories_per_100g=round(macros.calories * multiplier),
        protein_per_100g=round(macros.protein * multiplier),
        carbs_per_100g=round(macros.carbs * multiplier),
        fats_per_100g=round(macros.fats * multiplier),
        fiber_per_100g=round(macros.fiber * multiplier),
        image_url=image_url,
    )


def search_food_catalog(query: str, catalog: Sequence[FoodItem] = FOOD_DATABASE) -> List[FoodItem]:
    if len(query) < 2:
        return []
    q = query.lower()
    return [f for f in catalog if q in f.name.lower()]


def find_food(food_id: str, catalog: Sequence[FoodItem] = FOOD_DATABASE) -> Optional[FoodItem]:
    return next((f for f in catalog if f.id == food_id), None)


_MEAL_ITEM = re.compile(r"(\d+)\s*g\s+([a-zA-Z\s]+)", re.IGNORECASE)


def parse_meal_suggestion(text: str) -> Tuple[Optional[int], str]:
    """
    Pull "<grams>g <name>" out of a meal-plan line.
    Falls back to the first 20 characters as a search query.
    """
    match = _MEAL_ITEM.search(text)
    if not match:
        return None, text[:20]
    return int(match.group(1)), match.group(2).strip()


def add_meal_slot(meal_plan: MealPlan, name: str) -> MealPlan:
    updated = dict(meal_plan)
    updated.setdefault(name.lower(), "")
    return updated


def add_food_to_meal_slot(
    meal_plan: MealPlan,
    targets: Macros,
    slot: str,
    food: FoodItem,
    grams: float,
    auto_update: bool = True,
) -> Tuple[MealPlan, Macros]:
    """Append "<grams>g <food>" to a slot; optionally add its macros to the targets."""
    item = f"{grams:g}g {food.name}"
    current = meal_plan.get(slot, "")
    updated_plan = dict(meal_plan)
    updated_plan[slot] = f"{current}, {item}" if current else item

    if not auto_update:
        return updated_plan, targets
    added = scale_macros(food, grams)
    updated_targets = Macros(**{
        field: getattr(targets, field) + getattr(added, field) for field in MACRO_FIELDS
    })
    return updated_plan, updated_targets


# ---------- Steps ----------
def weekly_step_progress(current_steps: int, weekly_target: Optional[int], daily_goal: int) -> StepProgress:
    """
    Rough weekly projection: five earlier days assumed equal to today, plus today.
    No step history is stored.
    """
    target = weekly_target or DEFAULT_WEEKLY_STEP_GOAL
    weekly_total = current_steps * 5 + current_steps
    daily_percentage = min(current_steps / daily_goal * 100, 100) if daily_goal > 0 else 0.0
    return StepProgress(
        current_steps=current_steps,
        daily_goal=daily_goal,
        daily_percentage=daily_percentage,
        weekly_target=target,
        weekly_total=weekly_total,
        remaining=max(0, target - weekly_total),
    )


def sync_step_goals(step_goal: Optional[int] = None, weekly_step_goal: Optional[int] = None) -> Tuple[Optional[int], Optional[int]]:
    """Derive the missing goal from the other; the daily goal wins when both are given."""
    if step_goal is not None:
        return step_goal, step_goal * 7
    if weekly_step_goal is not None:
        return round(weekly_step_goal / 7), weekly_step_goal
    return None, None


# ---------- Measurements ----------
def measurement_changes(measurements: Iterable[MeasurementLog]) -> Dict[str, Optional[float]]:
    """Latest minus previous measurement per site (None when either is missing)."""
    ordered = sorted(measurements, key=lambda m: parse_timestamp(m.date), reverse=True)
    latest = ordered[0] if ordered else None
    previous = ordered[1] if len(ordered) > 1 else None

    changes: Dict[str, Optional[float]] = {}
    for site in MEASUREMENT_SITES:
        if latest is None or previous is None:
            changes[site] = None
            continue
        now_val = getattr(latest, site)
        prev_val = getattr(previous, site)
        changes[site] = round(now_val - prev_val, 2) if now_val and prev_val else None
    return changes


# ---------- Workouts ----------
def is_workout_complete(exercises: Sequence[Exercise]) -> bool:
    return len(exercises) > 0 and all(ex.completed for ex in exercises)


def toggle_exercise(workout: Workout, exercise_id: str) -> Workout:
    exercises = [
        ex.model_copy(update={"completed": not ex.completed}) if ex.id == exercise_id else ex
        for ex in workout.exercises
    ]
    return workout.model_copy(update={
        "exercises": exercises,
        "completed": is_workout_complete(exercises),
    })


# ---------- Roster ----------
def days_until(end_date: str, now: Optional[datetime] = None) -> int:
    if now is None:
        now = datetime.now(timezone.utc)
    seconds = (parse_timestamp(end_date) - now).total_seconds()
    return math.ceil(seconds / 86400)


def is_expiring(client: ClientProfile, now: Optional[datetime] = None) -> bool:
    return 0 <= days_until(client.subscription_end_date, now) <= 10


def roster_stats(clients: Sequence[ClientProfile], now: Optional[datetime] = None) -> Dict[str, int]:
    return {
        "total": len(clients),
        "flagged": sum(1 for c in clients if c.status == "flagged"),
        "expiring": sum(1 for c in clients if is_expiring(c, now)),
    }


def filter_roster(
    clients: Sequence[ClientProfile],
    query: str = "",
    roster_filter: str = "all",
    now: Optional[datetime] = None,
) -> List[ClientProfile]:
    q = query.lower()
    result = []
    for client in clients:
        if q not in client.name.lower() and q not in (client.username or "").lower():
            continue
        if roster_filter == "flagged" and client.status != "flagged":
            continue
        if roster_filter == "expiring" and not is_expiring(client, now):
            continue
        result.append(client)
    return result


# ---------- Client home ----------
def greeting(hour: int) -> str:
    if hour < 12:
        return "Good Morning"
    if hour < 18:
        return "Good Afternoon"
    return "Good Evening"


def meal_context(hour: int) -> str:
    if 5 <= hour < 11:
        return "Breakfast Time"
    if 11 <= hour < 15:
        return "Lunch Time"
    if 15 <= hour < 18:
        return "Afternoon Snack"
    if 18 <= hour < 22:
        return "Dinner Time"
    return "Late Night Snack"
