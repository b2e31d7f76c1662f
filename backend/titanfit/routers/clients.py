"""
Coach routes: client roster, client detail, diet plans and goals.
"""
from datetime import date
from typing import Optional
from urllib.parse import quote
from fastapi import APIRouter, Depends, HTTPException, status, Query
import logging

from .. import schemas, analytics
from ..auth import get_current_coach
from ..llm.service import GenerationService, get_generation_service
from ..store import FitnessStore, get_store, new_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/clients", tags=["Clients"])

DEFAULT_MACRO_TARGETS = schemas.Macros(calories=2000, protein=150, carbs=200, fats=65, fiber=30)
DEFAULT_MEAL_SLOTS = ("breakfast", "lunch", "dinner", "snack")


def get_client_or_404(store: FitnessStore, client_id: str) -> schemas.ClientProfile:
    client = store.get_client(client_id)
    if not client:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found"
        )
    return client


@router.get("", response_model=schemas.RosterResponse)
def list_clients(
    search: str = Query("", description="Case-insensitive match on name or username"),
    roster_filter: str = Query("all", alias="filter", pattern="^(all|flagged|expiring)$"),
    coach: schemas.User = Depends(get_current_coach),
    store: FitnessStore = Depends(get_store),
):
    """
    Get the client roster with headline stats.

    - **search**: filter by name or username
    - **filter**: all, flagged, or expiring (subscription ends within 10 days)
    """
    clients = store.get_clients()
    return schemas.RosterResponse(
        stats=schemas.DashboardStats(**analytics.roster_stats(clients)),
        clients=analytics.filter_roster(clients, search, roster_filter),
    )


@router.post("", response_model=schemas.ClientProfile, status_code=status.HTTP_201_CREATED)
def create_client(
    client: schemas.ClientCreate,
    coach: schemas.User = Depends(get_current_coach),
    store: FitnessStore = Depends(get_store),
):
    """
    Register a new client under the current coach.

    Age is derived from the date of birth; macro targets, step goals and meal
    slots start from defaults.
    """
    if any(c.username == client.username for c in store.get_clients()):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already registered"
        )

    profile = schemas.ClientProfile(
        id=new_id(),
        coach_id=coach.id,
        role=schemas.UserRole.CLIENT,
        name=client.name,
        username=client.username,
        email=client.email,
        passport_code=client.passport_code,
        dob=client.dob.isoformat(),
        age=analytics.age_from_dob(client.dob.isoformat(), date.today()),
        occupation="Not Set",
        height_cm=client.height_cm,
        start_weight_kg=client.start_weight_kg,
        current_weight_kg=client.start_weight_kg,
        goal=client.goal,
        subscription_end_date=client.subscription_end_date.isoformat(),
        status="active",
        step_goal=10000,
        weekly_step_goal=70000,
        daily_macro_targets=DEFAULT_MACRO_TARGETS.model_copy(),
        meal_plan={slot: "" for slot in DEFAULT_MEAL_SLOTS},
        habits=[],
        avatar_url=f"https://ui-avatars.com/api/?name={quote(client.name)}&background=random",
    )
    store.add_client(profile)
    logger.info(f"Coach {coach.id} created client {profile.id}")
    return profile


@router.get("/{client_id}", response_model=schemas.ClientDetail)
def get_client_detail(
    client_id: str,
    coach: schemas.User = Depends(get_current_coach),
    store: FitnessStore = Depends(get_store),
):
    """
    Get a client's profile with weight history, trend, measurements and workouts.
    """
    client = get_client_or_404(store, client_id)
    weight_logs = analytics.sort_by_date(w for w in store.get_weight_logs() if w.client_id == client_id)
    return schemas.ClientDetail(
        client=client,
        weight_logs=weight_logs,
        trend=analytics.classify_weight_trend(weight_logs),
        measurements=[m for m in store.get_measurements() if m.client_id == client_id],
        workouts=[w for w in store.get_workouts() if w.client_id == client_id],
    )


@router.put("/{client_id}/diet", response_model=schemas.ClientProfile)
def update_diet(
    client_id: str,
    diet: schemas.DietUpdate,
    coach: schemas.User = Depends(get_current_coach),
    store: FitnessStore = Depends(get_store),
):
    """
    Replace a client's daily macro targets and meal plan.
    """
    client = get_client_or_404(store, client_id)
    updated = client.model_copy(update={
        "daily_macro_targets": diet.daily_macro_targets,
        "meal_plan": dict(diet.meal_plan),
    })
    store.update_client(updated)
    return updated


@router.put("/{client_id}/goals", response_model=schemas.ClientProfile)
def update_goals(
    client_id: str,
    goals: schemas.GoalsUpdate,
    coach: schemas.User = Depends(get_current_coach),
    store: FitnessStore = Depends(get_store),
):
    """
    Update step goals and habits.

    Setting the daily goal sets the weekly goal to seven times it; setting only
    the weekly goal sets the daily goal to a seventh of it.
    """
    client = get_client_or_404(store, client_id)
    changes = {}
    step_goal, weekly_step_goal = analytics.sync_step_goals(goals.step_goal, goals.weekly_step_goal)
    if step_goal is not None:
        changes["step_goal"] = step_goal
        changes["weekly_step_goal"] = weekly_step_goal
    if goals.habits is not None:
        changes["habits"] = goals.habits

    updated = client.model_copy(update=changes)
    store.update_client(updated)
    return updated


@router.post("/{client_id}/meal-slots", response_model=schemas.ClientProfile)
def add_meal_slot(
    client_id: str,
    slot: schemas.MealSlotCreate,
    coach: schemas.User = Depends(get_current_coach),
    store: FitnessStore = Depends(get_store),
):
    """
    Add an empty meal slot (e.g. "Pre-Workout"); slot names are stored lower-case.
    """
    client = get_client_or_404(store, client_id)
    updated = client.model_copy(update={
        "meal_plan": analytics.add_meal_slot(client.meal_plan or {}, slot.name),
    })
    store.update_client(updated)
    return updated


@router.post("/{client_id}/meal-slots/food", response_model=schemas.ClientProfile)
def add_food_to_meal_slot(
    client_id: str,
    entry: schemas.MealSlotFood,
    coach: schemas.User = Depends(get_current_coach),
    store: FitnessStore = Depends(get_store),
):
    """
    Append a catalog food to a meal slot, optionally adding its macros to the targets.
    """
    client = get_client_or_404(store, client_id)
    food = analytics.find_food(entry.food_id)
    if not food:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Food not found"
        )

    meal_plan, targets = analytics.add_food_to_meal_slot(
        client.meal_plan or {},
        client.daily_macro_targets,
        entry.slot,
        food,
        entry.grams,
        entry.auto_update_macros,
    )
    updated = client.model_copy(update={"meal_plan": meal_plan, "daily_macro_targets": targets})
    store.update_client(updated)
    return updated


@router.post("/{client_id}/diet/generate", response_model=schemas.AiDietResult)
def generate_diet(
    client_id: str,
    request: Optional[schemas.DietPlanRequest] = None,
    coach: schemas.User = Depends(get_current_coach),
    store: FitnessStore = Depends(get_store),
    service: GenerationService = Depends(get_generation_service),
):
    """
    Draft macro targets and a four-slot meal plan with the AI.

    Nothing is saved; send the draft to PUT /diet to apply it.
    """
    client = get_client_or_404(store, client_id)
    try:
        return service.generate_diet(
            age=client.age,
            weight=client.current_weight_kg,
            goal=client.goal,
            gender=request.gender if request else None,
        )
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to generate diet plan. Please try again."
        )
