"""
Pydantic schemas for stored records and request/response validation.

Records serialize with camelCase aliases, which is also the layout of the
persisted JSON document.
"""
import datetime
from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============ Record Schemas ============

class UserRole(str, Enum):
    COACH = "COACH"
    CLIENT = "CLIENT"


class User(CamelModel):
    """Session identity returned by authentication."""
    id: str
    name: str
    role: UserRole
    email: Optional[str] = None
    username: Optional[str] = None
    avatar_url: Optional[str] = None


class Macros(CamelModel):
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fats: float = 0
    fiber: float = 0


class Habit(CamelModel):
    id: str
    name: str
    frequency: Literal["Daily", "Weekly"] = "Daily"
    completed: bool = False


# Slot name -> free text. Dicts keep insertion order, slot names are arbitrary.
MealPlan = Dict[str, str]


class ClientProfile(User):
    """A client's profile; owned by a coach."""
    role: UserRole = UserRole.CLIENT
    coach_id: str
    passport_code: str
    dob: str
    age: int
    occupation: str = "Not Set"
    height_cm: float
    start_weight_kg: float
    current_weight_kg: float
    goal: str
    subscription_end_date: str
    daily_macro_targets: Macros
    meal_plan: Optional[MealPlan] = None
    habits: Optional[List[Habit]] = None
    step_goal: int = 10000
    weekly_step_goal: Optional[int] = None
    status: Literal["active", "flagged", "expired"] = "active"


class FoodLog(CamelModel):
    id: str
    client_id: str
    date: str  # ISO string
    meal_type: str
    food_name: str
    grams: float
    macros: Macros
    photo_url: Optional[str] = None
    ai_confidence: Optional[float] = None
    is_verified: bool = False


TrendColor = Literal["green", "amber", "red"]


class WeightLog(CamelModel):
    id: str
    client_id: str
    date: str
    weight_kg: float
    source: Literal["manual", "photo"] = "manual"
    trend_status: Optional[TrendColor] = None
    trend_message: Optional[str] = None


class MeasurementLog(CamelModel):
    id: str
    client_id: str
    date: str
    chest: Optional[float] = None
    waist: Optional[float] = None
    hips: Optional[float] = None
    arms: Optional[float] = None
    thighs: Optional[float] = None
    notes: Optional[str] = None
    photo_url: Optional[str] = None


class Exercise(CamelModel):
    id: str
    name: str
    sets: int
    reps: str
    completed: bool = False
    weight_kg: Optional[float] = None
    video_url: Optional[str] = None
    notes: Optional[str] = None


class Workout(CamelModel):
    id: str
    client_id: str
    day_of_week: str
    title: str
    exercises: List[Exercise] = Field(default_factory=list)
    completed: bool = False


class FoodItem(CamelModel):
    """Catalog entry; nutrition values are per 100 g."""
    id: str
    name: str
    calories_per_100g: float
    protein_per_100g: float
    carbs_per_100g: float
    fats_per_100g: float
    fiber_per_100g: float
    image_url: Optional[str] = None


class ExerciseDefinition(CamelModel):
    id: str
    name: str
    muscle_group: Literal["Chest", "Back", "Legs", "Shoulders", "Arms", "Core", "Cardio"]
    gif_url: str
    notes: str


class DatabaseSchema(CamelModel):
    """The persisted document."""
    users: List[User] = Field(default_factory=list)
    clients: List[ClientProfile] = Field(default_factory=list)
    food_logs: List[FoodLog] = Field(default_factory=list)
    weight_logs: List[WeightLog] = Field(default_factory=list)
    workouts: List[Workout] = Field(default_factory=list)
    measurements: List[MeasurementLog] = Field(default_factory=list)
    credentials: Dict[str, str] = Field(default_factory=dict)  # username -> hex digest


# ============ Auth Schemas ============

class LoginRequest(CamelModel):
    role: UserRole
    identifier: str = Field(..., min_length=1)
    secret: str = Field(..., min_length=1)


class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"
    user: User


# ============ Coach Schemas ============

class ClientCreate(CamelModel):
    """Schema for a coach registering a new client."""
    name: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1)
    passport_code: str = Field(..., min_length=1)
    dob: datetime.date
    height_cm: float
    start_weight_kg: float
    goal: str
    subscription_end_date: datetime.date
    email: Optional[str] = None


class DietUpdate(CamelModel):
    daily_macro_targets: Macros
    meal_plan: MealPlan = Field(default_factory=dict)


class GoalsUpdate(CamelModel):
    """Step goals and habits; whichever step goal is given drives the other."""
    step_goal: Optional[int] = None
    weekly_step_goal: Optional[int] = None
    habits: Optional[List[Habit]] = None


class MealSlotCreate(CamelModel):
    name: str = Field(..., min_length=1)


class MealSlotFood(CamelModel):
    slot: str
    food_id: str
    grams: float = 100
    auto_update_macros: bool = True


class DietPlanRequest(CamelModel):
    gender: Optional[str] = None


class DashboardStats(CamelModel):
    total: int
    flagged: int
    expiring: int


class RosterResponse(CamelModel):
    stats: DashboardStats
    clients: List[ClientProfile]


# ============ Workout Schemas ============

class WorkoutSave(CamelModel):
    client_id: str
    day_of_week: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    exercises: List[Exercise] = Field(default_factory=list)


class WorkoutPlanRequest(CamelModel):
    client_id: str
    day_of_week: str
    focus: Optional[str] = None


# ============ Logging Schemas ============

class FoodLogCreate(CamelModel):
    """Log a catalog food; macros are scaled from its per-100 g values."""
    food_id: Optional[str] = None
    food: Optional[FoodItem] = None
    grams: float = 100
    meal_type: str = "Breakfast"


class FoodPhotoRequest(CamelModel):
    image_base64: str = Field(..., min_length=1)
    mime_type: str = "image/jpeg"
    meal_type: str = "Breakfast"


class FoodPhotoResult(CamelModel):
    """Either the auto-accepted log, or a candidate for manual review."""
    accepted: bool
    message: str
    log: Optional[FoodLog] = None
    candidate: Optional[FoodItem] = None
    suggested_grams: Optional[float] = None


class QuickLogSuggestion(CamelModel):
    meal_type: str
    grams: Optional[float] = None
    query: str
    food: Optional[FoodItem] = None
    results: List[FoodItem] = Field(default_factory=list)


class DailyNutrition(CamelModel):
    date: str
    consumed: Macros
    targets: Macros
    logs: List[FoodLog]


class WeightLogCreate(CamelModel):
    weight_kg: float
    source: Literal["manual", "photo"] = "manual"


class MeasurementCreate(CamelModel):
    chest: Optional[float] = None
    waist: Optional[float] = None
    hips: Optional[float] = None
    arms: Optional[float] = None
    thighs: Optional[float] = None
    notes: Optional[str] = None


class ProgressPhotoCreate(CamelModel):
    photo_url: str = Field(..., min_length=1)
    notes: str = "Weekly Check-in Photo"


# ============ Analytics Schemas ============

class TrendStatus(str, Enum):
    ON_TRACK = "on_track"
    PLATEAU = "plateau"
    REGRESSING = "regressing"
    INSUFFICIENT_DATA = "insufficient_data"


class TrendResult(CamelModel):
    status: TrendStatus
    message: str
    color: Optional[TrendColor] = None
    slope: Optional[float] = None
    percent_change: Optional[float] = None


class StepProgress(CamelModel):
    current_steps: int
    daily_goal: int
    daily_percentage: float
    weekly_target: int
    weekly_total: int
    remaining: int


class ClientDetail(CamelModel):
    client: ClientProfile
    weight_logs: List[WeightLog]
    trend: TrendResult
    measurements: List[MeasurementLog]
    workouts: List[Workout]


class ClientSummary(CamelModel):
    greeting: str
    meal_context: str
    consumed: Macros
    targets: Macros
    trend: TrendResult
    steps: StepProgress
    measurement_changes: Dict[str, Optional[float]]


# ============ AI Result Schemas ============

class FoodAnalysisResult(CamelModel):
    food_name: str
    grams: float
    macros: Macros
    confidence: float


class AiDietResult(CamelModel):
    macros: Macros
    meal_plan: MealPlan


class AiWorkoutResult(CamelModel):
    title: str
    exercises: List[Exercise]
