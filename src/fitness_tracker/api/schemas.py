"""Pydantic models for request payloads."""

from uuid import UUID

from pydantic import BaseModel, Field


class FoodPayload(BaseModel):
    """Food definition sent by a client."""

    name: str
    brand: str | None = None
    barcode: str | None = None
    category: str = "other"
    serving_size: float
    serving_unit: str
    calories: float
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    micronutrients: dict[str, float] = Field(default_factory=dict)
    is_verified: bool = False


class FoodUpdatePayload(BaseModel):
    """Partial food update."""

    name: str | None = None
    brand: str | None = None
    barcode: str | None = None
    category: str | None = None
    serving_size: float | None = None
    serving_unit: str | None = None
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    micronutrients: dict[str, float] | None = None
    is_verified: bool | None = None


class FoodEntryPayload(BaseModel):
    """Log a portion of a food."""

    food_id: UUID
    date: str
    meal_type: str
    # Raw so unparseable input reaches the quantity check.
    quantity: float | str


class SetTargetPayload(BaseModel):
    reps: int | float | str = 0
    weight: float | str = 0


class ExerciseTemplatePayload(BaseModel):
    name: str
    default_set_targets: list[SetTargetPayload] = Field(default_factory=list)


class TemplateExercisePayload(BaseModel):
    exercise_template_id: UUID
    set_targets: list[SetTargetPayload] | None = None


class WorkoutTemplatePayload(BaseModel):
    name: str
    exercises: list[TemplateExercisePayload] = Field(default_factory=list)


class StartSessionPayload(BaseModel):
    workout_template_id: UUID
    date: str | None = None


class SetUpdatePayload(BaseModel):
    """One field edit on a session set."""

    field: str
    value: float | int | bool | str | None = None


class RestExtensionPayload(BaseModel):
    seconds: int = Field(30, gt=0)


class FinishSessionPayload(BaseModel):
    calories_burned: float | str = 0


class WorkoutEntryUpdatePayload(BaseModel):
    duration: float | str | None = None
    calories_burned: float | str | None = None


class ProfilePayload(BaseModel):
    """Biometric inputs; targets are derived on save."""

    birthdate: str | None = None
    gender: str = "male"
    height: float | str | None = None
    weight: float | str | None = None
    activity_level: str = "sedentary"
    goal_type: str = "maintain-weight"
    target_weight: float | str | None = None


class WeightPayload(BaseModel):
    weight: float | str
    date: str | None = None
