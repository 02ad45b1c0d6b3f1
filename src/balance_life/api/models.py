"""Pydantic models for API request payloads."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegistrationRequest(BaseModel):
    """User registration payload."""

    model_config = ConfigDict(allow_inf_nan=False)

    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)
    gender: str
    birth_date: str = Field(alias="birthDate")
    height: float
    weight: float
    activity_level: str = Field(alias="activityLevel")
    goal: str
    target_weight: float | None = Field(default=None, alias="targetWeight")


class MealEntryRequest(BaseModel):
    """Meal entry creation payload."""

    model_config = ConfigDict(allow_inf_nan=False)

    user_id: str = Field(alias="userId")
    package_id: str = Field(alias="packageId")
    portion_multiplier: float = Field(alias="portionMultiplier")
    date: str


class WorkoutEntryRequest(BaseModel):
    """Workout entry creation payload."""

    model_config = ConfigDict(allow_inf_nan=False)

    user_id: str = Field(alias="userId")
    package_id: str = Field(alias="packageId")
    intensity_multiplier: float = Field(alias="intensityMultiplier")
    duration_minutes: int = Field(alias="durationMinutes")
    date: str
