# app/schemas/child_schema.py

from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from typing import List, Literal, Optional

DeliverySchedule = Literal["daily", "every-other-day", "weekly"]

MIN_AGE = 3
MAX_AGE = 18


def split_custom_interests(raw: Optional[str]) -> List[str]:
    """Quebra o texto livre: "Robots, Chess , " -> ["Robots", "Chess"]."""
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


class ChildCreate(BaseModel):
    name: str
    age: int = Field(..., ge=MIN_AGE, le=MAX_AGE)
    grade: Optional[str] = None
    interests: List[str] = []
    custom_interests: Optional[str] = None   # texto livre, separado por vírgulas
    favorite_shows: Optional[str] = None
    hobbies: Optional[str] = None
    delivery_schedule: DeliverySchedule = "daily"

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name is required")
        return value

    def all_interests(self) -> List[str]:
        # selecionados primeiro, depois os digitados (duplicatas são mantidas)
        return list(self.interests) + split_custom_interests(self.custom_interests)


class ChildUpdate(BaseModel):
    name: Optional[str] = None
    age: Optional[int] = Field(None, ge=MIN_AGE, le=MAX_AGE)
    grade: Optional[str] = None
    interests: Optional[List[str]] = None
    favorite_shows: Optional[str] = None
    hobbies: Optional[str] = None
    delivery_schedule: Optional[DeliverySchedule] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("name cannot be blank")
        return value


class ChildActiveUpdate(BaseModel):
    is_active: bool


class ChildResponse(BaseModel):
    id: int
    parent_id: int
    name: str
    age: int
    grade: Optional[str]
    interests: List[str]
    favorite_shows: Optional[str]
    hobbies: Optional[str]
    delivery_schedule: DeliverySchedule
    is_active: bool
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)
