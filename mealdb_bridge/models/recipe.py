# mealdb_bridge/models/recipe.py
from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional, Tuple
from pydantic import BaseModel, Field

# One TheMealDB meal object, as returned by the API
SourceRecord = Mapping[str, Any]


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Category(str, Enum):
    MAIN_COURSE = "main-course"
    APPETIZER = "appetizer"
    DESSERT = "dessert"
    BREAKFAST = "breakfast"


class Ingredient(BaseModel):
    name: str = Field(min_length=1)
    amount: str = Field(default="1", min_length=1)
    unit: str = ""

    model_config = {"frozen": True}


class InstructionStep(BaseModel):
    step: int = Field(ge=1)
    instruction: str = Field(min_length=1)
    duration: int = 0

    model_config = {"frozen": True}


class ImageDescriptor(BaseModel):
    url: str
    alt: str
    is_primary: bool = Field(default=True, alias="isPrimary")
    source: str
    width: Optional[int] = None
    height: Optional[int] = None

    model_config = {"populate_by_name": True, "frozen": True}


class DietaryInfo(BaseModel):
    vegetarian: bool = False
    vegan: bool = False
    gluten_free: bool = Field(default=False, alias="glutenFree")

    model_config = {"populate_by_name": True, "frozen": True}


class Rating(BaseModel):
    average: float = 0
    count: int = 0

    model_config = {"frozen": True}


class RecipeTimes(BaseModel):
    prep_time: int = Field(default=10, alias="prepTime")
    cook_time: int = Field(default=15, alias="cookTime")

    model_config = {"populate_by_name": True, "frozen": True}


class CanonicalRecipe(BaseModel):
    title: str
    description: str
    ingredients: Tuple[Ingredient, ...] = ()
    instructions: Tuple[InstructionStep, ...] = ()
    prep_time: int = Field(ge=10, alias="prepTime")
    cook_time: int = Field(ge=15, alias="cookTime")
    servings: int = Field(default=4, ge=1)
    difficulty: Difficulty
    cuisine: str = "International"
    category: Category = Category.MAIN_COURSE
    tags: Tuple[str, ...] = ()
    dietary_info: DietaryInfo = Field(default_factory=DietaryInfo, alias="dietaryInfo")
    images: Tuple[ImageDescriptor, ...] = ()
    # Opaque owner reference (user id string, ObjectId, ...), stored as given
    author: Optional[Any] = None
    is_public: bool = Field(default=True, alias="isPublic")
    rating: Rating = Field(default_factory=Rating)
    view_count: int = Field(default=0, alias="viewCount")
    youtube_url: Optional[str] = Field(default=None, alias="youtubeUrl")
    source_url: Optional[str] = Field(default=None, alias="sourceUrl")
    external_id: Optional[str] = Field(default=None, alias="externalId")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def total_time(self) -> int:
        return self.prep_time + self.cook_time

    @property
    def primary_image(self) -> Optional[ImageDescriptor]:
        for img in self.images:
            if img.is_primary:
                return img
        return self.images[0] if self.images else None
