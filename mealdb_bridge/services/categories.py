# mealdb_bridge/services/categories.py
from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Union

from mealdb_bridge.core.text import clean_text
from mealdb_bridge.models.recipe import Category, DietaryInfo, Difficulty, Ingredient, RecipeTimes

DEFAULT_CUISINE = "International"

# Source vocabulary is matched case-sensitively, exactly as the API spells it
CATEGORY_MAP: Dict[str, Category] = {
    "Beef": Category.MAIN_COURSE,
    "Chicken": Category.MAIN_COURSE,
    "Dessert": Category.DESSERT,
    "Lamb": Category.MAIN_COURSE,
    "Miscellaneous": Category.MAIN_COURSE,
    "Pasta": Category.MAIN_COURSE,
    "Pork": Category.MAIN_COURSE,
    "Seafood": Category.MAIN_COURSE,
    "Side": Category.APPETIZER,
    "Starter": Category.APPETIZER,
    "Vegetarian": Category.MAIN_COURSE,
    "Breakfast": Category.BREAKFAST,
    "Goat": Category.MAIN_COURSE,
}

CUISINE_MAP: Dict[str, str] = {
    "American": "American",
    "British": "British",
    "Canadian": "Canadian",
    "Chinese": "Chinese",
    "Croatian": "Croatian",
    "Dutch": "Dutch",
    "Egyptian": "Egyptian",
    "Filipino": "Filipino",
    "French": "French",
    "Greek": "Greek",
    "Indian": "Indian",
    "Irish": "Irish",
    "Italian": "Italian",
    "Jamaican": "Jamaican",
    "Japanese": "Japanese",
    "Kenyan": "Kenyan",
    "Malaysian": "Malaysian",
    "Mexican": "Mexican",
    "Moroccan": "Moroccan",
    "Polish": "Polish",
    "Portuguese": "Portuguese",
    "Russian": "Russian",
    "Spanish": "Spanish",
    "Thai": "Thai",
    "Tunisian": "Tunisian",
    "Turkish": "Turkish",
    "Unknown": DEFAULT_CUISINE,
    "Vietnamese": "Vietnamese",
}

MEAT_KEYWORDS = ("chicken", "beef", "pork", "fish", "meat", "lamb", "turkey", "bacon", "sausage")
GLUTEN_KEYWORDS = ("flour", "wheat", "bread", "pasta")


def map_category(source_category: Any) -> Category:
    if not isinstance(source_category, str):
        return Category.MAIN_COURSE
    return CATEGORY_MAP.get(source_category, Category.MAIN_COURSE)


def map_cuisine(source_area: Any) -> str:
    if not isinstance(source_area, str) or not source_area.strip():
        return DEFAULT_CUISINE
    return CUISINE_MAP.get(source_area, source_area)


def estimate_difficulty(ingredient_count: int, step_count: int) -> Difficulty:
    if ingredient_count > 10 or step_count > 8:
        return Difficulty.HARD
    if ingredient_count > 6 or step_count > 5:
        return Difficulty.MEDIUM
    return Difficulty.EASY


def estimate_times(ingredient_count: int, step_count: int) -> RecipeTimes:
    # The API has no timings at all; these are rough size-based guesses
    return RecipeTimes(
        prep_time=max(10, int(ingredient_count * 2)),
        cook_time=max(15, int(step_count * 5)),
    )


IngredientLike = Union[Ingredient, Mapping[str, Any], str]


def _names(ingredients: Iterable[IngredientLike]) -> list[str]:
    # Accepts models, dumped {"name": ...} dicts (the persisted shape) and plain names
    out = []
    for ing in ingredients:
        if isinstance(ing, Ingredient):
            name = ing.name
        elif isinstance(ing, Mapping):
            name = clean_text(ing.get("name"))
        else:
            name = clean_text(ing)
        if name:
            out.append(name.lower())
    return out


def compute_dietary_info(ingredients: Iterable[IngredientLike]) -> DietaryInfo:
    names = _names(ingredients)
    vegetarian = not any(m in n for n in names for m in MEAT_KEYWORDS)
    gluten_free = not any(g in n for n in names for g in GLUTEN_KEYWORDS)

    # vegan is not detected (dairy/egg/honey lists would be needed); always False
    return DietaryInfo(vegetarian=vegetarian, vegan=False, gluten_free=gluten_free)
