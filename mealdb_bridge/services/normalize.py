# mealdb_bridge/services/normalize.py
from __future__ import annotations

import logging
import time
from typing import Any, Iterable, List, Optional

from mealdb_bridge.core import config
from mealdb_bridge.core.batch_context import batch_scope
from mealdb_bridge.core.text import clean_text, uniq
from mealdb_bridge.models.recipe import CanonicalRecipe, ImageDescriptor, SourceRecord
from mealdb_bridge.services.categories import (
    compute_dietary_info,
    estimate_difficulty,
    estimate_times,
    map_category,
    map_cuisine,
)
from mealdb_bridge.services.images import fetch_recipe_images
from mealdb_bridge.services.ingredients import extract_ingredients
from mealdb_bridge.services.instructions import segment_instructions

log = logging.getLogger("mealdb_bridge.normalize")


class MissingTitleError(ValueError):
    pass


def _ms_since(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _images(record: SourceRecord, title: str, cuisine: str) -> List[ImageDescriptor]:
    # A photo shipped with the meal beats anything from the catalog
    thumb = clean_text(record.get("strMealThumb"))
    if thumb:
        # TheMealDB does not report photo dimensions, so width/height stay unset
        return [ImageDescriptor(url=thumb, alt=title, is_primary=True, source="themealdb")]
    return fetch_recipe_images(title, cuisine)


def _tags(record: SourceRecord, cuisine: str) -> List[str]:
    # strTags is a comma list like "Pasta,Curry"
    extra = clean_text(record.get("strTags")).split(",")
    return uniq([record.get("strCategory"), cuisine, *extra])


def _description(title: str, cuisine: str, source_category: str) -> str:
    kind = source_category.lower() or "dish"
    return f"{title} - A delicious {cuisine.lower()} {kind}"


def normalize(record: SourceRecord, owner_id: Optional[Any] = None) -> CanonicalRecipe:
    """
    Turn one TheMealDB meal into a CanonicalRecipe.

    The caller is expected to have checked that the meal has a title;
    MissingTitleError is raised otherwise. Everything else degrades to defaults.
    """
    start = time.perf_counter()

    title = clean_text(record.get("strMeal"))
    if not title:
        raise MissingTitleError("Source record has no strMeal title")

    ingredients = extract_ingredients(record)
    instructions = segment_instructions(record.get("strInstructions"), title)

    source_category = clean_text(record.get("strCategory"))
    category = map_category(record.get("strCategory"))
    cuisine = map_cuisine(record.get("strArea"))
    difficulty = estimate_difficulty(len(ingredients), len(instructions))
    times = estimate_times(len(ingredients), len(instructions))
    dietary = compute_dietary_info(ingredients)

    recipe = CanonicalRecipe(
        title=title,
        description=_description(title, cuisine, source_category),
        ingredients=ingredients,
        instructions=instructions,
        prep_time=times.prep_time,
        cook_time=times.cook_time,
        servings=config.DEFAULT_SERVINGS,
        difficulty=difficulty,
        cuisine=cuisine,
        category=category,
        tags=_tags(record, cuisine),
        dietary_info=dietary,
        images=_images(record, title, cuisine),
        author=owner_id,
        youtube_url=clean_text(record.get("strYoutube")) or None,
        source_url=clean_text(record.get("strSource")) or None,
        external_id=clean_text(record.get("idMeal")) or None,
    )

    log.info(
        "normalized",
        extra={"meal_id": recipe.external_id, "duration_ms": _ms_since(start)},
    )
    return recipe


def normalize_many(records: Iterable[SourceRecord], owner_id: Optional[Any] = None) -> List[CanonicalRecipe]:
    # Each record is independent; output order follows input order
    with batch_scope():
        return [normalize(r, owner_id=owner_id) for r in records]
