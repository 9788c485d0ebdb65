# mealdb_bridge/services/mealdb_import.py
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

from mealdb_bridge.clients.mealdb import MealDBClient, MealDBError
from mealdb_bridge.core import config
from mealdb_bridge.core.batch_context import batch_scope
from mealdb_bridge.core.text import clean_text
from mealdb_bridge.models.recipe import CanonicalRecipe
from mealdb_bridge.services.normalize import normalize_many

log = logging.getLogger("mealdb_bridge.import")


async def fetch_random_meals(
    client: MealDBClient,
    count: int = 10,
    delay_s: float = config.MEALDB_RANDOM_DELAY_S,
) -> List[Dict[str, Any]]:
    meals: List[Dict[str, Any]] = []
    for i in range(count):
        meal = await client.random_meal()
        if meal:
            meals.append(meal)
        # random.php is rate limited; space the calls out
        if delay_s and i < count - 1:
            await asyncio.sleep(delay_s)
    return meals


async def _lookup_full(client: MealDBClient, partial: List[Dict[str, Any]], limit: Optional[int]) -> List[Dict[str, Any]]:
    """
    filter.php only returns idMeal / strMeal / strMealThumb, so each hit is
    fetched again in full. A failed lookup drops that meal, not the batch.
    """
    ids = [m.get("idMeal") for m in partial if m.get("idMeal")]
    if limit is not None:
        ids = ids[:limit]

    full: List[Dict[str, Any]] = []
    for meal_id in ids:
        try:
            meal = await client.lookup(meal_id)
        except (httpx.HTTPError, MealDBError) as e:
            log.warning("lookup failed", extra={"meal_id": meal_id, "error": str(e)})
            continue
        if meal:
            full.append(meal)
    return full


def _titled(meals: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    # normalize() rejects untitled meals; one bad row must not sink the batch
    out: List[Dict[str, Any]] = []
    for meal in meals:
        if clean_text(meal.get("strMeal")):
            out.append(meal)
        else:
            log.warning("untitled meal skipped", extra={"meal_id": meal.get("idMeal")})
    return out


async def import_random(
    client: MealDBClient,
    count: int = 10,
    owner_id: Optional[Any] = None,
    delay_s: float = config.MEALDB_RANDOM_DELAY_S,
) -> List[CanonicalRecipe]:
    with batch_scope():
        meals = await fetch_random_meals(client, count=count, delay_s=delay_s)
        return normalize_many(_titled(meals), owner_id=owner_id)


async def import_search(client: MealDBClient, query: str, owner_id: Optional[Any] = None) -> List[CanonicalRecipe]:
    with batch_scope():
        meals = await client.search(query)
        return normalize_many(_titled(meals), owner_id=owner_id)


async def import_by_area(
    client: MealDBClient,
    area: str,
    owner_id: Optional[Any] = None,
    limit: Optional[int] = None,
) -> List[CanonicalRecipe]:
    with batch_scope():
        partial = await client.filter_by_area(area)
        meals = await _lookup_full(client, partial, limit)
        return normalize_many(_titled(meals), owner_id=owner_id)


async def import_by_category(
    client: MealDBClient,
    category: str,
    owner_id: Optional[Any] = None,
    limit: Optional[int] = None,
) -> List[CanonicalRecipe]:
    with batch_scope():
        partial = await client.filter_by_category(category)
        meals = await _lookup_full(client, partial, limit)
        return normalize_many(_titled(meals), owner_id=owner_id)
