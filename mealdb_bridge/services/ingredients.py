# mealdb_bridge/services/ingredients.py
from __future__ import annotations

from typing import List

from mealdb_bridge.core import config
from mealdb_bridge.core.text import clean_text
from mealdb_bridge.models.recipe import Ingredient, SourceRecord


def extract_ingredients(record: SourceRecord) -> List[Ingredient]:
    """
    Read the numbered strIngredientN / strMeasureN slots (1..20) in order.
    Empty slots are skipped. TheMealDB keeps quantity and unit in one measure
    string ("2 tbs"), so it lands in both amount and unit; amount falls back
    to "1" when there is no measure.
    """
    out: List[Ingredient] = []
    for i in range(1, config.MAX_INGREDIENT_SLOTS + 1):
        name = clean_text(record.get(f"strIngredient{i}"))
        if not name:
            continue
        measure = clean_text(record.get(f"strMeasure{i}"))
        out.append(Ingredient(name=name, amount=measure or "1", unit=measure))
    return out
