import logging
from typing import Any, Dict, List, Optional

import httpx

from mealdb_bridge.core import config

log = logging.getLogger("mealdb_bridge.mealdb")


class MealDBError(RuntimeError):
    pass


class MealDBClient:
    """
    Thin async wrapper over TheMealDB's JSON API. One GET per call, no retries.
    Every endpoint answers {"meals": [...]} or {"meals": null}.
    """

    def __init__(
        self,
        base_url: str = config.MEALDB_BASE_URL,
        timeout_s: float = config.MEALDB_TIMEOUT_S,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.transport = transport

    async def _get(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> List[Dict[str, Any]]:
        async with httpx.AsyncClient(timeout=self.timeout_s, transport=self.transport) as client:
            r = await client.get(
                f"{self.base_url}/{endpoint}",
                params=params,
                headers={"User-Agent": config.USER_AGENT},
            )
            log.debug("mealdb request", extra={"endpoint": endpoint, "status_code": r.status_code})
            r.raise_for_status()
            try:
                data = r.json()
            except ValueError as e:
                raise MealDBError(f"Failed to parse JSON from {endpoint}: {e}") from e

        meals = data.get("meals") if isinstance(data, dict) else None
        return meals if isinstance(meals, list) else []

    async def random_meal(self) -> Optional[Dict[str, Any]]:
        meals = await self._get("random.php")
        return meals[0] if meals else None

    async def search(self, query: str) -> List[Dict[str, Any]]:
        return await self._get("search.php", {"s": query})

    async def lookup(self, meal_id: str) -> Optional[Dict[str, Any]]:
        meals = await self._get("lookup.php", {"i": str(meal_id)})
        return meals[0] if meals else None

    async def filter_by_area(self, area: str) -> List[Dict[str, Any]]:
        return await self._get("filter.php", {"a": area})

    async def filter_by_category(self, category: str) -> List[Dict[str, Any]]:
        return await self._get("filter.php", {"c": category})

    async def list_areas(self) -> List[str]:
        meals = await self._get("list.php", {"a": "list"})
        return [m["strArea"] for m in meals if m.get("strArea")]

    async def list_categories(self) -> List[str]:
        meals = await self._get("list.php", {"c": "list"})
        return [m["strCategory"] for m in meals if m.get("strCategory")]


mealdb = MealDBClient()
