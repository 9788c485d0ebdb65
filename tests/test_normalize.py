from __future__ import annotations

import logging

import pytest

import mealdb_bridge.services.normalize as nz
from mealdb_bridge.core.batch_context import get_batch_id
from mealdb_bridge.models.recipe import Category, Difficulty

DEFAULT_URL = "https://images.unsplash.com/photo-1556909114-f6e7ad7d3136?w=800&h=600&fit=crop&q=80"


def _meal(**overrides) -> dict:
    meal = {
        "idMeal": "52772",
        "strMeal": "Teriyaki Chicken Casserole",
        "strCategory": "Chicken",
        "strArea": "Japanese",
        "strInstructions": (
            "Preheat oven to 350 degrees F.\r\n"
            "Combine soy sauce, water, brown sugar and ginger in a saucepan.\r\n"
            "Meanwhile, cook the rice according to the package.\r\n"
            "Place the chicken breasts in a baking dish and pour the sauce over."
        ),
        "strMealThumb": "https://www.themealdb.com/images/media/meals/wvpsxx1468256321.jpg",
        "strTags": "Meat,Casserole",
        "strYoutube": "https://www.youtube.com/watch?v=4aZr5hZXP_s",
        "strSource": "",
        "strIngredient1": "soy sauce",
        "strMeasure1": "3/4 cup",
        "strIngredient2": "water",
        "strMeasure2": "1/2 cup",
        "strIngredient3": "brown sugar",
        "strMeasure3": "1/4 cup",
        "strIngredient4": "chicken breasts",
        "strMeasure4": "2",
        "strIngredient5": "",
        "strMeasure5": "",
        "strIngredient6": None,
        "strMeasure6": None,
    }
    meal.update(overrides)
    return meal


def test_full_record():
    r = nz.normalize(_meal(), owner_id="user-1")

    assert r.title == "Teriyaki Chicken Casserole"
    assert r.description == "Teriyaki Chicken Casserole - A delicious japanese chicken"
    assert [i.name for i in r.ingredients] == ["soy sauce", "water", "brown sugar", "chicken breasts"]
    assert [s.step for s in r.instructions] == [1, 2, 3, 4]
    assert r.category == Category.MAIN_COURSE
    assert r.cuisine == "Japanese"
    assert r.difficulty == Difficulty.EASY
    assert (r.prep_time, r.cook_time) == (10, 20)
    assert r.total_time == 30
    assert r.servings == 4
    assert r.tags == ("Chicken", "Japanese", "Meat", "Casserole")
    assert r.dietary_info.vegetarian is False
    assert r.dietary_info.vegan is False
    assert r.author == "user-1"
    assert r.is_public is True
    assert (r.rating.average, r.rating.count, r.view_count) == (0, 0, 0)
    assert r.youtube_url == "https://www.youtube.com/watch?v=4aZr5hZXP_s"
    assert r.source_url is None
    assert r.external_id == "52772"


def test_source_photo_wins_over_catalog():
    r = nz.normalize(_meal())

    assert len(r.images) == 1
    assert r.primary_image.url.startswith("https://www.themealdb.com/")
    assert r.primary_image.source == "themealdb"
    # TheMealDB gives no photo dimensions
    assert (r.primary_image.width, r.primary_image.height) == (None, None)


def test_catalog_image_when_source_has_no_photo():
    r = nz.normalize(_meal(strMealThumb="  "))

    # "teriyaki" is a curated keyword
    assert r.images[0].url == (
        "https://images.unsplash.com/photo-1562967916-eb82221dfb92?w=800&h=600&fit=crop&q=80"
    )
    assert r.images[0].source == "unsplash-verified"
    assert r.images[0].alt == "Teriyaki Chicken Casserole"


def test_sparse_record_uses_defaults():
    r = nz.normalize({"strMeal": "Mystery Dish"})

    assert r.ingredients == ()
    assert len(r.instructions) == 1
    assert r.instructions[0].instruction == "Mystery Dish preparation instructions"
    assert r.category == Category.MAIN_COURSE
    assert r.cuisine == "International"
    assert r.description == "Mystery Dish - A delicious international dish"
    assert r.tags == ("International",)
    assert r.images[0].url == DEFAULT_URL
    assert r.images[0].source == "unsplash-fallback"
    assert r.dietary_info.vegetarian is True
    assert r.youtube_url is None
    assert r.external_id is None


def test_unknown_area_passes_through_and_feeds_image_cuisine():
    r = nz.normalize({"strMeal": "Grandma's Special", "strArea": "Mexican-ish"})

    assert r.cuisine == "Mexican-ish"
    assert r.images[0].url.startswith("https://images.unsplash.com/photo-1552332386-f8dd00dc2f85")


@pytest.mark.parametrize("title", [None, "", "   "])
def test_missing_title_is_rejected(title):
    with pytest.raises(nz.MissingTitleError):
        nz.normalize({"strMeal": title})


def test_normalize_is_idempotent():
    meal = _meal(strMealThumb=None)

    assert nz.normalize(meal) == nz.normalize(meal)
    assert nz.normalize(meal).model_dump(by_alias=True) == nz.normalize(meal).model_dump(by_alias=True)


def test_owner_only_changes_author():
    a = nz.normalize(_meal(), owner_id="a").model_dump()
    b = nz.normalize(_meal(), owner_id="b").model_dump()

    assert a.pop("author") == "a"
    assert b.pop("author") == "b"
    assert a == b


def test_author_is_stored_as_given():
    owner = object()

    assert nz.normalize({"strMeal": "Pad Thai"}, owner_id=42).author == 42
    assert nz.normalize({"strMeal": "Pad Thai"}, owner_id=owner).author is owner
    assert [r.author for r in nz.normalize_many([_meal()], owner_id=42)] == [42]


def test_dump_uses_camel_case_keys():
    d = nz.normalize(_meal()).model_dump(by_alias=True)

    for key in ("prepTime", "cookTime", "dietaryInfo", "isPublic", "viewCount", "youtubeUrl", "sourceUrl"):
        assert key in d
    assert d["images"][0]["isPrimary"] is True
    assert d["dietaryInfo"]["glutenFree"] is True


def test_recipe_is_frozen():
    r = nz.normalize(_meal())

    with pytest.raises(Exception):
        r.title = "Other"


def test_recipe_collections_cannot_be_mutated_in_place():
    r = nz.normalize(_meal())

    for field in (r.ingredients, r.instructions, r.tags, r.images):
        assert isinstance(field, tuple)
    with pytest.raises(AttributeError):
        r.tags.append("Hacked")
    assert "Hacked" not in nz.normalize(_meal()).tags


def test_normalize_many_keeps_order_and_batch_id(caplog: pytest.LogCaptureFixture):
    meals = [_meal(strMeal=t, idMeal=str(i)) for i, t in enumerate(["Pad Thai", "Ramen", "Churros"])]

    with caplog.at_level(logging.INFO, logger="mealdb_bridge.normalize"):
        out = nz.normalize_many(meals)

    assert [r.title for r in out] == ["Pad Thai", "Ramen", "Churros"]
    assert [r.external_id for r in out] == ["0", "1", "2"]
    assert len(caplog.records) == 3
    assert get_batch_id() is None
