from __future__ import annotations

import pytest

import mealdb_bridge.services.images as im

PIZZA = "photo-1574071318508-1cdbab80d002"
SALMON = "photo-1514516870926-205989f6c8b0"
DEFAULT_URL = "https://images.unsplash.com/photo-1556909114-f6e7ad7d3136?w=800&h=600&fit=crop&q=80"


def _url(image_id: str) -> str:
    return f"https://images.unsplash.com/{image_id}?w=800&h=600&fit=crop&q=80"


def test_unknown_title_without_cuisine_gets_default():
    img = im.resolve_image("Zxqv Glorp")

    assert img.url == DEFAULT_URL
    assert img.source == im.SOURCE_DEFAULT
    assert img.is_primary is True
    assert (img.width, img.height) == (800, 600)


@pytest.mark.parametrize("title", [None, "", "   ", 42, ["pizza"]])
def test_missing_or_non_string_title_gets_default(title):
    img = im.resolve_image(title, "Italian")

    assert img.url == DEFAULT_URL
    assert img.alt == "Recipe"


@pytest.mark.parametrize("cuisine", [None, "", "Mexican", "Japanese", "International"])
def test_pizza_wins_over_cuisine(cuisine):
    img = im.resolve_image("Pepperoni Pizza", cuisine)

    assert img.url == _url(PIZZA)
    assert img.source == im.SOURCE_CURATED


def test_exact_match_is_case_and_whitespace_insensitive():
    m = im.match_image("  Chicken Tikka Masala ")

    assert m.tier == "exact"
    assert m.image_id == "photo-1603133872878-684f208fb84b"


def test_substring_uses_table_order():
    # "chicken biryani" would be an exact hit, but "biryani" sits earlier in the
    # table and matches first for a longer title
    m = im.match_image("Spicy Chicken Biryani Bowl")

    assert m.tier == "substring"
    assert m.image_id == dict(im.KEYWORD_IMAGES)["biryani"]


def test_substring_matches_title_inside_key():
    # "lasag" is contained in the "lasagna" key
    m = im.match_image("Lasag")

    assert m.tier == "substring"
    assert m.image_id == "photo-1605478508892-7245f857b7c5"


def test_fish_title_hits_keyword_before_dish_type():
    m = im.match_image("Baked Fish Pie")

    # "fish" appears in the seafood family before "pie" in desserts
    assert m.tier == "substring"
    assert m.image_id == "photo-1504674900247-0877df9cc836"


@pytest.mark.parametrize(
    "cuisine, keyword",
    [
        ("Indian", "butter chicken"),
        ("Chinese", "fried rice"),
        ("Italian", "pizza"),
        ("Mexican", "tacos"),
        ("japanese", "sushi"),
        ("Thai", "pad thai"),
        ("Korean", "lo mein"),
        ("Vietnamese", "pho"),
        ("French", "ratatouille"),
        ("Spanish", "lo mein"),
        ("Seafood", "salmon"),
    ],
)
def test_cuisine_fallback(cuisine, keyword):
    m = im.match_image("Grandma's Special", cuisine)

    assert m.tier == "cuisine"
    assert m.image_id == dict(im.KEYWORD_IMAGES)[keyword]


def test_cuisine_fallback_checks_fragments_in_order():
    # "indian" is tested before "chinese"
    m = im.match_image("Grandma's Special", "Indian-Chinese fusion")

    assert m.image_id == "photo-1627308595229-7830a5c91f9f"


def test_unknown_cuisine_falls_through_to_default():
    assert im.match_image("Grandma's Special", "Kenyan") == im.DEFAULT_MATCH


def test_dish_type_fallback_for_dessert():
    m = im.match_image("Grandma's Dessert Special")

    assert m.tier == "dish_type"
    assert m.image_id == dict(im.KEYWORD_IMAGES)["cake"]


def test_dish_type_fallback_for_breakfast():
    m = im.match_image("Grandma's Breakfast Special")

    assert m.tier == "dish_type"
    assert m.image_id == dict(im.KEYWORD_IMAGES)["pancakes"]


def test_korean_and_spanish_share_the_lo_mein_photo():
    korean = im.match_image("Grandma's Special", "Korean")
    spanish = im.match_image("Grandma's Special", "Spanish")

    assert korean.image_id == spanish.image_id == "photo-1559314809-0cfa8c5e95bd"
    assert im.match_image("Grandma's Special", "French").image_id == "photo-1512621776951-a57141f2eefd"


def test_keyword_table_has_no_duplicate_keys():
    keys = [k for k, _ in im.KEYWORD_IMAGES]

    assert len(keys) == len(set(keys))
    assert keys[0] == "butter chicken"
    assert keys.index("pizza") < keys.index("margherita pizza")


def test_fetch_recipe_images_returns_single_primary():
    images = im.fetch_recipe_images("Beef Tacos", "Mexican")

    assert len(images) == 1
    assert images[0].alt == "Beef Tacos"
    assert images[0].url == _url("photo-1552332386-f8dd00dc2f85")


def test_earlier_family_wins_when_two_keys_match():
    # teriyaki (Japanese) is listed before salmon (Seafood)
    m = im.match_image("Salmon Teriyaki")

    assert m.image_id == "photo-1562967916-eb82221dfb92"


def test_descriptor_dumps_camel_case():
    d = im.resolve_image("Grilled Salmon").model_dump(by_alias=True)

    assert d["isPrimary"] is True
    assert d["url"] == _url(SALMON)
