# mealdb_bridge/services/images.py
from __future__ import annotations

import logging
from typing import Any, List, NamedTuple, Optional, Tuple

from mealdb_bridge.core import config
from mealdb_bridge.models.recipe import ImageDescriptor

log = logging.getLogger("mealdb_bridge.images")

SOURCE_CURATED = "unsplash-verified"
SOURCE_DEFAULT = "unsplash-fallback"

# Order matters: the substring pass returns the first key that matches, so
# families stay grouped and more specific keys come first inside a family.
KEYWORD_IMAGES: Tuple[Tuple[str, str], ...] = (
    # Indian
    ("butter chicken", "photo-1627308595229-7830a5c91f9f"),
    ("chicken tikka masala", "photo-1603133872878-684f208fb84b"),
    ("biryani", "photo-1601050690597-1c30c8d685fa"),
    ("palak paneer", "photo-1626081526123-d4dd7a1f1a62"),
    ("dal makhani", "photo-1601050690597-1c30c8d685fa"),
    ("chana masala", "photo-1604908177225-4e9f75e6c6a5"),
    ("aloo gobi", "photo-1512621776951-a57141f2eefd"),
    ("samosa", "photo-1601050690597-df0568f70950"),
    ("naan", "photo-1509440159596-0249088772ff"),
    ("naan bread", "photo-1509440159596-0249088772ff"),
    ("roti", "photo-1565299585323-38174c4aabaa"),
    ("masala dosa", "photo-1601050690597-df0568f70950"),
    ("chicken biryani", "photo-1601050690597-1c30c8d685fa"),
    # Chinese
    ("kung pao", "photo-1605478508892-7245f857b7c5"),
    ("kung pao chicken", "photo-1605478508892-7245f857b7c5"),
    ("sweet and sour", "photo-1576402187879-877d6e67e8b8"),
    ("sweet and sour pork", "photo-1576402187879-877d6e67e8b8"),
    ("general tso", "photo-1605478508892-7245f857b7c5"),
    ("mapo tofu", "photo-1525755662778-989d0524087e"),
    ("hot and sour soup", "photo-1571091655789-405eb7a3a6c6"),
    ("peking duck", "photo-1565299585323-38174c4aabaa"),
    ("dumpling", "photo-1562967916-eb82221dfb92"),
    ("dumplings", "photo-1562967916-eb82221dfb92"),
    ("spring roll", "photo-1621996346565-e3dbc353d946"),
    ("spring rolls", "photo-1621996346565-e3dbc353d946"),
    ("fried rice", "photo-1603133872878-684f208fb84b"),
    ("lo mein", "photo-1559314809-0cfa8c5e95bd"),
    # Italian
    ("pizza", "photo-1574071318508-1cdbab80d002"),
    ("margherita pizza", "photo-1574071318508-1cdbab80d002"),
    ("spaghetti", "photo-1621996346565-e3dbc353d946"),
    ("carbonara", "photo-1621996346565-e3dbc353d946"),
    ("lasagna", "photo-1605478508892-7245f857b7c5"),
    ("risotto", "photo-1621996346565-e3dbc353d946"),
    ("fettuccine", "photo-1621996346565-e3dbc353d946"),
    ("alfredo", "photo-1621996346565-e3dbc353d946"),
    ("penne", "photo-1621996346565-e3dbc353d946"),
    ("chicken parmigiana", "photo-1562967916-eb82221dfb92"),
    ("bruschetta", "photo-1574071318508-1cdbab80d002"),
    ("minestrone", "photo-1571091655789-405eb7a3a6c6"),
    ("tiramisu", "photo-1617196034796-4e0c7b7c2a8a"),
    # Mexican
    ("taco", "photo-1552332386-f8dd00dc2f85"),
    ("tacos", "photo-1552332386-f8dd00dc2f85"),
    ("enchilada", "photo-1601924582971-6f95e1fa8b2c"),
    ("enchiladas", "photo-1601924582971-6f95e1fa8b2c"),
    ("quesadilla", "photo-1605478508892-7245f857b7c5"),
    ("quesadillas", "photo-1605478508892-7245f857b7c5"),
    ("guacamole", "photo-1606813907291-d86efa9b94db"),
    ("chiles rellenos", "photo-1601924582971-6f95e1fa8b2c"),
    ("carnitas", "photo-1552332386-f8dd00dc2f85"),
    ("pozole", "photo-1571091655789-405eb7a3a6c6"),
    ("churro", "photo-1499636136210-6f4ee915583e"),
    ("churros", "photo-1499636136210-6f4ee915583e"),
    ("salsa verde", "photo-1606813907291-d86efa9b94db"),
    ("fish taco", "photo-1552332386-f8dd00dc2f85"),
    ("fish tacos", "photo-1552332386-f8dd00dc2f85"),
    ("beef taco", "photo-1552332386-f8dd00dc2f85"),
    ("beef tacos", "photo-1552332386-f8dd00dc2f85"),
    ("chicken enchilada", "photo-1601924582971-6f95e1fa8b2c"),
    ("chicken enchiladas", "photo-1601924582971-6f95e1fa8b2c"),
    ("chicken quesadilla", "photo-1605478508892-7245f857b7c5"),
    ("chicken quesadillas", "photo-1605478508892-7245f857b7c5"),
    # Japanese
    ("teriyaki", "photo-1562967916-eb82221dfb92"),
    ("chicken teriyaki", "photo-1562967916-eb82221dfb92"),
    ("sushi", "photo-1546069901-ba9599a7e63c"),
    ("sushi roll", "photo-1546069901-ba9599a7e63c"),
    ("sushi rolls", "photo-1546069901-ba9599a7e63c"),
    ("ramen", "photo-1553621042-f6e147245754"),
    ("miso soup", "photo-1571091655789-405eb7a3a6c6"),
    ("tonkatsu", "photo-1603133872878-684f208fb84b"),
    ("yakitori", "photo-1562967916-eb82221dfb92"),
    ("tempura", "photo-1590080875831-c2d1a9c9ad62"),
    ("okonomiyaki", "photo-1574071318508-1cdbab80d002"),
    ("katsu curry", "photo-1562967916-eb82221dfb92"),
    ("onigiri", "photo-1546069901-ba9599a7e63c"),
    ("sushi platter", "photo-1546069901-ba9599a7e63c"),
    # Thai
    ("pad thai", "photo-1627308595229-7830a5c91f9f"),
    ("green curry", "photo-1590080875831-c2d1a9c9ad62"),
    ("tom yum", "photo-1617196034796-4e0c7b7c2a8a"),
    ("tom yum soup", "photo-1617196034796-4e0c7b7c2a8a"),
    ("pad krapow", "photo-1627308595229-7830a5c91f9f"),
    ("massaman", "photo-1590080875831-c2d1a9c9ad62"),
    ("massaman curry", "photo-1590080875831-c2d1a9c9ad62"),
    ("som tam", "photo-1546793665-c74683f339c1"),
    ("thai basil chicken", "photo-1603133872878-684f208fb84b"),
    ("mango sticky rice", "photo-1505253716362-afaea1d3d1af"),
    ("larb", "photo-1546793665-c74683f339c1"),
    ("satay", "photo-1562967916-eb82221dfb92"),
    # Seafood
    ("salmon", "photo-1514516870926-205989f6c8b0"),
    ("grilled salmon", "photo-1514516870926-205989f6c8b0"),
    ("shrimp", "photo-1617196034796-4e0c7b7c2a8a"),
    ("shrimp scampi", "photo-1617196034796-4e0c7b7c2a8a"),
    ("fish", "photo-1504674900247-0877df9cc836"),
    ("fish and chips", "photo-1565299585323-38174c4aabaa"),
    ("lobster", "photo-1565299585323-38174c4aabaa"),
    ("lobster roll", "photo-1565299585323-38174c4aabaa"),
    ("crab", "photo-1565299585323-38174c4aabaa"),
    ("crab cake", "photo-1565299585323-38174c4aabaa"),
    ("crab cakes", "photo-1565299585323-38174c4aabaa"),
    ("cioppino", "photo-1571091655789-405eb7a3a6c6"),
    # Soups (minestrone and miso soup already listed above)
    ("soup", "photo-1571091655789-405eb7a3a6c6"),
    ("pho", "photo-1617196034796-4e0c7b7c2a8a"),
    ("chowder", "photo-1565958011703-44e211f03835"),
    ("tomato soup", "photo-1571091655789-405eb7a3a6c6"),
    ("chicken noodle soup", "photo-1571091655789-405eb7a3a6c6"),
    ("french onion soup", "photo-1571091655789-405eb7a3a6c6"),
    ("lentil soup", "photo-1571091655789-405eb7a3a6c6"),
    ("wonton soup", "photo-1571091655789-405eb7a3a6c6"),
    ("clam chowder", "photo-1565958011703-44e211f03835"),
    ("borscht", "photo-1571091655789-405eb7a3a6c6"),
    # Desserts (tiramisu already listed under Italian)
    ("cake", "photo-1578985545062-69928b1d9587"),
    ("chocolate cake", "photo-1578985545062-69928b1d9587"),
    ("cookie", "photo-1499636136210-6f4ee915583e"),
    ("cookies", "photo-1499636136210-6f4ee915583e"),
    ("chocolate chip cookie", "photo-1499636136210-6f4ee915583e"),
    ("chocolate chip cookies", "photo-1499636136210-6f4ee915583e"),
    ("ice cream", "photo-1505253716362-afaea1d3d1af"),
    ("cheesecake", "photo-1578985545062-69928b1d9587"),
    ("brownie", "photo-1578985545062-69928b1d9587"),
    ("brownies", "photo-1578985545062-69928b1d9587"),
    ("apple pie", "photo-1578985545062-69928b1d9587"),
    ("pie", "photo-1578985545062-69928b1d9587"),
    ("creme brulee", "photo-1578985545062-69928b1d9587"),
    ("panna cotta", "photo-1578985545062-69928b1d9587"),
    ("lemon bar", "photo-1499636136210-6f4ee915583e"),
    ("lemon bars", "photo-1499636136210-6f4ee915583e"),
    # Breakfast
    ("pancake", "photo-1509440159596-0249088772ff"),
    ("pancakes", "photo-1509440159596-0249088772ff"),
    ("waffle", "photo-1509440159596-0249088772ff"),
    ("waffles", "photo-1509440159596-0249088772ff"),
    ("french toast", "photo-1509440159596-0249088772ff"),
    ("omelette", "photo-1574071318508-1cdbab80d002"),
    ("scrambled egg", "photo-1574071318508-1cdbab80d002"),
    ("scrambled eggs", "photo-1574071318508-1cdbab80d002"),
    ("egg", "photo-1574071318508-1cdbab80d002"),
    ("eggs benedict", "photo-1574071318508-1cdbab80d002"),
    ("breakfast burrito", "photo-1552332386-f8dd00dc2f85"),
    ("hash brown", "photo-1574071318508-1cdbab80d002"),
    ("hash browns", "photo-1574071318508-1cdbab80d002"),
    ("bacon", "photo-1565299585323-38174c4aabaa"),
    ("sausage", "photo-1565299585323-38174c4aabaa"),
    # Vegetarian
    ("vegetarian lasagna", "photo-1605478508892-7245f857b7c5"),
    ("veggie burger", "photo-1565299585323-38174c4aabaa"),
    ("stuffed bell pepper", "photo-1512621776951-a57141f2eefd"),
    ("stuffed bell peppers", "photo-1512621776951-a57141f2eefd"),
    ("ratatouille", "photo-1512621776951-a57141f2eefd"),
    ("quinoa bowl", "photo-1512621776951-a57141f2eefd"),
    ("quinoa", "photo-1512621776951-a57141f2eefd"),
    ("cauliflower steak", "photo-1512621776951-a57141f2eefd"),
    ("mushroom risotto", "photo-1621996346565-e3dbc353d946"),
    ("eggplant parmesan", "photo-1605478508892-7245f857b7c5"),
    ("zucchini noodle", "photo-1512621776951-a57141f2eefd"),
    ("zucchini noodles", "photo-1512621776951-a57141f2eefd"),
    ("vegetable curry", "photo-1627308595229-7830a5c91f9f"),
    ("vegetable", "photo-1512621776951-a57141f2eefd"),
    ("vegetable stir fry", "photo-1512621776951-a57141f2eefd"),
    ("salad", "photo-1546069901-5ec6a79120b0"),
    ("caesar salad", "photo-1546069901-5ec6a79120b0"),
    ("greek salad", "photo-1546793665-c74683f339c1"),
)

_KEYWORD_LOOKUP = dict(KEYWORD_IMAGES)


def _keyword_image(keyword: str) -> str:
    return _KEYWORD_LOOKUP[keyword]


# Checked in order against the lowercased cuisine
CUISINE_IMAGES: Tuple[Tuple[str, str], ...] = (
    ("indian", _keyword_image("butter chicken")),
    ("chinese", _keyword_image("fried rice")),
    ("italian", _keyword_image("pizza")),
    ("mexican", _keyword_image("tacos")),
    ("japanese", _keyword_image("sushi")),
    ("thai", _keyword_image("pad thai")),
    ("korean", _keyword_image("lo mein")),
    ("vietnamese", _keyword_image("pho")),
    ("french", _keyword_image("ratatouille")),
    ("spanish", _keyword_image("lo mein")),
    ("seafood", _keyword_image("salmon")),
)

# Coarse dish types looked for in the title when nothing else matched
DISH_TYPE_IMAGES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("soup",), _keyword_image("soup")),
    (("dessert", "cake", "cookie"), _keyword_image("cake")),
    (("breakfast", "pancake", "waffle"), _keyword_image("pancakes")),
    (("fish", "shrimp", "salmon"), _keyword_image("salmon")),
)


class ImageMatch(NamedTuple):
    image_id: str
    tier: str  # exact | substring | cuisine | dish_type | default


DEFAULT_MATCH = ImageMatch(config.DEFAULT_IMAGE_ID, "default")


def image_url(image_id: str) -> str:
    return f"{config.IMAGE_CDN_BASE.rstrip('/')}/{image_id}?{config.IMAGE_QUERY}"


DEFAULT_IMAGE_URL = image_url(config.DEFAULT_IMAGE_ID)


def match_image(title: Any, cuisine: Any = None) -> ImageMatch:
    """
    Walk the fallback chain for a recipe title:
      exact keyword -> keyword/title containment -> cuisine -> dish type -> default

    Never raises. Anything that is not a non-blank string gets the default.
    """
    if not isinstance(title, str) or not title.strip():
        return DEFAULT_MATCH

    t = title.strip().lower()

    if t in _KEYWORD_LOOKUP:
        return ImageMatch(_KEYWORD_LOOKUP[t], "exact")

    # Containment is two-way, so short titles can hit longer keys
    for key, image_id in KEYWORD_IMAGES:
        if key in t or t in key:
            return ImageMatch(image_id, "substring")

    if isinstance(cuisine, str) and cuisine:
        c = cuisine.lower()
        for fragment, image_id in CUISINE_IMAGES:
            if fragment in c:
                return ImageMatch(image_id, "cuisine")

    for fragments, image_id in DISH_TYPE_IMAGES:
        if any(f in t for f in fragments):
            return ImageMatch(image_id, "dish_type")

    return DEFAULT_MATCH


def resolve_image(title: Any, cuisine: Any = None) -> ImageDescriptor:
    match = match_image(title, cuisine)
    log.debug("image resolved", extra={"tier": match.tier})

    alt = title.strip() if isinstance(title, str) and title.strip() else "Recipe"
    source = SOURCE_DEFAULT if match.tier == "default" else SOURCE_CURATED

    return ImageDescriptor(
        url=image_url(match.image_id),
        alt=alt,
        is_primary=True,
        source=source,
        width=config.IMAGE_WIDTH,
        height=config.IMAGE_HEIGHT,
    )


def fetch_recipe_images(title: Any, cuisine: Optional[str] = None) -> List[ImageDescriptor]:
    # Recipes store a list of images; the catalog only ever yields one
    return [resolve_image(title, cuisine)]
