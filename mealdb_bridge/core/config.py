import os

# --- Version (override via env) ---
APP_VERSION = os.getenv("APP_VERSION", "1.0.1")

# TheMealDB public test key ("1") needs no signup
MEALDB_BASE_URL = os.getenv("MEALDB_BASE_URL", "https://www.themealdb.com/api/json/v1/1")
MEALDB_TIMEOUT_S = float(os.getenv("MEALDB_TIMEOUT_S", "15"))
MEALDB_RANDOM_DELAY_S = float(os.getenv("MEALDB_RANDOM_DELAY_S", "0.3"))
USER_AGENT = f"mealdb-bridge/{APP_VERSION}"

# --- Image catalog ---
IMAGE_CDN_BASE = os.getenv("IMAGE_CDN_BASE", "https://images.unsplash.com")
IMAGE_WIDTH = 800
IMAGE_HEIGHT = 600
IMAGE_QUERY = f"w={IMAGE_WIDTH}&h={IMAGE_HEIGHT}&fit=crop&q=80"
DEFAULT_IMAGE_ID = "photo-1556909114-f6e7ad7d3136"

# --- Normalization defaults ---
DEFAULT_SERVINGS = 4
MAX_INGREDIENT_SLOTS = 20
