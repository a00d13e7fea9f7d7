"""Editable static cookie catalog."""

from __future__ import annotations

# Raw seed records consumed by cookie_kingdom.data (which validates them into Item instances).
COOKIE_RECORDS: list[dict[str, object]] = [
    {
        "name": "Chocolate Chip Cookies",
        "ingredients": [
            "1 cup butter",
            "1 cup white sugar",
            "2 cups flour",
            "2 eggs",
            "1 tsp vanilla extract",
            "2 cups chocolate chips",
        ],
        "substitutions": {
            "butter": "Use coconut oil as a vegan alternative",
            "eggs": "Use flax eggs (1 tbsp flaxseed + 2.5 tbsp water per egg)",
        },
        "process": (
            "Preheat oven to 180°C. Cream butter and sugar. Add eggs and vanilla. "
            "Mix in flour and then fold in chocolate chips. Scoop onto tray and bake 10–12 minutes."
        ),
        "rating": 4.8,
        "reviews": [
            "Absolutely delicious and easy to make!",
            "My kids loved these! Will bake again.",
        ],
    },
    {
        "name": "Oatmeal Raisin Cookies",
        "ingredients": [
            "1 cup butter",
            "1 cup brown sugar",
            "2 eggs",
            "1.5 cups flour",
            "2 cups rolled oats",
            "1 cup raisins",
            "1 tsp cinnamon",
        ],
        "substitutions": {
            "raisins": "Use chopped dates or cranberries",
            "butter": "Substitute with margarine or vegan butter",
        },
        "process": (
            "Preheat oven to 180°C. Cream butter and sugar. Add eggs. "
            "Stir in flour, oats, cinnamon, then raisins. Bake for 12–15 minutes until golden brown."
        ),
        "rating": 4.6,
        "reviews": [
            "Super chewy and flavorful!",
            "Perfect with a glass of milk.",
        ],
    },
]

REQUIRED_RECORD_KEYS: tuple[str, ...] = ("name", "ingredients", "process", "rating")

# Older seed files name the substitutions mapping "alternatives".
SUBSTITUTION_KEY_ALIASES: tuple[str, ...] = ("substitutions", "alternatives")

MIN_RATING = 0.0
MAX_RATING = 5.0
