"""Canned photo analyses served when the vision model is unavailable."""

MOCK_FOOD_ANALYSES = [
    {
        "items": [
            {"name": "Izgara Tavuk Göğsü", "grams": 150, "calories": 248, "protein": 46, "carbs": 0, "fats": 5},
            {"name": "Pilav", "grams": 100, "calories": 130, "protein": 2, "carbs": 28, "fats": 0.3},
            {"name": "Yeşil Salata", "grams": 80, "calories": 20, "protein": 1, "carbs": 4, "fats": 0.2},
        ],
        "portion": "1 porsiyon",
    },
    {
        "items": [
            {"name": "Omlet (2 yumurta)", "grams": 120, "calories": 188, "protein": 13, "carbs": 1, "fats": 14},
            {"name": "Tam Buğday Ekmeği", "grams": 60, "calories": 140, "protein": 6, "carbs": 24, "fats": 2},
            {"name": "Domates", "grams": 100, "calories": 18, "protein": 1, "carbs": 4, "fats": 0.2},
        ],
        "portion": "1 porsiyon",
    },
    {
        "items": [
            {"name": "Izgara Somon", "grams": 150, "calories": 280, "protein": 39, "carbs": 0, "fats": 13},
            {"name": "Buharda Brokoli", "grams": 100, "calories": 34, "protein": 3, "carbs": 7, "fats": 0.4},
            {"name": "Kinoa", "grams": 80, "calories": 120, "protein": 4, "carbs": 21, "fats": 2},
        ],
        "portion": "1 porsiyon",
    },
    {
        "items": [
            {"name": "Mercimek Çorbası", "grams": 250, "calories": 180, "protein": 12, "carbs": 30, "fats": 1},
            {"name": "Yoğurt", "grams": 100, "calories": 61, "protein": 3, "carbs": 5, "fats": 3},
        ],
        "portion": "1 kase",
    },
    {
        "items": [
            {"name": "Tavuklu Wrap", "grams": 200, "calories": 350, "protein": 28, "carbs": 38, "fats": 10},
            {"name": "Patates Kızartması", "grams": 100, "calories": 312, "protein": 4, "carbs": 41, "fats": 15},
        ],
        "portion": "1 adet",
    },
]
