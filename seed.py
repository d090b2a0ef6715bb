from dubytrack import create_app
from dubytrack.extensions import db
from dubytrack.models.food_item import FoodItem

STARTER_CATALOG = [
    ("Apple", 1.0, "piece"),
    ("Chicken Breast 100g", 2.0, "100g"),
    ("Rice 100g", 3.0, "100g"),
]

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    if FoodItem.query.count() == 0:
        for name, duby, unit in STARTER_CATALOG:
            db.session.add(FoodItem(name=name, duby=duby, unit=unit))
        db.session.commit()
        print(f"Seeded {len(STARTER_CATALOG)} food items.")
    else:
        print("Food catalog already populated, nothing to seed.")
