from dubytrack.extensions import db


class FoodItem(db.Model):
    __tablename__ = "food_items"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False, index=True)
    duby = db.Column(db.Numeric(8, 2), nullable=False, default=0)
    unit = db.Column(db.String(50), nullable=False, default="")

    def to_dict(self):
        return {"id": self.id, "name": self.name, "duby": float(self.duby), "unit": self.unit}
