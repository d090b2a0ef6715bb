from dubytrack.extensions import db


class FoodLog(db.Model):
    __tablename__ = "food_logs"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    food_item_id = db.Column(db.Integer, db.ForeignKey("food_items.id"), nullable=False)
    portion = db.Column(db.Numeric(8, 2), nullable=False, default=1)
    occurred_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    # Cost at logging time; FoodItem.duby may change afterwards
    duby_cost = db.Column(db.Numeric(10, 2), nullable=False, default=0)

    food_item = db.relationship("FoodItem")
