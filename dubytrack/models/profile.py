from dubytrack.extensions import db


class Profile(db.Model):
    __tablename__ = "profiles"

    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), primary_key=True)
    height_cm = db.Column(db.Integer, nullable=False)
    current_weight_kg = db.Column(db.Numeric(6, 2), nullable=False)
    goal_weight_kg = db.Column(db.Numeric(6, 2), nullable=False)
    target_date = db.Column(db.DateTime)
    gender = db.Column(db.String(50), nullable=False)
    age = db.Column(db.Integer, nullable=False)
    activity_level = db.Column(db.String(20), nullable=False)
    daily_duby_budget = db.Column(db.Integer, nullable=False)
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now(), nullable=False)

    def to_dict(self):
        return {
            "userId": self.user_id,
            "heightCm": self.height_cm,
            "currentWeightKg": float(self.current_weight_kg),
            "goalWeightKg": float(self.goal_weight_kg),
            "targetDate": self.target_date.isoformat() if self.target_date else None,
            "gender": self.gender,
            "age": self.age,
            "activityLevel": self.activity_level,
            "dailyDubyBudget": self.daily_duby_budget,
        }
