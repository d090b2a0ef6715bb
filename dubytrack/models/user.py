from dubytrack.extensions import db


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)

    profile = db.relationship("Profile", uselist=False, backref="user")
    food_logs = db.relationship("FoodLog", backref="user", lazy="dynamic")
    weight_logs = db.relationship("WeightLog", backref="user", lazy="dynamic")
    refresh_tokens = db.relationship("RefreshToken", backref="user", lazy="dynamic")

    def to_public(self):
        return {"id": self.id, "name": self.name, "email": self.email}
