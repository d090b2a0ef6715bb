from dubytrack.extensions import db


class WeightLog(db.Model):
    __tablename__ = "weight_logs"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    weight_kg = db.Column(db.Numeric(6, 2), nullable=False)
    date = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
