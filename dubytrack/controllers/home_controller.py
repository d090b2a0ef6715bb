from flask import jsonify
from dubytrack.extensions import db


def health_check():
    db_status = "healthy"
    try:
        db.session.execute(db.text("SELECT 1"))
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"

    return jsonify({
        "ok": db_status == "healthy",
        "database": db_status,
    })
