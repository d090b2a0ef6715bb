from flask import Blueprint
from dubytrack.utils.auth import resolve_user
from dubytrack.controllers.food_controller import (
    list_food_handler,
    search_food_handler,
    create_food_log_handler,
    delete_food_log_handler,
)

food_bp = Blueprint("food", __name__, url_prefix="/api")


@food_bp.get("/food")
def list_food():
    return list_food_handler()


@food_bp.get("/food/search")
def search_food():
    return search_food_handler()


@food_bp.post("/food-log")
@resolve_user
def create_food_log():
    return create_food_log_handler()


@food_bp.delete("/food-log/<int:id>")
@resolve_user
def delete_food_log(id):
    return delete_food_log_handler(id)
