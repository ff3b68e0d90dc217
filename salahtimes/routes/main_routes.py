# salahtimes/routes/main_routes.py

from flask_smorest import Blueprint
from prometheus_client import generate_latest

from ..schemas import MessageSchema

main_bp = Blueprint('Main', __name__, url_prefix='/')


@main_bp.route('/')
@main_bp.response(200, MessageSchema)
def index():
    """
    Main endpoint for the API.
    """
    return {"message": "Welcome to the SalahTimes API!"}


@main_bp.route('/metrics')
def metrics():
    return generate_latest(), 200, {'Content-Type': 'text/plain; version=0.0.4; charset=utf-8'}
