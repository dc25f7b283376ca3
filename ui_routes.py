# ui_routes.py — API banner and health check (no auth)
from flask import Blueprint, current_app

from utils import isoformat, send_success, utc_now

ui = Blueprint("ui", __name__)


@ui.route("/")
def home():
    return send_success("Task Management API", {
        "version": current_app.config["API_VERSION"],
        "healthCheck": "/api/v1/health",
    })


@ui.route("/api/v1/health")
def health():
    return send_success("API is running", {
        "timestamp": isoformat(utc_now()),
        "version": current_app.config["API_VERSION"],
    })
