from flask import Blueprint, jsonify

from admin_panel.access import locked_kiosk

dashboard_bp = Blueprint("dashboard", __name__)


@dashboard_bp.route("/", methods=["GET"])
def dashboard():
    with locked_kiosk() as kiosk:
        report = kiosk.get_analytics()
    return jsonify(report.to_dict())


@dashboard_bp.route("/pricing", methods=["GET"])
def pricing():
    with locked_kiosk() as kiosk:
        info = kiosk.get_pricing_info()
    return jsonify(info.to_dict())
