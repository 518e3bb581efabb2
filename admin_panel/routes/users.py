from flask import Blueprint, jsonify, request

from admin_panel.access import locked_kiosk, page_arg, paginate
from services.errors import InvalidAmount, InvalidQuantity

users_bp = Blueprint('users', __name__)

PER_PAGE = 20


def _payload():
    return request.get_json(silent=True) or request.form.to_dict() or {}


def _number(data, key, error_cls):
    try:
        return float(data.get(key))
    except (TypeError, ValueError):
        raise error_cls(f"'{key}' must be a number")


def _flag(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in ("1", "true", "yes", "on")


@users_bp.route('/', methods=['GET'])
def users_list():
    page = page_arg(request)
    search = request.args.get('search', '').strip().lower()

    with locked_kiosk() as kiosk:
        users = kiosk.list_users()
    if search:
        users = [u for u in users if search in u.name.lower() or search in u.phone]

    chunk, meta = paginate(users, page, PER_PAGE)
    return jsonify(users=[u.to_dict() for u in chunk], search=search, **meta)


@users_bp.route('/', methods=['POST'])
def register_user():
    data = _payload()
    name = (data.get("name") or "").strip()
    phone = (data.get("phone") or "").strip()
    if not name or not phone:
        return jsonify(error="InvalidInput", message="'name' and 'phone' are required"), 400

    with locked_kiosk() as kiosk:
        user_id = kiosk.register_user(name, phone, _flag(data.get("is_student")))
        profile = kiosk.get_user_profile(user_id)
    return jsonify(profile.to_dict()), 201


@users_bp.route('/<int:user_id>', methods=['GET'])
def user_profile(user_id):
    with locked_kiosk() as kiosk:
        profile = kiosk.get_user_profile(user_id)
    return jsonify(profile.to_dict())


@users_bp.route('/<int:user_id>/topup', methods=['POST'])
def top_up(user_id):
    amount = _number(_payload(), "amount", InvalidAmount)
    with locked_kiosk() as kiosk:
        result = kiosk.top_up_wallet(user_id, amount)
    return jsonify(result.to_dict())


@users_bp.route('/<int:user_id>/purchase', methods=['POST'])
def purchase(user_id):
    data = _payload()
    liters = _number(data, "liters", InvalidQuantity)
    with locked_kiosk() as kiosk:
        receipt = kiosk.purchase_water(user_id, liters, data.get("method"))
    return jsonify(receipt.to_dict()), 201


@users_bp.route('/<int:user_id>/pass', methods=['POST'])
def buy_pass(user_id):
    with locked_kiosk() as kiosk:
        receipt = kiosk.purchase_pass(user_id, _payload().get("pass_type"))
    return jsonify(receipt.to_dict()), 201
