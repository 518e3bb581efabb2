from flask import Blueprint, jsonify, request

from admin_panel.access import locked_kiosk, page_arg, paginate

transactions_bp = Blueprint("transactions", __name__)

PER_PAGE = 50


@transactions_bp.route("/", methods=["GET"])
def transactions_list():
    page = page_arg(request)
    user_id = request.args.get("user_id", type=int)

    with locked_kiosk() as kiosk:
        txns = kiosk.get_transactions(user_id)

    newest_first = list(reversed(txns))
    chunk, meta = paginate(newest_first, page, PER_PAGE)
    return jsonify(transactions=[t.to_dict() for t in chunk], user_id=user_id, **meta)
