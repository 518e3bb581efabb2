from contextlib import contextmanager

from flask import current_app, jsonify

from services.errors import (
    CapacityExceeded, InsufficientFunds, KioskError, LedgerFull, UserNotFound,
)

STATUS_CODES = {
    UserNotFound: 404,
    CapacityExceeded: 409,
    LedgerFull: 409,
    InsufficientFunds: 402,
}


@contextmanager
def locked_kiosk():
    """The app's kiosk, held under the app-wide lock for the duration of the block."""
    state = current_app.extensions["water_kiosk"]
    with state["lock"]:
        yield state["kiosk"]


def handle_kiosk_error(err: KioskError):
    status = STATUS_CODES.get(type(err), 400)
    current_app.logger.info("Rejected %s: %s", err.code, err.message)
    return jsonify(err.to_dict()), status


def paginate(items, page, per_page):
    total_count = len(items)
    total_pages = (total_count + per_page - 1) // per_page
    chunk = items[(page - 1) * per_page:page * per_page]
    return chunk, {"page": page, "per_page": per_page,
                   "total_count": total_count, "total_pages": total_pages}


def page_arg(request):
    try:
        return max(1, int(request.args.get("page", 1)))
    except ValueError:
        return 1
