from bot.handlers.admin_panel import NOT_ALLOWED
from bot.handlers.transactions import build_transaction_message
from bot.libs.helpers import safe_edit_message
from bot.libs.messages import error_text
from services.errors import KioskError


def _user_transactions(ctx, raw_id):
    if not raw_id.isdigit():
        return "⚠️ User ID must be a number.", None
    try:
        txns = ctx.kiosk.get_transactions(int(raw_id))
    except KioskError as e:
        return error_text(e), None
    return txns, raw_id


def handle(bot, message, ctx):
    """Command: /trnx <user_id>"""
    chat_id = message["chat"]["id"]
    if not ctx.is_admin(message["from"]["id"]):
        bot.send_message(chat_id, NOT_ALLOWED)
        return

    parts = (message.get("text") or "").split()
    if len(parts) != 2:
        bot.send_message(chat_id, "⚠️ Usage: /trnx user_id")
        return

    txns, uid = _user_transactions(ctx, parts[1])
    if uid is None:
        bot.send_message(chat_id, txns)
        return
    text, kb = build_transaction_message(txns, 1, prefix=f"trnx:{uid}")
    bot.send_message(chat_id, text, reply_markup=kb, parse_mode="HTML")


def handle_callback(bot, call, ctx):
    # data: "trnx:<user_id>:<page>"
    if not ctx.is_admin(call["from"]["id"]):
        bot.answer_callback_query(call["id"], "Not allowed.")
        return

    try:
        _, raw_id, raw_page = call["data"].split(":")
        page = max(1, int(raw_page))
    except ValueError:
        bot.answer_callback_query(call["id"], "Invalid request.")
        return

    txns, uid = _user_transactions(ctx, raw_id)
    if uid is None:
        bot.answer_callback_query(call["id"], txns)
        return
    text, kb = build_transaction_message(txns, page, prefix=f"trnx:{uid}")
    safe_edit_message(bot, call, text, kb)
    bot.answer_callback_query(call["id"])
