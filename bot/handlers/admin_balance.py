from bot.handlers.admin_panel import NOT_ALLOWED
from bot.libs.helpers import parse_amount
from bot.libs.messages import CURRENCY, error_text, money
from services.errors import KioskError


def handle(bot, message: dict, ctx):
    chat_id = message["chat"]["id"]

    # check if admin
    if not ctx.is_admin(message["from"]["id"]):
        bot.send_message(chat_id, NOT_ALLOWED)
        return

    # parse command
    parts = (message.get("text") or "").split()
    if len(parts) != 3:
        bot.send_message(chat_id, "⚠️ Usage:\n/add user_id amount")
        return

    _, target_id, amount_str = parts
    amount = parse_amount(amount_str)
    if amount is None or not target_id.isdigit():
        bot.send_message(chat_id, "⚠️ User ID and amount must be numbers.")
        return

    try:
        result = ctx.kiosk.top_up_wallet(int(target_id), amount)
    except KioskError as e:
        bot.send_message(chat_id, error_text(e))
        return

    bonus = f" (+{money(result.bonus)} bonus)" if result.bonus else ""
    bot.send_message(
        chat_id,
        f"✅ Added {money(amount)} {CURRENCY}{bonus} to user {target_id}. "
        f"New balance: {money(result.wallet_balance)} {CURRENCY}"
    )
