import logging

from telebot.apihelper import ApiTelegramException
from telebot.types import InlineKeyboardMarkup, InlineKeyboardButton

from bot.libs.helpers import linked_user_id, parse_amount, safe_edit_message
from bot.libs.messages import CURRENCY, error_text, money, new_purchase_text, receipt_text
from services.errors import KioskError
from services.rates import DIGITAL_FEE, WATER_PRICE_PER_LITER

logger = logging.getLogger(__name__)

LITER_OPTIONS = [1, 5, 10, 15, 20]
USAGE = "⚠️ Usage: <code>/buy liters cash|digital</code>\nExample: <code>/buy 5 digital</code>"


def liters_keyboard():
    kb = InlineKeyboardMarkup(row_width=3)
    kb.add(*[InlineKeyboardButton(f"{l} L", callback_data=f"buy:{l}") for l in LITER_OPTIONS])
    kb.row(InlineKeyboardButton("« Back", callback_data="back_main"))
    return kb


def method_keyboard(liters):
    kb = InlineKeyboardMarkup(row_width=2)
    kb.row(
        InlineKeyboardButton("💵 Cash", callback_data=f"buy:{liters:g}:cash"),
        InlineKeyboardButton("💳 Digital", callback_data=f"buy:{liters:g}:digital"),
    )
    kb.row(InlineKeyboardButton("« Back", callback_data="buy"))
    return kb


def _notify_admins(bot, ctx, receipt):
    q = receipt.quote
    text = new_purchase_text.format(
        user_id=receipt.transaction.user_id, liters=f"{q.liters:g}",
        base=money(q.base_cost), discount=money(q.discount), fee=money(q.fee),
        amount=money(q.amount), method=receipt.transaction.payment_method.value, cur=CURRENCY,
    )
    for admin_id in ctx.admin_ids:
        try:
            bot.send_message(admin_id, text, parse_mode="HTML")
        except ApiTelegramException as e:
            logger.warning(f"Failed to notify admin {admin_id}: {e}")


def _purchase(bot, ctx, chat_id, user_id, liters, method):
    try:
        receipt = ctx.kiosk.purchase_water(user_id, liters, method)
    except KioskError as e:
        bot.send_message(chat_id, error_text(e))
        return None

    profile = ctx.kiosk.get_user_profile(user_id)
    bot.send_message(chat_id, receipt_text(profile.name, receipt), parse_mode="HTML")
    _notify_admins(bot, ctx, receipt)
    return receipt


def handle(bot, call, ctx):
    """
    Callback for "buy", "buy:<liters>" and "buy:<liters>:<cash|digital>".
    """
    user_id = linked_user_id(bot, ctx, call["from"], call_id=call["id"])
    if user_id is None:
        return

    data = call["data"].split(":")
    if len(data) == 1:
        text = (
            "💧 <b>Buy Water</b>\n"
            f"{money(WATER_PRICE_PER_LITER)} {CURRENCY} per liter. How much do you need?\n"
            "<i>Or send /buy liters cash|digital</i>"
        )
        safe_edit_message(bot, call, text, liters_keyboard())
        bot.answer_callback_query(call["id"])
        return

    liters = parse_amount(data[1])
    if liters is None or len(data) > 3:
        bot.answer_callback_query(call["id"], "⚠️ Invalid request.")
        return

    if len(data) == 2:
        text = (
            f"💧 <b>{liters:g} L</b> - {money(liters * WATER_PRICE_PER_LITER)} {CURRENCY}\n\n"
            "💵 Cash: no extra fee\n"
            f"💳 Digital (wallet): {money(DIGITAL_FEE)} {CURRENCY} fee unless waived"
        )
        safe_edit_message(bot, call, text, method_keyboard(liters))
        bot.answer_callback_query(call["id"])
        return

    receipt = _purchase(bot, ctx, call["message"]["chat"]["id"], user_id, liters, data[2])
    bot.answer_callback_query(call["id"], "✅ Done." if receipt else "❌ Purchase failed.")


def command(bot, message, ctx):
    """Command: /buy <liters> <cash|digital>"""
    chat_id = message["chat"]["id"]
    user_id = linked_user_id(bot, ctx, message["from"], chat_id=chat_id)
    if user_id is None:
        return

    parts = (message.get("text") or "").split()
    if len(parts) != 3:
        bot.send_message(chat_id, USAGE, parse_mode="HTML")
        return
    liters = parse_amount(parts[1])
    if liters is None:
        bot.send_message(chat_id, "⚠️ Liters must be a number.")
        return
    _purchase(bot, ctx, chat_id, user_id, liters, parts[2])
