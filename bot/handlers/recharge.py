# bot/handlers/recharge.py
from telebot.types import InlineKeyboardMarkup, InlineKeyboardButton

from bot.libs.helpers import linked_user_id, parse_amount, safe_edit_message
from bot.libs.messages import CURRENCY, error_text, money, topup_text
from services.errors import KioskError
from services.rates import TOPUP_BONUS_RATE, TOPUP_BONUS_THRESHOLD

AMOUNTS = [50, 100, 200]


def amount_keyboard():
    kb = InlineKeyboardMarkup(row_width=3)
    btns = [InlineKeyboardButton(f"{a} {CURRENCY}", callback_data=f"amt:{a}") for a in AMOUNTS]
    kb.row(*btns)
    kb.row(InlineKeyboardButton("« Back", callback_data="back_main"))
    return kb


def _top_up(ctx, user_id, amount):
    """Returns the reply text for a top-up attempt."""
    try:
        result = ctx.kiosk.top_up_wallet(user_id, amount)
    except KioskError as e:
        return error_text(e)
    return topup_text.format(amount=money(result.amount), bonus=money(result.bonus),
                             balance=money(result.wallet_balance), cur=CURRENCY)


def menu(bot, call, ctx):
    """Callback: recharge"""
    if linked_user_id(bot, ctx, call["from"], call_id=call["id"]) is None:
        return
    text = (
        "💳 <b>Top-up Wallet</b>\nChoose an amount or send <code>/topup amount</code>.\n\n"
        f"🎁 Top-ups of {money(TOPUP_BONUS_THRESHOLD)} {CURRENCY} or more get a {TOPUP_BONUS_RATE:.0%} bonus."
    )
    safe_edit_message(bot, call, text, amount_keyboard())
    bot.answer_callback_query(call["id"])


def amount_callback(bot, call, ctx):
    # data: "amt:<value>"
    user_id = linked_user_id(bot, ctx, call["from"], call_id=call["id"])
    if user_id is None:
        return
    amount = parse_amount(call["data"].split(":", 1)[-1])
    if amount is None:
        bot.answer_callback_query(call["id"], "⚠️ Invalid amount.")
        return
    bot.send_message(call["message"]["chat"]["id"], _top_up(ctx, user_id, amount), parse_mode="HTML")
    bot.answer_callback_query(call["id"])


def handle(bot, message, ctx):
    """Command: /topup <amount>"""
    chat_id = message["chat"]["id"]
    user_id = linked_user_id(bot, ctx, message["from"], chat_id=chat_id)
    if user_id is None:
        return

    parts = (message.get("text") or "").split()
    amount = parse_amount(parts[1]) if len(parts) == 2 else None
    if amount is None:
        bot.send_message(chat_id, "⚠️ Usage: <code>/topup amount</code>", parse_mode="HTML")
        return
    bot.send_message(chat_id, _top_up(ctx, user_id, amount), parse_mode="HTML")
