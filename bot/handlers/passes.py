# bot/handlers/passes.py
from telebot.types import InlineKeyboardMarkup, InlineKeyboardButton

from bot.libs.helpers import linked_user_id, safe_edit_message
from bot.libs.messages import CURRENCY, error_text, money, pass_text
from models.pass_type import PassType
from services.errors import KioskError


def pass_keyboard():
    kb = InlineKeyboardMarkup(row_width=1)
    for p in PassType:
        kb.add(InlineKeyboardButton(f"🎫 {p.label} - {money(p.cost)} {CURRENCY} ({p.days} days)",
                                    callback_data=f"pass:{p.label.lower()}"))
    kb.add(InlineKeyboardButton("« Back", callback_data="back_main"))
    return kb


def _buy(ctx, user_id, pass_type):
    try:
        receipt = ctx.kiosk.purchase_pass(user_id, pass_type)
    except KioskError as e:
        return error_text(e)
    return pass_text.format(
        label=receipt.pass_type.label, cost=money(receipt.cost), days=receipt.pass_type.days,
        expiry=receipt.expiry.strftime("%Y-%m-%d %I:%M %p"), balance=money(receipt.wallet_balance),
        cur=CURRENCY,
    )


def menu(bot, call, ctx):
    """Callback: "pass" opens the options, "pass:<weekly|monthly>" buys one."""
    user_id = linked_user_id(bot, ctx, call["from"], call_id=call["id"])
    if user_id is None:
        return

    parts = call["data"].split(":", 1)
    if len(parts) == 1:
        text = "🎫 <b>Passes</b>\nNo digital payment fees while your pass is valid.\nA new pass replaces the current one."
        safe_edit_message(bot, call, text, pass_keyboard())
        bot.answer_callback_query(call["id"])
        return

    bot.send_message(call["message"]["chat"]["id"], _buy(ctx, user_id, parts[1]), parse_mode="HTML")
    bot.answer_callback_query(call["id"])


def handle(bot, message, ctx):
    """Command: /pass <weekly|monthly>"""
    chat_id = message["chat"]["id"]
    user_id = linked_user_id(bot, ctx, message["from"], chat_id=chat_id)
    if user_id is None:
        return

    parts = (message.get("text") or "").split()
    if len(parts) != 2:
        bot.send_message(chat_id, "⚠️ Usage: <code>/pass weekly|monthly</code>", parse_mode="HTML")
        return
    bot.send_message(chat_id, _buy(ctx, user_id, parts[1]), parse_mode="HTML")
