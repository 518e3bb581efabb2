from telebot.types import InlineKeyboardMarkup, InlineKeyboardButton

from bot.libs.helpers import linked_user_id, safe_edit_message
from bot.libs.messages import CURRENCY, money


def handle(bot, call, ctx):
    """Handles Balance callback"""
    user_id = linked_user_id(bot, ctx, call["from"], call_id=call["id"])
    if user_id is None:
        return

    profile = ctx.kiosk.get_user_profile(user_id)
    text = (
        "💰 <b>Balance Overview :</b>\n\n"
        f"🪙 <b>Wallet:</b> {money(profile.wallet_balance)} {CURRENCY}\n"
        f"📈 <b>Total Spent:</b> {money(profile.total_spent)} {CURRENCY}\n"
        f"⭐ <b>Loyalty Points:</b> {profile.loyalty_points}\n\n"
        "~~ Check transactions below."
    )

    markup = InlineKeyboardMarkup(row_width=2)
    markup.row(
        InlineKeyboardButton("💳 Top-up", callback_data="recharge"),
        InlineKeyboardButton("📜 Transactions", callback_data="transactions"),
    )
    markup.row(InlineKeyboardButton("« Back", callback_data="back_main"))

    safe_edit_message(bot, call, text, markup)
    bot.answer_callback_query(call["id"])
