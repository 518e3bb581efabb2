# bot/handlers/profile.py
from telebot.types import InlineKeyboardMarkup, InlineKeyboardButton

from bot.libs.helpers import linked_user_id, safe_edit_message
from bot.libs.messages import profile_text


def build_profile_message(ctx, user_id):
    """
    Returns (text, inline_kb).
    """
    text = profile_text(ctx.kiosk.get_user_profile(user_id))
    kb = InlineKeyboardMarkup()
    kb.row(InlineKeyboardButton("🎫 Get a Pass", callback_data="pass"))
    kb.row(InlineKeyboardButton("« Back", callback_data="back_main"))
    return text, kb


def handle(bot, call, ctx):
    user_id = linked_user_id(bot, ctx, call["from"], call_id=call["id"])
    if user_id is None:
        return

    text, kb = build_profile_message(ctx, user_id)
    safe_edit_message(bot, call, text, kb)
    bot.answer_callback_query(call["id"])


def command(bot, message, ctx):
    chat_id = message["chat"]["id"]
    user_id = linked_user_id(bot, ctx, message["from"], chat_id=chat_id)
    if user_id is None:
        return

    text, kb = build_profile_message(ctx, user_id)
    bot.send_message(chat_id, text, reply_markup=kb, parse_mode="HTML")
