from telebot.types import InlineKeyboardMarkup, InlineKeyboardButton

from bot.libs.helpers import safe_edit_message
from bot.libs.messages import pricing_text


def _back():
    kb = InlineKeyboardMarkup()
    kb.row(InlineKeyboardButton("« Back", callback_data="back_main"))
    return kb


def handle(bot, call, ctx):
    safe_edit_message(bot, call, pricing_text(ctx.kiosk.get_pricing_info()), _back())
    bot.answer_callback_query(call["id"])


def command(bot, message, ctx):
    bot.send_message(message["chat"]["id"], pricing_text(ctx.kiosk.get_pricing_info()),
                     reply_markup=_back(), parse_mode="HTML")
