from bot.handlers.start import main_menu, welcome_text
from bot.libs.helpers import safe_edit_message


def handle(bot, call, ctx):
    """Handles the Back button → return to main menu"""
    safe_edit_message(bot, call, welcome_text(ctx, call["from"]), main_menu(ctx))
    bot.answer_callback_query(call["id"])
