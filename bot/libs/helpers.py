import json
import logging

from telebot.apihelper import ApiTelegramException

logger = logging.getLogger(__name__)


def safe_edit_message(bot, call, new_text, new_markup):
    try:
        old_text = call["message"].get("text", "")
        old_markup = call["message"].get("reply_markup")

        # Convert both markups to JSON strings for comparison
        old_markup_json = json.dumps(old_markup, sort_keys=True) if old_markup else None
        new_markup_json = new_markup.to_json() if new_markup else None

        if old_text == new_text and old_markup_json == new_markup_json:
            # Nothing changed → avoid 400 error
            return

        bot.edit_message_text(
            chat_id=call["message"]["chat"]["id"],
            message_id=call["message"]["message_id"],
            text=new_text,
            parse_mode="HTML",
            reply_markup=new_markup
        )
    except ApiTelegramException as e:
        logger.warning(f"Could not edit message: {e}")


def linked_user_id(bot, ctx, from_, chat_id=None, call_id=None):
    """
    Kiosk user id linked to this Telegram user, or None after telling them
    to register first.
    """
    user_id = ctx.user_id_for(from_["id"])
    if user_id is not None:
        return user_id
    if call_id is not None:
        bot.answer_callback_query(call_id, "❌ Please /register first.")
    elif chat_id is not None:
        bot.send_message(chat_id, "❌ You are not registered yet.\nUse <code>/register phone yes|no name</code>",
                         parse_mode="HTML")
    return None


def parse_page(data: str) -> int:
    parts = (data or "").split(":", 1)
    if len(parts) < 2:
        return 1
    try:
        return max(1, int(parts[1]))
    except ValueError:
        return 1


def parse_amount(raw):
    """Float from user text, or None when it is not a number."""
    try:
        return float(raw)
    except (TypeError, ValueError):
        return None
