from bot.handlers.start import main_menu
from bot.libs.messages import register_text, student_note, error_text
from services.errors import KioskError

USAGE = "⚠️ Usage:\n<code>/register phone yes|no name</code>\nExample: <code>/register 9876543210 no Asha Rao</code>"
YES = {"yes", "y", "1", "true", "student"}
NO = {"no", "n", "0", "false"}


def handle(bot, message, ctx):
    chat_id = message["chat"]["id"]
    from_ = message["from"]

    existing = ctx.user_id_for(from_["id"])
    if existing is not None:
        bot.send_message(chat_id, f"ℹ️ You are already registered. Your User ID: <code>{existing}</code>",
                         parse_mode="HTML")
        return

    parts = (message.get("text") or "").split(maxsplit=3)
    if len(parts) != 4 or parts[2].lower() not in YES | NO:
        bot.send_message(chat_id, USAGE, parse_mode="HTML")
        return

    _, phone, student, name = parts
    is_student = student.lower() in YES
    try:
        user_id = ctx.kiosk.register_user(name.strip(), phone, is_student)
    except KioskError as e:
        bot.send_message(chat_id, error_text(e))
        return

    ctx.link(from_["id"], user_id)
    text = register_text.format(user_id=user_id, name=name.strip(), phone=phone)
    if is_student:
        text += "\n\n" + student_note
    bot.send_message(chat_id, text, parse_mode="HTML", reply_markup=main_menu(ctx))
