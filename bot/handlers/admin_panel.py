from bot.libs.messages import analytics_text

NOT_ALLOWED = "❌ You are not authorized to use this command."


def handle(bot, message, ctx):
    chat_id = message["chat"]["id"]

    if not ctx.is_admin(message["from"]["id"]):
        bot.send_message(chat_id, NOT_ALLOWED)
        return

    example_id = "1"
    text = (
        f"👋 Hello @{message['from'].get('username', '') or 'Admin'}\n\n"
        "⚙️ <b>Admin Commands:</b>\n\n"
        f"📊 Analytics → <code>/stats</code>\n"
        f"➕ Top-up a wallet → <code>/add {example_id} 100</code>\n"
        f"📜 User transactions → <code>/trnx {example_id}</code>\n\n"
        "<i>Use the kiosk User ID, not the Telegram ID.</i>"
    )
    bot.send_message(chat_id, text, parse_mode="HTML")


def stats(bot, message, ctx):
    chat_id = message["chat"]["id"]

    if not ctx.is_admin(message["from"]["id"]):
        bot.send_message(chat_id, NOT_ALLOWED)
        return

    bot.send_message(chat_id, analytics_text(ctx.kiosk.get_analytics()), parse_mode="HTML")
