from telebot.types import InlineKeyboardMarkup, InlineKeyboardButton

from bot.libs.messages import CURRENCY, money


def main_menu(ctx):
    markup = InlineKeyboardMarkup(row_width=2)
    markup.row(InlineKeyboardButton("💧 Buy Water", callback_data="buy"))
    markup.row(
        InlineKeyboardButton("💰 Balance", callback_data="balance"),
        InlineKeyboardButton("💳 Top-up", callback_data="recharge")
    )
    markup.row(InlineKeyboardButton("🎫 Weekly/Monthly Pass", callback_data="pass"))
    markup.row(
        InlineKeyboardButton("👤 Profile", callback_data="profile"),
        InlineKeyboardButton("📜 Transactions", callback_data="transactions")
    )
    markup.row(InlineKeyboardButton("🏷 Pricing & Discounts", callback_data="pricing"))
    if ctx.support_url:
        markup.row(InlineKeyboardButton("📞 Support", url=ctx.support_url))
    return markup


def welcome_text(ctx, from_):
    text = f"👋 Hello {from_.get('first_name', '')} !\n\n"
    user_id = ctx.user_id_for(from_["id"])
    if user_id is None:
        return text + (
            "💧 Welcome to the Water ATM.\n\n"
            "Register to get a wallet:\n"
            "<code>/register phone yes|no name</code>\n"
            "<i>(yes if you are a student)</i>"
        )
    profile = ctx.kiosk.get_user_profile(user_id)
    return text + (
        f"🆔 User ID : {profile.user_id}\n"
        f"💰 Wallet : {money(profile.wallet_balance)} {CURRENCY}\n"
        f"⭐ Loyalty Points : {profile.loyalty_points}\n\n"
        "<i>~~ Pay cash or from your wallet.\n"
        "~~ A pass waives the digital payment fee.</i>"
    )


def handle(bot, message, ctx):
    chat_id = message["chat"]["id"]
    if message["chat"].get("type", "private") != "private":
        bot.send_message(chat_id, "👋 Hello there! Message me personally to buy water.")
        return

    bot.send_message(chat_id, welcome_text(ctx, message["from"]),
                     reply_markup=main_menu(ctx), parse_mode="HTML")
