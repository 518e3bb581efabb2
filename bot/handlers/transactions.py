# bot/handlers/transactions.py
from telebot.types import InlineKeyboardMarkup, InlineKeyboardButton

from bot.libs.helpers import linked_user_id, parse_page, safe_edit_message
from bot.libs.messages import CURRENCY, money

PAGE_SIZE = 5


def format_transaction(t):
    when = t.timestamp.strftime("%Y-%m-%d %I:%M %p")
    lines = [f"🧾 <b>#{t.transaction_id}</b> | {t.liters:g} L ({t.payment_method.value})"]
    lines.append(f"Paid: {money(t.amount)} {CURRENCY}")
    if t.discount:
        lines.append(f"Discount: -{money(t.discount)} {CURRENCY}")
    if t.fee:
        lines.append(f"Fee: +{money(t.fee)} {CURRENCY}")
    lines.append(f"🗓 {when}")
    return "\n".join(lines)


def page_keyboard(page, pages, prefix):
    kb = InlineKeyboardMarkup()
    nav = []
    if page > 1:
        nav.append(InlineKeyboardButton("⬅️ Prev", callback_data=f"{prefix}:{page - 1}"))
    if page < pages:
        nav.append(InlineKeyboardButton("Next ➡️", callback_data=f"{prefix}:{page + 1}"))
    if nav:
        kb.row(*nav)
    kb.row(InlineKeyboardButton("« Back", callback_data="back_main"))
    return kb


def build_transaction_message(transactions, page=1, prefix="transactions"):
    """Newest first, PAGE_SIZE per page. Returns (text, keyboard)."""
    if not transactions:
        return "📭 No transactions found.", None

    pages = -(-len(transactions) // PAGE_SIZE)
    page = min(page, pages)
    newest_first = transactions[::-1]
    start = (page - 1) * PAGE_SIZE

    parts = [f"📄 <b>Transactions | Page {page}/{pages}</b>\n"]
    parts += [format_transaction(t) for t in newest_first[start:start + PAGE_SIZE]]
    return "\n\n".join(parts), page_keyboard(page, pages, prefix)


def handle(bot, call, ctx):
    """Callback: "transactions" or "transactions:<page>" for the caller's own history."""
    user_id = linked_user_id(bot, ctx, call["from"], call_id=call["id"])
    if user_id is None:
        return

    page = parse_page(call.get("data", ""))
    text, kb = build_transaction_message(ctx.kiosk.get_transactions(user_id), page)
    safe_edit_message(bot, call, text, kb)
    bot.answer_callback_query(call["id"])
