"""Tests for the Telegram update routing and handlers, using a recording bot."""

import pytest

from bot.context import BotContext
from bot.dispatcher import build_dispatcher
from bot.handlers.admin_panel import NOT_ALLOWED
from conftest import ADMIN_ID, callback_update, message_update


@pytest.fixture
def ctx(kiosk):
    return BotContext(kiosk, admin_ids={str(ADMIN_ID)})


@pytest.fixture
def dispatcher(ctx):
    return build_dispatcher(ctx)


@pytest.fixture
def send(dispatcher, fake_bot):
    def _send(text, from_id=42):
        dispatcher.handle_update(message_update(text, from_id=from_id), fake_bot)
    return _send


@pytest.fixture
def press(dispatcher, fake_bot):
    def _press(data, from_id=42):
        dispatcher.handle_update(callback_update(data, from_id=from_id), fake_bot)
    return _press


@pytest.fixture
def registered(send):
    send("/register 9876543210 no Asha Rao")
    return 1


class TestRouting:
    def test_plain_text_is_ignored(self, send, fake_bot):
        send("hello there")
        assert fake_bot.sent == []

    def test_unknown_command_is_ignored(self, send, fake_bot):
        send("/nope")
        assert fake_bot.sent == []

    def test_unknown_callback_is_answered(self, press, fake_bot):
        press("nope")
        assert fake_bot.answered == [{"id": "cb-1", "text": None}]

    def test_command_with_bot_name(self, registered, send, fake_bot):
        send("/buy@WaterAtmBot 5 cash")
        assert "Final amount: 10.00" in fake_bot.sent[-2]["text"]


class TestStartAndRegister:
    def test_start_asks_to_register(self, send, fake_bot):
        send("/start")
        assert "/register" in fake_bot.last_text

    def test_start_in_group(self, dispatcher, fake_bot):
        update = message_update("/start")
        update["message"]["chat"]["type"] = "group"
        dispatcher.handle_update(update, fake_bot)
        assert "Message me personally" in fake_bot.last_text

    def test_register_student(self, send, fake_bot, ctx, kiosk):
        send("/register 9876543210 yes Asha Rao")
        assert "Registration successful" in fake_bot.last_text
        assert "Student discount" in fake_bot.last_text
        assert ctx.user_id_for(42) == 1
        user = kiosk.users.get(1)
        assert user.name == "Asha Rao"
        assert user.is_student

    def test_register_twice(self, registered, send, fake_bot, kiosk):
        send("/register 9123456780 no Someone Else")
        assert "already registered" in fake_bot.last_text
        assert len(kiosk.users) == 1

    def test_register_usage(self, send, fake_bot, kiosk):
        send("/register 9876543210 maybe Asha")
        assert "Usage" in fake_bot.last_text
        assert len(kiosk.users) == 0

    def test_start_shows_wallet_once_registered(self, registered, send, fake_bot):
        send("/start")
        assert "User ID : 1" in fake_bot.last_text


class TestWallet:
    def test_unregistered_topup(self, send, fake_bot):
        send("/topup 100")
        assert "not registered" in fake_bot.last_text

    def test_topup_with_bonus(self, registered, send, fake_bot):
        send("/topup 100")
        assert "102.00" in fake_bot.last_text

    def test_topup_rejects_negative(self, registered, send, fake_bot, kiosk):
        send("/topup -5")
        assert fake_bot.last_text.startswith("❌")
        assert kiosk.users.get(1).wallet_balance == 0.0

    def test_topup_rejects_nan(self, registered, send, fake_bot, kiosk):
        send("/topup nan")
        assert fake_bot.last_text.startswith("❌")
        assert kiosk.users.get(1).wallet_balance == 0.0

    def test_topup_buttons(self, registered, press, fake_bot):
        press("recharge")
        assert "Top-up Wallet" in fake_bot.edited[-1]["text"]
        press("amt:50")
        assert "50.00" in fake_bot.last_text

    def test_balance_needs_registration(self, press, fake_bot):
        press("balance")
        assert fake_bot.answered[-1]["text"] == "❌ Please /register first."

    def test_balance(self, registered, press, fake_bot):
        press("balance")
        assert "Balance Overview" in fake_bot.edited[-1]["text"]


class TestPurchase:
    def test_cash_purchase_sends_receipt_and_alert(self, registered, send, fake_bot):
        send("/buy 5 cash")
        receipt, alert = fake_bot.sent[-2], fake_bot.sent[-1]
        assert "PURCHASE RECEIPT" in receipt["text"]
        assert receipt["chat_id"] == 42
        assert alert["chat_id"] == str(ADMIN_ID)
        assert "New Purchase Alert" in alert["text"]

    def test_digital_without_funds(self, registered, send, fake_bot, kiosk):
        send("/buy 5 digital")
        assert "Insufficient wallet balance" in fake_bot.last_text
        assert "Required: 11.00 ₹, Available: 0.00 ₹" in fake_bot.last_text
        assert len(kiosk.ledger) == 0

    def test_bad_method(self, registered, send, fake_bot):
        send("/buy 5 card")
        assert fake_bot.last_text.startswith("❌")

    @pytest.mark.parametrize("text", ["/buy inf cash", "/buy nan digital"])
    def test_non_finite_liters(self, registered, send, fake_bot, kiosk, text):
        send(text)
        assert fake_bot.last_text.startswith("❌")
        assert len(kiosk.ledger) == 0

    def test_usage(self, registered, send, fake_bot):
        send("/buy 5")
        assert "Usage" in fake_bot.last_text

    def test_button_flow(self, registered, send, press, fake_bot, kiosk):
        send("/topup 100")
        press("buy")
        assert "Buy Water" in fake_bot.edited[-1]["text"]
        press("buy:12")
        assert "12 L" in fake_bot.edited[-1]["text"]
        press("buy:12:digital")
        assert "digital fee waived" in fake_bot.sent[-2]["text"]
        assert fake_bot.answered[-1]["text"] == "✅ Done."
        assert kiosk.users.get(1).wallet_balance == pytest.approx(80.0)

    def test_bad_liters_button(self, registered, press, fake_bot):
        press("buy:abc")
        assert fake_bot.answered[-1]["text"] == "⚠️ Invalid request."

    def test_failed_button_purchase(self, registered, press, fake_bot):
        press("buy:5:digital")
        assert fake_bot.answered[-1]["text"] == "❌ Purchase failed."


class TestPasses:
    def test_pass_without_funds(self, registered, send, fake_bot):
        send("/pass weekly")
        assert "Insufficient wallet balance" in fake_bot.last_text

    def test_pass_waives_fee(self, registered, send, fake_bot):
        send("/topup 100")
        send("/pass weekly")
        assert "Weekly Pass purchased" in fake_bot.last_text
        assert "87.00" in fake_bot.last_text
        send("/buy 1 digital")
        assert "Pass holder" in fake_bot.sent[-2]["text"]

    def test_pass_button(self, registered, send, press, fake_bot, kiosk):
        send("/topup 100")
        press("pass")
        assert "Passes" in fake_bot.edited[-1]["text"]
        press("pass:monthly")
        assert "Monthly Pass purchased" in fake_bot.last_text
        assert kiosk.users.get(1).has_monthly_pass

    def test_unknown_pass(self, registered, send, fake_bot):
        send("/pass yearly")
        assert fake_bot.last_text.startswith("❌")


class TestViews:
    def test_profile(self, registered, send, fake_bot):
        send("/profile")
        assert "USER PROFILE" in fake_bot.last_text
        assert "Asha Rao" in fake_bot.last_text

    def test_pricing(self, send, fake_bot):
        send("/pricing")
        assert "PRICING & DISCOUNTS" in fake_bot.last_text

    def test_no_transactions(self, registered, press, fake_bot):
        press("transactions")
        assert fake_bot.edited[-1]["text"] == "📭 No transactions found."

    def test_transactions_newest_first(self, registered, send, press, fake_bot):
        send("/buy 1 cash")
        send("/buy 2 cash")
        press("transactions")
        text = fake_bot.edited[-1]["text"]
        assert text.index("#2") < text.index("#1")

    def test_back_to_menu(self, registered, press, fake_bot):
        press("back_main")
        assert "User ID : 1" in fake_bot.edited[-1]["text"]


class TestAdmin:
    def test_stats_requires_admin(self, send, fake_bot):
        send("/stats")
        assert fake_bot.last_text == NOT_ALLOWED

    def test_stats(self, registered, send, fake_bot):
        send("/stats", from_id=ADMIN_ID)
        assert "ADMIN ANALYTICS" in fake_bot.last_text
        assert "Total Users: 1" in fake_bot.last_text

    def test_admin_help(self, send, fake_bot):
        send("/admin", from_id=ADMIN_ID)
        assert "/stats" in fake_bot.last_text

    def test_add_balance(self, registered, send, fake_bot, kiosk):
        send("/add 1 100", from_id=ADMIN_ID)
        assert "New balance: 102.00" in fake_bot.last_text
        assert kiosk.users.get(1).wallet_balance == pytest.approx(102.0)

    def test_add_requires_admin(self, registered, send, fake_bot, kiosk):
        send("/add 1 100")
        assert fake_bot.last_text == NOT_ALLOWED
        assert kiosk.users.get(1).wallet_balance == 0.0

    def test_add_unknown_user(self, send, fake_bot):
        send("/add 7 10", from_id=ADMIN_ID)
        assert fake_bot.last_text == "❌ User 7 not found"

    def test_user_transactions(self, registered, send, press, fake_bot):
        send("/buy 1 cash")
        send("/trnx 1", from_id=ADMIN_ID)
        assert "#1" in fake_bot.last_text
        press("trnx:1:1")
        assert fake_bot.answered[-1]["text"] == "Not allowed."
