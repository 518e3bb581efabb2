import logging
import os
import threading

from flask import Flask, request
from telebot import TeleBot

from admin_panel.access import handle_kiosk_error
from admin_panel.routes.dashboard import dashboard_bp
from admin_panel.routes.transactions import transactions_bp
from admin_panel.routes.users import users_bp
from bot.context import BotContext
from bot.dispatcher import build_dispatcher
from services.errors import KioskError
from services.kiosk import Kiosk
from utils.config import load_settings


def create_app(kiosk=None, bot=None, settings=None):
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(levelname)s - [%(name)s] %(message)s'
    )

    kiosk = kiosk or Kiosk.from_settings(settings)
    if bot is None:
        if not settings.bot_token:
            raise RuntimeError("BOT_TOKEN environment variable is required")
        # Init Telebot (just for sending)
        bot = TeleBot(settings.bot_token, parse_mode="HTML")

    ctx = BotContext(kiosk, admin_ids=settings.admin_ids, support_url=settings.support_url)
    dispatcher = build_dispatcher(ctx)
    # the kiosk core has no locking of its own
    lock = threading.Lock()

    # Init Flask
    app = Flask(__name__)
    app.config["SECRET_KEY"] = settings.secret_key or os.urandom(24)
    app.extensions["water_kiosk"] = {"kiosk": kiosk, "lock": lock, "bot_context": ctx}

    # Register admin routes
    app.register_blueprint(dashboard_bp, url_prefix="/admin/dashboard")
    app.register_blueprint(users_bp, url_prefix="/admin/users")
    app.register_blueprint(transactions_bp, url_prefix="/admin/transactions")
    app.register_error_handler(KioskError, handle_kiosk_error)

    # Telegram webhook route
    @app.route("/webhook", methods=["POST"])
    def webhook():
        """
        Always return 200 to Telegram. Handler errors are logged, never
        returned, so Telegram doesn't keep retrying.
        """
        update = request.get_json(force=True, silent=True)
        if not update:
            app.logger.warning("Webhook received empty/invalid payload. body=%s", request.data[:1000])
            return "OK", 200

        try:
            with lock:
                dispatcher.handle_update(update, bot)
        except Exception as e:
            app.logger.exception("Error while handling update: %s", e)

        return "OK", 200

    @app.route("/")
    def index():
        return "Water ATM is running"

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000)
