import logging

from bot.groups import command_handlers, callback_handlers

logger = logging.getLogger(__name__)


class Dispatcher:
    def __init__(self, ctx):
        self.ctx = ctx
        self.command_handlers = {}
        self.callback_handlers = {}

    def register_command(self, cmd, func):
        self.command_handlers[cmd] = func

    def register_callback(self, data_key, func):
        self.callback_handlers[data_key] = func

    def handle_update(self, update, bot):
        """Manually route updates to correct handler"""
        if "message" in update and "text" in update["message"]:
            message = update["message"]
            text = message["text"]
            if not text.startswith("/"):
                return

            # "/buy@WaterAtmBot 5 cash" -> "buy"
            cmd = text.split()[0][1:].split("@")[0]
            if cmd in self.command_handlers:
                self.command_handlers[cmd](bot, message, self.ctx)
            else:
                logger.debug(f"Unknown command /{cmd}")

        elif "callback_query" in update:
            call = update["callback_query"]
            prefix = call.get("data", "").split(":")[0]
            if prefix in self.callback_handlers:
                self.callback_handlers[prefix](bot, call, self.ctx)
            else:
                bot.answer_callback_query(call["id"])


def build_dispatcher(ctx):
    dispatcher = Dispatcher(ctx)

    # Register groups
    command_handlers(dispatcher)
    callback_handlers(dispatcher)
    return dispatcher
