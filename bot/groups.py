from bot.handlers import (
    start, register, balance, back, recharge, purchase, passes, profile, pricing,
    transactions, admin_panel, admin_balance, admin_transactions,
)


def command_handlers(dispatcher):
    dispatcher.register_command("start", start.handle)
    dispatcher.register_command("register", register.handle)
    dispatcher.register_command("topup", recharge.handle)
    dispatcher.register_command("buy", purchase.command)
    dispatcher.register_command("pass", passes.handle)
    dispatcher.register_command("profile", profile.command)
    dispatcher.register_command("pricing", pricing.command)
    dispatcher.register_command("admin", admin_panel.handle)
    dispatcher.register_command("stats", admin_panel.stats)
    dispatcher.register_command("add", admin_balance.handle)
    dispatcher.register_command("trnx", admin_transactions.handle)


def callback_handlers(dispatcher):
    dispatcher.register_callback("balance", balance.handle)
    dispatcher.register_callback("back_main", back.handle)
    dispatcher.register_callback("recharge", recharge.menu)          # open menu
    dispatcher.register_callback("amt", recharge.amount_callback)    # preset amount
    dispatcher.register_callback("buy", purchase.handle)
    dispatcher.register_callback("pass", passes.menu)
    dispatcher.register_callback("profile", profile.handle)
    dispatcher.register_callback("pricing", pricing.handle)
    dispatcher.register_callback("transactions", transactions.handle)
    dispatcher.register_callback("trnx", admin_transactions.handle_callback)
