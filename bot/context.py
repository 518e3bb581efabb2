class BotContext:
    """What every handler gets besides the bot: the kiosk and who is who."""

    def __init__(self, kiosk, admin_ids=(), support_url=""):
        self.kiosk = kiosk
        self.admin_ids = frozenset(str(a) for a in admin_ids)
        self.support_url = support_url
        # telegram id -> kiosk user id
        self.accounts = {}

    def link(self, telegram_id, user_id: int):
        self.accounts[str(telegram_id)] = user_id

    def user_id_for(self, telegram_id):
        return self.accounts.get(str(telegram_id))

    def is_admin(self, telegram_id) -> bool:
        return str(telegram_id) in self.admin_ids
