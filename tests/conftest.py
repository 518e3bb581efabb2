"""Shared pytest fixtures for the kiosk tests."""

import datetime

import pytest

from app import create_app
from services.kiosk import Kiosk
from utils.config import Settings

START = datetime.datetime(2024, 1, 1, 9, 0, tzinfo=datetime.timezone.utc)
ADMIN_ID = 999


class FixedClock:
    """A clock that only moves when told to."""

    def __init__(self, now=START):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += datetime.timedelta(**kwargs)


class FakeBot:
    """Records what handlers send instead of talking to Telegram."""

    def __init__(self):
        self.sent = []
        self.edited = []
        self.answered = []

    def send_message(self, chat_id, text, **kwargs):
        self.sent.append({"chat_id": chat_id, "text": text, **kwargs})

    def edit_message_text(self, text, chat_id=None, message_id=None, **kwargs):
        self.edited.append({"chat_id": chat_id, "message_id": message_id, "text": text, **kwargs})

    def answer_callback_query(self, callback_query_id, text=None, **kwargs):
        self.answered.append({"id": callback_query_id, "text": text})

    @property
    def last_text(self):
        return self.sent[-1]["text"]


def message_update(text, from_id=42, chat_id=None, first_name="Asha"):
    chat_id = chat_id or from_id
    return {
        "update_id": 1,
        "message": {
            "message_id": 10,
            "from": {"id": from_id, "first_name": first_name, "username": "asha"},
            "chat": {"id": chat_id, "type": "private"},
            "text": text,
        },
    }


def callback_update(data, from_id=42, message_text="menu"):
    return {
        "update_id": 2,
        "callback_query": {
            "id": "cb-1",
            "from": {"id": from_id, "first_name": "Asha"},
            "data": data,
            "message": {
                "message_id": 11,
                "chat": {"id": from_id, "type": "private"},
                "text": message_text,
            },
        },
    }


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def kiosk(clock):
    return Kiosk(clock=clock)


@pytest.fixture
def fake_bot():
    return FakeBot()


@pytest.fixture
def settings():
    return Settings(bot_token="test-token", secret_key="test", admin_ids=frozenset({str(ADMIN_ID)}))


@pytest.fixture
def app(kiosk, fake_bot, settings):
    app = create_app(kiosk=kiosk, bot=fake_bot, settings=settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
