"""
Test fixtures for the membership gate.

The Bot API client is always mocked: tests verify gate decisions, update
routing and the webhook contract without touching Telegram.
"""

import os

import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, MagicMock

from httpx import AsyncClient, ASGITransport

TEST_BOT_TOKEN = "000000000:AAFakeTokenForTesting"
TEST_ADMIN_ID = "1000"
TEST_CHANNEL_ID = "@mychannel"

# config.py reads os.environ at import time
os.environ["BOT_TOKEN"] = TEST_BOT_TOKEN
os.environ["ADMIN_ID"] = TEST_ADMIN_ID
os.environ["REQUIRED_CHANNEL_ID"] = TEST_CHANNEL_ID
os.environ["SET_WEBHOOK_ON_STARTUP"] = "false"
os.environ["LOG_LEVEL"] = "DEBUG"


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def gate_config():
    from join_gate.models.gate_config import GateConfig

    return GateConfig(
        bot_token=TEST_BOT_TOKEN,
        admin_id=TEST_ADMIN_ID,
        required_channel_id=TEST_CHANNEL_ID,
    )


@pytest.fixture
def mock_api():
    """Bot API double; membership defaults to a plain member."""
    from join_gate.api_client import TelegramBotAPI

    api = MagicMock(spec=TelegramBotAPI)
    api.get_chat_member = AsyncMock(return_value="member")
    api.send_message = AsyncMock(return_value=None)
    return api


@pytest.fixture
def app(gate_config, mock_api):
    from join_gate.webhook.server import create_app

    return create_app(gate_config=gate_config, api=mock_api)


@pytest_asyncio.fixture
async def client(app):
    """Async HTTP client hitting the Starlette app via ASGI transport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def make_message_update(chat_id: int = 789, user_id: int = 42, update_id: int = 1) -> dict:
    return {
        "update_id": update_id,
        "message": {
            "message_id": 1,
            "text": "/start",
            "chat": {"id": chat_id, "type": "private"},
            "from": {"id": user_id, "is_bot": False, "first_name": "Test"},
        },
    }


def make_callback_update(
    data: str = "check_join", chat_id: int = 789, user_id: int = 42, update_id: int = 2
) -> dict:
    return {
        "update_id": update_id,
        "callback_query": {
            "id": "4382bfdwdsb323b2d9",
            "from": {"id": user_id, "is_bot": False, "first_name": "Test"},
            "chat_instance": "-123",
            "data": data,
            "message": {
                "message_id": 10,
                "text": "join prompt",
                "chat": {"id": chat_id, "type": "private"},
                "from": {"id": 999, "is_bot": True, "first_name": "GateBot"},
            },
        },
    }
