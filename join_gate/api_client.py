from typing import Union

from telegram import Bot, User
from telegram.constants import ParseMode
from telegram.error import TelegramError
from telegram.request import HTTPXRequest

from join_gate.config import TELEGRAM_API_SERVER, TELEGRAM_REQUEST_TIMEOUT
from join_gate.exceptions import MalformedResponse, TelegramTransportError
from join_gate.models.outbound import OutboundMessage
from join_gate.utils.logger import logger


def build_bot(
    token: str,
    base_url: str = TELEGRAM_API_SERVER,
    timeout: float = TELEGRAM_REQUEST_TIMEOUT,
) -> Bot:
    request = HTTPXRequest(
        connect_timeout=timeout, read_timeout=timeout, write_timeout=timeout
    )
    return Bot(token=token, base_url=base_url, request=request)


class TelegramBotAPI:
    """
    The Bot API calls the gate makes, with python-telegram-bot errors
    translated into the gate's own exceptions.
    """

    def __init__(self, bot: Bot):
        self.bot = bot

    async def get_chat_member(self, chat_id: Union[int, str], user_id: int) -> str:
        """Return the membership status string of ``user_id`` in ``chat_id``."""
        try:
            member = await self.bot.get_chat_member(chat_id=chat_id, user_id=user_id)
        except TelegramError as e:
            raise TelegramTransportError("getChatMember", e.message) from e
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedResponse("getChatMember", repr(e)) from e
        status = getattr(member, "status", None)
        if not isinstance(status, str):
            raise MalformedResponse("getChatMember", "missing result.status")
        return str(status)

    async def send_message(self, message: OutboundMessage) -> None:
        logger.debug(f"sendMessage {message.to_payload()}")
        try:
            await self.bot.send_message(
                chat_id=message.chat_id,
                text=message.text,
                parse_mode=ParseMode.MARKDOWN,
                reply_markup=message.reply_markup,
            )
        except TelegramError as e:
            raise TelegramTransportError("sendMessage", e.message) from e

    async def set_webhook(self, url: str) -> bool:
        try:
            return await self.bot.set_webhook(url=url)
        except TelegramError as e:
            raise TelegramTransportError("setWebhook", e.message) from e

    async def get_me(self) -> User:
        try:
            return await self.bot.get_me()
        except TelegramError as e:
            raise TelegramTransportError("getMe", e.message) from e
