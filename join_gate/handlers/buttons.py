from typing import Optional

from join_gate.api_client import TelegramBotAPI
from join_gate.handlers.messages import message_process
from join_gate.models.gate_config import GateConfig
from join_gate.models.outbound import OutboundMessage
from join_gate.models.update import CallbackQuery, Message
from join_gate.services.constants import RECHECK_CALLBACK_DATA
from join_gate.utils.logger import logger


def recheck_message(query: CallbackQuery) -> Optional[Message]:
    """The button's message, re-addressed as if the presser had sent it."""
    if query.message is None:
        return None
    return query.message.model_copy(update={"from_user": query.from_user})


async def buttons_process(
    query: CallbackQuery, config: GateConfig, api: TelegramBotAPI
) -> Optional[OutboundMessage]:
    if query.data != RECHECK_CALLBACK_DATA:
        logger.debug(f"Unhandled callback data: {query.data}")
        return None
    message = recheck_message(query)
    if message is None:
        logger.warning(f"Callback query {query.id} carries no message, cannot recheck")
        return None
    return await message_process(message, config, api)
