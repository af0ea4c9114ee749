from typing import Optional

from join_gate.api_client import TelegramBotAPI
from join_gate.exceptions import JoinGateError
from join_gate.models.gate_config import GateConfig
from join_gate.models.outbound import OutboundMessage
from join_gate.models.update import Message
from join_gate.services.gate import build_apology, evaluate
from join_gate.utils.logger import logger


async def message_process(
    message: Message, config: GateConfig, api: TelegramBotAPI
) -> Optional[OutboundMessage]:
    """
    Run the membership gate for the sender of ``message`` and send the reply.
    Returns the message that reached Telegram, if any.
    """
    if message.from_user is None:
        logger.debug(f"Message {message.message_id} has no sender, skipping")
        return None
    chat_id = message.chat.id
    user_id = message.from_user.id
    try:
        reply = await evaluate(user_id, chat_id, config, api)
        await api.send_message(reply)
        return reply
    except Exception as e:
        logger.opt(exception=e).error(f"Error checking membership for user {user_id}")

    apology = build_apology(chat_id)
    try:
        await api.send_message(apology)
    except JoinGateError as e:
        logger.error(f"Could not deliver the apology to chat {chat_id}: {e}")
        return None
    return apology
