from typing import Optional, Union

from join_gate.api_client import TelegramBotAPI
from join_gate.exceptions import MalformedInboundBody
from join_gate.handlers.buttons import buttons_process
from join_gate.handlers.messages import message_process
from join_gate.models.gate_config import GateConfig
from join_gate.models.outbound import OutboundMessage
from join_gate.models.update import Update, UpdateKind, parse_update
from join_gate.utils.logger import logger


async def dispatch_update(
    update: Update, config: GateConfig, api: TelegramBotAPI
) -> Optional[OutboundMessage]:
    kind = update.kind
    logger.debug(f"Update {update.update_id} classified as {kind.value}")
    if kind is UpdateKind.MESSAGE:
        return await message_process(update.message, config, api)
    if kind is UpdateKind.CALLBACK_QUERY:
        return await buttons_process(update.callback_query, config, api)
    return None


async def process_telegram_update(
    body: Union[bytes, str], config: GateConfig, api: TelegramBotAPI
) -> Optional[OutboundMessage]:
    """
    Handle one raw webhook body end to end. Never raises: every failure is
    logged and the caller acknowledges the request regardless.
    :return: the message sent back to the user, if any
    """
    try:
        update = parse_update(body)
    except MalformedInboundBody as e:
        logger.warning(f"Dropping malformed update: {e}")
        return None
    try:
        return await dispatch_update(update, config, api)
    except Exception as e:
        logger.opt(exception=e).error(f"Exception while handling update {update.update_id}")
        return None
