from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from join_gate.api_client import TelegramBotAPI
from join_gate.exceptions import (
    MalformedResponse,
    MembershipCheckFailed,
    TelegramTransportError,
)
from join_gate.models.gate_config import GateConfig
from join_gate.models.outbound import OutboundMessage
from join_gate.services.constants import (
    ADMITTED_STATUSES,
    APOLOGY_TEXT,
    JOIN_BUTTON_TEXT,
    JOIN_PROMPT_TEXT,
    RECHECK_BUTTON_TEXT,
    RECHECK_CALLBACK_DATA,
    WELCOME_TEXT,
)
from join_gate.utils.logger import logger


def is_admitted(status: str) -> bool:
    return status in ADMITTED_STATUSES


def build_welcome(chat_id: int) -> OutboundMessage:
    return OutboundMessage(chat_id=chat_id, text=WELCOME_TEXT)


def build_join_prompt(chat_id: int, config: GateConfig) -> OutboundMessage:
    join_keyboard = InlineKeyboardMarkup(
        [
            [InlineKeyboardButton(JOIN_BUTTON_TEXT, url=config.join_url)],
            [
                InlineKeyboardButton(
                    RECHECK_BUTTON_TEXT, callback_data=RECHECK_CALLBACK_DATA
                )
            ],
        ]
    )
    return OutboundMessage(
        chat_id=chat_id, text=JOIN_PROMPT_TEXT, reply_markup=join_keyboard
    )


def build_apology(chat_id: int) -> OutboundMessage:
    return OutboundMessage(chat_id=chat_id, text=APOLOGY_TEXT)


async def evaluate(
    user_id: int, chat_id: int, config: GateConfig, api: TelegramBotAPI
) -> OutboundMessage:
    """
    Decide whether the user is admitted and build the reply for the chat.
    The reply is returned, not sent.
    :raises MembershipCheckFailed: when the membership query fails
    """
    try:
        status = await api.get_chat_member(config.required_channel_id, user_id)
    except (TelegramTransportError, MalformedResponse) as e:
        raise MembershipCheckFailed(user_id, config.required_channel_id) from e
    admitted = is_admitted(status)
    logger.info(
        f"User {user_id} has status {status} in {config.required_channel_id}, admitted: {admitted}"
    )
    if admitted:
        return build_welcome(chat_id)
    return build_join_prompt(chat_id, config)
