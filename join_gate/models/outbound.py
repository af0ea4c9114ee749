from dataclasses import dataclass
from typing import Optional

from telegram import InlineKeyboardMarkup
from telegram.constants import ParseMode


@dataclass(frozen=True)
class OutboundMessage:
    chat_id: int
    text: str
    reply_markup: Optional[InlineKeyboardMarkup] = None

    def to_payload(self) -> dict:
        """JSON body for the Bot API sendMessage method."""
        payload = {
            "chat_id": self.chat_id,
            "text": self.text,
            "parse_mode": ParseMode.MARKDOWN.value,
        }
        if self.reply_markup is not None:
            payload["reply_markup"] = self.reply_markup.to_dict()
        return payload
