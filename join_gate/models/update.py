"""
Inbound Telegram updates, validated at the webhook boundary.

Only the fields the gate reads are declared; everything else Telegram sends
is ignored.
"""
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from join_gate.exceptions import MalformedInboundBody


class TelegramUser(BaseModel):
    id: int
    is_bot: bool = False
    first_name: str = ""
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None


class TelegramChat(BaseModel):
    id: int
    type: str = "private"
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class Message(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message_id: Optional[int] = None
    chat: TelegramChat
    from_user: Optional[TelegramUser] = Field(default=None, alias="from")
    text: Optional[str] = None


class CallbackQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    from_user: TelegramUser = Field(alias="from")
    message: Optional[Message] = None
    data: Optional[str] = None


class UpdateKind(str, Enum):
    MESSAGE = "message"
    CALLBACK_QUERY = "callback_query"
    UNKNOWN = "unknown"


class Update(BaseModel):
    update_id: Optional[int] = None
    message: Optional[Message] = None
    callback_query: Optional[CallbackQuery] = None

    @property
    def kind(self) -> UpdateKind:
        if self.message is not None:
            return UpdateKind.MESSAGE
        if self.callback_query is not None:
            return UpdateKind.CALLBACK_QUERY
        return UpdateKind.UNKNOWN


def parse_update(body: Union[bytes, str]) -> Update:
    """Decode and validate a raw webhook body."""
    try:
        return Update.model_validate_json(body)
    except ValidationError as e:
        raise MalformedInboundBody(f"Invalid update body: {e.error_count()} error(s)") from e
