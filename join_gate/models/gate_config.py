from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

from join_gate import config
from join_gate.exceptions import ConfigurationError
from join_gate.utils.logger import logger

PUBLIC_HANDLE_SIGIL = "@"
TELEGRAM_LINK_BASE = "https://t.me/"


class GateConfig(BaseModel):
    """Immutable settings the gate needs for the whole process lifetime."""

    model_config = ConfigDict(frozen=True)

    bot_token: str
    admin_id: str
    required_channel_id: str

    @property
    def channel_handle(self) -> str:
        # numeric (private) channel ids have no public handle
        if self.required_channel_id.startswith(PUBLIC_HANDLE_SIGIL):
            return self.required_channel_id[len(PUBLIC_HANDLE_SIGIL):]
        return ""

    @property
    def join_url(self) -> str:
        return f"{TELEGRAM_LINK_BASE}{self.channel_handle}"


def load_gate_config(env: Optional[Mapping[str, str]] = None) -> GateConfig:
    if env is None:
        values = {
            "BOT_TOKEN": config.BOT_TOKEN,
            "ADMIN_ID": config.ADMIN_ID,
            "REQUIRED_CHANNEL_ID": config.REQUIRED_CHANNEL_ID,
        }
    else:
        values = {
            key: env.get(key)
            for key in ("BOT_TOKEN", "ADMIN_ID", "REQUIRED_CHANNEL_ID")
        }
    missing = [key for key, value in values.items() if not value]
    if missing:
        raise ConfigurationError(missing)
    gate_config = GateConfig(
        bot_token=values["BOT_TOKEN"],
        admin_id=values["ADMIN_ID"],
        required_channel_id=values["REQUIRED_CHANNEL_ID"],
    )
    if not gate_config.channel_handle:
        logger.warning(
            f"REQUIRED_CHANNEL_ID {gate_config.required_channel_id} is not a public @handle, "
            f"the join button will link to {gate_config.join_url}"
        )
    return gate_config
