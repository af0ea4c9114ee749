"""
Error taxonomy for the membership gate.

Nothing in here ever reaches the inbound caller: the webhook endpoint
acknowledges every request with 200 ``OK``.
"""


class JoinGateError(Exception):
    pass


class ConfigurationError(JoinGateError):
    def __init__(self, missing: list):
        self.missing = list(missing)
        super().__init__(f"Missing required configuration: {', '.join(self.missing)}")


class TelegramTransportError(JoinGateError):
    """Network, timeout, non-2xx status or ``ok: false`` from the Bot API."""

    def __init__(self, method: str, detail: str):
        self.method = method
        self.detail = detail
        super().__init__(f"Telegram API call {method} failed: {detail}")


class MalformedResponse(JoinGateError):
    def __init__(self, method: str, detail: str):
        self.method = method
        self.detail = detail
        super().__init__(f"Unexpected response from {method}: {detail}")


class MembershipCheckFailed(JoinGateError):
    def __init__(self, user_id: int, channel_id: str):
        self.user_id = user_id
        self.channel_id = channel_id
        super().__init__(f"Could not check membership of user {user_id} in {channel_id}")


class MalformedInboundBody(JoinGateError):
    pass
