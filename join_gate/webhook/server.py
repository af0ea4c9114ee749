from contextlib import asynccontextmanager
from typing import Optional

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route
from telegram.error import TelegramError

from join_gate.api_client import TelegramBotAPI, build_bot
from join_gate.config import (
    SET_WEBHOOK_ON_STARTUP,
    TELEGRAM_WEBHOOK_PATH,
    TELEGRAM_WEBHOOK_URL,
)
from join_gate.exceptions import JoinGateError
from join_gate.models.gate_config import GateConfig, load_gate_config
from join_gate.services.dispatcher import process_telegram_update
from join_gate.utils.logger import logger


async def register_webhook(api: TelegramBotAPI) -> None:
    if not TELEGRAM_WEBHOOK_URL:
        logger.error("SET_WEBHOOK_ON_STARTUP is on but BASE_URL is not set")
        return
    try:
        if await api.set_webhook(TELEGRAM_WEBHOOK_URL):
            logger.info(f"Webhook registered successfully: {TELEGRAM_WEBHOOK_URL}")
        else:
            logger.error("Failed to register webhook!")
        bot_info = await api.get_me()
        logger.info(f"Bot Username: @{bot_info.username}")
        logger.info(f"Bot ID: {bot_info.id}")
    except JoinGateError as e:
        logger.error(f"Error registering webhook: {e}")


@asynccontextmanager
async def lifespan(app):
    """
    Fill in whatever create_app was not given: the gate config from the
    environment and a python-telegram-bot Bot for the outbound calls.
    """
    bot = None
    if app.state.gate_config is None:
        app.state.gate_config = load_gate_config()
    if app.state.telegram_api is None:
        bot = build_bot(app.state.gate_config.bot_token)
        try:
            await bot.initialize()
        except TelegramError as e:
            logger.error(f"Error initializing bot: {e}")
        app.state.telegram_api = TelegramBotAPI(bot)
    if SET_WEBHOOK_ON_STARTUP:
        await register_webhook(app.state.telegram_api)

    yield

    if bot is not None:
        await bot.shutdown()


async def telegram_webhook(request: Request):
    # Telegram redelivers on anything but a 200, so every path ends in OK
    if request.method != "POST":
        return PlainTextResponse("OK")
    gate_config = request.app.state.gate_config
    api = request.app.state.telegram_api
    if gate_config is None or api is None:
        logger.error("Webhook called before the gate was configured")
        return PlainTextResponse("OK")
    try:
        body = await request.body()
    except Exception as e:
        logger.error(f"Could not read webhook body: {e}")
        return PlainTextResponse("OK")
    await process_telegram_update(body, gate_config, api)
    return PlainTextResponse("OK")


class WebhookEndpoint:
    """
    Raw ASGI wrapper around telegram_webhook. Starlette restricts plain
    function routes to the listed methods; an ASGI app route accepts them all.
    """

    async def __call__(self, scope, receive, send):
        response = await telegram_webhook(Request(scope, receive))
        await response(scope, receive, send)


async def health(request: Request):
    return JSONResponse({"status": "healthy"})


def create_app(
    gate_config: Optional[GateConfig] = None,
    api: Optional[TelegramBotAPI] = None,
) -> Starlette:
    app = Starlette(
        routes=[
            Route(TELEGRAM_WEBHOOK_PATH, WebhookEndpoint()),
            Route("/health", health, methods=["GET"]),
        ],
        lifespan=lifespan,
    )
    app.state.gate_config = gate_config
    app.state.telegram_api = api
    return app


webhook_app = create_app()
