import os
import tempfile

from join_gate.utils.parse import get_env_bool, get_env_int

env = os.environ

# Required gate settings, validated by join_gate.models.gate_config.load_gate_config
BOT_TOKEN = env.get("BOT_TOKEN", None)
ADMIN_ID = env.get("ADMIN_ID", None)
REQUIRED_CHANNEL_ID = env.get("REQUIRED_CHANNEL_ID", None)

# Telegram Bot API server
TELEGRAM_API_SERVER = env.get("TELEGRAM_API_SERVER", "https://api.telegram.org/bot")
TELEGRAM_REQUEST_TIMEOUT = get_env_int(env, "TELEGRAM_REQUEST_TIMEOUT", 30)

# Webhook
BASE_URL = env.get("BASE_URL", None)
TELEGRAM_WEBHOOK_PATH = env.get("TELEGRAM_WEBHOOK_PATH", "/webhook")
TELEGRAM_WEBHOOK_URL = f"https://{BASE_URL}{TELEGRAM_WEBHOOK_PATH}" if BASE_URL else None
SET_WEBHOOK_ON_STARTUP = get_env_bool(env, "SET_WEBHOOK_ON_STARTUP", False)

# HTTP server
HOST = env.get("HOST", "0.0.0.0")
PORT = get_env_int(env, "PORT", 8787)

# Logging
TEMP_DIR = env.get("TEMP_DIR", tempfile.gettempdir())
LOG_FILE_PATH = env.get("LOG_FILE_PATH", TEMP_DIR)
LOG_LEVEL = env.get("LOG_LEVEL", "DEBUG")
LOG_FILE_NAME = env.get("LOG_FILE_NAME", "join_gate.log")
LOG_ROTATION = env.get("LOG_ROTATION", "1 week")
LOG_RETENTION = env.get("LOG_RETENTION", "10 days")
