import uvicorn

from join_gate.config import HOST, PORT
from join_gate.utils.logger import logger
from join_gate.webhook.server import webhook_app


def main() -> None:
    logger.info(f"Running membership gate webhook on {HOST}:{PORT}")
    uvicorn.run(webhook_app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
