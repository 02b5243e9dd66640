import uvicorn

from core import logging
from core.config import LOG_LEVEL, WEB_HOST, WEB_PORT, WEB_WORKERS


def main():
    logging.info(f"HTTP server running on {WEB_HOST}:{WEB_PORT} ({WEB_WORKERS} worker(s))")
    try:
        # Workers are separate processes sharing the port, each with its own pool
        uvicorn.run(
            "web:app",
            host=WEB_HOST,
            port=WEB_PORT,
            workers=WEB_WORKERS,
            log_level=LOG_LEVEL.lower(),
        )
    except KeyboardInterrupt:
        logging.info("Server shutdown by keyboard interrupt")


if __name__ == "__main__":
    main()
