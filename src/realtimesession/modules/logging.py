import sys

from loguru import logger

# Library code stays silent until the application opts in.
logger.disable("realtimesession")


def setup_logger(path=None, level="INFO"):
    """Configure loguru sinks for realtimesession and enable its messages."""
    logger.add(sink=sys.stderr, format="<level>{time:HH:mm:ss}</level> | {message}", colorize=True, level=level)

    if path:
        logger.add(
            path,
            rotation="10 MB",  # Rotate when file reaches 10MB
            retention="1 week",  # Keep logs for 1 week
            compression="zip",  # Compress rotated logs
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            level=level,
        )

    logger.enable("realtimesession")
    return logger


def log_request(method, url, body):
    # Only key names are logged; instructions and tool schemas can be large.
    keys = ", ".join(sorted(body)) if body else "-"
    logger.info(f"⬆️ - Out {method} {url} [{keys}]")


def log_response(status_code, url):
    emoji = "✅" if 200 <= status_code < 300 else "❌"
    logger.info(f"{emoji} ⬇️ - In {status_code} {url}")


def log_error(message):
    logger.error(message)


def log_info(message):
    logger.info(message)
