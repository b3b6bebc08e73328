# infrastructure/logging/log_setup.py
from loguru import logger

# Bound event fields (see LoguruLogger) are printed after the event name.
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {message} {extra}"


def setup_console_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Replace every loguru sink with a single stdout sink.

    With json_output each record is printed as one JSON object per line,
    event fields under record.extra.
    """
    logger.remove()
    if json_output:
        logger.add(lambda msg: print(msg, end=""), level=level, serialize=True)
        return
    logger.add(lambda msg: print(msg, end=""), level=level, format=CONSOLE_FORMAT)
