import logging
import sys

from billed.settings import settings

TEXT_FORMAT = "%(levelname)s %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Client libraries that log every request or migration step at INFO.
NOISY_LOGGERS = ("httpx", "httpcore", "botocore", "boto3", "urllib3", "alembic.runtime.migration")

_applied: dict = {}


def _formatter(json_output: bool) -> logging.Formatter:
    if not json_output:
        return logging.Formatter(TEXT_FORMAT)
    from pythonjsonlogger.json import JsonFormatter

    return JsonFormatter(fmt=JSON_FORMAT, rename_fields={"asctime": "timestamp", "levelname": "level"})


def configure_logging(level: str | None = None, *, json_output: bool | None = None) -> None:
    """Install a single stderr handler on the root logger.

    ``level`` and ``json_output`` override ``BILLED_LOG_LEVEL`` / ``BILLED_LOG_JSON``.
    Client libraries stay at WARNING unless the root level is DEBUG.
    """
    level_name = (level or settings.log_level).upper()
    json_output = settings.log_json if json_output is None else json_output
    root_level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(json_output))

    root = logging.getLogger()
    root.setLevel(root_level)
    root.handlers.clear()
    root.addHandler(handler)

    library_level = logging.DEBUG if root_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)

    _applied.update(level=level, json_output=json_output)


def reconfigure() -> None:
    """Re-apply the last configuration, e.g. after Alembic's ``fileConfig`` replaced it."""
    configure_logging(_applied.get("level"), json_output=_applied.get("json_output"))
