import logging
import os

from caesar.coreutils.env import env_get

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def resolve_level(level=None) -> int:
    """Resolve a level name or number, defaulting to CAESAR_LOG_LEVEL"""
    if level is None:
        level = env_get("CAESAR_LOG_LEVEL", "WARNING")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level=None, log_file: str | None = None):
    """Setup basic logging configuration"""
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    log_file = log_file or env_get("CAESAR_LOG_FILE")
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    return logging.getLogger(__name__)


def log_function_call(func_name: str, **kwargs):
    """Log function calls with parameters"""
    logger = logging.getLogger(__name__)
    logger.debug(f"Calling {func_name} with params: {kwargs}")
