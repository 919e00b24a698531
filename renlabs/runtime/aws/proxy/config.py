import logging, os

logger = logging.getLogger(__name__)

def coerce_level(value, default=logging.DEBUG):
    """Accept 'INFO', 'info', '20' or 20; anything else yields default."""
    if value is None or value == '':
        return default
    if isinstance(value, int):
        return value
    value = str(value).strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level
    logger.warning(f'Unrecognized LEVEL {value!r}, using {logging.getLevelName(default)}')
    return default

def env_level(default=logging.DEBUG):
    return coerce_level(os.environ.get('LEVEL'), default)
