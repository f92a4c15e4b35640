import logging

logger = logging.getLogger(__name__)


def ensure_int(val):
    try:
        if type(val) == str:
            return int(val)
    except ValueError:
        logger.error(f'Bad value: {val}')
    return val


def ensure_bool(val):
    try:
        if type(val) == str:
            return val.strip().lower() in ('true', 'yes', '1')
        return bool(val)
    except ValueError:
        pass
    return val


def ensure_bytes(val) -> bytes:
    if val is None:
        return b''
    if isinstance(val, bytes):
        return val
    return bytes(val)
