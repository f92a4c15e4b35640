from datetime import datetime, timezone

from imfs.constants import TS_FORMAT


def now_ms():
    return int(datetime.now(tz=timezone.utc).timestamp() * 1000)


def sec_to_ms(ts_sec: float) -> int:
    return int(ts_sec * 1000)


def ts_to_str(ts: int, fmt: str = TS_FORMAT) -> str:
    """Note: this cannot print milliseconds"""
    dt = datetime.fromtimestamp(ts / 1000)
    return dt.strftime(fmt)

