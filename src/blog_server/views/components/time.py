from datetime import datetime, timezone

from htpy import (
    BaseElement,
    time as time_,
)


def format_timestamp(ts: int) -> str:
    return datetime.fromtimestamp(ts, tz=timezone.utc).strftime("%Y-%m-%d %H:%M")


def render_time(value: int) -> BaseElement:
    iso = datetime.fromtimestamp(value, tz=timezone.utc).isoformat()
    return time_(datetime=iso)[format_timestamp(value)]
