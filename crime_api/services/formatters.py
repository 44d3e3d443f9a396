# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Display formatting for stored incident timestamps (local time)."""
from datetime import datetime
from typing import Union

Timestamp = Union[str, datetime]


def to_local(value: Timestamp) -> datetime:
    """Parse a stored timestamp; naive values are already local, aware ones are converted."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        raw = value.strip()
        if raw.endswith(("Z", "z")):
            raw = raw[:-1] + "+00:00"
        dt = datetime.fromisoformat(raw)
    else:
        raise ValueError(f"Unsupported timestamp {value!r}")
    if dt.tzinfo is not None:
        dt = dt.astimezone()
    return dt


def format_date(value: Timestamp) -> str:
    dt = to_local(value)
    return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"


def format_time(value: Timestamp) -> str:
    dt = to_local(value)
    return f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
