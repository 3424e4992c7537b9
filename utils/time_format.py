# utils/time_format.py
from PySide6.QtCore import QTime

MS_PER_DAY = 24 * 60 * 60 * 1000


def format_elapsed(elapsed_ms: int, fmt: str) -> str:
    """
    Render an elapsed duration the way a clock would show midnight + elapsed.
    Uses Qt time-format syntax (HH, mm, ss, zzz, ...). Wraps every 24 hours.
    """
    ms = max(0, int(elapsed_ms)) % MS_PER_DAY
    return QTime(0, 0).addMSecs(ms).toString(fmt)
