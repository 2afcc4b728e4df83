"""Time-of-day and duration helpers shared by search and connection finding."""
import re
from datetime import date, time
from src.enums import DayOfWeek

_DURATION_PATTERN = re.compile(r"(\d+)h\s*(\d+)?m?")
_WEEKDAYS = [DayOfWeek.MON, DayOfWeek.TUE, DayOfWeek.WED, DayOfWeek.THU,
             DayOfWeek.FRI, DayOfWeek.SAT, DayOfWeek.SUN]

def parse_duration(text: str) -> int:
    """Parse "2h 30m" / "2h30m" / "2h" into minutes; 0 when unparseable"""
    match = _DURATION_PATTERN.search(text or "")
    if not match:
        return 0
    hours = int(match.group(1) or 0)
    minutes = int(match.group(2) or 0)
    return hours * 60 + minutes

def format_duration(minutes: int, pad: bool = False) -> str:
    """Format minutes as "Xh Ym", or "Xh YYm" when pad is set"""
    hours, mins = divmod(minutes, 60)
    if pad:
        return f"{hours}h {mins:02d}m"
    return f"{hours}h {mins}m"

def minutes_of_day(value: time) -> int:
    return value.hour * 60 + value.minute

def day_of_week(value: date) -> DayOfWeek:
    return _WEEKDAYS[value.weekday()]
