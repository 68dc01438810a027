"""Time source used by expiry validation"""

from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Local wall-clock time"""
    return datetime.now()
