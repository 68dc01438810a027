# Core configuration

from .config import Settings, get_settings, settings
from .clock import Clock, system_clock

__all__ = ["Settings", "get_settings", "settings", "Clock", "system_clock"]
