"""공통 유틸리티 모음."""

from .config_loader import load_config
from .timing import Clock, ClockError, ClockTracker, ManualClock, MonotonicClock

__all__ = ["load_config", "Clock", "ClockError", "ClockTracker", "ManualClock", "MonotonicClock"]
