"""
pidcore 패키지 루트 모듈.

이산 시간 PID 제어기를 노출한다. 순수 연산부(PidMath)와 경과 시간 추적부
(ClockTracker)를 분리하고, PIDController가 둘을 묶는다.
"""

from pidcore.control import PIDController, PidGains, PidMath
from pidcore.utils import ClockError, ClockTracker, ManualClock, MonotonicClock, load_config

__all__ = [
    "PIDController",
    "PidGains",
    "PidMath",
    "ClockError",
    "ClockTracker",
    "ManualClock",
    "MonotonicClock",
    "load_config",
    "control",
    "utils",
]
