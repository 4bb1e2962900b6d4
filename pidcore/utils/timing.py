"""제어 주기 측정 유틸리티 (주입 가능한 시계 + 경과 시간 추적)."""

from __future__ import annotations

import time
from typing import Optional, Protocol


class ClockError(RuntimeError):
    """시계가 뒤로 간 경우. 복구 대상이 아닌 설정 오류로 취급한다."""


class Clock(Protocol):
    def now(self) -> float:
        ...


class MonotonicClock:
    """실기용 시계. 시스템 시각 조정의 영향을 받지 않는다."""

    def now(self) -> float:
        return time.monotonic()


class ManualClock:
    """테스트용 시계. sleep 없이 경과 시간을 직접 조작한다."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> float:
        self._now += float(seconds)
        return self._now

    def set(self, value: float) -> None:
        self._now = float(value)


class ClockTracker:
    def __init__(self, clock: Optional[Clock] = None) -> None:
        self.clock: Clock = clock if clock is not None else MonotonicClock()
        self._last_sample_time: Optional[float] = None

    @property
    def last_sample_time(self) -> Optional[float]:
        return self._last_sample_time

    @property
    def started(self) -> bool:
        return self._last_sample_time is not None

    def mark(self) -> None:
        self._last_sample_time = self.clock.now()

    def elapsed_since_last(self) -> float:
        """직전 호출 이후 경과 시간(초). 첫 호출은 0.0."""
        now = self.clock.now()
        if self._last_sample_time is None:
            elapsed = 0.0
        else:
            elapsed = now - self._last_sample_time
            # abs()/클램프 금지: 시계 설정 오류를 감추지 않는다
            if elapsed < 0:
                raise ClockError(
                    f"시계가 뒤로 갔습니다: last={self._last_sample_time}, now={now}"
                )
        self._last_sample_time = now
        return elapsed
