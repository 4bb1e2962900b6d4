"""경과 시간 추적 + PID 연산을 묶은 제어기.

스레드 안전하지 않다. 여러 스레드가 공유하면 호출자가 update() 호출 단위로
Lock을 잡아야 한다 (세 상태값의 읽기-수정-쓰기가 원자적이지 않음).
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pidcore.control.gains import PidGains
from pidcore.control.pid import PidMath
from pidcore.utils.timing import Clock, ClockTracker


class PIDController:
    UNINITIALIZED = "UNINITIALIZED"
    RUNNING = "RUNNING"

    def __init__(
        self,
        kp: float,
        ki: float,
        kd: float,
        clock: Optional[Clock] = None,
    ) -> None:
        self.math = PidMath(kp, ki, kd)
        self.tracker = ClockTracker(clock)

    @classmethod
    def from_gains(cls, gains: PidGains, clock: Optional[Clock] = None) -> "PIDController":
        return cls(gains.kp, gains.ki, gains.kd, clock=clock)

    @classmethod
    def from_config(cls, cfg: Optional[Mapping[str, Any]], clock: Optional[Clock] = None) -> "PIDController":
        return cls.from_gains(PidGains.from_config(cfg), clock=clock)

    @property
    def state(self) -> str:
        return self.RUNNING if self.tracker.started else self.UNINITIALIZED

    @property
    def gains(self) -> PidGains:
        return self.math.gains

    @property
    def kp(self) -> float:
        return self.math.p_coefficient

    @property
    def ki(self) -> float:
        return self.math.i_coefficient

    @property
    def kd(self) -> float:
        return self.math.d_coefficient

    @property
    def last_integral(self) -> float:
        return self.math.last_integral

    @property
    def last_error(self) -> float:
        return self.math.last_error

    @property
    def last_sample_time(self) -> Optional[float]:
        return self.tracker.last_sample_time

    def update(self, setpoint: float, measurement: float) -> float:
        first_sample = not self.tracker.started
        # ClockError 발생 시 상태는 변하지 않는다
        dt = self.tracker.elapsed_since_last()
        if first_sample:
            self.math.prime(self.math.error(setpoint, measurement))
        return self.math.update(setpoint, measurement, dt)

    def __repr__(self) -> str:
        return (
            f"PIDController(kp={self.kp}, ki={self.ki}, kd={self.kd}, "
            f"state={self.state}, last_integral={self.last_integral}, last_error={self.last_error})"
        )
