"""PID 항 계산 (시계와 무관한 순수 연산부).

경과 시간은 호출자가 `delta_time`(초)으로 넘긴다. 이 클래스가 갖는 상태는
게인과 항 메모리(`last_integral`, `last_error`)뿐이다.
"""

from __future__ import annotations

from .gains import PidGains


class PidMath:
    def __init__(self, kp: float, ki: float, kd: float) -> None:
        self._gains = PidGains(float(kp), float(ki), float(kd))

        self.last_integral = 0.0
        self.last_error = 0.0

    @property
    def gains(self) -> PidGains:
        return self._gains

    @property
    def p_coefficient(self) -> float:
        return self._gains.kp

    @property
    def i_coefficient(self) -> float:
        return self._gains.ki

    @property
    def d_coefficient(self) -> float:
        return self._gains.kd

    @staticmethod
    def _check_delta(delta_time: float) -> None:
        if delta_time < 0:
            raise ValueError(f"delta_time은 음수일 수 없습니다: {delta_time}")

    @staticmethod
    def error(setpoint: float, measurement: float) -> float:
        return setpoint - measurement

    @staticmethod
    def proportional_term(error: float) -> float:
        return error

    def integral_term(self, error: float, delta_time: float) -> float:
        """직사각형(오일러) 적분. 게인은 곱하지 않고, 클램프도 하지 않는다."""
        self._check_delta(delta_time)
        self.last_integral = self.last_integral + error * delta_time
        return self.last_integral

    def derivative_term(self, error: float, delta_time: float) -> float:
        """오차 변화율. delta_time == 0이면 0을 반환하고 last_error는 그대로 둔다."""
        self._check_delta(delta_time)
        if delta_time == 0:
            return 0.0
        derivative = (error - self.last_error) / delta_time
        self.last_error = error
        return derivative

    def prime(self, error: float) -> None:
        """첫 샘플의 오차로 미분 기준값을 채운다 (초기 0 대비 미분 킥 방지)."""
        self.last_error = error

    def update(
        self,
        setpoint: float,
        measurement: float,
        delta_time: float,
    ) -> float:
        self._check_delta(delta_time)
        error = self.error(setpoint, measurement)

        p = self.proportional_term(error)
        i = self.integral_term(error, delta_time)
        d = self.derivative_term(error, delta_time)

        # 게인은 여기서 항마다 정확히 한 번만 곱한다
        return self.p_coefficient * p + self.i_coefficient * i + self.d_coefficient * d

    # 짧은 이름
    p_term = proportional_term
    i_term = integral_term
    d_term = derivative_term
