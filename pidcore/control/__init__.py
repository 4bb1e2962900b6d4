"""제어 로직 패키지."""

from .controller import PIDController
from .gains import PidGains
from .pid import PidMath

__all__ = ["PIDController", "PidGains", "PidMath"]
