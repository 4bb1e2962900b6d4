"""PID 게인 묶음."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

GAIN_KEYS = ("kp", "ki", "kd")


@dataclass(frozen=True)
class PidGains:
    kp: float = 0.0
    ki: float = 0.0
    kd: float = 0.0

    @classmethod
    def from_config(cls, cfg: Optional[Mapping[str, Any]]) -> "PidGains":
        """`control` 섹션(또는 kp/ki/kd 평면 매핑)에서 게인을 읽는다."""
        cfg = cfg or {}
        if "control" in cfg:
            control_cfg = cfg["control"]
        elif any(isinstance(value, Mapping) for value in cfg.values()):
            # 다른 섹션만 있는 전체 설정
            control_cfg = None
        else:
            control_cfg = cfg

        if control_cfg is None:
            print("[WARN] control 섹션이 비어 있습니다 → 게인 0.0 사용")
            control_cfg = {}
        if not isinstance(control_cfg, Mapping):
            raise ValueError(f"control 섹션은 매핑이어야 합니다: {control_cfg!r}")

        for key in control_cfg:
            if key not in GAIN_KEYS:
                print(f"[WARN] 알 수 없는 제어 설정 키 '{key}' 무시")

        return cls(
            kp=float(control_cfg.get("kp", 0.0)),
            ki=float(control_cfg.get("ki", 0.0)),
            kd=float(control_cfg.get("kd", 0.0)),
        )
