"""YAML 설정 로더."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


def load_config(path: Union[str, Path], section: Optional[str] = None) -> Dict[str, Any]:
    """YAML 파일을 dict로 읽는다. section 지정 시 해당 하위 섹션만 반환."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"설정 파일을 찾을 수 없습니다: {config_path}")
    with config_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"설정 최상위는 매핑이어야 합니다: {config_path} ({type(data).__name__})")

    if section is None:
        return data
    sub = data.get(section)
    if sub is None:
        print(f"[WARN] '{section}' 섹션이 없습니다: {config_path} → 빈 설정 사용")
        return {}
    if not isinstance(sub, dict):
        raise ValueError(f"'{section}' 섹션은 매핑이어야 합니다: {config_path}")
    return sub
