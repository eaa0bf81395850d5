"""設定型定義と YAML 読み込み"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import FlagEventsError, FlagEventsErrorCodes


class EventsSection(BaseModel):
    """イベント生成設定。"""

    do_not_track_env: str = Field(default="K1S0_FLAG_DO_NOT_TRACK", min_length=1)
    current_url_env: str = Field(default="K1S0_FLAG_CURRENT_URL", min_length=1)


class LogSection(BaseModel):
    """ログ設定。"""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class ClientConfig(BaseModel):
    """flag_events クライアント設定全体。"""

    events: EventsSection = Field(default_factory=EventsSection)
    log: LogSection = Field(default_factory=LogSection)


def _read_yaml(path: Path) -> dict[str, Any]:
    """YAML ファイルを読み込む。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FlagEventsError(
            code=FlagEventsErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data: dict[str, Any] = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise FlagEventsError(
            code=FlagEventsErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    return data


def load_config(path: Path) -> ClientConfig:
    """設定ファイルを読み込んで ClientConfig を返す。"""
    data = _read_yaml(path)
    try:
        return ClientConfig.model_validate(data)
    except ValidationError as e:
        raise FlagEventsError(
            code=FlagEventsErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
