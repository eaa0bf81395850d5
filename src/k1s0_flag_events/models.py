"""flag_events データモデル

イベントの optional フィールドは None を「欠落」として扱い、to_dict() で
キーごと省略する。feature イベントの variation のみ None のまま出力する。
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class EventKind(str, Enum):
    """イベント種別。"""

    IDENTIFY = "identify"
    FEATURE = "feature"
    CUSTOM = "custom"


@dataclass
class User:
    """評価・トラッキング対象のユーザー。

    key 以外の属性は attributes にそのまま保持する（このライブラリでは解釈しない）。
    """

    key: Any = None
    attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> User:
        """{"key": ..., "name": ...} 形式の辞書から User を生成する。"""
        attributes = {k: copy.deepcopy(v) for k, v in data.items() if k != "key"}
        return cls(key=data.get("key"), attributes=attributes)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.key is not None:
            result["key"] = self.key
        result.update(copy.deepcopy(self.attributes))
        return result


@dataclass
class FlagEvaluationResult:
    """フラグストアが返す評価結果。未知のフラグはストアが None を返す。"""

    value: Any = None
    variation: int | None = None
    version: int | None = None
    flag_version: int | None = None
    track_events: bool | None = None
    debug_events_until_date: int | None = None
    reason: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FlagEvaluationResult:
        """フラグサービスの JSON 形式（camelCase）から生成する。"""
        return cls(
            value=data.get("value"),
            variation=data.get("variation"),
            version=data.get("version"),
            flag_version=data.get("flagVersion"),
            track_events=data.get("trackEvents"),
            debug_events_until_date=data.get("debugEventsUntilDate"),
            reason=data.get("reason"),
        )


@dataclass(frozen=True)
class EvaluationDetail:
    """variation_detail() の戻り値。"""

    value: Any
    variation_index: int | None = None
    reason: dict[str, Any] | None = None


@dataclass(frozen=True)
class IdentifyEvent:
    """identify イベント。"""

    user: User
    kind: EventKind = field(default=EventKind.IDENTIFY, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "user": self.user.to_dict()}


@dataclass(frozen=True)
class FeatureEvent:
    """フラグ評価 1 回分の feature イベント。"""

    key: str
    value: Any
    variation: int | None
    default: Any
    user: User
    version: int | None = None
    track_events: bool | None = None
    debug_events_until_date: int | None = None
    reason: dict[str, Any] | None = None
    kind: EventKind = field(default=EventKind.FEATURE, init=False)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "kind": self.kind.value,
            "key": self.key,
            "value": self.value,
            "variation": self.variation,
            "default": self.default,
            "user": self.user.to_dict(),
        }
        if self.version is not None:
            result["version"] = self.version
        if self.track_events is not None:
            result["trackEvents"] = self.track_events
        if self.debug_events_until_date is not None:
            result["debugEventsUntilDate"] = self.debug_events_until_date
        if self.reason is not None:
            result["reason"] = self.reason
        return result


@dataclass(frozen=True)
class CustomEvent:
    """track() で生成されるカスタムイベント。

    FlagEventsClient 経由では url は常に設定される（現在の URL がなければ空文字列）。
    None は build_custom_event を url なしで直接呼んだ場合のみで、その時は出力しない。
    """

    key: str
    user: User
    data: Any = None
    url: str | None = None
    kind: EventKind = field(default=EventKind.CUSTOM, init=False)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "kind": self.kind.value,
            "key": self.key,
            "user": self.user.to_dict(),
        }
        if self.data is not None:
            result["data"] = self.data
        if self.url is not None:
            result["url"] = self.url
        return result


Event = IdentifyEvent | FeatureEvent | CustomEvent
