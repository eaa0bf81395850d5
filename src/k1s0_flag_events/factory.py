"""イベントの組み立て"""

from __future__ import annotations

from typing import Any

from .models import CustomEvent, FeatureEvent, FlagEvaluationResult, IdentifyEvent, User


def build_identify_event(user: User) -> IdentifyEvent:
    return IdentifyEvent(user=user)


def build_feature_event(
    user: User,
    flag_key: str,
    default: Any,
    result: FlagEvaluationResult | None,
) -> FeatureEvent:
    """フラグ評価 1 回分の feature イベントを組み立てる。

    result が None（未知のフラグ）の場合、value は default、variation は None、
    version は欠落となる。version は flag_version を version より優先する。
    """
    if result is None:
        return FeatureEvent(
            key=flag_key,
            value=default,
            variation=None,
            default=default,
            user=user,
        )
    version = result.flag_version if result.flag_version is not None else result.version
    return FeatureEvent(
        key=flag_key,
        value=result.value,
        variation=result.variation,
        default=default,
        user=user,
        version=version,
        track_events=result.track_events,
        debug_events_until_date=result.debug_events_until_date,
        reason=result.reason,
    )


def build_custom_event(
    user: User,
    key: str,
    data: Any = None,
    url: str | None = None,
) -> CustomEvent:
    """カスタムイベントを組み立てる。data は指定時のみ含まれる。"""
    return CustomEvent(key=key, user=user, data=data, url=url)
