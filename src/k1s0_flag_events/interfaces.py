"""外部コラボレーターのプロトコル"""

from __future__ import annotations

from typing import Protocol

from .models import Event, FlagEvaluationResult


class EventQueue(Protocol):
    """ローカルイベントキュー。シリアライズと送信はキュー側の責務。"""

    def enqueue(self, event: Event) -> None: ...

    def flush(self) -> None: ...

    def start(self) -> None: ...

    def stop(self) -> None: ...


class StateProvider(Protocol):
    """複数の SDK インスタンスで共有される外部状態プロバイダー。"""

    def enqueue_event(self, event: Event) -> None: ...


class FlagStore(Protocol):
    """フラグ評価結果のストア。未知のキーは None を返す。"""

    def get(self, flag_key: str) -> FlagEvaluationResult | None: ...

    def keys(self) -> list[str]: ...


class Platform(Protocol):
    """do-not-track 設定と現在の URL を提供する実行環境。"""

    def do_not_track(self) -> bool: ...

    def current_url(self) -> str: ...
