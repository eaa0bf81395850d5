"""インメモリのコラボレーター実装"""

from __future__ import annotations

from typing import Any, Mapping

from .exceptions import FlagEventsError, FlagEventsErrorCodes
from .models import Event, FlagEvaluationResult

FLAGS_STATE_KEY = "$flagsState"


class InMemoryEventQueue:
    """テスト用インメモリイベントキュー。"""

    def __init__(self) -> None:
        self.events: list[Event] = []
        self.flush_count = 0
        self.started = False
        self.stopped = False

    def enqueue(self, event: Event) -> None:
        self.events.append(event)

    def flush(self) -> None:
        self.flush_count += 1

    def start(self) -> None:
        self.started = True

    def stop(self) -> None:
        self.stopped = True


class InMemoryStateProvider:
    """テスト用インメモリ状態プロバイダー。受け取ったイベントを記録する。"""

    def __init__(self) -> None:
        self.events: list[Event] = []

    def enqueue_event(self, event: Event) -> None:
        self.events.append(event)


class InMemoryFlagStore:
    """テスト用インメモリフラグストア。"""

    def __init__(self) -> None:
        self._flags: dict[str, FlagEvaluationResult] = {}

    @classmethod
    def from_bootstrap(cls, data: Mapping[str, Any]) -> InMemoryFlagStore:
        """bootstrap データからストアを生成する。

        トップレベルのキーがフラグ値、"$flagsState" がフラグごとのメタデータ。
        "$" で始まるキーはフラグとして扱わない。
        """
        if not isinstance(data, Mapping):
            raise FlagEventsError(
                FlagEventsErrorCodes.INVALID_BOOTSTRAP,
                f"bootstrap data must be a mapping: {type(data).__name__}",
            )
        states = data.get(FLAGS_STATE_KEY) or {}
        if not isinstance(states, Mapping):
            raise FlagEventsError(
                FlagEventsErrorCodes.INVALID_BOOTSTRAP,
                f"{FLAGS_STATE_KEY} must be a mapping: {type(states).__name__}",
            )
        store = cls()
        for key, value in data.items():
            if not isinstance(key, str):
                raise FlagEventsError(
                    FlagEventsErrorCodes.INVALID_BOOTSTRAP,
                    f"flag key must be a string: {key!r}",
                )
            if key.startswith("$"):
                continue
            metadata = states.get(key) or {}
            if not isinstance(metadata, Mapping):
                raise FlagEventsError(
                    FlagEventsErrorCodes.INVALID_BOOTSTRAP,
                    f"{FLAGS_STATE_KEY} entry for {key} must be a mapping: {type(metadata).__name__}",
                )
            store.set_flag(key, FlagEvaluationResult.from_dict({**metadata, "value": value}))
        return store

    def set_flag(self, flag_key: str, result: FlagEvaluationResult) -> None:
        """フラグを設定する。"""
        self._flags[flag_key] = result

    def remove_flag(self, flag_key: str) -> None:
        self._flags.pop(flag_key, None)

    def get(self, flag_key: str) -> FlagEvaluationResult | None:
        return self._flags.get(flag_key)

    def keys(self) -> list[str]:
        return list(self._flags)
