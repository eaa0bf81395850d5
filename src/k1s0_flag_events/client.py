"""FlagEventsClient — identify / variation / track からのイベント生成"""

from __future__ import annotations

from typing import Any, Mapping

from .dispatch import DispatchMode, EventDispatcher
from .exceptions import FlagEventsError, FlagEventsErrorCodes
from .factory import build_custom_event, build_feature_event, build_identify_event
from .identity import Identity
from .interfaces import EventQueue, FlagStore, Platform, StateProvider
from .models import EvaluationDetail, FlagEvaluationResult, User
from .privacy import PrivacyGate


class FlagEventsClient:
    """フィーチャーフラグ SDK のイベント生成コア。

    すべての操作は呼び出し元のスレッドで同期的に完了する。ローカルモードでは
    初期ユーザーの identify イベントがコンストラクタ内で配送されるため、以降の
    feature イベントより必ず先にキューへ入る。state_provider 指定時は初期
    ユーザーの identify イベントを送らず、identify() 呼び出し分のみ送る。
    """

    def __init__(
        self,
        user: User | Mapping[str, Any],
        event_queue: EventQueue,
        flag_store: FlagStore,
        platform: Platform,
        state_provider: StateProvider | None = None,
    ) -> None:
        if user is None:
            raise FlagEventsError(
                FlagEventsErrorCodes.INVALID_USER,
                "initial user is required",
            )
        self._event_queue = event_queue
        self._flag_store = flag_store
        self._platform = platform
        self._privacy = PrivacyGate(platform)
        self._dispatcher = EventDispatcher.create(event_queue, state_provider)
        self._identity = Identity(user)
        if self._dispatcher.mode is DispatchMode.LOCAL:
            self._event_queue.start()
            # ダイバートモードの初期ユーザーはプロバイダー由来のため identify しない
            self._send_identify_event(self._identity.get_user())
        self._identity.add_listener(self._send_identify_event)

    @property
    def dispatch_mode(self) -> DispatchMode:
        return self._dispatcher.mode

    def _send_identify_event(self, user: User) -> None:
        if not self._privacy.allows("identify", user.key):
            return
        self._dispatcher.dispatch(build_identify_event(user))

    def get_user(self) -> User | None:
        return self._identity.get_user()

    def identify(self, user: User | Mapping[str, Any] | None) -> None:
        """現在のユーザーを置き換える。None の場合は何もしない。"""
        self._identity.set_user(user)

    def _evaluate(self, flag_key: str, default: Any) -> FlagEvaluationResult | None:
        result = self._flag_store.get(flag_key)
        if self._privacy.allows("feature", flag_key):
            user = self._identity.get_user()
            self._dispatcher.dispatch(build_feature_event(user, flag_key, default, result))
        return result

    def variation(self, flag_key: str, default: Any = None) -> Any:
        """フラグ値を返す。未知のフラグは default を返す。"""
        result = self._evaluate(flag_key, default)
        return default if result is None else result.value

    def variation_detail(self, flag_key: str, default: Any = None) -> EvaluationDetail:
        """フラグ値と評価理由を返す。"""
        result = self._evaluate(flag_key, default)
        if result is None:
            return EvaluationDetail(value=default)
        return EvaluationDetail(
            value=result.value,
            variation_index=result.variation,
            reason=result.reason,
        )

    def track(self, key: str, data: Any = None) -> None:
        """カスタムイベントを送信する。"""
        if not isinstance(key, str) or not key:
            raise FlagEventsError(
                FlagEventsErrorCodes.INVALID_EVENT_KEY,
                f"custom event key must be a non-empty string: {key!r}",
            )
        if not self._privacy.allows("custom", key):
            return
        user = self._identity.get_user()
        url = self._platform.current_url() or ""
        self._dispatcher.dispatch(build_custom_event(user, key, data=data, url=url))

    def all_flags(self) -> dict[str, Any]:
        """既知のフラグ値のスナップショットを返す。イベントは生成しない。"""
        flags: dict[str, Any] = {}
        for key in self._flag_store.keys():
            result = self._flag_store.get(key)
            if result is not None:
                flags[key] = result.value
        return flags

    def flush(self) -> None:
        if self._dispatcher.mode is DispatchMode.LOCAL:
            self._event_queue.flush()

    def close(self) -> None:
        if self._dispatcher.mode is DispatchMode.LOCAL:
            self._event_queue.stop()
