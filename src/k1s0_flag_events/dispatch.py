"""イベントの配送先の決定"""

from __future__ import annotations

from enum import Enum

import structlog

from .exceptions import FlagEventsError, FlagEventsErrorCodes
from .interfaces import EventQueue, StateProvider
from .models import Event

logger = structlog.get_logger(__name__)


class DispatchMode(str, Enum):
    """配送モード。インスタンスの生存期間中は変化しない。"""

    LOCAL = "local"
    DIVERTED = "diverted"


class EventDispatcher:
    """イベントをローカルキューまたは外部状態プロバイダーへ渡す。

    イベントの変換や再送は行わない。コラボレーター側の例外はそのまま伝播する。
    """

    def __init__(
        self,
        mode: DispatchMode,
        event_queue: EventQueue | None = None,
        state_provider: StateProvider | None = None,
    ) -> None:
        if mode is DispatchMode.LOCAL and event_queue is None:
            raise FlagEventsError(
                FlagEventsErrorCodes.INVALID_DISPATCH,
                "event_queue is required in local mode",
            )
        if mode is DispatchMode.DIVERTED and state_provider is None:
            raise FlagEventsError(
                FlagEventsErrorCodes.INVALID_DISPATCH,
                "state_provider is required in diverted mode",
            )
        self._mode = mode
        self._event_queue = event_queue
        self._state_provider = state_provider

    @classmethod
    def create(
        cls,
        event_queue: EventQueue | None,
        state_provider: StateProvider | None = None,
    ) -> EventDispatcher:
        """state_provider の有無でモードを決定して生成する。"""
        if state_provider is not None:
            return cls(DispatchMode.DIVERTED, state_provider=state_provider)
        return cls(DispatchMode.LOCAL, event_queue=event_queue)

    @property
    def mode(self) -> DispatchMode:
        return self._mode

    def dispatch(self, event: Event) -> None:
        if self._mode is DispatchMode.DIVERTED:
            self._state_provider.enqueue_event(event)  # type: ignore[union-attr]
        else:
            self._event_queue.enqueue(event)  # type: ignore[union-attr]
        logger.debug("dispatch.event_dispatched", kind=event.kind.value, mode=self._mode.value)
