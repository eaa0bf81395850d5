"""現在のユーザーを保持する Identity"""

from __future__ import annotations

import copy
from typing import Any, Callable, Mapping

import structlog

from .models import User

UserListener = Callable[[User], None]

logger = structlog.get_logger(__name__)


def sanitize_user(user: User | Mapping[str, Any]) -> User:
    """ユーザーのディープコピーを返す。key が存在すれば文字列に変換する。"""
    sane = User.from_dict(user) if isinstance(user, Mapping) else copy.deepcopy(user)
    if sane.key is not None:
        sane.key = str(sane.key)
    return sane


class Identity:
    """現在のユーザーを単一の所有者として保持する。

    get_user() と変更通知はいずれもディープコピーを渡すため、呼び出し側の変更が
    内部状態に影響することはない。
    """

    def __init__(
        self,
        initial_user: User | Mapping[str, Any] | None = None,
        on_change: UserListener | None = None,
    ) -> None:
        self._user: User | None = None
        self._listeners: list[UserListener] = []
        if on_change is not None:
            self._listeners.append(on_change)
        if initial_user is not None:
            self.set_user(initial_user)

    def add_listener(self, listener: UserListener) -> None:
        """ユーザー変更リスナーを登録する。"""
        self._listeners.append(listener)

    def remove_listener(self, listener: UserListener) -> None:
        """登録済みのリスナーを解除する。未登録なら何もしない。"""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_user(self, user: User | Mapping[str, Any] | None) -> None:
        """ユーザーを置き換え、リスナーへ同期的に通知する。

        None は無視され、直前のユーザーがそのまま保持される。
        """
        if user is None:
            logger.debug("identity.set_user.ignored", reason="user is None")
            return
        self._user = sanitize_user(user)
        for listener in list(self._listeners):
            listener(copy.deepcopy(self._user))

    def get_user(self) -> User | None:
        """現在のユーザーのコピーを返す。未設定なら None。"""
        if self._user is None:
            return None
        return copy.deepcopy(self._user)
