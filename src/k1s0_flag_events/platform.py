"""Platform 実装"""

from __future__ import annotations

import os

from .config import ClientConfig

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class EnvironmentPlatform:
    """環境変数から do-not-track と現在の URL を読み取る。

    値は呼び出しのたびに読み直すため、実行中の切り替えがそのまま反映される。
    """

    def __init__(
        self,
        do_not_track_env: str = "K1S0_FLAG_DO_NOT_TRACK",
        current_url_env: str = "K1S0_FLAG_CURRENT_URL",
    ) -> None:
        self._do_not_track_env = do_not_track_env
        self._current_url_env = current_url_env

    @classmethod
    def from_config(cls, config: ClientConfig) -> EnvironmentPlatform:
        return cls(
            do_not_track_env=config.events.do_not_track_env,
            current_url_env=config.events.current_url_env,
        )

    def do_not_track(self) -> bool:
        value = os.environ.get(self._do_not_track_env, "")
        return value.strip().lower() in _TRUTHY

    def current_url(self) -> str:
        """現在の URL を返す。未設定なら空文字列。"""
        return os.environ.get(self._current_url_env, "")


class StaticPlatform:
    """テスト用のインメモリ Platform。"""

    def __init__(self, do_not_track: bool = False, current_url: str = "") -> None:
        self._do_not_track = do_not_track
        self._current_url = current_url

    def set_do_not_track(self, value: bool) -> None:
        self._do_not_track = value

    def set_current_url(self, url: str) -> None:
        self._current_url = url

    def do_not_track(self) -> bool:
        return self._do_not_track

    def current_url(self) -> str:
        return self._current_url
