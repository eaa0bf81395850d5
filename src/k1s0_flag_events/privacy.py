"""do-not-track によるイベント生成の抑止"""

from __future__ import annotations

import structlog

from .interfaces import Platform

logger = structlog.get_logger(__name__)


class PrivacyGate:
    """イベント生成の可否を判定する。判定結果はキャッシュしない。"""

    def __init__(self, platform: Platform) -> None:
        self._platform = platform

    def do_not_track(self) -> bool:
        return bool(self._platform.do_not_track())

    def allows(self, action: str, key: str | None = None) -> bool:
        """イベント生成が許可されていれば True を返す。"""
        if self.do_not_track():
            logger.debug("privacy.event_suppressed", action=action, key=key)
            return False
        return True
