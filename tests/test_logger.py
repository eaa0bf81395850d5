"""ロガー設定のユニットテスト"""

import io
import json
import logging

from k1s0_flag_events import Identity, LogSection, PrivacyGate, StaticPlatform, logger_from_config, new_logger


def test_new_logger_json_format() -> None:
    """JSON フォーマットのロガーが作成できること。"""
    logger = new_logger(level="INFO", format="json", stream=io.StringIO())
    assert logger is not None


def test_new_logger_text_format() -> None:
    """テキストフォーマットのロガーが作成できること。"""
    logger = new_logger(level="DEBUG", format="text", stream=io.StringIO())
    assert logger is not None


def test_library_module_logs_are_rendered_as_json() -> None:
    """ライブラリ内モジュールのログが JSON で出力されること。"""
    stream = io.StringIO()
    new_logger(level="DEBUG", format="json", stream=stream)
    Identity().set_user(None)
    record = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["event"] == "identity.set_user.ignored"
    assert record["logger"] == "k1s0_flag_events.identity"
    assert record["level"] == "debug"


def test_level_filters_library_logs() -> None:
    """設定レベル未満のログは出力されないこと。"""
    stream = io.StringIO()
    logger_from_config(LogSection(level="WARNING", format="json"))
    new_logger(level="WARNING", format="json", stream=stream)
    PrivacyGate(StaticPlatform(do_not_track=True)).allows("custom", "k")
    assert stream.getvalue() == ""


def test_reconfigure_replaces_handler() -> None:
    """再設定してもライブラリ用ハンドラーが重複しないこと。"""
    new_logger(stream=io.StringIO())
    new_logger(stream=io.StringIO())
    handlers = [
        h for h in logging.getLogger("k1s0_flag_events").handlers if getattr(h, "_k1s0_flag_events", False)
    ]
    assert len(handlers) == 1
    assert logging.getLogger("k1s0_flag_events").propagate is False
