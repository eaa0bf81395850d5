"""FlagEventsError / FlagEventsErrorCodes のユニットテスト"""

from k1s0_flag_events import FlagEventsError, FlagEventsErrorCodes


def test_error_str() -> None:
    """str 表現が 'CODE: message' 形式であること。"""
    err = FlagEventsError(code="INVALID_EVENT_KEY", message="empty key")
    assert str(err) == "INVALID_EVENT_KEY: empty key"
    assert err.code == "INVALID_EVENT_KEY"


def test_error_with_cause() -> None:
    """cause を指定すると __cause__ が設定されること。"""
    cause = OSError("no such file")
    err = FlagEventsError(code=FlagEventsErrorCodes.READ_FILE, message="read", cause=cause)
    assert err.__cause__ is cause


def test_error_codes_constants() -> None:
    """エラーコード定数の値。"""
    assert FlagEventsErrorCodes.READ_FILE == "READ_FILE_ERROR"
    assert FlagEventsErrorCodes.PARSE_YAML == "PARSE_YAML_ERROR"
    assert FlagEventsErrorCodes.VALIDATION == "VALIDATION_ERROR"
    assert FlagEventsErrorCodes.INVALID_USER == "INVALID_USER"
    assert FlagEventsErrorCodes.INVALID_BOOTSTRAP == "INVALID_BOOTSTRAP"
    assert FlagEventsErrorCodes.INVALID_DISPATCH == "INVALID_DISPATCH"
