"""インメモリ実装のユニットテスト"""

import pytest
from k1s0_flag_events import (
    FlagEvaluationResult,
    FlagEventsError,
    FlagEventsErrorCodes,
    InMemoryFlagStore,
)


def test_set_get_remove_flag() -> None:
    """フラグの設定・取得・削除。"""
    store = InMemoryFlagStore()
    result = FlagEvaluationResult(value=True, variation=0, version=1)
    store.set_flag("on-flag", result)
    assert store.get("on-flag") == result
    assert store.keys() == ["on-flag"]
    store.remove_flag("on-flag")
    assert store.get("on-flag") is None
    store.remove_flag("on-flag")


def test_unknown_flag_returns_none() -> None:
    """未知のフラグは None を返すこと。"""
    assert InMemoryFlagStore().get("no-such-flag") is None


def test_from_bootstrap_without_flags_state() -> None:
    """$flagsState がなければ値のみの評価結果になること。"""
    store = InMemoryFlagStore.from_bootstrap({"foo": "bar"})
    assert store.get("foo") == FlagEvaluationResult(value="bar")


def test_from_bootstrap_skips_metadata_keys() -> None:
    """$ で始まるキーはフラグとして扱わないこと。"""
    store = InMemoryFlagStore.from_bootstrap({"foo": 1, "$flagsState": {}, "$valid": True})
    assert store.keys() == ["foo"]


def test_from_bootstrap_ignores_value_in_metadata() -> None:
    """トップレベルの値がメタデータより優先されること。"""
    store = InMemoryFlagStore.from_bootstrap(
        {"foo": "bar", "$flagsState": {"foo": {"value": "stale", "flagVersion": 5}}}
    )
    result = store.get("foo")
    assert result.value == "bar"
    assert result.flag_version == 5


@pytest.mark.parametrize(
    "data",
    [
        ["foo"],
        {"foo": 1, "$flagsState": ["x"]},
        {"foo": "bar", "$flagsState": {"foo": 5}},
        {1: "bar"},
    ],
)
def test_from_bootstrap_invalid(data: object) -> None:
    """不正な bootstrap データはエラーになること。"""
    with pytest.raises(FlagEventsError) as exc_info:
        InMemoryFlagStore.from_bootstrap(data)  # type: ignore[arg-type]
    assert exc_info.value.code == FlagEventsErrorCodes.INVALID_BOOTSTRAP
