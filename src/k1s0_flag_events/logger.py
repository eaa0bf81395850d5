"""k1s0_flag_events.* モジュールロガーの structlog 設定"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from .config import LogSection

LIBRARY_LOGGER = "k1s0_flag_events"


def _library_handler(stream: TextIO) -> logging.Handler:
    """ライブラリロガー専用のハンドラーを返す。再設定時は既存のものを差し替える。"""
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in list(library_logger.handlers):
        if getattr(handler, "_k1s0_flag_events", False):
            library_logger.removeHandler(handler)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler._k1s0_flag_events = True  # type: ignore[attr-defined]
    library_logger.addHandler(handler)
    return handler


def new_logger(
    level: str = "INFO",
    format: str = "json",
    stream: TextIO | None = None,
) -> structlog.stdlib.BoundLogger:
    """identity / privacy / dispatch などライブラリ内ロガーの出力を構成する。

    ルートロガーには触れず、"k1s0_flag_events" 配下のロガーにだけレベルと
    ハンドラーを設定する。

    Args:
        level: ログレベル ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        format: 出力形式 ("json" or "text")
        stream: 出力先。省略時は標準出力
    """
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    library_logger.propagate = False
    _library_handler(stream or sys.stdout)

    renderer: structlog.types.Processor
    if format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    return structlog.stdlib.get_logger(LIBRARY_LOGGER)


def logger_from_config(section: LogSection) -> structlog.stdlib.BoundLogger:
    """LogSection からライブラリロガーを構成する。"""
    return new_logger(level=section.level, format=section.format)
