from __future__ import annotations

import logging
from typing import IO, Optional

import structlog

CONSOLE_HANDLER_NAME = "brand_analysis.console"


def configure_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """設定結構化日誌格式，標準 logging 的 extra 欄位一併輸出。"""

    timestamper = structlog.processors.TimeStamper(fmt="iso")
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ExtraAdder(),
            timestamper,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
    )
    handler = logging.StreamHandler(stream)
    handler.set_name(CONSOLE_HANDLER_NAME)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    # 重複呼叫時只保留一個主控台 handler
    for existing in list(root.handlers):
        if existing.get_name() == CONSOLE_HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger("brand_analysis").setLevel(level)

    structlog.configure(
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
    )
