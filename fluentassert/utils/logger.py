"""
日誌模組

預設只輸出到 console（WARNING 以上，避免干擾測試輸出）。
設定 FLUENTASSERT_LOG_DIR 後同時寫入 fluentassert.log；
再設 LOG_JSON=1 會多寫一份每行一筆 JSON 的 fluentassert.json.log。

斷言失敗與輪詢結果以 extra 帶上結構化欄位（見 EXTRA_FIELDS），
JSON 檔會把它們列為獨立欄位，方便事後篩選。
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

from fluentassert.config.config import Config

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# logger.xxx(..., extra={...}) 可帶的欄位
EXTRA_FIELDS = ("reporter_method", "poll_mode", "attempts", "timeout")


class JsonFormatter(logging.Formatter):
    """一行一筆 JSON；只輸出有值的 EXTRA_FIELDS"""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "source": f"{record.module}:{record.lineno}",
            "message": record.getMessage(),
        }
        entry.update(
            (name, getattr(record, name)) for name in EXTRA_FIELDS if hasattr(record, name)
        )
        return json.dumps(entry, ensure_ascii=False)


def _file_handler(path: Path, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def _create_logger() -> logging.Logger:
    _logger = logging.Logger("fluentassert")
    _logger.setLevel(logging.DEBUG)
    text_format = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(getattr(logging, os.getenv("LOG_LEVEL", "WARNING").upper(), logging.WARNING))
    console.setFormatter(text_format)
    _logger.addHandler(console)

    if Config.LOG_DIR:
        log_dir = Path(Config.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        _logger.addHandler(_file_handler(log_dir / "fluentassert.log", text_format))
        if os.getenv("LOG_JSON", "").strip() == "1":
            _logger.addHandler(_file_handler(log_dir / "fluentassert.json.log", JsonFormatter()))

    return _logger


logger = _create_logger()
