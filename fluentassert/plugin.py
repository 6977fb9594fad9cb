"""
fluentassert pytest plugin

在 conftest.py 加入：
    pytest_plugins = ["fluentassert.plugin"]

提供：
- reporter fixture：每個測試一個 PytestReporter
- assert_() 記錄的失敗在測試本體結束後一次報告
- --fluent-poll-timeout / --fluent-poll-interval 覆蓋 Periodic 預設值
"""

import pytest

from fluentassert.config.config import Config
from fluentassert.core.exceptions import InvalidConfigError
from fluentassert.core.reporter import PytestReporter
from fluentassert.utils.logger import logger

_saved_config: dict = {}


# ── 命令列參數 ──

def pytest_addoption(parser):
    group = parser.getgroup("fluentassert")
    group.addoption(
        "--fluent-poll-timeout",
        action="store",
        type=float,
        default=None,
        help="Periodic 預設 timeout 秒數",
    )
    group.addoption(
        "--fluent-poll-interval",
        action="store",
        type=float,
        default=None,
        help="Periodic 預設 interval 秒數",
    )


def pytest_configure(config):
    overrides = {}
    timeout = config.getoption("--fluent-poll-timeout")
    interval = config.getoption("--fluent-poll-interval")
    if timeout is not None:
        overrides["POLL_TIMEOUT"] = timeout
    if interval is not None:
        overrides["POLL_INTERVAL"] = interval
    if overrides:
        try:
            _saved_config.update(Config.override(**overrides))
        except InvalidConfigError as e:
            raise pytest.UsageError(str(e)) from e
        logger.info(f"Periodic 預設值已覆蓋: {overrides}")


def pytest_unconfigure(config):
    if _saved_config:
        Config.override(**_saved_config)
        _saved_config.clear()


# ── fixtures ──

@pytest.fixture
def reporter() -> PytestReporter:
    """每個測試獨立的 reporter"""
    return PytestReporter()


# ── hooks ──

@pytest.hookimpl(wrapper=True)
def pytest_runtest_call(item):
    """測試本體正常結束後，若 reporter 收集到失敗則讓測試失敗"""
    result = yield
    funcargs = getattr(item, "funcargs", {})
    collected = funcargs.get("reporter")
    if isinstance(collected, PytestReporter) and collected.failed:
        logger.debug(f"{item.nodeid}: {len(collected.failures)} 個斷言失敗")
        collected.verify()
    return result
