"""
fluentassert — 可鏈式呼叫、失敗訊息結構化的斷言工具

用法：
    import fluentassert as f

    def test_order(reporter):
        f.string(order.status).equal("paid").require(reporter)
        f.seq(order.items).equivalent(["a", "b"]).assert_(reporter)
        f.periodic(timeout=5, interval=0.2, check=is_shipped).eventually().assert_(reporter)

reporter fixture 由 fluentassert.plugin 提供（conftest.py 加上
pytest_plugins = ["fluentassert.plugin"]）。
"""

from fluentassert.core.assertion import Assertion
from fluentassert.core.exceptions import (
    ConfigError,
    FluentAssertError,
    InvalidConfigError,
    ReporterError,
)
from fluentassert.core.failure import FailureMessage
from fluentassert.core.poller import Periodic, PollState, periodic
from fluentassert.core.reporter import PytestReporter, Reporter
from fluentassert.core.wrappers import (
    FluentBool,
    FluentErr,
    FluentMapping,
    FluentNumber,
    FluentObj,
    FluentSeq,
    FluentString,
    boolean,
    check,
    err,
    mapping,
    number,
    obj,
    seq,
    string,
)

__all__ = [
    # FailureMessage / finalizer
    "FailureMessage",
    "Assertion",
    "check",
    # Wrappers
    "obj",
    "string",
    "number",
    "boolean",
    "seq",
    "mapping",
    "err",
    "FluentObj",
    "FluentString",
    "FluentNumber",
    "FluentBool",
    "FluentSeq",
    "FluentMapping",
    "FluentErr",
    # Periodic
    "periodic",
    "Periodic",
    "PollState",
    # Reporter
    "Reporter",
    "PytestReporter",
    # Exceptions
    "FluentAssertError",
    "ConfigError",
    "InvalidConfigError",
    "ReporterError",
]
