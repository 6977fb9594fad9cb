"""
core — 斷言引擎核心

FailureMessage、comparator、fluent wrapper、finalizer 與 Periodic 輪詢器。
一般使用請直接 import fluentassert。
"""
