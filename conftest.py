"""
pytest 全域設定

- fluentassert.plugin：reporter fixture 與 --fluent-poll-* 參數
- pytester：plugin 本身的測試需要
"""

pytest_plugins = ["pytester", "fluentassert.plugin"]
