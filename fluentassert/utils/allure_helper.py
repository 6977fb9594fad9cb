"""
Allure 報告整合輔助
將斷言失敗訊息附加到 Allure 報告。
未以 --alluredir 執行時，allure 不會註冊 listener，附件呼叫不產生任何效果。
"""

import allure

from fluentassert.utils.logger import logger


def attach_text(text: str, name: str = "assertion failure") -> None:
    """將文字附加到 Allure 報告"""
    allure.attach(text, name=name, attachment_type=allure.attachment_type.TEXT)
    logger.debug(f"已附加 Allure 文字附件: {name}")
