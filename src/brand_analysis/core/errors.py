from __future__ import annotations


class AnalysisError(Exception):
    """品牌分析流程的基底例外。"""


class ConfigurationError(AnalysisError):
    """設定或環境變數錯誤。"""


class ClientRequestError(AnalysisError):
    """可直接回覆給呼叫端的請求錯誤。"""

    status_code = 400
    message = "Bad request."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class InvalidRequestError(ClientRequestError):
    """請求內容無法解析或欄位型別錯誤。"""

    message = "Invalid request body."


class MissingCredentialError(ClientRequestError):
    """呼叫端與伺服器皆未提供 API 金鑰。"""

    message = "API key is missing."
