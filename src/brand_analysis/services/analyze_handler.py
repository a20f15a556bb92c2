from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from ..adapters.simulated import SimulatedAnalysisClient
from ..config.settings import AppSettings
from ..core.errors import ClientRequestError, InvalidRequestError, MissingCredentialError
from ..core.types import AnalysisRequest, HandlerResponse

RequestBody = Union[str, bytes, bytearray, Mapping[str, Any], None]

logger = logging.getLogger(__name__)


class AnalyzeHandler:
    """伺服器端分析入口：解析請求、決定金鑰並回傳報告。"""

    def __init__(self, settings: AppSettings, client: Optional[SimulatedAnalysisClient] = None) -> None:
        self._fallback_api_key = settings.fallback_api_key
        self._client = client or SimulatedAnalysisClient()

    def handle(self, body: RequestBody) -> HandlerResponse:
        """處理單次請求，用戶端錯誤一律轉為 400 回應。"""

        try:
            request = self.parse_request(body)
            credential = self.resolve_credential(request.api_key)
            report = self._client.analyze(request.asset_name, credential)
        except ClientRequestError as error:
            logger.warning("analysis_rejected", extra={"reason": type(error).__name__})
            return HandlerResponse.error(error.status_code, error.message)

        logger.info(
            "analysis_completed",
            extra={
                "asset_name": request.asset_name,
                "total_score": report.spark.total_score,
                "final_grade": report.spark.final_grade,
            },
        )
        return HandlerResponse(status_code=200, body=report.to_payload())

    @staticmethod
    def parse_request(body: RequestBody) -> AnalysisRequest:
        """將原始請求內容轉為 AnalysisRequest。"""

        payload: Any = body
        if isinstance(body, (str, bytes, bytearray)):
            try:
                payload = json.loads(body)
            except (json.JSONDecodeError, UnicodeDecodeError) as error:
                raise InvalidRequestError() from error
        if not isinstance(payload, Mapping):
            raise InvalidRequestError()
        try:
            return AnalysisRequest.model_validate(dict(payload))
        except ValidationError as error:
            raise InvalidRequestError() from error

    def resolve_credential(self, api_key: Optional[str]) -> str:
        """呼叫端金鑰優先，否則使用伺服器備援金鑰。"""

        credential = api_key or self._fallback_api_key
        if not credential:
            raise MissingCredentialError()
        return credential
