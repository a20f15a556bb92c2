from __future__ import annotations

from typing import Optional

from ..core.types import Report
from ..reports.generator import ReportGenerator


class SimulatedAnalysisClient:
    """模擬第三方推論 API，實際交由 ReportGenerator 產生報告。"""

    def __init__(self, generator: Optional[ReportGenerator] = None) -> None:
        self._generator = generator or ReportGenerator()

    def analyze(self, asset_name: str, api_key: Optional[str]) -> Report:
        # 真實串接時金鑰只在此處使用，不寫入日誌
        return self._generator.generate(asset_name, api_key)
