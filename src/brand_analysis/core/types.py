from __future__ import annotations

import json
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class AnalysisRequest(BaseModel):
    """前端送出的分析請求。"""

    model_config = ConfigDict(extra="ignore", strict=True)

    asset_name: str = Field(..., alias="assetName")
    api_key: Optional[str] = Field(None, alias="apiKey")


class _ReportPart(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class EchoBlock(_ReportPart):
    grade: Literal["B"] = "B"
    analysis: str


class SieveBlock(_ReportPart):
    recommendation: Literal["Curate"] = "Curate"
    rationale: str


class ScoreDetail(_ReportPart):
    """單一子分數與其理由。"""

    score: int
    rationale: str


class SparkAnalysis(_ReportPart):
    """五項子分數，輸出時鍵名維持大寫。"""

    bedrock: ScoreDetail = Field(..., alias="Bedrock")
    story: ScoreDetail = Field(..., alias="Story")
    compass: ScoreDetail = Field(..., alias="Compass")
    current: ScoreDetail = Field(..., alias="Current")
    lightning: ScoreDetail = Field(..., alias="Lightning")

    def scores(self) -> List[int]:
        return [
            self.bedrock.score,
            self.story.score,
            self.compass.score,
            self.current.score,
            self.lightning.score,
        ]


class LocusBlock(_ReportPart):
    grade: Literal["A", "B", "C"]
    rationale: str


class CartographyBlock(_ReportPart):
    summary: str


class AlistairNote(_ReportPart):
    profile: Literal["The Keystone"] = "The Keystone"
    insight: str


class SparkBlock(_ReportPart):
    sieve: SieveBlock
    analysis: SparkAnalysis
    locus: LocusBlock
    cartography: CartographyBlock
    total_score: int = Field(..., alias="totalScore")
    final_grade: str = Field(..., alias="finalGrade")
    alistair_note: AlistairNote = Field(..., alias="alistairNote")


class ShadowBlock(_ReportPart):
    score: Literal["Low"] = "Low"
    analysis: str


class IgnitionBlock(_ReportPart):
    myth: str
    archetype: str
    moat: str
    moves: Tuple[str, str, str]


class Report(_ReportPart):
    """單次分析產出的完整報告。"""

    echo: EchoBlock
    spark: SparkBlock
    shadow: ShadowBlock
    ignition: IgnitionBlock

    def to_payload(self) -> Dict[str, Any]:
        """輸出與前端約定的 JSON 結構。"""

        return self.model_dump(mode="json", by_alias=True)


class HandlerResponse(BaseModel):
    """處理器回傳的狀態碼與內容。"""

    status_code: int
    body: Dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def to_json(self) -> str:
        return json.dumps(self.body)

    @classmethod
    def error(cls, status_code: int, message: str) -> "HandlerResponse":
        return cls(status_code=status_code, body={"error": message})
