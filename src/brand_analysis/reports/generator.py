from __future__ import annotations

import logging
from typing import Optional

from ..core.errors import MissingCredentialError
from ..core.types import (
    AlistairNote,
    CartographyBlock,
    EchoBlock,
    IgnitionBlock,
    LocusBlock,
    Report,
    ScoreDetail,
    ShadowBlock,
    SieveBlock,
    SparkAnalysis,
    SparkBlock,
)
from ..core.utils import RandomSource, SystemRandomSource, split_asset_name
from . import scoring, templates


class ReportGenerator:
    """依資產名稱產生模擬的品牌分析報告。"""

    def __init__(self, random_source: Optional[RandomSource] = None) -> None:
        self._random = random_source or SystemRandomSource()
        self._logger = logging.getLogger(__name__)

    def generate(self, asset_name: str, credential: Optional[str]) -> Report:
        """產生報告；credential 為空時拒絕。"""

        if not credential:
            raise MissingCredentialError()

        name, tld = split_asset_name(asset_name)
        random_scores = scoring.draw_random_scores(self._random)
        analysis = SparkAnalysis(
            Bedrock=ScoreDetail(
                score=scoring.bedrock_score(name),
                rationale=templates.bedrock_rationale(name),
            ),
            Story=ScoreDetail(score=random_scores["Story"], rationale=templates.STORY_RATIONALE),
            Compass=ScoreDetail(score=random_scores["Compass"], rationale=templates.COMPASS_RATIONALE),
            Current=ScoreDetail(score=random_scores["Current"], rationale=templates.CURRENT_RATIONALE),
            Lightning=ScoreDetail(score=random_scores["Lightning"], rationale=templates.LIGHTNING_RATIONALE),
        )
        total = scoring.total_score(analysis.scores())

        report = Report(
            echo=EchoBlock(analysis=templates.echo_analysis(name)),
            spark=SparkBlock(
                sieve=SieveBlock(rationale=templates.SIEVE_RATIONALE),
                analysis=analysis,
                locus=LocusBlock(
                    grade=scoring.locus_grade(tld),
                    rationale=templates.locus_rationale(tld),
                ),
                cartography=CartographyBlock(summary=templates.cartography_summary(name)),
                totalScore=total,
                finalGrade=scoring.spark_grade(total),
                alistairNote=AlistairNote(insight=templates.ALISTAIR_INSIGHT),
            ),
            shadow=ShadowBlock(analysis=templates.shadow_analysis(tld)),
            ignition=IgnitionBlock(
                myth=templates.IGNITION_MYTH,
                archetype=templates.IGNITION_ARCHETYPE,
                moat=templates.IGNITION_MOAT,
                moves=templates.ignition_moves(),
            ),
        )
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug("report_generated", extra={"asset_label": name, "tld": tld, "total_score": total})
        return report
