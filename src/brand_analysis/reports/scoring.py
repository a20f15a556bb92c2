"""Spark 評分規則：子分數、總分等第與 TLD 等第。"""

from __future__ import annotations

import math
from typing import Dict, FrozenSet, Sequence, Tuple

from ..core.utils import RandomSource, name_length

BEDROCK_MAX = 10
BEDROCK_MIN = 3
BEDROCK_LENGTH_STEP = 2.5

# 各隨機子分數的 (基礎分, 亂數上界)，順序即亂數抽取順序
RANDOM_SCORE_RANGES: Tuple[Tuple[str, int, int], ...] = (
    ("Story", 5, 5),
    ("Compass", 5, 5),
    ("Current", 6, 4),
    ("Lightning", 5, 5),
)

SPARK_GRADES: Tuple[Tuple[int, str], ...] = (
    (45, "A+ (Foundational Landmark)"),
    (40, "A (Core Landmark)"),
    (35, "A- (Prime Asset)"),
    (30, "B+ (Strong Asset)"),
)
SPARK_GRADE_FALLBACK = "Curation Pass"

PREMIUM_TLDS: FrozenSet[str] = frozenset({"com", "im", "ai", "io", "art", "eco", "earth"})
WEAK_TLDS: FrozenSet[str] = frozenset({"xyz", "co"})
DEFAULT_LOCUS_GRADE = "B"


def bedrock_score(name: str) -> int:
    """名稱越長分數越低，最低 3 分。"""

    return max(BEDROCK_MIN, BEDROCK_MAX - math.floor(name_length(name) / BEDROCK_LENGTH_STEP))


def draw_random_scores(random_source: RandomSource) -> Dict[str, int]:
    """依固定順序抽取 Story、Compass、Current、Lightning 分數。"""

    return {
        key: base + random_source.below(bound)
        for key, base, bound in RANDOM_SCORE_RANGES
    }


def total_score(scores: Sequence[int]) -> int:
    return sum(scores)


def spark_grade(score: int) -> str:
    """由高至低比對門檻，第一個符合者即為等第。"""

    for threshold, grade in SPARK_GRADES:
        if score >= threshold:
            return grade
    return SPARK_GRADE_FALLBACK


def locus_grade(tld: str) -> str:
    grade = DEFAULT_LOCUS_GRADE
    if tld in PREMIUM_TLDS:
        grade = "A"
    # WEAK_TLDS 須在後判斷並覆蓋結果
    if tld in WEAK_TLDS:
        grade = "C"
    return grade
