"""報告中的固定文案，名稱與 TLD 以參數帶入。"""

from __future__ import annotations

from typing import Tuple

from ..core.utils import name_length

LONG_NAME_THRESHOLD = 7

SIEVE_RATIONALE = "The asset has clear commercial potential."
STORY_RATIONALE = "The narrative is compelling, suggesting a brand built on a powerful mission."
COMPASS_RATIONALE = "Establishes immediate authority in its niche."
CURRENT_RATIONALE = "The name aligns perfectly with current cultural trends."
LIGHTNING_RATIONALE = 'The "Aha!" is the satisfying recognition of a name that perfectly encapsulates a vision.'
ALISTAIR_INSIGHT = "A versatile, all-around strong asset with a good story and solid commercial potential."

IGNITION_MYTH = (
    "To build the definitive platform for creative collaboration, "
    "making complex systems accessible and human-centric."
)
IGNITION_ARCHETYPE = "The Systems Thinker: A founder who sees the big picture."
IGNITION_MOAT = "The name's primary moat is its clarity and authority."
IGNITION_MOVES: Tuple[str, str, str] = (
    "Publish a founding manifesto.",
    "Secure key social media handles.",
    "Begin building a community.",
)


def echo_analysis(name: str) -> str:
    return (
        f"The chamber finds a strong positive resonance around '{name}'. "
        "Its primal feel is direct, it evokes a clear founder vision, "
        "and its narrative potential is significant."
    )


def bedrock_rationale(name: str) -> str:
    if name_length(name) > LONG_NAME_THRESHOLD:
        detail = "length is a minor liability"
    else:
        detail = "brevity is a major asset"
    return f"A strong linguistic foundation. Its {detail}."


def locus_rationale(tld: str) -> str:
    return f"The .{tld} TLD is a solid, modern choice."


def cartography_summary(name: str) -> str:
    return (
        f"Initial checks suggest social handles for '{name}' are likely taken, "
        "requiring creative modifiers."
    )


def shadow_analysis(tld: str) -> str:
    return (
        "The Conceptual Shadow is minimal. "
        f"Any primary risk lies in the Associative Shadow of the .{tld} TLD."
    )


def ignition_moves() -> Tuple[str, str, str]:
    return IGNITION_MOVES
