"""Word budgets for generated summaries, derived from transcript length."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

_WORD_RE = re.compile(r"\S+")


@dataclass(frozen=True)
class PolicyThresholds:
    """Tier boundaries, absolute bounds and compression ratios."""

    short_transcript_words: int = 80
    long_transcript_words: int = 8000
    short_target_ceiling: int = 40
    short_cap_floor: int = 20
    long_target_ceiling: int = 500
    short_ratio: float = 0.9
    normal_ratio: float = 0.35
    long_ratio: float = 0.25


DEFAULT_THRESHOLDS = PolicyThresholds()


@dataclass(frozen=True)
class SummaryPolicy:
    target: int  # soft goal, advisory only
    hard_cap: int  # enforced after generation
    must_be_shorter_than: int  # transcript words - 1, never below 1


class SummaryTier(str, Enum):
    SHORT = "short"
    NORMAL = "normal"
    LONG = "long"


def word_count(text: str) -> int:
    return len(_WORD_RE.findall(text or ""))


def classify_transcript(words: int, thresholds: PolicyThresholds = DEFAULT_THRESHOLDS) -> SummaryTier:
    if words < thresholds.short_transcript_words:
        return SummaryTier.SHORT
    if words <= thresholds.long_transcript_words:
        return SummaryTier.NORMAL
    return SummaryTier.LONG


def compute_policy(transcript: str, thresholds: PolicyThresholds = DEFAULT_THRESHOLDS) -> SummaryPolicy:
    """
    Compute the word budget for summarizing ``transcript``.

    Every tier clamps ``hard_cap`` to ``must_be_shorter_than`` so a summary can
    never be as long as its source. Total over all strings, including "".
    """
    wc = word_count(transcript)
    must_be_shorter_than = max(1, wc - 1)
    tier = classify_transcript(wc, thresholds)

    if tier is SummaryTier.SHORT:
        target = min(thresholds.short_target_ceiling, math.floor(wc * thresholds.short_ratio))
        hard_cap = min(must_be_shorter_than, max(thresholds.short_cap_floor, target))
        return SummaryPolicy(target=target, hard_cap=hard_cap, must_be_shorter_than=must_be_shorter_than)

    if tier is SummaryTier.NORMAL:
        target = math.floor(wc * thresholds.normal_ratio)
        hard_cap = min(must_be_shorter_than, target)
        return SummaryPolicy(target=target, hard_cap=hard_cap, must_be_shorter_than=must_be_shorter_than)

    target = min(thresholds.long_target_ceiling, math.floor(wc * thresholds.long_ratio))
    hard_cap = min(must_be_shorter_than, target)
    return SummaryPolicy(target=target, hard_cap=hard_cap, must_be_shorter_than=must_be_shorter_than)
