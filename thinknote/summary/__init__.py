"""Summary length control: word budgets and sentence-preserving trimming."""

from thinknote.summary.enforcement import enforce_word_budget
from thinknote.summary.policy import (
    DEFAULT_THRESHOLDS,
    PolicyThresholds,
    SummaryPolicy,
    SummaryTier,
    classify_transcript,
    compute_policy,
    word_count,
)
from thinknote.summary.prompts import build_summary_system_prompt, build_summary_user_prompt
from thinknote.summary.trimming import split_sentences, trim_to_word_cap

__all__ = [
    "DEFAULT_THRESHOLDS",
    "PolicyThresholds",
    "SummaryPolicy",
    "SummaryTier",
    "build_summary_system_prompt",
    "build_summary_user_prompt",
    "classify_transcript",
    "compute_policy",
    "enforce_word_budget",
    "split_sentences",
    "trim_to_word_cap",
    "word_count",
]
