from __future__ import annotations

import logging
import math

from thinknote.summary.policy import DEFAULT_THRESHOLDS, PolicyThresholds, SummaryPolicy, compute_policy, word_count
from thinknote.summary.trimming import trim_to_word_cap

logger = logging.getLogger(__name__)


def enforce_word_budget(
    draft: str,
    transcript: str,
    policy: SummaryPolicy | None = None,
    thresholds: PolicyThresholds = DEFAULT_THRESHOLDS,
) -> str:
    """
    Trim a generated draft so it respects the policy for ``transcript``.

    Passes run in order and each one only tightens the cap:
    the policy hard cap, then strictly shorter than the transcript, then
    the short-transcript ratio.
    """
    transcript_words = word_count(transcript)
    if policy is None:
        policy = compute_policy(transcript, thresholds)

    final = trim_to_word_cap(draft, policy.hard_cap)

    if word_count(final) >= transcript_words:
        logger.debug("summary not shorter than transcript, re-trimming", extra={"transcript_words": transcript_words})
        final = trim_to_word_cap(final, max(1, transcript_words - 1))

    if transcript_words < thresholds.short_transcript_words:
        short_cap = math.floor(transcript_words * thresholds.short_ratio)
        if word_count(final) > short_cap:
            logger.debug("short transcript over-expanded, re-trimming", extra={"short_cap": short_cap})
            final = trim_to_word_cap(final, short_cap)

    return final
