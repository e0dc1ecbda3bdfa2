from __future__ import annotations

from thinknote.core.constants import SUMMARY_ASSISTANT_NAME
from thinknote.summary.policy import SummaryPolicy


def build_summary_system_prompt(policy: SummaryPolicy) -> str:
    return (
        f"You are {SUMMARY_ASSISTANT_NAME}, a study assistant for teens and young adults. "
        "Produce a clear, plain-English summary that is significantly shorter than the original transcript.\n\n"
        "STRICT OUTPUT RULES:\n"
        "- Write in plain sentences (no headings, no bullets, no lists, no labels).\n"
        f"- Aim for about {policy.target} words and DO NOT exceed {policy.hard_cap} words.\n"
        "- The summary MUST be shorter than the transcript.\n"
        "- Do not truncate any sentence; always finish your last sentence.\n"
        "- Use short sentences and simple vocabulary. Define unavoidable terms very briefly in-line.\n"
        "- Focus on meaning and main claims; remove filler, repetitions, and side remarks.\n"
        '- No preambles or meta text like "Here is the summary".'
    )


def build_summary_user_prompt(transcript: str) -> str:
    return f"TRANSCRIPT:\n{transcript}\n\nWrite the summary now."
