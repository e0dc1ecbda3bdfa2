from __future__ import annotations

import re

from thinknote.summary.policy import word_count

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+(?:\s|$)")
_TERMINAL_PUNCTUATION = (".", "!", "?")


def split_sentences(text: str) -> list[str]:
    """
    Split text into sentences ending in ``.``, ``!`` or ``?``.

    Whitespace runs are collapsed first. A trailing fragment without terminal
    punctuation is dropped; text with no terminal punctuation at all is one
    sentence.
    """
    collapsed = _WHITESPACE_RE.sub(" ", text or "")
    sentences = [match.group(0) for match in _SENTENCE_RE.finditer(collapsed)]
    if not sentences:
        return [collapsed.strip()]
    return sentences


def trim_to_word_cap(text: str, cap: int) -> str:
    """Keep whole leading sentences of ``text`` up to ``cap`` words."""
    cap = max(0, cap)

    kept: list[str] = []
    total = 0
    for sentence in split_sentences(text):
        sentence_words = word_count(sentence)
        if total + sentence_words > cap:
            break
        kept.append(sentence.strip())
        total += sentence_words

    joined = " ".join(kept).strip()
    if joined:
        return joined

    # Nothing fits whole (one run-on sentence, a tiny cap, or blank text): clip words instead.
    clipped = " ".join((text or "").split()[:cap])
    if not clipped.endswith(_TERMINAL_PUNCTUATION):
        clipped += "."
    return clipped
