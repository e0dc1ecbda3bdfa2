import pytest

from thinknote.summary import split_sentences, trim_to_word_cap, word_count

PARAGRAPH = (
    "Photosynthesis turns light into chemical energy. Plants store that energy as sugar! "
    "Why does this matter for animals? Because almost every food chain starts with it."
)


def test_split_sentences_keeps_order_and_terminal_punctuation():
    assert split_sentences("A b. C d! E f?") == ["A b. ", "C d! ", "E f?"]


def test_split_sentences_collapses_whitespace():
    assert split_sentences("First  one.\n\nSecond\tone.") == ["First one. ", "Second one."]


def test_split_sentences_keeps_duplicates():
    assert split_sentences("Again. Again.") == ["Again. ", "Again."]


def test_split_sentences_groups_repeated_punctuation():
    assert split_sentences("Wait... what?!") == ["Wait... ", "what?!"]


def test_split_sentences_without_punctuation_returns_whole_text():
    assert split_sentences("  no punctuation   at all  ") == ["no punctuation at all"]


def test_split_sentences_drops_trailing_fragment():
    assert split_sentences("Complete sentence here. trailing fragment") == ["Complete sentence here. "]


def test_trim_stops_at_first_sentence_that_overflows():
    assert trim_to_word_cap("One. Two three four. Five.", 3) == "One."


def test_trim_does_not_skip_ahead_to_shorter_sentences():
    # "Five." would fit after "One." but accumulation stops at the first overflow.
    assert trim_to_word_cap("One. Two three four. Five.", 2) == "One."


def test_trim_keeps_everything_within_cap():
    assert trim_to_word_cap(PARAGRAPH, 100) == PARAGRAPH


def test_trim_normalizes_whitespace_between_sentences():
    assert trim_to_word_cap("First  one.\n\n  Second one.  ", 10) == "First one. Second one."


def test_run_on_sentence_falls_back_to_word_clipping():
    text = "alpha beta gamma delta epsilon zeta eta theta iota kappa"

    assert trim_to_word_cap(text, 3) == "alpha beta gamma."


def test_long_first_sentence_falls_back_to_word_clipping():
    text = "This opening sentence is far too long for the budget. Short one."

    assert trim_to_word_cap(text, 4) == "This opening sentence is."


def test_punctuation_glued_to_a_word_is_not_a_sentence_boundary():
    assert trim_to_word_cap("Is it?This runs on without a break", 2) == "Is it?This."


def test_fallback_does_not_add_a_second_terminal_mark():
    assert trim_to_word_cap("?? what is this about.", 1) == "??"


def test_unpunctuated_text_within_cap_is_returned_as_is():
    assert trim_to_word_cap("hello   world", 5) == "hello world"


def test_zero_cap_returns_a_lone_period():
    assert trim_to_word_cap("Some text here.", 0) == "."
    assert trim_to_word_cap("", 0) == "."


def test_negative_cap_is_treated_as_zero():
    assert trim_to_word_cap("Some text here.", -5) == "."


@pytest.mark.parametrize("cap", range(1, 30))
def test_trim_never_exceeds_cap(cap):
    assert word_count(trim_to_word_cap(PARAGRAPH, cap)) <= cap


@pytest.mark.parametrize("cap", [0, 1, 5, 9, 50])
def test_trim_never_expands_text(cap):
    assert word_count(trim_to_word_cap(PARAGRAPH, cap)) <= max(word_count(PARAGRAPH), cap)


@pytest.mark.parametrize("cap", [word_count(PARAGRAPH), word_count(PARAGRAPH) + 10])
def test_trim_is_idempotent_on_compliant_text(cap):
    once = trim_to_word_cap(PARAGRAPH, cap)

    assert once == PARAGRAPH
    assert trim_to_word_cap(once, cap) == once


@pytest.mark.parametrize("cap", [0, 1, 3, 8])
def test_trim_output_is_never_empty_for_non_empty_text(cap):
    assert trim_to_word_cap(PARAGRAPH, cap)


@pytest.mark.parametrize("text", ["", "   ", "\n\t", " \r\n "])
@pytest.mark.parametrize("cap", [1, 5])
def test_blank_text_still_yields_a_period(text, cap):
    assert trim_to_word_cap(text, cap) == "."
