"""
Tests for all-or-nothing recall grading.
"""

from core.grading import RecallResult, grade_recall, normalize_answer, split_lines
from core.schemas import CorpusItem


DOG = CorpusItem(word="犬", reading="いぬ", meaning="dog")
CAT = CorpusItem(word="猫", reading="ねこ", meaning="cat")


def test_missing_item_fails_and_meaning_counts_as_extra():
    result = grade_recall([DOG, CAT], ["いぬ", "dog"])

    assert not result.passed
    assert result.missing == ["猫"]
    assert result.extras == ["dog"]


def test_word_or_reading_both_accepted():
    result = grade_recall([DOG, CAT], ["犬", "ねこ"])
    assert result == RecallResult(passed=True, missing=[], extras=[])


def test_case_and_whitespace_are_ignored():
    items = [
        CorpusItem(word="Tokyo", reading="とうきょう"),
        CorpusItem(word="Osaka", reading="おおさか"),
        CorpusItem(word="Kyoto", reading="きょうと"),
        CorpusItem(word="Nara", reading="なら"),
        CorpusItem(word="Kobe", reading="こうべ"),
    ]
    lines = ["  tokyo", "OSAKA  ", "\tKyOtO", "なら", "kobe"]

    result = grade_recall(items, lines)

    assert result.passed
    assert result.missing == []
    assert result.extras == []


def test_empty_submission_misses_everything():
    result = grade_recall([DOG, CAT], [])
    assert not result.passed
    assert result.missing == ["犬", "猫"]
    assert result.extras == []


def test_empty_active_set_passes():
    assert grade_recall([], ["anything"]).passed


def test_extras_are_deduplicated_and_blanks_dropped():
    result = grade_recall([DOG], ["いぬ", "Bird", "", "   ", "bird"])
    assert result.passed
    assert result.extras == ["bird"]


def test_item_without_reading_matches_on_word():
    item = CorpusItem(word="ok")
    assert grade_recall([item], ["OK"]).passed
    assert not grade_recall([item], [""]).passed


def test_grading_is_deterministic():
    lines = ["いぬ", "dog", "fish"]
    assert grade_recall([DOG, CAT], lines) == grade_recall([DOG, CAT], lines)


def test_normalize_answer_is_idempotent():
    for text in ["  Hello ", "STRASSE", "いぬ", "", "\tMiXeD\n"]:
        once = normalize_answer(text)
        assert normalize_answer(once) == once


def test_split_lines_drops_blank_lines():
    assert split_lines("いぬ\n\n  ねこ  \r\n") == ["いぬ", "ねこ"]
    assert split_lines("") == []


def test_result_to_dict():
    result = grade_recall([DOG, CAT], ["いぬ"])
    assert result.to_dict() == {"pass": False, "missing": ["猫"], "extras": []}
