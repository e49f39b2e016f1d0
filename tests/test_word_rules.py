"""
Tests for services.word_rules module.
"""

import pytest

from models.errors import (
    DuplicateWord,
    EmptyWord,
    RejectionKind,
    RootWordReused,
    WordNotPossible,
    WordNotRecognized,
    WordRejected,
    WordTooShort,
)
from models.game import ScrambleSession
from services.word_rules import (
    WordRules,
    check_letters,
    is_original,
    is_possible,
    normalize,
    submit_word,
)
from services.word_validator import DictionaryOracle, WordValidationResult


class RecordingDictionary(DictionaryOracle):
    """Dictionary that accepts everything and remembers what it was asked."""

    def __init__(self, valid=True, definitive=True, reason=None):
        self.valid = valid
        self.definitive = definitive
        self.reason = reason
        self.calls = []

    async def validate_word(self, word, language="en"):
        self.calls.append((word, language))
        return WordValidationResult(
            word=word,
            is_valid=self.valid,
            reason=self.reason,
            definitive=self.definitive,
        )


def test_normalize_trims_and_lowercases():
    assert normalize("  PlAn \n") == "plan"
    assert normalize("\t\n ") == ""


def test_is_original():
    assert is_original("plan", ("plane", "net"))
    assert not is_original("plan", ("plan",))


def test_is_possible_uses_each_letter_once():
    assert is_possible("plan", "planets")
    assert is_possible("planets", "planets")
    assert is_possible("sent", "planets")
    # only one 'n' in planets
    assert not is_possible("nan", "planets")
    assert not is_possible("xyz", "planets")


def test_is_possible_allows_repeats_up_to_root_count():
    assert is_possible("tee", "letters")
    assert is_possible("settle", "letters")
    # letters has two t's, not three
    assert not is_possible("tttt", "letters")


def test_is_possible_latte_from_letters():
    # letters = l,e,t,t,e,r,s; latte needs an 'a'
    assert not is_possible("latte", "letters")


def test_is_possible_empty_word():
    assert is_possible("", "planets")


def test_check_letters_order_empty_first():
    session = ScrambleSession(root_word="planets", used_words=("plan",))
    with pytest.raises(EmptyWord):
        check_letters("", session, WordRules(min_length=3))


def test_check_letters_duplicate_before_possible():
    session = ScrambleSession(root_word="planets", used_words=("plan",))
    with pytest.raises(DuplicateWord):
        check_letters("plan", session, WordRules())


def test_check_letters_min_length_disabled_by_default():
    session = ScrambleSession(root_word="planets")
    check_letters("a", session, WordRules())


def test_check_letters_min_length():
    session = ScrambleSession(root_word="planets")
    with pytest.raises(WordTooShort) as exc_info:
        check_letters("pa", session, WordRules(min_length=3))
    assert exc_info.value.min_length == 3


def test_check_letters_root_word_allowed_by_default():
    session = ScrambleSession(root_word="planets")
    check_letters("planets", session, WordRules())


def test_check_letters_root_word_rejected_when_configured():
    session = ScrambleSession(root_word="planets")
    with pytest.raises(RootWordReused):
        check_letters("planets", session, WordRules(allow_root_word=False))


async def test_submit_prepends_word(dictionary):
    session = ScrambleSession(root_word="planets", used_words=("net", "plan"))

    updated = await submit_word(session, "  Plane ", dictionary)

    assert updated.used_words == ("plane", "net", "plan")
    assert updated.root_word == "planets"
    # original snapshot untouched
    assert session.used_words == ("net", "plan")


async def test_submit_empty_word_leaves_session(dictionary):
    session = ScrambleSession(root_word="planets", used_words=("plan",))

    with pytest.raises(EmptyWord) as exc_info:
        await submit_word(session, "   ", dictionary)

    assert exc_info.value.kind is RejectionKind.EMPTY
    assert session.used_words == ("plan",)


async def test_submit_not_possible_skips_dictionary():
    dictionary = RecordingDictionary()
    session = ScrambleSession(root_word="letters")

    with pytest.raises(WordNotPossible) as exc_info:
        await submit_word(session, "latte", dictionary)

    assert exc_info.value.root_word == "letters"
    assert "letters" in exc_info.value.message
    assert dictionary.calls == []


async def test_submit_not_real_word(dictionary):
    session = ScrambleSession(root_word="planets")

    with pytest.raises(WordNotRecognized) as exc_info:
        await submit_word(session, "pnl", dictionary)

    assert exc_info.value.kind is RejectionKind.NOT_REAL
    assert exc_info.value.message == "You can't just make them up, you know!"


async def test_submit_passes_language_to_dictionary():
    dictionary = RecordingDictionary()
    session = ScrambleSession(root_word="planets")

    await submit_word(session, "plan", dictionary, WordRules(language="en-gb"))

    assert dictionary.calls == [("plan", "en-gb")]


async def test_submit_shows_reason_when_dictionary_unreachable():
    dictionary = RecordingDictionary(
        valid=False,
        definitive=False,
        reason="Could not connect to dictionary service. Please try again.",
    )
    session = ScrambleSession(root_word="planets")

    with pytest.raises(WordNotRecognized) as exc_info:
        await submit_word(session, "plan", dictionary)

    assert "Could not connect" in exc_info.value.message


async def test_rejections_share_base_class(dictionary):
    session = ScrambleSession(root_word="planets")
    for raw in ["", "xyz", "pnl"]:
        with pytest.raises(WordRejected) as exc_info:
            await submit_word(session, raw, dictionary)
        assert exc_info.value.title
        assert exc_info.value.message


async def test_planets_scenario(dictionary):
    session = ScrambleSession.start(["planets"])
    assert session.root_word == "planets"

    session = await submit_word(session, "plan", dictionary)
    assert session.used_words == ("plan",)

    with pytest.raises(DuplicateWord):
        await submit_word(session, "plan", dictionary)
    with pytest.raises(WordNotPossible):
        await submit_word(session, "xyz", dictionary)
    with pytest.raises(EmptyWord):
        await submit_word(session, "", dictionary)

    assert session.used_words == ("plan",)


async def test_accepted_word_appears_once(dictionary):
    session = ScrambleSession(root_word="planets")
    for word in ["plan", "net", "slant", "pest"]:
        session = await submit_word(session, word, dictionary)

    assert session.used_words == ("pest", "slant", "net", "plan")
    assert all(session.used_words.count(w) == 1 for w in session.used_words)
