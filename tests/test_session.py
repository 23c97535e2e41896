import copy
import random

import pytest
from wordscramble.engine import (
    DEFAULT_ROOT_WORD, WORD_POINTS, DictionarySpellChecker, Reason, Session,
    SessionNotStartedError, Status, start_game, submit,
)

WORDS = ["email", "roam", "mail", "moral", "realm", "lime", "memorials", "mammal"]


@pytest.fixture
def checker():
    return DictionarySpellChecker(WORDS)


@pytest.fixture
def session():
    return start_game(["memorial"], rng=random.Random(0))


def test_start_game_picks_from_list():
    rng = random.Random(7)
    pool = ["absolute", "calendar", "elephant"]
    s = start_game(pool, rng=rng)
    assert s.root_word in pool
    assert s.score == 0 and s.used_words == []

def test_start_game_is_reproducible_with_seed():
    pool = ["absolute", "calendar", "elephant", "memorial", "treasure"]
    a = start_game(pool, rng=random.Random(42))
    b = start_game(pool, rng=random.Random(42))
    assert a.root_word == b.root_word

@pytest.mark.parametrize("pool", [[], None, ["", "  "]])
def test_start_game_falls_back_to_default(pool):
    assert start_game(pool).root_word == DEFAULT_ROOT_WORD

def test_restart_keeps_best_score(session, checker):
    submit(session, "email", checker)
    submit(session, "roam", checker)
    assert session.best_score == 50
    same = start_game(["memorial"], session=session)
    assert same is session
    assert session.score == 0 and session.used_words == []
    assert session.best_score == 50

def test_submit_before_start_raises(checker):
    with pytest.raises(SessionNotStartedError):
        submit(Session(), "email", checker)

def test_accept_prepends_and_scores(session, checker):
    out = submit(session, "  Email ", checker)
    assert out.accepted and out.word == "email" and out.score == WORD_POINTS
    out = submit(session, "roam", checker)
    assert out.accepted
    assert session.used_words == ["roam", "email"]
    assert session.score == 2 * WORD_POINTS

@pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
def test_empty_input_is_ignored(session, checker, raw):
    before = copy.deepcopy(session)
    out = submit(session, raw, checker)
    assert out.status is Status.IGNORED
    assert out.rejection is None
    assert session == before

@pytest.mark.parametrize("raw,reason", [
    ("memorial", Reason.SAME_AS_ROOT),
    (" MEMORIAL ", Reason.SAME_AS_ROOT),
    ("xq", Reason.TOO_SHORT),
    ("ram", Reason.TOO_SHORT),
    ("emial", Reason.NOT_REAL),
    ("memorials", Reason.NOT_POSSIBLE),
    ("mammal", Reason.NOT_POSSIBLE),
    ("email", Reason.NOT_ORIGINAL),
])
def test_rejections_leave_session_unchanged(session, checker, raw, reason):
    submit(session, "email", checker)
    before = copy.deepcopy(session)
    out = submit(session, raw, checker)
    assert out.status is Status.REJECTED
    assert out.rejection.reason is reason
    assert session == before

def test_root_word_wins_over_other_checks():
    # Root word is neither in the dictionary nor longer than 3 letters.
    s = start_game(["cat"])
    out = submit(s, "cat", DictionarySpellChecker([]))
    assert out.rejection.reason is Reason.SAME_AS_ROOT

def test_too_short_checked_before_dictionary(session):
    out = submit(session, "mo", DictionarySpellChecker([]))
    assert out.rejection.reason is Reason.TOO_SHORT
    assert out.rejection.length == 2

def test_best_score_is_monotonic(checker):
    rng = random.Random(1)
    s = start_game(["memorial"], rng=rng)
    seen = [s.best_score]
    for word in ["email", "roam", "xq", "email", "mail"]:
        submit(s, word, checker)
        seen.append(s.best_score)
    start_game(["memorial"], rng=rng, session=s)
    seen.append(s.best_score)
    submit(s, "lime", checker)
    seen.append(s.best_score)
    assert seen == sorted(seen)
    assert s.best_score == 75

def test_end_to_end_memorial(checker):
    s = start_game(["memorial"])
    assert s.root_word == "memorial"

    out = submit(s, "email", checker)
    assert out.accepted and s.score == 25

    out = submit(s, "email", checker)
    assert out.rejection.reason is Reason.NOT_ORIGINAL

    out = submit(s, "memorial", checker)
    assert out.rejection.reason is Reason.SAME_AS_ROOT
    assert out.rejection.title == "Not allowed!"

    out = submit(s, "xq", checker)
    assert out.rejection.reason is Reason.TOO_SHORT
    assert out.rejection.message == "Your word is too short with 2 letters"

    assert s.used_words == ["email"] and s.score == 25 and s.best_score == 25
