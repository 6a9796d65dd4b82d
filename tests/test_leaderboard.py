from datetime import date

import pytest

from models import HoleScore, HoleSelection, Round, ScoredRound
from scoring.leaderboard import (
    LeaderboardMetric,
    best_round_for_player,
    build_pool,
    filter_rounds,
    paginate,
    rank,
)


def _scored(round_id, player_id, score, day=None):
    return ScoredRound(
        round_id=round_id,
        player_id=player_id,
        display_score=score,
        date=date(2025, 6, day) if day else None,
    )


def _round(round_id, player_id, strokes, pars, day, holes_played=None, stroke_index=False, **kwargs):
    holes = [
        HoleScore(hole_number=i, par=p, strokes=s, stroke_index=i if stroke_index else None)
        for i, (s, p) in enumerate(zip(strokes, pars), start=1)
    ]
    if holes_played:
        kwargs["holes_played"] = holes_played
    return Round.from_hole_scores(
        holes, id=round_id, player_id=player_id, date=date(2025, 6, day), **kwargs
    )


# ================================================================
# rank
# ================================================================

def test_empty_pool_gives_empty_leaderboard():
    assert rank([], LeaderboardMetric.GROSS) == []
    assert rank([], LeaderboardMetric.STABLEFORD_NET) == []


def test_stroke_play_ranks_low_first():
    pool = [_scored("a", "p1", 82), _scored("b", "p2", 75), _scored("c", "p3", 90)]
    entries = rank(pool, LeaderboardMetric.GROSS)
    assert [e.round_id for e in entries] == ["b", "a", "c"]
    assert [e.rank for e in entries] == [1, 2, 3]


def test_stableford_ranks_high_first():
    pool = [_scored("a", "p1", 30), _scored("b", "p2", 38), _scored("c", "p3", 25)]
    entries = rank(pool, "stableford-gross")
    assert [e.round_id for e in entries] == ["b", "a", "c"]


def test_ranks_are_a_permutation_without_gaps():
    pool = [_scored(str(i), f"p{i % 3}", score) for i, score in enumerate([80, 80, 75, 91, 80, 75])]
    entries = rank(pool, LeaderboardMetric.NET)
    assert len(entries) == len(pool)
    assert sorted(e.rank for e in entries) == list(range(1, len(pool) + 1))


def test_ties_break_on_earlier_date_then_input_order():
    pool = [
        _scored("late", "p1", 80, day=20),
        _scored("early", "p2", 80, day=3),
        _scored("undated", "p3", 80),
        _scored("also-late", "p4", 80, day=20),
    ]
    entries = rank(pool, LeaderboardMetric.GROSS)
    assert [e.round_id for e in entries] == ["early", "late", "also-late", "undated"]
    assert [e.rank for e in entries] == [1, 2, 3, 4]


def test_rank_is_idempotent():
    pool = [_scored("a", "p1", 82, 1), _scored("b", "p2", 82, 1), _scored("c", "p3", 70, 2)]
    assert rank(pool, "gross") == rank(pool, "gross")
    assert rank(rank(pool, "gross"), "gross") == rank(pool, "gross")


# ================================================================
# best_round_for_player
# ================================================================

def test_best_round_for_player():
    entries = rank(
        [_scored("a", "me", 85), _scored("b", "you", 70), _scored("c", "me", 79)],
        LeaderboardMetric.GROSS,
    )
    best = best_round_for_player(entries, "me", LeaderboardMetric.GROSS)
    assert best.round_id == "c"
    assert best.rank == 2
    assert best_round_for_player(entries, "nobody", LeaderboardMetric.GROSS) is None


def test_best_round_for_player_stableford_takes_maximum():
    pool = [_scored("a", "me", 30), _scored("b", "me", 34)]
    assert best_round_for_player(pool, "me", "stableford-net").round_id == "b"


# ================================================================
# build_pool
# ================================================================

PARS_18 = [4] * 18


def test_build_pool_gross_and_labels():
    rounds = [
        _round("r18", "p1", [5] * 18, PARS_18, 1),
        _round("r9", "p2", [4] * 9, [4] * 9, 2),
    ]
    pool = build_pool(rounds, LeaderboardMetric.GROSS)
    assert [(s.round_id, s.display_score, s.holes_played_label) for s in pool] == [
        ("r18", 90, "18 Holes"),
        ("r9", 36, "9 Holes"),
    ]

    front = build_pool(rounds, LeaderboardMetric.GROSS, selection=HoleSelection.FRONT_NINE)
    assert [(s.display_score, s.holes_played_label) for s in front] == [
        (45, "Front 9 (from 18)"),
        (36, "Front 9 Only"),
    ]


def test_build_pool_net_halves_handicap_for_nine_holes():
    rounds = [
        _round("r9", "p1", [5, 6, 5, 6, 5, 6, 5, 5, 5], [4] * 9, 1),
        _round("r18", "p2", [5] * 18, PARS_18, 2),
    ]
    pool = build_pool(rounds, "net", handicaps={"p1": 10.0, "p2": 10.0})
    scores = {s.round_id: s.display_score for s in pool}
    assert scores == {"r9": 43, "r18": 80}


def test_build_pool_net_for_slice_of_eighteen():
    rounds = [_round("r18", "p1", [5] * 18, PARS_18, 1, net_score=70)]
    pool = build_pool(rounds, "net", handicaps={"p1": 10.0}, selection="back9")
    assert pool[0].display_score == 40          # 45 - 5, stored whole-round net ignored
    whole = build_pool(rounds, "net", handicaps={"p1": 10.0})
    assert whole[0].display_score == 70


def test_build_pool_missing_handicap_plays_off_zero():
    rounds = [_round("r", "p1", [5] * 18, PARS_18, 1)]
    assert build_pool(rounds, "net")[0].display_score == 90


def test_build_pool_net_stableford_needs_stroke_index():
    rounds = [
        _round("with-si", "p1", [5] * 18, PARS_18, 1, stroke_index=True),
        _round("without-si", "p2", [5] * 18, PARS_18, 2),
    ]
    pool = build_pool(rounds, LeaderboardMetric.STABLEFORD_NET, handicaps={"p1": 18.0, "p2": 18.0})
    assert [(s.round_id, s.display_score) for s in pool] == [("with-si", 36)]

    gross = build_pool(rounds, LeaderboardMetric.STABLEFORD_GROSS)
    assert [s.display_score for s in gross] == [18, 18]


def test_build_pool_drops_rounds_without_scores_in_range():
    played_front = [5] * 9 + [None] * 9
    rounds = [_round("front-only", "p1", played_front, PARS_18, 1, holes_played=18)]
    assert build_pool(rounds, "gross", selection="back9") == []
    assert build_pool(rounds, "gross", selection="front9")[0].display_score == 45


def test_build_pool_uses_player_names():
    rounds = [_round("r", "p1", [4] * 9, [4] * 9, 1)]
    pool = build_pool(rounds, "gross", player_names={"p1": "Sam"})
    assert pool[0].player_name == "Sam"


# ================================================================
# filter_rounds / paginate
# ================================================================

def test_filter_rounds():
    rounds = [
        _round("a", "p1", [4] * 9, [4] * 9, 1, tee_name="White"),
        _round("b", "p1", [4] * 18, PARS_18, 15, tee_name="Blue"),
        _round("c", "p2", [4] * 18, PARS_18, 28, tee_name="white"),
    ]
    assert [r.id for r in filter_rounds(rounds, date_from=date(2025, 6, 10))] == ["b", "c"]
    assert [r.id for r in filter_rounds(rounds, date_to=date(2025, 6, 15))] == ["a", "b"]
    assert [r.id for r in filter_rounds(rounds, tee_name="WHITE")] == ["a", "c"]
    assert [r.id for r in filter_rounds(rounds, holes_played=18)] == ["b", "c"]
    assert filter_rounds([], tee_name="Blue") == []


def test_paginate():
    entries = rank([_scored(str(i), "p", 70 + i) for i in range(25)], "gross")
    first = paginate(entries, page=1, per_page=10)
    assert first["total_pages"] == 3
    assert [e.rank for e in first["entries"]] == list(range(1, 11))

    last = paginate(entries, page=9, per_page=10)
    assert last["page"] == 3
    assert len(last["entries"]) == 5

    empty = paginate([], page=1)
    assert empty == {"entries": [], "page": 1, "total_pages": 1}


@pytest.mark.parametrize("metric", list(LeaderboardMetric))
def test_every_metric_ranks_full_pool(metric):
    pool = [_scored("a", "p1", 10), _scored("b", "p2", 20)]
    assert len(rank(pool, metric)) == 2
