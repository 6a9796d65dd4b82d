import pytest

from models import Round
from scoring.differentials import eligible_rounds, select_differentials
from scoring.handicap import compute_handicap, course_handicap, scores_to_use


def _rounds(to_pars, par=72):
    return [
        Round(id=f"r{i}", gross_score=par + tp, to_par_gross=tp)
        for i, tp in enumerate(to_pars, start=1)
    ]


# ================================================================
# Differentials
# ================================================================

def test_differentials_sorted_best_first():
    assert select_differentials(_rounds([2, 5, 1, 3, 8])) == [1, 2, 3, 5, 8]


def test_incomplete_rounds_excluded_by_default():
    rounds = _rounds([2, 4]) + [Round(id="bad", gross_score=0, to_par_gross=-72)]
    assert select_differentials(rounds) == [2, 4]
    assert select_differentials(rounds, exclude_incomplete=False) == [-72, 2, 4]
    assert [r.id for r in eligible_rounds(rounds)] == ["r1", "r2"]


# ================================================================
# Scores-to-use table
# ================================================================

@pytest.mark.parametrize(
    "count, expected",
    [
        (0, 0), (4, 0),
        (5, 3), (9, 3),
        (10, 4), (14, 4),
        (15, 6), (19, 6),
        (20, 8), (40, 8),
    ],
)
def test_scores_to_use_boundaries(count, expected):
    assert scores_to_use(count) == expected


@pytest.mark.parametrize("count, used", [(5, 3), (10, 4), (15, 6), (20, 8)])
def test_compute_handicap_uses_table_at_thresholds(count, used):
    state = compute_handicap(_rounds(range(count)))
    assert state.rounds_used == used
    assert state.eligible_rounds == count
    assert state.is_valid
    # best `used` of 0..count-1 are 0..used-1
    expected = round((sum(range(used)) / used) * 0.96 + 1e-9, 1)
    assert state.handicap_index == pytest.approx(expected)


# ================================================================
# compute_handicap
# ================================================================

def test_scenario_five_rounds():
    state = compute_handicap(_rounds([2, 5, 1, 3, 8]))
    # best 3 = 1, 2, 3 -> mean 2.0 -> 1.92 -> 1.9
    assert state.handicap_index == 1.9
    assert state.rounds_needed_for_handicap == 0
    assert state.is_valid


@pytest.mark.parametrize("count", [1, 2, 3, 4])
def test_fewer_than_five_rounds_has_no_index(count):
    state = compute_handicap(_rounds([10] * count))
    assert state.handicap_index == 0
    assert state.is_valid is False
    assert state.rounds_needed_for_handicap == 5 - count


def test_no_rounds():
    state = compute_handicap([])
    assert state.handicap_index == 0
    assert state.rounds_needed_for_handicap == 5
    assert state.is_valid is False
    assert state.rounds_used == 0


def test_only_incomplete_rounds_count_as_none():
    state = compute_handicap([Round(gross_score=0, to_par_gross=0)] * 6)
    assert state.eligible_rounds == 0
    assert state.rounds_needed_for_handicap == 5


def test_under_par_average_floors_at_zero():
    state = compute_handicap(_rounds([-3, -2, -4, 1, 0]))
    assert state.handicap_index == 0
    assert state.is_valid


def test_custom_required_rounds():
    state = compute_handicap(_rounds([5, 6, 7]), required_rounds=8)
    assert state.rounds_needed_for_handicap == 5


def test_rounds_half_up_to_one_decimal():
    # best 4 of 10 average 13.0 -> 12.48 -> 12.5
    state = compute_handicap(_rounds([12, 13, 13, 14] + [30] * 6))
    assert state.rounds_used == 4
    assert state.handicap_index == 12.5


def test_compute_handicap_is_idempotent():
    rounds = _rounds([7, 3, 9, 12, 4, 6, 8])
    assert compute_handicap(rounds) == compute_handicap(rounds)


# ================================================================
# course_handicap
# ================================================================

def test_course_handicap_scales_by_slope():
    assert course_handicap(10.0) == 10
    assert course_handicap(10.0, 113) == 10
    assert course_handicap(10.0, 135) == 12     # 11.95 -> 12
    assert course_handicap(None) == 0
    assert course_handicap(0.0, 140) == 0
