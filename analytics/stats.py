from __future__ import annotations

from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from models.handicap import PlayerHandicapState
from models.round import Round
from scoring.aggregation import split_nines
from scoring.handicap import compute_handicap

# Names as returned by HoleScore.get_score_type, best first
SCORE_TYPE_ORDER = [
    "albatross",
    "eagle",
    "birdie",
    "par",
    "bogey",
    "double bogey",
    "triple bogey",
    "quadruple bogey+",
]


def _by_date(rounds: Iterable[Round]) -> List[Round]:
    # Undated rounds keep their relative order at the end
    return sorted(rounds, key=lambda r: (r.date is None, r.date or date.min))


def round_summary(round_obj: Round) -> Dict[str, Optional[float]]:
    """Compute summary metrics for a single round."""
    played = round_obj.played_holes()
    split = split_nines(played)
    putts = [hs.putts for hs in played if hs.putts is not None]
    girs = [hs.green_in_regulation for hs in played if hs.green_in_regulation is not None]
    holes_played = len(played)

    return {
        "holes_played": holes_played,
        "total_strokes": split.total.strokes if split.total else None,
        "to_par": split.total.to_par if split.total else None,
        "front_nine": split.front.strokes if split.front else None,
        "back_nine": split.back.strokes if split.back else None,
        "total_putts": sum(putts) if putts else None,
        "total_gir": sum(girs) if girs else None,
        "gir_percentage": (sum(girs) / holes_played) * 100 if girs and holes_played else None,
        "putts_per_hole": sum(putts) / holes_played if putts and holes_played else None,
    }


def score_trend(rounds: Iterable[Round]) -> List[Dict[str, Any]]:
    """Return gross and to-par trend data by round, oldest first."""
    results: List[Dict[str, Any]] = []
    complete = [r for r in _by_date(rounds) if r.is_complete()]
    for index, round_obj in enumerate(complete, start=1):
        results.append(
            {
                "round_index": index,
                "round_id": round_obj.id,
                "date": round_obj.date,
                "holes_played": round_obj.holes_played,
                "total_score": round_obj.gross_score,
                "to_par": round_obj.to_par_gross,
            }
        )
    return results


def handicap_progression(
    rounds: Iterable[Round], required_rounds: int = 5
) -> List[Dict[str, Any]]:
    """Handicap state after each round, replaying the history oldest first."""
    ordered = _by_date(rounds)
    results: List[Dict[str, Any]] = []
    for index, round_obj in enumerate(ordered, start=1):
        state = compute_handicap(ordered[:index], required_rounds=required_rounds)
        results.append(
            {
                "round_index": index,
                "round_id": round_obj.id,
                "date": round_obj.date,
                "handicap_index": state.handicap_index if state.is_valid else None,
                "rounds_needed": state.rounds_needed_for_handicap,
            }
        )
    return results


def scoring_by_par(rounds: Iterable[Round]) -> List[Dict[str, Any]]:
    """
    Aggregate scoring performance by hole par (3, 4, 5).

    Output rows:
    - par: 3, 4, or 5
    - average_to_par: mean(strokes - par)
    - average_strokes: mean(strokes)
    - sample_size: number of holes included
    """
    by_par: Dict[int, List[int]] = {}

    for round_obj in rounds:
        for hole_score in round_obj.played_holes():
            if hole_score.par not in (3, 4, 5):
                continue
            by_par.setdefault(hole_score.par, []).append(hole_score.strokes)

    results: List[Dict[str, Any]] = []
    for par in sorted(by_par):
        strokes = by_par[par]
        avg_strokes = sum(strokes) / len(strokes)
        results.append(
            {
                "par": par,
                "average_to_par": avg_strokes - par,
                "average_strokes": avg_strokes,
                "sample_size": len(strokes),
            }
        )
    return results


def score_type_distribution_per_round(rounds: Iterable[Round]) -> List[Dict[str, Any]]:
    """
    Percentage of holes by score type for each round.

    Buckets are the names from HoleScore.get_score_type, so albatross
    covers anything three or more under par and "quadruple bogey+"
    anything four or more over.
    """
    results: List[Dict[str, Any]] = []

    for index, round_obj in enumerate(rounds, start=1):
        counts = {name: 0 for name in SCORE_TYPE_ORDER}
        played = round_obj.played_holes()
        for hole_score in played:
            counts[hole_score.get_score_type()] += 1

        total = len(played)
        row: Dict[str, Any] = {
            "round_index": index,
            "round_id": round_obj.id,
            "holes_counted": total,
        }
        for name in SCORE_TYPE_ORDER:
            row[name] = (counts[name] / total * 100.0) if total else 0.0
        results.append(row)

    return results


def potential_best_score(rounds: Iterable[Round]) -> Optional[Dict[str, Any]]:
    """
    Best score recorded on each hole across a player's rounds at one course.

    Returns None when there are no rounds. Holes never played appear with
    best_score None and are left out of the totals.
    """
    rounds = list(rounds)
    if not rounds:
        return None

    by_hole: Dict[int, Dict[str, Any]] = {}
    for round_obj in rounds:
        for hole_score in round_obj.hole_scores:
            entry = by_hole.setdefault(
                hole_score.hole_number, {"par": hole_score.par, "scores": []}
            )
            if hole_score.is_played():
                entry["scores"].append(hole_score.strokes)

    holes: List[Dict[str, Any]] = []
    for number in sorted(by_hole):
        scores = by_hole[number]["scores"]
        holes.append(
            {
                "hole": number,
                "par": by_hole[number]["par"],
                "best_score": min(scores) if scores else None,
                "rounds": len(scores),
            }
        )

    def _totals(rows: List[Dict[str, Any]]) -> Dict[str, int]:
        scored = [h for h in rows if h["best_score"] is not None]
        return {
            "par": sum(h["par"] for h in scored),
            "best_score": sum(h["best_score"] for h in scored),
        }

    return {
        "holes": holes,
        "total": _totals(holes),
        "front_nine": _totals([h for h in holes if h["hole"] <= 9]),
        "back_nine": _totals([h for h in holes if h["hole"] >= 10]),
    }


def player_stats(
    rounds: Iterable[Round], handicap: Optional[PlayerHandicapState] = None
) -> Dict[str, Any]:
    """Headline numbers for a player's dashboard."""
    rounds = list(rounds)
    handicap = handicap or compute_handicap(rounds)
    complete = [r for r in rounds if r.is_complete()]
    with_net = [r for r in complete if r.net_score is not None and r.to_par_net is not None]

    return {
        "total_rounds": len(rounds),
        "best_gross_score": min((r.gross_score for r in complete), default=None),
        "best_to_par": min((r.to_par_gross for r in complete), default=None),
        "best_net_score": min((r.net_score for r in with_net), default=None),
        "best_to_par_net": min((r.to_par_net for r in with_net), default=None),
        "average_score": round(sum(r.gross_score for r in complete) / len(complete), 1)
        if complete else None,
        "handicap_index": handicap.handicap_index,
        "rounds_needed_for_handicap": handicap.rounds_needed_for_handicap,
    }
