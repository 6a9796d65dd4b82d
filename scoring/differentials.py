"""Select the rounds and differentials that feed the handicap index.

A differential here is the round's gross score relative to par. It stands
in for the course- and slope-normalized differential of the official
handicap system; tee rating and slope are not applied.
"""

from typing import Iterable, List

from models.round import Round


def eligible_rounds(rounds: Iterable[Round], exclude_incomplete: bool = True) -> List[Round]:
    """Rounds that may count toward a handicap, in input order."""
    if not exclude_incomplete:
        return list(rounds)
    return [r for r in rounds if r.is_complete()]


def select_differentials(rounds: Iterable[Round], exclude_incomplete: bool = True) -> List[int]:
    """To-par differentials of the eligible rounds, best (lowest) first."""
    return sorted(r.to_par_gross for r in eligible_rounds(rounds, exclude_incomplete))
