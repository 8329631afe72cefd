"""
Family generators: expand each canonical solver into its symmetric variants.

A variant is one canonical solver evaluated on a transformed goal, plus the
rule that maps its `(t, u, v)` back onto the untransformed problem:

- timeflip  `(x, y, phi) -> (-x, y, -phi)`: drive the same word in the
  opposite gear, so every length is negated.
- reflect   `(x, y, phi) -> (x, -y, -phi)`: mirror about the x axis, so L and
  R swap.
- backward  `(x, y, phi) -> (x cos phi + y sin phi, x sin phi - y cos phi, phi)`:
  solve from the goal end, so the segment order is reversed.

Candidates are appended in a fixed order (families in `FAMILY_GENERATORS`
order, then the variant tables below top to bottom). Selection keeps the first
strict minimum, so this order is the tie-break.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from ..errors import PathGenerationError
from .path import LEFT, RIGHT, SEGMENT_TYPES, CandidatePath
from .solvers import (
    SegmentSolution,
    lrl,
    lrlr_n,
    lrlr_p,
    lrsl,
    lrslr,
    lrsr,
    lsl,
    lsr,
    sls,
)

logger = logging.getLogger(__name__)

HALF_PI = 0.5 * math.pi

Solver = Callable[[float, float, float], SegmentSolution]
LengthTemplate = Callable[[SegmentSolution], Tuple[float, ...]]


@dataclass(frozen=True)
class Reflection:
    name: str
    timeflip: bool = False
    reflect: bool = False
    backward: bool = False

    def apply(self, x: float, y: float, phi: float) -> Tuple[float, float, float]:
        if self.backward:
            c = math.cos(phi)
            s = math.sin(phi)
            x, y = x * c + y * s, x * s - y * c
        if self.timeflip:
            x, phi = -x, -phi
        if self.reflect:
            y, phi = -y, -phi
        return x, y, phi


IDENTITY = Reflection("identity")
TIMEFLIP = Reflection("timeflip", timeflip=True)
REFLECT = Reflection("reflect", reflect=True)
TIMEFLIP_REFLECT = Reflection("timeflip+reflect", timeflip=True, reflect=True)
BACKWARD = Reflection("backward", backward=True)
BACKWARD_TIMEFLIP = Reflection("backward+timeflip", timeflip=True, backward=True)
BACKWARD_REFLECT = Reflection("backward+reflect", reflect=True, backward=True)
BACKWARD_TIMEFLIP_REFLECT = Reflection("backward+timeflip+reflect", timeflip=True, reflect=True, backward=True)

FORWARD_REFLECTIONS = (IDENTITY, TIMEFLIP, REFLECT, TIMEFLIP_REFLECT)
BACKWARD_REFLECTIONS = (BACKWARD, BACKWARD_TIMEFLIP, BACKWARD_REFLECT, BACKWARD_TIMEFLIP_REFLECT)
ALL_REFLECTIONS = FORWARD_REFLECTIONS + BACKWARD_REFLECTIONS


@dataclass(frozen=True)
class Word:
    """A canonical solver together with how its solution is laid out as segments."""

    solver: Solver
    types: str
    lengths: LengthTemplate


def _tuv(sol: SegmentSolution) -> Tuple[float, ...]:
    return sol.t, sol.u, sol.v


def _four_turn_n(sol: SegmentSolution) -> Tuple[float, ...]:
    return sol.t, sol.u, -sol.u, sol.v


def _four_turn_p(sol: SegmentSolution) -> Tuple[float, ...]:
    return sol.t, sol.u, sol.u, sol.v


def _turn_turn_straight_turn(sol: SegmentSolution) -> Tuple[float, ...]:
    return sol.t, -HALF_PI, sol.u, sol.v


def _turn_turn_straight_turn_turn(sol: SegmentSolution) -> Tuple[float, ...]:
    return sol.t, -HALF_PI, sol.u, -HALF_PI, sol.v


SLS = Word(sls, "SLS", _tuv)
LSL = Word(lsl, "LSL", _tuv)
LSR = Word(lsr, "LSR", _tuv)
LRL = Word(lrl, "LRL", _tuv)
LRLR_N = Word(lrlr_n, "LRLR", _four_turn_n)
LRLR_P = Word(lrlr_p, "LRLR", _four_turn_p)
LRSL = Word(lrsl, "LRSL", _turn_turn_straight_turn)
LRSR = Word(lrsr, "LRSR", _turn_turn_straight_turn)
LRSLR = Word(lrslr, "LRSLR", _turn_turn_straight_turn_turn)


def _swap_turns(types: str) -> str:
    return "".join(RIGHT if c == LEFT else LEFT if c == RIGHT else c for c in types)


def variant(word: Word, reflection: Reflection, sol: SegmentSolution) -> Tuple[List[float], str]:
    """Map a solution of the transformed problem back to lengths and types of the untransformed one."""
    lengths = [float(v) for v in word.lengths(sol)]
    types = word.types
    if reflection.timeflip:
        lengths = [-v for v in lengths]
    if reflection.reflect:
        types = _swap_turns(types)
    if reflection.backward:
        lengths.reverse()
        types = types[::-1]
    return lengths, types


def assemble_path(lengths: Sequence[float], types: str, paths: List[CandidatePath]) -> None:
    """Append a candidate built from parallel lengths/types to `paths`."""
    if len(lengths) != len(types) or len(lengths) not in (3, 4, 5):
        raise PathGenerationError(f"malformed segment arrays: {len(lengths)} lengths for word {types!r}")
    if any(c not in SEGMENT_TYPES for c in types):
        raise PathGenerationError(f"unknown segment type in word {types!r}")
    total = sum(abs(v) for v in lengths)
    if not total >= 0.0:
        raise PathGenerationError(f"invalid total length {total} for word {types!r}")
    paths.append(CandidatePath(segment_types=tuple(types), segment_lengths=list(lengths), total_length=total))


def _expand(
    family: str,
    table: Sequence[Tuple[Word, Sequence[Reflection]]],
    x: float,
    y: float,
    phi: float,
    paths: List[CandidatePath],
) -> None:
    for word, reflections in table:
        for reflection in reflections:
            sol = word.solver(*reflection.apply(x, y, phi))
            if not sol.valid:
                logger.debug("%s: %s (%s) infeasible", family, word.solver.__name__, reflection.name)
                continue
            lengths, types = variant(word, reflection, sol)
            try:
                assemble_path(lengths, types, paths)
            except PathGenerationError as exc:
                exc.family = family
                raise


SCS_TABLE = ((SLS, (IDENTITY, REFLECT)),)
CSC_TABLE = ((LSL, FORWARD_REFLECTIONS), (LSR, FORWARD_REFLECTIONS))
CCC_TABLE = ((LRL, ALL_REFLECTIONS),)
CCCC_TABLE = ((LRLR_N, FORWARD_REFLECTIONS), (LRLR_P, FORWARD_REFLECTIONS))
CCSC_TABLE = (
    (LRSL, FORWARD_REFLECTIONS),
    (LRSR, FORWARD_REFLECTIONS),
    (LRSL, BACKWARD_REFLECTIONS),
    (LRSR, BACKWARD_REFLECTIONS),
)
CCSCC_TABLE = ((LRSLR, FORWARD_REFLECTIONS),)


def generate_scs(x: float, y: float, phi: float, paths: List[CandidatePath]) -> None:
    """Straight-turn-straight: SLS and SRS."""
    _expand("SCS", SCS_TABLE, x, y, phi, paths)


def generate_csc(x: float, y: float, phi: float, paths: List[CandidatePath]) -> None:
    """Turn-straight-turn: LSL, LSR and their reflections (8 variants)."""
    _expand("CSC", CSC_TABLE, x, y, phi, paths)


def generate_ccc(x: float, y: float, phi: float, paths: List[CandidatePath]) -> None:
    """Three turns, including the words solved from the goal end (8 variants)."""
    _expand("CCC", CCC_TABLE, x, y, phi, paths)


def generate_cccc(x: float, y: float, phi: float, paths: List[CandidatePath]) -> None:
    _expand("CCCC", CCCC_TABLE, x, y, phi, paths)


def generate_ccsc(x: float, y: float, phi: float, paths: List[CandidatePath]) -> None:
    """Two turns, a straight and a turn, with a quarter circle second turn (16 variants)."""
    _expand("CCSC", CCSC_TABLE, x, y, phi, paths)


def generate_ccscc(x: float, y: float, phi: float, paths: List[CandidatePath]) -> None:
    _expand("CCSCC", CCSCC_TABLE, x, y, phi, paths)


FAMILY_GENERATORS: Tuple[Tuple[str, Callable[[float, float, float, List[CandidatePath]], None]], ...] = (
    ("SCS", generate_scs),
    ("CSC", generate_csc),
    ("CCC", generate_ccc),
    ("CCCC", generate_cccc),
    ("CCSC", generate_ccsc),
    ("CCSCC", generate_ccscc),
)
