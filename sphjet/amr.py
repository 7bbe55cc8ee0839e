"""Adaptive radial refinement: merging thin cells and splitting long ones."""

from __future__ import annotations

import copy
import math
from collections.abc import Callable, Sequence

from sphjet.model import Cell, Domain

CellVolume = Callable[[Sequence[float], Sequence[float]], float]
Cons2Prim = Callable[[Sequence[float], float, float, float], Sequence[float]]


def _centroid(rm: float, rp: float) -> float:
    return (2.0 / 3.0) * (rp ** 3 - rm ** 3) / (rp * rp - rm * rm)


def long_and_short(
    domain: Domain, sweep: list[Cell], j: int, k: int
) -> tuple[float, float, int, int]:
    """Largest radial and angular aspect ratios among the interior cells of sweep.

    Returns (longest, shortest, index of longest, index of shortest); an index
    is 0 when no interior cell was examined.
    """
    dtheta = domain.t_edge(j) - domain.t_edge(j - 1)
    longest = shortest = 0.0
    i_long = i_short = 0
    for i, cell in enumerate(sweep[1:-1], start=1):
        dx = cell.riph * dtheta
        dy = cell.dr
        aspect_long = dy / dx
        aspect_short = dx / dy
        if longest < aspect_long:
            longest, i_long = aspect_long, i
        if shortest < aspect_short:
            shortest, i_short = aspect_short, i
    if domain.nt == 1:
        scale = domain.params.num_r * math.pi / math.log(sweep[-1].riph / sweep[0].riph)
        shortest /= scale
        longest *= scale
    return longest, shortest, i_long, i_short


def amr_sweep(
    domain: Domain, j: int, k: int, cell_volume: CellVolume, cons2prim: Cons2Prim
) -> None:
    """Merge the thinnest cell of column (j, k) or split its longest one, if needed."""
    sweep = domain.column(j, k)
    params = domain.params
    longest, shortest, i_long, i_short = long_and_short(domain, sweep, j, k)

    tp, tm = domain.t_edge(j), domain.t_edge(j - 1)
    pp, pm = domain.p_edge(k), domain.p_edge(k - 1)
    theta = 0.5 * (tp + tm)

    def refresh(cell: Cell, rm: float, rp: float) -> None:
        dv = cell_volume((rp, tp, pp), (rm, tm, pm))
        cell.prim = list(cons2prim(cell.cons, _centroid(rm, rp), theta, dv))

    if shortest > params.max_short and i_short > 0:
        if sweep[i_short - 1].dr < sweep[i_short + 1].dr and i_short != 1:
            i_short -= 1
        keep, gone = sweep[i_short], sweep[i_short + 1]
        keep.dr += gone.dr
        keep.riph = gone.rk_riph
        keep.cons = [a + b for a, b in zip(keep.cons, gone.cons)]
        keep.rk_cons = [a + b for a, b in zip(keep.rk_cons, gone.rk_cons)]
        refresh(keep, sweep[i_short - 1].riph, gone.riph)
        del sweep[i_short + 1]
        if i_short < i_long:
            i_long -= 1

    if longest > params.max_long and i_long > 0:
        original = sweep[i_long]
        twin = copy.deepcopy(original)
        sweep.insert(i_long + 1, twin)

        rp = original.riph
        rm = sweep[i_long - 1].riph
        r0 = (0.5 * (rp ** 3 + rm ** 3)) ** (1.0 / 3.0)

        original.riph = r0
        original.rk_riph = r0
        original.dr = r0 - rm
        twin.dr = rp - r0

        for cell in (original, twin):
            cell.cons = [0.5 * c for c in cell.cons]
            cell.rk_cons = [0.5 * c for c in cell.rk_cons]

        refresh(original, rm, r0)
        refresh(twin, r0, twin.riph)


def amr(domain: Domain, cell_volume: CellVolume, cons2prim: Cons2Prim) -> None:
    """Run one refinement sweep over every column of domain."""
    for j in range(domain.nt):
        for k in range(domain.np):
            amr_sweep(domain, j, k, cell_volume, cons2prim)


def calc_prim(domain: Domain, cell_volume: CellVolume, cons2prim: Cons2Prim) -> None:
    """Recompute the primitive variables of every cell from its conserved ones."""
    for j in range(domain.nt):
        tp, tm = domain.t_edge(j), domain.t_edge(j - 1)
        theta = 0.5 * (tp + tm)
        for k in range(domain.np):
            pp, pm = domain.p_edge(k), domain.p_edge(k - 1)
            rm = 0.0
            for cell in domain.column(j, k):
                rp = cell.riph
                dv = cell_volume((rp, tp, pp), (rm, tm, pm))
                cell.prim = list(cons2prim(cell.cons, _centroid(rm, rp), theta, dv))
                rm = rp