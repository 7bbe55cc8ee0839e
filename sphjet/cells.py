"""Cell-wise updates of the radial columns: face velocities, RK stages, widths, tracers."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from sphjet.model import DEN, NUM_C, NUM_N, PPP, Cell, Domain

RadialVelocity = Callable[[Sequence[float]], float]


def _all_cells(domain: Domain) -> Iterator[Cell]:
    for column in domain.cells:
        yield from column


def clear_w(domain: Domain) -> None:
    """Set the velocity of every radial face to zero."""
    for cell in _all_cells(domain):
        cell.wiph = 0.0


def set_wcell(domain: Domain, get_vr: RadialVelocity) -> None:
    """Move interior faces with the mean radial velocity of the two cells beside them.

    The innermost and outermost faces stay fixed.
    """
    for column in domain.cells:
        if not column:
            continue
        column[0].wiph = 0.0
        column[-1].wiph = 0.0
        interior = column[1:-1]
        for left, right in zip(interior, interior[1:]):
            left.wiph = 0.5 * (get_vr(left.prim) + get_vr(right.prim))


def adjust_rk_cons(domain: Domain, rk: float) -> None:
    """Blend the conserved variables with the stored Runge-Kutta stage."""
    for cell in _all_cells(domain):
        cell.cons = [(1.0 - rk) * c + rk * s for c, s in zip(cell.cons, cell.rk_cons)]


def move_cells(domain: Domain, rk: float, dt: float) -> None:
    """Advance every radial face by its velocity over dt, blended with the RK stage."""
    for cell in _all_cells(domain):
        cell.riph = (1.0 - rk) * cell.riph + rk * cell.rk_riph + cell.wiph * dt


def calc_dr(domain: Domain) -> None:
    """Recompute cell widths from the face positions; the outermost cell is left alone."""
    for column in domain.cells:
        inner = 0.0
        for cell in column[:-1]:
            cell.dr = cell.riph - inner
            inner = cell.riph


def make_nickel(domain: Domain) -> None:
    """Track the peak pressure of each cell and mark cells hot enough to make nickel."""
    if NUM_N <= 0:
        return
    threshold = domain.params.p56_critical
    for cell in _all_cells(domain):
        pressure = cell.prim[PPP]
        if cell.prim[NUM_C] < pressure:
            cell.prim[NUM_C] = pressure
            cell.cons[NUM_C] = pressure * cell.cons[DEN]
        if pressure > threshold and NUM_N > 2:
            cell.prim[NUM_C + 2] = 1.0
            cell.cons[NUM_C + 2] = cell.cons[DEN]