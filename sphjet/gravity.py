"""Self-gravity from the enclosed mass profile."""

from __future__ import annotations

import math
from pathlib import Path

from sphjet.model import DEN, SS1, Cell, Domain

G_CONST = 0.0


def xtor(x: float, rmin: float, rmax: float) -> float:
    """Radius at logarithmic coordinate x in [0, 1]."""
    return rmin * (rmax / rmin) ** x


def rtox(r: float, rmin: float, rmax: float) -> float:
    """Logarithmic coordinate of radius r between rmin and rmax."""
    return math.log(r / rmin) / math.log(rmax / rmin)


def _model_density() -> float:
    return 1.0 / 4.0 / math.pi / math.sqrt(3.0)


def get_pot(r: float) -> float:
    """Gravitational potential at r; the potential is switched off."""
    rhoc = _model_density()
    phi = -4.0 * math.pi * G_CONST * rhoc / math.sqrt(1.0 + r * r / 3.0)
    del phi
    return 0.0


class Gravity:
    """Enclosed-mass table on a logarithmic radial grid."""

    def __init__(self, num_r: int, point_mass: float = 0.0) -> None:
        if num_r < 1:
            raise ValueError("the mass table needs at least one bin")
        self.num_r = num_r
        self.point_mass = point_mass
        self.menc = [0.0] * num_r
        self.clear()

    def clear(self) -> None:
        """Empty the table, leaving only the point mass in the first bin."""
        self.menc = [0.0] * self.num_r
        self.menc[0] = self.point_mass

    def menc_force(self, x: float, r: float) -> float:
        """Radial gravitational acceleration at radius r (coordinate x)."""
        n = self.num_r
        ir = min(max(int(x * n), 0), n - 1)
        dx = min(max(x * n - ir, 0.0), 1.0)
        m0 = self.menc[ir]
        m1 = self.menc[ir + 1] if ir < n - 1 else m0
        mass = m0 * (1.0 - dx) + m1 * dx
        rhoc = _model_density()
        mass = 4.0 * math.pi / 3.0 * rhoc * r ** 3 / (1.0 + r * r / 3.0) ** 1.5
        return -G_CONST * mass / r / r

    def grav_src(self, cons: list[float], dt: float, r: float, x: float) -> None:
        """Add the gravitational momentum source over dt to cons."""
        cons[SS1] += cons[DEN] * self.menc_force(x, r) * dt

    def accumulate(self, cell: Cell, rmin: float, rmax: float) -> None:
        """Add the mass of cell to the bin holding its centre."""
        r = cell.riph - 0.5 * cell.dr
        ir = max(int(rtox(r, rmin, rmax) * self.num_r), 0)
        if ir < self.num_r - 1:
            self.menc[ir] += cell.cons[DEN]

    def aggregate(self) -> None:
        """Turn the binned masses into enclosed masses."""
        total = 0.0
        cumulative = []
        for m in self.menc:
            total += m
            cumulative.append(total)
        self.menc = cumulative

    def calculate_mass(self, domain: Domain) -> None:
        """Rebuild the enclosed-mass table from the cells of domain."""
        self.clear()
        for column in domain.cells:
            rmin = column[0].riph
            rmax = column[-1].riph
            for cell in column[1:]:
                self.accumulate(cell, rmin, rmax)
        self.aggregate()

    def add_source(self, domain: Domain, dt: float) -> None:
        """Apply the gravitational source to every cell but the outermost."""
        for column in domain.cells:
            rmin = column[0].riph
            rmax = column[-1].riph
            for cell in column[:-1]:
                r = cell.riph - 0.5 * cell.dr
                self.grav_src(cell.cons, dt, r, rtox(r, rmin, rmax))

    def write_mass(self, domain: Domain, path: str | Path = "mass.dat") -> None:
        """Write the enclosed-mass table as radius/mass lines."""
        first = domain.cells[0]
        rmin, rmax = first[0].riph, first[-1].riph
        with open(path, "w", encoding="utf-8") as handle:
            for i, mass in enumerate(self.menc):
                r = xtor(i / self.num_r, rmin, rmax)
                handle.write("%e %e\n" % (r, mass))