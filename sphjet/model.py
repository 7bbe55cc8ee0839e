"""Core data structures of the solver: cells, faces, run parameters and the domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

NUM_C = 4
NUM_N = 4
NUM_Q = NUM_C + NUM_N
NUM_G = 2


class Prim(IntEnum):
    """Indices of the primitive variables."""

    RHO = 0
    PPP = 1
    UU1 = 2
    UU2 = 3
    UU3 = 4


class Cons(IntEnum):
    """Indices of the conserved variables."""

    DEN = 0
    TAU = 1
    SS1 = 2
    SS2 = 3
    SS3 = 4


class MoveCells(IntEnum):
    """How radial cell faces move."""

    FIXED = 0
    WRIEMANN = 1
    WCELL = 2


MOVE_CELLS = MoveCells.WCELL

RHO, PPP, UU1, UU2, UU3 = Prim
DEN, TAU, SS1, SS2, SS3 = Cons


def _zeros() -> list[float]:
    return [0.0] * NUM_Q


@dataclass(eq=False)
class Cell:
    """A single radial zone of a (theta, phi) column."""

    prim: list[float] = field(default_factory=_zeros)
    cons: list[float] = field(default_factory=_zeros)
    rk_cons: list[float] = field(default_factory=_zeros)
    grad: list[float] = field(default_factory=_zeros)
    gradr: list[float] = field(default_factory=_zeros)
    riph: float = 0.0
    rk_riph: float = 0.0
    dr: float = 0.0
    wiph: float = 0.0


@dataclass(eq=False)
class Face:
    """An interface between two cells of neighbouring columns."""

    left: Cell
    right: Cell
    dx_l: float
    dx_r: float
    cm: tuple[float, float, float]
    dr: float
    da: float


@dataclass
class ParamList:
    """Run parameters as read from the parameter file."""

    t_min: float = 0.0
    t_max: float = 0.0
    num_r: int = 0
    num_t: int = 0
    num_p: int = 0
    num_repts: int = 0
    num_snaps: int = 0
    num_checks: int = 0
    out_log_time: int = 0

    rmin: float = 0.0
    rmax: float = 0.0
    thmin: float = 0.0
    thmax: float = 0.0
    phimax: float = 0.0

    log_zoning: float = 0.0
    max_short: float = 0.0
    max_long: float = 0.0
    target_x: float = 0.0
    target_w: float = 0.0
    shock_pos: float = 0.0
    absorb_bc: int = 0
    move_bcs: int = 0
    initial_regrid: int = 0
    initial_cons: int = 0
    reset_entropy: int = 0
    add_cooling: int = 0
    make_nickel: int = 0
    p56_critical: float = 0.0

    cfl: float = 0.0
    plm: float = 0.0
    density_floor: float = 0.0
    pressure_floor: float = 0.0

    adiabatic_index: float = 0.0
    gravity_switch: int = 0
    output_mass: int = 0
    point_mass: float = 0.0

    nozzle_switch: int = 0
    nozzle_is_wind: int = 0
    nozzle_power: float = 0.0
    nozzle_gamma: float = 0.0
    nozzle_eta: float = 0.0
    nozzle_r0: float = 0.0
    nozzle_th0: float = 0.0
    nozzle_time: float = 0.0
    gam_h_rel_th: float = 0.0

    wind_nozzle_beta: float = 0.0
    wind_mass: float = 0.0
    wind_t0: float = 0.0
    wind_dt: float = 0.0
    start_wind_tmin: int = 0

    explosion_energy: float = 0.0
    gam_0: float = 0.0
    gam_boost: float = 0.0

    restart_flag: int = 0


@dataclass
class Domain:
    """The computational domain.

    Columns of cells are stored flat, column (j, k) at index j + nt*k.
    The edge lists t_jph and p_kph hold nt+1 and np+1 values; their first
    entry is the edge with index -1.
    """

    params: ParamList = field(default_factory=ParamList)
    cells: list[list[Cell]] = field(default_factory=list)
    nt: int = 0
    np: int = 0
    ng: int = 0
    t_jph: list[float] = field(default_factory=list)
    p_kph: list[float] = field(default_factory=list)
    nr_init: list[int] = field(default_factory=list)

    g_point_mass: float = 0.0

    wallt_init: float = 0.0
    count_steps: int = 0

    rank: int = 0
    size: int = 1
    dim_rank: list[int] = field(default_factory=lambda: [0, 0])
    dim_size: list[int] = field(default_factory=lambda: [1, 1])

    t: float = 0.0
    t_init: float = 0.0
    t_fin: float = 0.0
    nrpt: int = 0
    n_rpt: int = 0
    nsnp: int = 0
    n_snp: int = 0
    nchk: int = 0
    n_chk: int = 0

    final_step: bool = False

    @staticmethod
    def _edge(edges: list[float], index: int) -> float:
        if index < -1 or index + 1 >= len(edges):
            raise IndexError(f"edge index {index} out of range")
        return edges[index + 1]

    def t_edge(self, j: int) -> float:
        """Theta of the upper edge of row j (j may be -1)."""
        return self._edge(self.t_jph, j)

    def p_edge(self, k: int) -> float:
        """Phi of the upper edge of column k (k may be -1)."""
        return self._edge(self.p_kph, k)

    def column(self, j: int, k: int) -> list[Cell]:
        """The radial list of cells at (j, k)."""
        return self.cells[j + self.nt * k]

    def nr(self, j: int, k: int) -> int:
        """Number of radial cells at (j, k), or the planned count before cells exist."""
        if self.cells:
            return len(self.column(j, k))
        return self.nr_init[j + self.nt * k]