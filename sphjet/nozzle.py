"""Energy injection by a jet nozzle or a wind at the inner boundary."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from sphjet.model import (
    DEN,
    NUM_C,
    NUM_N,
    PPP,
    RHO,
    SS1,
    SS2,
    TAU,
    UU1,
    UU2,
    Domain,
    ParamList,
)

CellVolume = Callable[[Sequence[float], Sequence[float]], float]


@dataclass
class Nozzle:
    """Settings of the jet or wind source."""

    power: float = 0.0
    th0: float = 0.0
    eta0: float = 0.0
    gam0: float = 0.0
    tjet: float = 0.0
    tmin: float = 0.0
    wind: bool = False
    t0_wind: float = 0.0
    beta0: float = 0.0
    m_wind: float = 0.0
    wind_pow: float = 0.0
    tau_wind: float = 0.0

    @classmethod
    def from_params(cls, params: ParamList) -> "Nozzle":
        """Build the nozzle from the run parameters."""
        nozzle = cls(
            power=params.nozzle_power,
            th0=params.nozzle_th0,
            eta0=params.nozzle_eta,
            gam0=params.nozzle_gamma,
            tjet=params.nozzle_time,
            tmin=params.t_min,
            wind=bool(params.nozzle_is_wind),
        )
        if nozzle.wind:
            if params.wind_dt == 0.0:
                raise ValueError("a wind needs a non-zero Wind_dt")
            nozzle.beta0 = params.wind_nozzle_beta
            nozzle.m_wind = params.wind_mass
            nozzle.t0_wind = params.t_min if params.start_wind_tmin else params.wind_t0
            nozzle.tau_wind = params.wind_dt
            nozzle.wind_pow = 0.5 * (nozzle.m_wind / nozzle.tau_wind) * nozzle.beta0 ** 2
        return nozzle

    def _profile(self, r: float, theta: float, t: float, r_min: float) -> tuple[float, float, float, float]:
        """Shape factor, velocity, energy per mass and power at (r, theta, t)."""
        if not self.wind:
            r0 = 5.0 * r_min
            v = math.sqrt(1.0 - 1.0 / self.gam0 / self.gam0)
            th2 = self.th0 * self.th0
            vol = (
                (math.sqrt(2.0 * math.pi) * r0) ** 3
                * (1.0 - math.exp(-2.0 / th2))
                * th2
                / math.sqrt(0.5 * math.pi)
            )
            f = (r / r0) * math.exp(-0.5 * r * r / r0 / r0)
            f *= math.exp((abs(math.cos(theta)) - 1.0) / th2) / vol
            f *= math.exp(-(t - self.tmin) / self.tjet)
            return f, v, self.eta0, self.power

        r0 = 2.0 * r_min
        v = self.beta0
        vol = 8.0 * math.pi * r0 ** 3
        f = (r / r0) * math.exp(-0.5 * r * r / r0 / r0) / vol
        f *= math.exp(-(t - self.t0_wind) / self.tau_wind)
        if t < self.t0_wind:
            f = 0.0
        return f, v, 0.5 * v * v, self.wind_pow

    def source(
        self, cons: list[float], dvdt: float, r: float, theta: float, t: float, r_min: float
    ) -> None:
        """Add the injected mass, momentum and energy over volume-time dvdt to cons."""
        f, v, eta, power = self._profile(r, theta, t, r_min)
        se = power * f
        sm = se / eta
        ss = v * se

        cons[DEN] += sm * dvdt
        cons[SS1] += ss * dvdt
        cons[SS2] += 0.0
        cons[TAU] += se * dvdt

        if self.wind and NUM_N > 3:
            cons[NUM_C + 3] += sm * dvdt

    def set_prim(self, prim: list[float], r: float, theta: float, t: float, r_min: float) -> None:
        """Overwrite the primitives inside the nozzle region with the jet state."""
        r0 = 3.0 * r_min
        if r >= r0:
            return
        if theta < self.th0:
            area = 2.0 * math.pi * r0 * r0 * (1.0 - math.cos(self.th0))
            pressure = self.power / 4.0 / self.gam0 / self.gam0 / area * math.exp(-t / self.tjet)
            rho = 4.0 * self.gam0 * pressure / self.eta0
            gv = self.gam0
            tracer = 1.0
        else:
            rho = prim[RHO]
            gv = 0.0
            pressure = prim[PPP]
            tracer = 0.0

        prim[RHO] = rho
        prim[UU1] = gv
        prim[UU2] = 0.0
        prim[PPP] = pressure
        for q in range(NUM_C, NUM_C + NUM_N):
            prim[q] = tracer

    def apply(self, domain: Domain, dt: float, cell_volume: CellVolume) -> None:
        """Add the source over dt to every cell of domain."""
        r_min = domain.cells[0][0].riph
        t_now = domain.t
        for j in range(domain.nt):
            thp = domain.t_edge(j)
            thm = domain.t_edge(j - 1)
            th = 0.5 * (thp + thm)
            for k in range(domain.np):
                php = domain.p_edge(k)
                phm = domain.p_edge(k - 1)
                for cell in domain.column(j, k):
                    rp = cell.riph
                    rm = rp - cell.dr
                    r = rp - 0.5 * cell.dr
                    dv = cell_volume((rp, thp, php), (rm, thm, phm))
                    self.source(cell.cons, dv * dt, r, th, t_now, r_min)