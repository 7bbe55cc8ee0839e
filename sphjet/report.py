"""Global diagnostics of the flow, appended to a report file each step."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path

from sphjet.model import DEN, NUM_C, NUM_Q, PPP, RHO, TAU, UU1, UU2, Domain

_HEADER_NICKEL = (
    "# time R_forward_shock Rmin uAverage uMax E_total M_total E_jet_rel gamma_h_max "
    "Rmin_ghRel_N Rmax_ghRel_N Rmin_ghRel_S Rmax_ghRel_S v_photosphere M_Ni56_direct "
    "M_Ni56_PPP sint_jet_2 E_therm_tot\n"
)
_HEADER_BOTH = (
    "# time R_forward_shock Rmin uAverage uMax E_total M_total E_jet_rel gamma_h_max "
    "Rmin_ghRel_N Rmax_ghRel_N Rmin_ghRel_S Rmax_ghRel_S v_photosphere M_wind "
    "M_Ni56_directM_Ni56_PPP sint_jet_2 E_therm_tot\n"
)
_HEADER_WIND = (
    "# time R_forward_shock Rmin uAverage uMax E_total M_total E_jet_rel gamma_h_max "
    "Rmin_ghRel_N Rmax_ghRel_N Rmin_ghRel_S Rmax_ghRel_S v_photosphere M_wind "
    "sint_jet_2 E_therm_tot\n"
)


@dataclass
class Report:
    """Diagnostics of one moment of the run."""

    t: float
    r_max: float
    r_min: float
    u_av: float
    u_max: float
    e_sum: float
    m_sum: float
    e_jet: float
    gh_max: float
    r_min_rel_n: float
    r_max_rel_n: float
    r_min_rel_s: float
    r_max_rel_s: float
    v_phot: float
    wind_mass: float
    ni_direct: float
    ni_via_ppp: float
    sintj2: float
    e_therm: float


def _divide(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a)


def compute_report(domain: Domain, t: float) -> Report:
    """Gather the diagnostics of the first phi column of domain at time t."""
    params = domain.params
    nt, ng = domain.nt, domain.ng
    jmin = 0 if domain.rank == 0 else ng
    jmax = nt if domain.rank == domain.size - 1 else nt - ng
    make_nick = bool(params.make_nickel)
    wind = bool(params.nozzle_is_wind)
    p_threshold = params.p56_critical
    gh_threshold = params.gam_h_rel_th

    u_sum = e_sum = e_therm = e_jet = m_sum = 0.0
    ni_direct = ni_via_ppp = wind_mass = 0.0
    u_max = gh_max = 0.0
    r_min_rel_n = r_min_rel_s = math.inf
    r_max_rel_n = r_max_rel_s = 0.0
    i_th = 0.0

    for j in range(jmin, jmax):
        d_omega = 2.0 * math.pi * (math.cos(domain.t_edge(j - 1)) - math.cos(domain.t_edge(j)))
        north = domain.t_edge(j) <= math.pi / 2.0
        d_e = 0.0
        for cell in domain.cells[j]:
            prim, cons = cell.prim, cell.cons
            x_ni = x_p = x_w = 0.0
            if make_nick:
                if NUM_Q > NUM_C:
                    x_p = prim[NUM_C]
                if NUM_Q > NUM_C + 2:
                    x_ni = prim[NUM_C + 2]
            if wind and NUM_Q > NUM_C + 3:
                x_w = prim[NUM_C + 3]

            u = math.hypot(prim[UU1], prim[UU2])
            energy = cons[TAU]
            mass = cons[DEN]
            h = 1.0 + 4.0 * prim[PPP] / prim[RHO]
            gam = math.sqrt(1.0 + u * u)
            gh = gam * h
            if gh >= gh_threshold:
                r = cell.riph
                if north:
                    r_min_rel_n = min(r_min_rel_n, r)
                    r_max_rel_n = max(r_max_rel_n, r)
                else:
                    r_min_rel_s = min(r_min_rel_s, r)
                    r_max_rel_s = max(r_max_rel_s, r)

            u_sum += u * energy
            e_sum += energy
            e_therm += 3.0 * prim[PPP] * cons[DEN] / prim[RHO]
            d_e += energy
            if gh * gh - 1.0 > 1.0:
                e_jet += energy
            m_sum += mass
            if x_p > p_threshold:
                ni_via_ppp += mass
            ni_direct += mass * x_ni
            wind_mass += mass * x_w
            u_max = max(u_max, u)
            gh_max = max(gh_max, gh)
        i_th += _divide(d_e * d_e, d_omega)

    u_av = _divide(u_sum, e_sum)
    sintj2 = _divide(e_sum, math.sqrt(4.0 * math.pi * i_th))

    r_max = 0.0
    r_min = math.inf
    for j in range(jmin, jmax):
        for cell in domain.cells[j]:
            u = math.hypot(cell.prim[UU1], cell.prim[UU2])
            if u > 0.5 * u_av:
                r_max = max(r_max, cell.riph)
                r_min = min(r_min, cell.riph)

    v_phot = 0.0
    if domain.rank == 0 and domain.cells:
        tau = 0.0
        kappa = 3.0 * t * t
        for cell in reversed(domain.cells[0]):
            if tau >= 1.0:
                break
            tau += cell.prim[RHO] * kappa * cell.dr
            ur, up = cell.prim[UU1], cell.prim[UU2]
            v_phot = ur / math.sqrt(1.0 + ur * ur + up * up)

    return Report(
        t=t,
        r_max=r_max,
        r_min=r_min,
        u_av=u_av,
        u_max=u_max,
        e_sum=e_sum,
        m_sum=m_sum,
        e_jet=e_jet,
        gh_max=gh_max,
        r_min_rel_n=r_min_rel_n,
        r_max_rel_n=r_max_rel_n,
        r_min_rel_s=r_min_rel_s,
        r_max_rel_s=r_max_rel_s,
        v_phot=v_phot,
        wind_mass=wind_mass,
        ni_direct=ni_direct,
        ni_via_ppp=ni_via_ppp,
        sintj2=sintj2,
        e_therm=e_therm,
    )


def write_report(
    path: str | Path, report: Report, make_nickel: bool, wind: bool, first: bool
) -> str:
    """Append one report line to path (with a header when first); return the text added."""
    rep = report
    common = [
        rep.t, rep.r_max, rep.r_min, rep.u_av, rep.u_max, rep.e_sum, rep.m_sum,
        rep.e_jet, rep.gh_max, rep.r_min_rel_n, rep.r_max_rel_n, rep.r_min_rel_s,
        rep.r_max_rel_s, rep.v_phot,
    ]
    if make_nickel and not wind:
        header = _HEADER_NICKEL
        values = common + [rep.ni_direct, rep.ni_via_ppp, rep.sintj2, rep.e_therm]
    elif make_nickel and wind:
        header = _HEADER_BOTH
        values = common + [rep.wind_mass, rep.ni_direct, rep.ni_via_ppp, rep.sintj2, rep.e_therm]
    elif wind:
        header = _HEADER_WIND
        values = common + [rep.wind_mass, rep.sintj2, rep.e_therm]
    else:
        header = ""
        values = []

    text = ""
    if values:
        if first:
            text += header
        text += " ".join("%e" % v for v in values) + "\n"
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(text)
    return text