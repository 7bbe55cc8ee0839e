import math

import pytest

from sphjet.model import DEN, NUM_C, NUM_N, NUM_Q, PPP, RHO, SS1, TAU, UU1, UU2, Cell, Domain, ParamList
from sphjet.nozzle import Nozzle


def _jet_params(**extra):
    values = dict(
        nozzle_power=1.0,
        nozzle_th0=0.2,
        nozzle_eta=8.0,
        nozzle_gamma=2.0,
        nozzle_time=1.0,
        t_min=0.0,
    )
    values.update(extra)
    return ParamList(**values)


def _wind_params(**extra):
    values = dict(
        nozzle_is_wind=1,
        wind_nozzle_beta=0.5,
        wind_mass=2.0,
        wind_t0=1.0,
        wind_dt=4.0,
        t_min=0.5,
    )
    values.update(extra)
    return ParamList(**values)


def test_from_params_jet_copies_values():
    nozzle = Nozzle.from_params(_jet_params())
    assert nozzle.wind is False
    assert nozzle.power == 1.0
    assert nozzle.th0 == 0.2
    assert nozzle.eta0 == 8.0
    assert nozzle.gam0 == 2.0


def test_from_params_wind_start_times():
    assert Nozzle.from_params(_wind_params()).t0_wind == 1.0
    assert Nozzle.from_params(_wind_params(start_wind_tmin=1)).t0_wind == 0.5


def test_from_params_wind_needs_duration():
    with pytest.raises(ValueError):
        Nozzle.from_params(_wind_params(wind_dt=0.0))


def test_jet_source_ratios():
    nozzle = Nozzle.from_params(_jet_params())
    cons = [0.0] * NUM_Q
    nozzle.source(cons, 1.0, 0.3, 0.1, 0.5, 0.1)
    assert cons[TAU] > 0.0
    assert cons[TAU] / cons[DEN] == pytest.approx(nozzle.eta0)
    assert cons[SS1] / cons[TAU] == pytest.approx(math.sqrt(3.0) / 2.0)
    assert all(c == 0.0 for c in cons[NUM_C:])


def test_jet_source_decays_and_scales():
    nozzle = Nozzle.from_params(_jet_params())
    early = [0.0] * NUM_Q
    late = [0.0] * NUM_Q
    double = [0.0] * NUM_Q
    nozzle.source(early, 1.0, 0.3, 0.1, 0.0, 0.1)
    nozzle.source(late, 1.0, 0.3, 0.1, 2.0, 0.1)
    nozzle.source(double, 2.0, 0.3, 0.1, 0.0, 0.1)
    assert late[TAU] < early[TAU]
    assert double[TAU] == pytest.approx(2.0 * early[TAU])


def test_wind_source_before_start_adds_nothing():
    nozzle = Nozzle.from_params(_wind_params())
    cons = [1.0] * NUM_Q
    nozzle.source(cons, 1.0, 0.3, 0.1, 0.5, 0.1)
    assert cons == [1.0] * NUM_Q


def test_wind_source_tracks_wind_mass():
    nozzle = Nozzle.from_params(_wind_params())
    cons = [0.0] * NUM_Q
    nozzle.source(cons, 1.0, 0.3, 0.1, 2.0, 0.1)
    assert cons[DEN] / cons[TAU] == pytest.approx(8.0)
    assert cons[SS1] / cons[TAU] == pytest.approx(nozzle.beta0)
    if NUM_N > 3:
        assert cons[NUM_C + 3] == pytest.approx(cons[DEN])


def test_set_prim_outside_radius_untouched():
    nozzle = Nozzle.from_params(_jet_params())
    prim = [0.7] * NUM_Q
    nozzle.set_prim(prim, 0.5, 0.05, 0.0, 0.1)
    assert prim == [0.7] * NUM_Q


def test_set_prim_inside_cone():
    nozzle = Nozzle.from_params(_jet_params(nozzle_eta=8.0, nozzle_gamma=2.0))
    prim = [0.7] * NUM_Q
    nozzle.set_prim(prim, 0.1, 0.05, 0.0, 0.1)
    assert prim[UU1] == nozzle.gam0
    assert prim[UU2] == 0.0
    assert prim[RHO] / prim[PPP] == pytest.approx(1.0)
    assert prim[NUM_C:] == [1.0] * NUM_N


def test_set_prim_outside_cone_stops_flow():
    nozzle = Nozzle.from_params(_jet_params())
    prim = [0.7] * NUM_Q
    nozzle.set_prim(prim, 0.1, 1.0, 0.0, 0.1)
    assert prim[RHO] == 0.7
    assert prim[PPP] == 0.7
    assert prim[UU1] == 0.0
    assert prim[NUM_C:] == [0.0] * NUM_N


def test_apply_matches_source():
    nozzle = Nozzle.from_params(_jet_params())
    radii = [0.1, 0.2, 0.4]
    cells = [Cell(riph=r, dr=r / 2.0) for r in radii]
    domain = Domain(
        cells=[cells], nt=1, np=1, t_jph=[0.0, 0.5], p_kph=[0.0, 2.0 * math.pi], t=0.3
    )
    seen = []

    def volume(xp, xm):
        seen.append((xp, xm))
        return 2.0

    nozzle.apply(domain, 0.1, volume)

    assert len(seen) == len(radii)
    assert seen[0][0][1] == 0.5 and seen[0][1][1] == 0.0
    for cell in cells:
        expected = [0.0] * NUM_Q
        nozzle.source(expected, 2.0 * 0.1, cell.riph - 0.5 * cell.dr, 0.25, 0.3, 0.1)
        assert cell.cons == pytest.approx(expected)