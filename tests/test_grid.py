import math

import pytest

from sphjet.grid import get_n0, grid_setup
from sphjet.model import Domain, ParamList


@pytest.mark.parametrize("dsize, dnum", [(1, 10), (3, 10), (4, 7), (5, 100)])
def test_get_n0_partitions_axis(dsize, dnum):
    starts = [get_n0(r, dsize, dnum) for r in range(dsize + 1)]
    assert starts[0] == 0
    assert starts[-1] == dnum
    assert all(a <= b for a, b in zip(starts, starts[1:]))
    assert sum(b - a for a, b in zip(starts, starts[1:])) == dnum


def _domain(num_t=10, num_p=1, num_r=100, dim_rank=(0, 0), dim_size=(1, 1)):
    params = ParamList(
        num_t=num_t, num_p=num_p, num_r=num_r,
        thmin=0.0, thmax=math.pi / 2, phimax=1.0,
    )
    return Domain(params=params, dim_rank=list(dim_rank), dim_size=list(dim_size))


def test_single_rank_theta_grid():
    dom = _domain()
    grid_setup(dom)
    assert dom.nt == 10
    assert dom.np == 1
    assert dom.ng == 2
    assert len(dom.t_jph) == dom.nt + 1
    assert dom.t_edge(-1) == pytest.approx(0.0)
    assert dom.t_edge(dom.nt - 1) == pytest.approx(math.pi / 2)
    widths = [b - a for a, b in zip(dom.t_jph, dom.t_jph[1:])]
    assert all(w == pytest.approx(widths[0]) for w in widths)


def test_uniform_grid_radial_counts():
    dom = _domain()
    grid_setup(dom)
    assert len(dom.nr_init) == dom.nt * dom.np
    # The 1.001 safety factor puts uniform rows just below Num_R.
    assert set(dom.nr_init) == {99}
    assert dom.nr(3, 0) == 99


def test_phi_ghost_zones_added():
    dom = _domain(num_p=4)
    grid_setup(dom)
    assert dom.np == 4 + 2 * dom.ng
    assert len(dom.p_kph) == dom.np + 1
    assert dom.p_edge(-1) == pytest.approx(0.0)
    assert len(dom.nr_init) == dom.nt * dom.np


def test_second_rank_has_left_ghosts_matching_global_edges():
    whole = _domain()
    grid_setup(whole)
    upper = _domain(dim_rank=(1, 0), dim_size=(2, 1))
    grid_setup(upper)
    assert upper.nt == 5 + upper.ng
    assert upper.t_edge(upper.ng - 1) == pytest.approx(whole.t_edge(4))
    assert upper.t_edge(upper.nt - 1) == pytest.approx(whole.t_edge(whole.nt - 1))


def test_first_of_two_ranks_has_right_ghosts():
    lower = _domain(dim_rank=(0, 0), dim_size=(2, 1))
    grid_setup(lower)
    assert lower.nt == 5 + lower.ng
    assert lower.t_edge(-1) == pytest.approx(0.0)