import math

import pytest

from sphjet.faces import build_faces
from sphjet.model import NUM_Q, Cell, Domain, ParamList
from sphjet.plm import minmod, plm_r, plm_trans


def _column(radii, value):
    cells = []
    prev = 0.0
    for i, r in enumerate(radii):
        cells.append(Cell(riph=r, dr=r - prev, prim=[value(i) + q for q in range(NUM_Q)]))
        prev = r
    return cells


def test_minmod_picks_smallest_same_sign():
    assert minmod(1.0, 2.0, 3.0) == 1.0
    assert minmod(3.0, 2.0, 1.0) == 1.0
    assert minmod(-3.0, -2.0, -1.5) == -1.5


def test_minmod_zero_on_sign_change():
    assert minmod(1.0, -1.0, 1.0) == 0.0
    assert minmod(-1.0, 2.0, 3.0) == 0.0


def test_plm_r_linear_profile_recovers_slope():
    column = _column([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], lambda i: 2.0 * i)
    domain = Domain(params=ParamList(plm=1.5), nt=1, np=1, cells=[column])
    plm_r(domain)
    assert column[0].gradr == [0.0] * NUM_Q
    assert column[-1].gradr == [0.0] * NUM_Q
    for c in column[1:-1]:
        assert c.gradr == pytest.approx([2.0] * NUM_Q)


def test_plm_r_extremum_is_flattened():
    column = _column([1.0, 2.0, 3.0], lambda i: 1.0 if i == 1 else 0.0)
    domain = Domain(params=ParamList(plm=1.0), nt=1, np=1, cells=[column])
    plm_r(domain)
    assert column[1].gradr == [0.0] * NUM_Q


def _theta_domain(value_of_row, plm=1.0):
    edges = [0.0, 0.1, 0.2, 0.3, 0.4]
    cells = [_column([1.0, 2.0, 3.0], lambda i, j=j: value_of_row(j)) for j in range(4)]
    return Domain(
        params=ParamList(plm=plm),
        nt=4,
        np=1,
        t_jph=edges,
        p_kph=[0.0, 2.0 * math.pi],
        cells=cells,
    )


def _unit_area(xp, xm, dim):
    return 1.0


def test_plm_trans_uniform_field_has_no_gradient():
    domain = _theta_domain(lambda j: 5.0)
    faces, _ = build_faces(domain, 1, _unit_area)
    plm_trans(domain, faces, 1, _unit_area)
    for column in domain.cells:
        for c in column:
            assert c.grad == pytest.approx([0.0] * NUM_Q)


def test_plm_trans_linear_field_is_limited_and_positive():
    plm = 1.0
    domain = _theta_domain(lambda j: float(j), plm=plm)
    faces, _ = build_faces(domain, 1, _unit_area)
    plm_trans(domain, faces, 1, _unit_area)
    spacing = domain.t_edge(0) - domain.t_edge(-1)
    bound = plm / spacing
    for j in (1, 2):
        for c in domain.column(j, 0):
            for g in c.grad:
                assert 0.0 < g <= bound + 1e-9


def test_plm_trans_outer_rows_are_zero():
    domain = _theta_domain(lambda j: float(j) ** 2)
    faces, _ = build_faces(domain, 1, _unit_area)
    plm_trans(domain, faces, 1, _unit_area)
    for j in (0, 3):
        for c in domain.column(j, 0):
            assert c.grad == [0.0] * NUM_Q