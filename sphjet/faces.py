"""Construction of the transverse faces between neighbouring radial columns."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from sphjet.model import Cell, Domain, Face

FaceArea = Callable[[Sequence[float], Sequence[float], int], float]


def num_tp_faces(nt: int, np: int, dim: int) -> int:
    """Number of column pairs that share faces along dimension dim (1 = theta, 2 = phi)."""
    if dim == 1:
        return (nt - 1) * np
    return nt * np


def _make_face(
    left: Cell,
    right: Cell,
    dx_l: float,
    dx_r: float,
    xp: tuple[float, float, float],
    xm: tuple[float, float, float],
    dim: int,
    face_area: FaceArea,
) -> Face:
    rp, rm = xp[0], xm[0]
    r2 = (rp * rp + rm * rm + rp * rm) / 3.0
    cm = (r2 / (0.5 * (rp + rm)), 0.5 * (xp[1] + xm[1]), 0.5 * (xp[2] + xm[2]))
    return Face(
        left=left,
        right=right,
        dx_l=dx_l,
        dx_r=dx_r,
        cm=cm,
        dr=rp - rm,
        da=face_area(xp, xm, dim),
    )


def _link_columns(
    left_col: list[Cell],
    right_col: list[Cell],
    dx_l: float,
    dx_r: float,
    plus_angles: tuple[float, float],
    minus_angles: tuple[float, float],
    dim: int,
    face_area: FaceArea,
) -> list[Face]:
    """Faces formed by the radial overlaps of two neighbouring columns."""
    faces: list[Face] = []
    n_right = len(right_col)

    def emit(cl: Cell, cr: Cell, r_hi: float, r_lo: float) -> None:
        xp = (r_hi, *plus_angles)
        xm = (r_lo, *minus_angles)
        faces.append(_make_face(cl, cr, dx_l, dx_r, xp, xm, dim, face_area))

    ip = 0
    for cl in left_col:
        if ip >= n_right:
            break
        cr = right_col[ip]
        if cr.riph > cl.riph:
            # The right cell covers all of the left one.
            emit(cl, cr, cl.riph, cl.riph - cl.dr)
            continue

        emit(cl, cr, cr.riph, cl.riph - cl.dr)
        ip += 1
        if ip < n_right:
            cr = right_col[ip]
        while cl.riph - cr.riph > 0.0 and ip < n_right:
            emit(cl, cr, cr.riph, cr.riph - cr.dr)
            ip += 1
            if ip < n_right:
                cr = right_col[ip]
        if ip < n_right:
            emit(cl, cr, cl.riph, cr.riph - cr.dr)
    return faces


def build_faces(
    domain: Domain, dim: int, face_area: FaceArea
) -> tuple[list[Face], list[int]]:
    """Build every face along dimension dim.

    Returns the faces and a list of offsets: the faces of column pair
    j + ntmax*k start at offsets[j + ntmax*k]; the last entry is the total.
    """
    if dim not in (1, 2):
        raise ValueError(f"dimension must be 1 or 2, not {dim}")

    nt, np_ = domain.nt, domain.np
    nt_max = nt if dim == 2 else nt - 1
    t, p = domain.t_edge, domain.p_edge

    faces: list[Face] = []
    offsets = [0] * (num_tp_faces(nt, np_, dim) + 1)

    for j in range(nt_max):
        for k in range(np_):
            offsets[j + nt_max * k] = len(faces)
            kp = (k + 1) % np_
            left_col = domain.column(j, k)
            if dim == 1:
                right_col = domain.column(j + 1, k)
                dx_l = 0.5 * (t(j) - t(j - 1))
                dx_r = 0.5 * (t(j + 1) - t(j))
                plus_angles = (t(j), p(k))
                minus_angles = (t(j), p(k - 1))
            else:
                right_col = domain.column(j, kp)
                dx_l = 0.5 * (p(k) - p(k - 1))
                dx_r = 0.5 * (p(kp) - p(k))
                if dx_r < 0.0:
                    dx_r += math.pi
                plus_angles = (t(j), p(k))
                minus_angles = (t(j - 1), p(k))
            faces.extend(
                _link_columns(
                    left_col, right_col, dx_l, dx_r,
                    plus_angles, minus_angles, dim, face_area,
                )
            )
    offsets[-1] = len(faces)
    return faces, offsets