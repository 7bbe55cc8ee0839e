"""Piecewise-linear reconstruction of primitive variables."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from sphjet.model import NUM_Q, Domain, Face

FaceArea = Callable[[Sequence[float], Sequence[float], int], float]


def minmod(a: float, b: float, c: float) -> float:
    """The argument of smallest magnitude, or zero if the signs disagree."""
    m = a
    if a * b < 0.0:
        m = 0.0
    if abs(b) < abs(m):
        m = b
    if b * c < 0.0:
        m = 0.0
    if abs(c) < abs(m):
        m = c
    return m


def plm_r(domain: Domain) -> None:
    """Set limited radial gradients of every cell; the end cells get zero."""
    plm = domain.params.plm
    for column in domain.cells:
        if not column:
            continue
        column[0].gradr = [0.0] * NUM_Q
        column[-1].gradr = [0.0] * NUM_Q
        for cl, c, cr in zip(column, column[1:], column[2:]):
            drl, drc, drr = cl.dr, c.dr, cr.dr
            c.gradr = [
                minmod(
                    plm * (pc - pl) / (0.5 * (drc + drl)),
                    (pr - pl) / (0.5 * (drl + drr) + drc),
                    plm * (pr - pc) / (0.5 * (drr + drc)),
                )
                for pl, pc, pr in zip(cl.prim, c.prim, cr.prim)
            ]


def _face_slopes(face: Face) -> list[float]:
    r = face.cm[0]
    cl, cr = face.left, face.right
    drl = r - (cl.riph - 0.5 * cl.dr)
    drr = (cr.riph - 0.5 * cr.dr) - r
    width = face.dx_r + face.dx_l
    return [
        ((pr - drr * gr) - (pl + drl * gl)) / width
        for pl, gl, pr, gr in zip(cl.prim, cl.gradr, cr.prim, cr.gradr)
    ]


def plm_trans(domain: Domain, faces: list[Face], dim: int, face_area: FaceArea) -> None:
    """Set limited transverse gradients along dim from the face slopes."""
    plm = domain.params.plm
    t, p = domain.t_edge, domain.p_edge

    for column in domain.cells:
        for c in column:
            c.grad = [0.0] * NUM_Q

    for face in faces:
        for q, s in enumerate(_face_slopes(face)):
            face.left.grad[q] += s * face.da
            face.right.grad[q] += s * face.da

    nt = domain.nt
    for j in range(nt):
        outside = j in (0, nt - 1)
        for k in range(domain.np):
            for c in domain.column(j, k):
                if outside:
                    c.grad = [0.0] * NUM_Q
                    continue
                rp, rm = c.riph, c.riph - c.dr
                if dim == 1:
                    da1 = face_area((rp, t(j), p(k)), (rm, t(j), p(k - 1)), dim)
                    da2 = face_area((rp, t(j - 1), p(k)), (rm, t(j - 1), p(k - 1)), dim)
                else:
                    da1 = face_area((rp, t(j), p(k)), (rm, t(j - 1), p(k)), dim)
                    da2 = face_area((rp, t(j), p(k - 1)), (rm, t(j - 1), p(k - 1)), dim)
                total = da1 + da2
                c.grad = [g / total for g in c.grad]

    for face in faces:
        for q, s in enumerate(_face_slopes(face)):
            limited = plm * s
            for cell in (face.left, face.right):
                g = cell.grad[q]
                if s * g < 0.0:
                    cell.grad[q] = 0.0
                elif abs(limited) < abs(g):
                    cell.grad[q] = limited