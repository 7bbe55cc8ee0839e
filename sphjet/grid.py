"""Construction of the angular grid and initial radial zone counts."""

from __future__ import annotations

from sphjet.model import NUM_G, Domain


def get_n0(drank: int, dsize: int, dnum: int) -> int:
    """First global index owned by rank drank of dsize along a dnum-long axis."""
    return (dnum * drank) // dsize


def grid_setup(domain: Domain) -> None:
    """Set the local grid sizes, cell edges and radial zone counts of domain."""
    params = domain.params
    ng = NUM_G
    domain.ng = ng
    dim_rank = domain.dim_rank
    dim_size = domain.dim_size
    num_t = params.num_t
    num_p = params.num_p
    theta_min = params.thmin
    theta_max = params.thmax

    n0t = get_n0(dim_rank[0], dim_size[0], num_t)
    nt = get_n0(dim_rank[0] + 1, dim_size[0], num_t) - n0t

    n0p = get_n0(dim_rank[1], dim_size[1], num_p)
    np_ = get_n0(dim_rank[1] + 1, dim_size[1], num_p) - n0p

    if dim_rank[0] != 0:
        nt += ng
        n0t -= ng
    if dim_rank[0] != dim_size[0] - 1:
        nt += ng
    if num_p != 1:
        np_ += 2 * ng

    domain.nt = nt
    domain.np = np_

    dx = 1.0 / num_t
    x0 = n0t * dx
    domain.t_jph = [
        theta_min + (theta_max - theta_min) * (x0 + idx * dx) for idx in range(nt + 1)
    ]

    dphi = params.phimax / num_p
    p0 = n0p * dphi
    domain.p_kph = [p0 + idx * dphi for idx in range(np_ + 1)]

    dth = (theta_max - theta_min) / num_t
    edges = domain.t_jph
    nr_row = [
        int(params.num_r * dth / (1.001 * (upper - lower)))
        for lower, upper in zip(edges, edges[1:])
    ]
    domain.nr_init = [count for _ in range(np_) for count in nr_row]