"""Wall-clock timing and a summary log of a run."""

from __future__ import annotations

import math
import time
from pathlib import Path

from sphjet.model import Domain


def start_clock(domain: Domain) -> None:
    """Record the wall-clock start of the run."""
    domain.wallt_init = time.time()


def count_cells(domain: Domain) -> int:
    """Number of cells this rank owns, excluding ghost rows and columns."""
    ng, nt, np_ = domain.ng, domain.nt, domain.np
    dim_rank, dim_size = domain.dim_rank, domain.dim_size
    jmin = 0 if dim_rank[0] == 0 else ng
    jmax = nt if dim_rank[0] == dim_size[0] - 1 else nt - ng
    kmin = 0 if dim_rank[1] == 0 else ng
    kmax = np_ if dim_rank[1] == dim_size[1] - 1 else np_ - ng
    return sum(domain.nr(j, k) for j in range(jmin, jmax) for k in range(kmin, kmax))


def _divide(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a)


def generate_log(
    domain: Domain, path: str | Path = "times.log", now: float | None = None
) -> str:
    """Build the timing summary; rank 0 also writes it to path."""
    end = time.time() if now is None else now
    seconds = int(end - domain.wallt_init)
    n_cells = count_cells(domain)
    n_steps = domain.count_steps
    size = domain.size

    avgdt = _divide(seconds / 2.0, float(n_cells) * float(n_steps))
    micro = avgdt * 1e6
    plural = "es" if size > 1 else ""

    text = (
        f"Run using {size} MPI process{plural}.\n"
        f"Total time = {seconds} sec\n"
        f"Number of cells = {n_cells}\n"
        f"Number of timesteps = {n_steps} (x2)\n"
        "Megazones per second = %.2e\n"
        "Megazones per CPU second = %.2e\n"
        "Time/zone/step = %.2e microseconds\n"
    ) % (_divide(1.0, micro), _divide(1.0, micro * size), micro)

    if domain.rank == 0:
        Path(path).write_text(text, encoding="utf-8")
    return text