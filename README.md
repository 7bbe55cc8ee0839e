# sphjet

Building blocks for a moving-mesh hydrodynamics code on a spherical
(r, θ, φ) grid. The code is aimed at relativistic jets, winds and explosions.

The domain is divided into angular columns. Each column holds its own list of
radial `Cell`s, and the radial cell edges can move with the flow. The package
has no runtime dependencies beyond the standard library.

## Modules

- `sphjet.model`: the data model.
  - `Cell` holds the primitive, conserved, Runge–Kutta and gradient lists, the
    outer edge `riph`, the width `dr` and the edge velocity `wiph`.
  - `Face` is an interface between two cells of neighbouring columns.
  - `ParamList` holds the run parameters.
  - `Domain` holds the cells and the edge lists `t_jph` and `p_kph`. It has the
    helpers `t_edge(j)`, `p_edge(k)`, `column(j, k)` and `nr(j, k)`. Edge index
    -1 is allowed.
  - The module also defines the variable indices `RHO`, `PPP`, `UU1`… and
    `DEN`, `TAU`, `SS1`…, and the sizes `NUM_C`, `NUM_N`, `NUM_Q` and `NUM_G`.
- `sphjet.params`: reads `in.par`-style parameter files.
  - `read_var(path, name, kind)` reads one value, with `kind` a `VarKind` of
    `INT`, `DOUBLE` or `STR`.
  - `read_par_file(path="in.par")` reads every parameter into a `ParamList`.
  - A missing or unreadable value raises `ParamError`. `read_par_file` reports
    all the missing names at once.
- `sphjet.grid`: `get_n0` gives the first global index of a block.
  `grid_setup(domain)` sets `nt`, `np`, `ng`, the θ and φ edges and the planned
  radial counts `nr_init` from the domain's parameters and its block position
  (`dim_rank`, `dim_size`).
- `sphjet.faces`: `num_tp_faces(nt, np, dim)` and
  `build_faces(domain, dim, face_area)`. `build_faces` returns the faces along
  θ (`dim=1`) or φ (`dim=2`) together with per-column-pair offsets.
- `sphjet.plm`: piecewise-linear reconstruction with a minmod limiter.
  - `minmod` is the limiter.
  - `plm_r` sets the radial gradients.
  - `plm_trans` sets the transverse gradients.
- `sphjet.gravity`: enclosed-mass gravity.
  - `Gravity` keeps a mass table on a logarithmic radial grid, with
    `calculate_mass`, `add_source` and `write_mass` (which writes `mass.dat`).
  - The helpers are `xtor`, `rtox` and `get_pot`.
  - The gravitational constant `G_CONST` is 0. As set, the source term and
    `get_pot` contribute nothing.
- `sphjet.nozzle`: `Nozzle` injects a jet or a wind.
  - `Nozzle.from_params` builds it from the run parameters.
  - `source` adds mass, momentum and energy to one cell.
  - `set_prim` overwrites the primitives inside the nozzle region.
  - `apply` adds the source to the whole domain.
- `sphjet.cells`: per-step cell bookkeeping.
  - `clear_w` and `set_wcell` set the edge velocities.
  - `adjust_rk_cons` blends the conserved variables with the stored
    Runge–Kutta stage.
  - `move_cells` moves the radial edges.
  - `calc_dr` recomputes the cell widths.
  - `make_nickel` tracks peak pressure and the nickel tracer.
- `sphjet.amr`: radial refinement.
  - `long_and_short` finds the extreme aspect ratios of a column.
  - `amr_sweep` and `amr` merge the thinnest cell or split the longest one.
  - `calc_prim` recomputes every cell's primitives.
- `sphjet.report`: global diagnostics.
  - `compute_report(domain, t)` returns a `Report`.
  - `write_report(path, report, make_nickel, wind, first)` appends a line to
    the report file, with a header when `first` is true, and returns the text
    it added. When neither nickel nor wind is tracked it adds nothing.
- `sphjet.profiler`: `start_clock` and `count_cells`.
  `generate_log(domain, path="times.log", now=None)` returns the timing summary
  as text. Rank 0 also writes it to `path`.
- `sphjet.colorbar`: `get_rgb(val, colorbar=0, invert=False)` maps a value in
  [0, 1] to an RGB triple. It has colour maps 0–7; any other number gives white.

## Caller-supplied physics

The package does not contain the equation of state or the cell geometry. The
functions that need them take them as arguments:

| Argument | Call | Returns |
| --- | --- | --- |
| `face_area` | `face_area(xp, xm, dim)` | the area of a face |
| `cell_volume` | `cell_volume(xp, xm)` | the volume of a cell |
| `cons2prim` | `cons2prim(cons, r, theta, dv)` | the primitive variables |
| `get_vr` | `get_vr(prim)` | the radial velocity |

`xp` and `xm` are the (r, θ, φ) corners of the face or cell.

## Example

```python
from sphjet.params import read_par_file
from sphjet.model import Domain
from sphjet.grid import grid_setup

params = read_par_file("in.par")
domain = Domain(params=params)
grid_setup(domain)
print(domain.nt, domain.np, domain.nr_init[:5])
```

## What the package does not do

These are building blocks, not a complete simulation. The package has none of
the following:

- a command to run;
- a time-stepping driver;
- Riemann solvers;
- radial or transverse boundary conditions;
- moving or regridding of the inner and outer boundaries;
- initial conditions;
- snapshot or checkpoint files;
- a viewer.

Nothing exchanges data between processes. `Domain.rank`, `size`, `dim_rank`
and `dim_size` only choose which part of the grid is built or counted.

## Installation

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```