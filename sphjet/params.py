"""Reading run parameters from a plain-text parameter file."""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path

from sphjet.model import ParamList


class VarKind(Enum):
    """The type a parameter value is read as."""

    INT = "int"
    DOUBLE = "double"
    STR = "str"


class ParamError(ValueError):
    """A parameter is missing or its value cannot be read."""


_SEPARATORS = "\t :=>_"
_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_MAX_STR = 256

PAR_KEYS: tuple[tuple[str, str, VarKind], ...] = (
    ("Num_R", "num_r", VarKind.INT),
    ("Num_Theta", "num_t", VarKind.INT),
    ("Num_Phi", "num_p", VarKind.INT),
    ("Num_Reports", "num_repts", VarKind.INT),
    ("Num_Snapshots", "num_snaps", VarKind.INT),
    ("Num_Checkpoints", "num_checks", VarKind.INT),
    ("T_Start", "t_min", VarKind.DOUBLE),
    ("T_End", "t_max", VarKind.DOUBLE),
    ("R_Min", "rmin", VarKind.DOUBLE),
    ("R_Max", "rmax", VarKind.DOUBLE),
    ("Theta_Min", "thmin", VarKind.DOUBLE),
    ("Theta_Max", "thmax", VarKind.DOUBLE),
    ("Phi_Max", "phimax", VarKind.DOUBLE),
    ("Log_Zoning", "log_zoning", VarKind.DOUBLE),
    ("Max_Aspect_Short", "max_short", VarKind.DOUBLE),
    ("Max_Aspect_Long", "max_long", VarKind.DOUBLE),
    ("CFL", "cfl", VarKind.DOUBLE),
    ("PLM", "plm", VarKind.DOUBLE),
    ("Adiabatic_Index", "adiabatic_index", VarKind.DOUBLE),
    ("Density_Floor", "density_floor", VarKind.DOUBLE),
    ("Pressure_Floor", "pressure_floor", VarKind.DOUBLE),
    ("Gravity_Switch", "gravity_switch", VarKind.INT),
    ("Output_Mass", "output_mass", VarKind.INT),
    ("PointMass", "point_mass", VarKind.DOUBLE),
    ("Explosion_Energy", "explosion_energy", VarKind.DOUBLE),
    ("Gam_0", "gam_0", VarKind.DOUBLE),
    ("Gam_Boost", "gam_boost", VarKind.DOUBLE),
    ("Absorbing_BC", "absorb_bc", VarKind.INT),
    ("Move_Boundaries", "move_bcs", VarKind.INT),
    ("Shock_Position", "shock_pos", VarKind.DOUBLE),
    ("Initial_Regrid", "initial_regrid", VarKind.INT),
    ("Restart", "restart_flag", VarKind.INT),
    ("Target_X0", "target_x", VarKind.DOUBLE),
    ("Target_Weight", "target_w", VarKind.DOUBLE),
    ("Nozzle_Switch", "nozzle_switch", VarKind.INT),
    ("Nozzle_Power", "nozzle_power", VarKind.DOUBLE),
    ("Nozzle_Gamma", "nozzle_gamma", VarKind.DOUBLE),
    ("Nozzle_Eta", "nozzle_eta", VarKind.DOUBLE),
    ("Nozzle_r0", "nozzle_r0", VarKind.DOUBLE),
    ("Nozzle_th0", "nozzle_th0", VarKind.DOUBLE),
    ("Nozzle_Time", "nozzle_time", VarKind.DOUBLE),
    ("Nozzle_GammaH_thr", "gam_h_rel_th", VarKind.DOUBLE),
    ("Nozzle_is_Wind", "nozzle_is_wind", VarKind.INT),
    ("Wind_Mass", "wind_mass", VarKind.DOUBLE),
    ("Wind_Nozzle_Beta", "wind_nozzle_beta", VarKind.DOUBLE),
    ("Wind_t0", "wind_t0", VarKind.DOUBLE),
    ("Wind_dt", "wind_dt", VarKind.DOUBLE),
    ("Start_Wind_tmin", "start_wind_tmin", VarKind.INT),
    ("Use_Logtime", "out_log_time", VarKind.INT),
    ("Initial_Cons", "initial_cons", VarKind.INT),
    ("Reset_Entropy", "reset_entropy", VarKind.INT),
    ("Add_Cooling", "add_cooling", VarKind.INT),
    ("Make_Nickel", "make_nickel", VarKind.INT),
    ("P56_critical", "p56_critical", VarKind.DOUBLE),
)


def _lookup(lines: list[str], name: str, kind: VarKind) -> int | float | str:
    for line in lines:
        tokens = line.split()
        if tokens and tokens[0] == name:
            break
    else:
        raise ParamError(f"{name} not found")

    rest = line[len(name):].lstrip(_SEPARATORS)

    if kind is VarKind.STR:
        words = rest.split()
        if not words:
            raise ParamError(f"{name} has no value")
        return words[0][:_MAX_STR]

    match = _NUMBER.match(rest)
    if match is None:
        raise ParamError(f"{name} has no numeric value")
    value = float(match.group(1))
    if kind is VarKind.DOUBLE:
        return value
    try:
        return int(value)
    except (ValueError, OverflowError) as exc:
        raise ParamError(f"{name} is not a valid integer") from exc


def _read_lines(path: str | Path) -> list[str]:
    with open(path, encoding="utf-8") as handle:
        return handle.readlines()


def read_var(path: str | Path, name: str, kind: VarKind) -> int | float | str:
    """Read one named value from the parameter file at path."""
    return _lookup(_read_lines(path), name, kind)


def read_par_file(path: str | Path = "in.par") -> ParamList:
    """Read every run parameter; raise ParamError naming all that are missing."""
    lines = _read_lines(path)
    params = ParamList()
    problems = []
    for key, attr, kind in PAR_KEYS:
        try:
            setattr(params, attr, _lookup(lines, key, kind))
        except ParamError as exc:
            problems.append(str(exc))
    if problems:
        raise ParamError(f"read failed, err = {len(problems)}: " + "; ".join(problems))
    return params