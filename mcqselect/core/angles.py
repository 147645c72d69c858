"""
Torsion angle types measured by the downstream comparison
"""

from enum import Enum

from .errors import AngleTypeError
from .messages import MessageKind


class TorsionAngleType(Enum):
    """Registry of RNA torsion angle kinds, valued by their display name."""

    ALPHA = "α"
    BETA = "β"
    GAMMA = "γ"
    DELTA = "δ"
    EPSILON = "ε"
    ZETA = "ζ"
    CHI = "χ"
    ETA = "η"
    THETA = "θ"
    ETA_PRIM = "η'"
    THETA_PRIM = "θ'"
    NU0 = "ν0"
    NU1 = "ν1"
    NU2 = "ν2"
    NU3 = "ν3"
    NU4 = "ν4"
    PSEUDOPHASE_PUCKER = "P"

    def __str__(self) -> str:
        return self.name


MAIN_ANGLES = (
    TorsionAngleType.ALPHA,
    TorsionAngleType.BETA,
    TorsionAngleType.GAMMA,
    TorsionAngleType.DELTA,
    TorsionAngleType.EPSILON,
    TorsionAngleType.ZETA,
    TorsionAngleType.CHI,
    TorsionAngleType.PSEUDOPHASE_PUCKER,
)


def main_angles() -> tuple[TorsionAngleType, ...]:
    """Default angle kinds used when none are requested."""
    return MAIN_ANGLES


def angle_names(angles) -> str:
    return ",".join(angle.name for angle in angles)


def parse_angles(angles_csv: str | None) -> list[TorsionAngleType]:
    """
    Resolve a comma-separated list of angle type names.

    Args:
        angles_csv: Names such as "ALPHA,CHI", or None for the main angles

    Returns:
        New list of angle types in the requested order, without repetitions

    Raises:
        AngleTypeError: If any name is not a known angle type
    """
    if angles_csv is None:
        return list(main_angles())

    angles = []
    for angle_name in angles_csv.split(","):
        try:
            angles.append(TorsionAngleType[angle_name])
        except KeyError:
            raise AngleTypeError(
                MessageKind.INVALID_ANGLE, angle=angle_name, valid=angle_names(TorsionAngleType)
            ) from None
    return list(dict.fromkeys(angles))
