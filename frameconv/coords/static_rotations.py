"""Static rotations between the fixed frame conventions.

Two rotations cover all four named conversions:

- NED <-> ENU: +π about X followed by +π/2 about Z. Applied to NED axes
  this gives ENU; applied to ENU axes it gives NED.
- Aircraft <-> base_link: +π about X (forward), turning forward-right-down
  into forward-left-up and back.

The composition order of the NED/ENU rotation matters: q_z(π/2) ⊗ q_x(π)
swaps x/y and negates z, while q_x(π) ⊗ q_z(π/2) does not.

The table is built once at import and its arrays are read-only, so it can
be shared between threads without locking.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Union

import numpy as np
from numpy.typing import NDArray

from frameconv.coords.frames import FramePair, StaticTF
from frameconv.coords.rotations import (
    quat_normalize,
    quat_to_rotation_matrix,
    quaternion_from_rpy,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class RotationTable:
    """Immutable quaternion and rotation matrix per frame pair.

    Two tables compare equal when every stored array matches exactly.

    Attributes:
        quaternions: Unit quaternion [qw, qx, qy, qz] for each FramePair.
        rotation_matrices: 3x3 rotation matrix for each FramePair, derived
            from the normalized quaternion.

    Raises:
        ValueError: If a mapping does not cover exactly the FramePair
            members, or an entry has the wrong shape.
    """

    quaternions: Mapping[FramePair, NDArray[np.float64]]
    rotation_matrices: Mapping[FramePair, NDArray[np.float64]]

    def __post_init__(self) -> None:
        """Validate coverage and freeze the stored arrays."""
        for name, mapping, shape in (
            ("quaternions", self.quaternions, (4,)),
            ("rotation_matrices", self.rotation_matrices, (3, 3)),
        ):
            if set(mapping) != set(FramePair):
                raise ValueError(
                    f"{name} must cover {sorted(p.name for p in FramePair)}, "
                    f"got {sorted(map(str, mapping))}"
                )

            frozen = {}
            for pair, value in mapping.items():
                array = np.array(value, dtype=np.float64)
                if array.shape != shape:
                    raise ValueError(
                        f"{name}[{pair.name}] must have shape {shape}, "
                        f"got {array.shape}"
                    )
                array.flags.writeable = False
                frozen[pair] = array

            object.__setattr__(self, name, MappingProxyType(frozen))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RotationTable):
            return NotImplemented
        return all(
            np.array_equal(mine[pair], theirs[pair])
            for mine, theirs in (
                (self.quaternions, other.quaternions),
                (self.rotation_matrices, other.rotation_matrices),
            )
            for pair in FramePair
        )

    def __hash__(self) -> int:
        # +0.0 folds -0.0 into 0.0 so equal tables hash alike
        return hash(
            tuple((self.quaternions[pair] + 0.0).tobytes() for pair in FramePair)
            + tuple((self.rotation_matrices[pair] + 0.0).tobytes() for pair in FramePair)
        )

    def quaternion(self, key: Union[StaticTF, FramePair]) -> NDArray[np.float64]:
        """Return the read-only static quaternion for a tag or frame pair."""
        return self.quaternions[_frame_pair(key)]

    def rotation_matrix(
        self, key: Union[StaticTF, FramePair]
    ) -> NDArray[np.float64]:
        """Return the read-only static rotation matrix for a tag or frame pair."""
        return self.rotation_matrices[_frame_pair(key)]


def _frame_pair(key: Union[StaticTF, FramePair, str]) -> FramePair:
    if isinstance(key, FramePair):
        return key
    return StaticTF.coerce(key).frame_pair


def build_rotation_table() -> RotationTable:
    """Build the standard NED/ENU and aircraft/base_link rotation table.

    Returns:
        RotationTable with read-only arrays.
    """
    quaternions = {
        FramePair.WORLD: quaternion_from_rpy(np.pi, 0.0, np.pi / 2.0),
        FramePair.BODY: quaternion_from_rpy(np.pi, 0.0, 0.0),
    }
    rotation_matrices = {
        pair: quat_to_rotation_matrix(quat_normalize(q))
        for pair, q in quaternions.items()
    }

    table = RotationTable(quaternions, rotation_matrices)
    logger.debug(
        "Built static rotation table: %s",
        {pair.name: np.round(q, 6).tolist() for pair, q in table.quaternions.items()},
    )
    return table


STATIC_ROTATIONS = build_rotation_table()

NED_ENU_Q = STATIC_ROTATIONS.quaternion(FramePair.WORLD)
AIRCRAFT_BASELINK_Q = STATIC_ROTATIONS.quaternion(FramePair.BODY)
NED_ENU_R = STATIC_ROTATIONS.rotation_matrix(FramePair.WORLD)
AIRCRAFT_BASELINK_R = STATIC_ROTATIONS.rotation_matrix(FramePair.BODY)
