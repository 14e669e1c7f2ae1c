"""Coordinate frame definitions for flight-controller / robotics bridging.

This module defines the frames exchanged between an aerospace flight
controller and a robotics middleware:
- NED (North-East-Down): World frame used by the flight controller
- ENU (East-North-Up): World frame used by the robotics side
- Aircraft: Body frame (forward-right-down)
- Base_link: Body frame (forward-left-up)
- ECEF (Earth-Centered Earth-Fixed): Global Cartesian frame

It also defines the closed set of named static conversions between them.
"""

from enum import Enum
from typing import NamedTuple, Union


class FrameType(Enum):
    """Enumeration of coordinate frame types.

    Attributes:
        NED: North-East-Down local tangent plane frame.
        ENU: East-North-Up local tangent plane frame.
        AIRCRAFT: Vehicle body frame (forward-right-down).
        BASE_LINK: Vehicle body frame (forward-left-up).
        ECEF: Earth-Centered Earth-Fixed Cartesian frame.
    """

    NED = "ned"
    ENU = "enu"
    AIRCRAFT = "aircraft"
    BASE_LINK = "base_link"
    ECEF = "ecef"


class Frame(NamedTuple):
    """Representation of a coordinate frame.

    Attributes:
        frame_type: Type of coordinate frame.
        description: Human-readable description of the frame.
    """

    frame_type: FrameType
    description: str

    def __repr__(self) -> str:
        """Return string representation of frame."""
        return f"Frame({self.frame_type.value}: {self.description})"


FRAME_NED = Frame(
    FrameType.NED,
    "North-East-Down local tangent plane (x=North, y=East, z=Down)",
)

FRAME_ENU = Frame(
    FrameType.ENU,
    "East-North-Up local tangent plane (x=East, y=North, z=Up)",
)

FRAME_AIRCRAFT = Frame(
    FrameType.AIRCRAFT,
    "Aircraft body frame (x=forward, y=right, z=down)",
)

FRAME_BASE_LINK = Frame(
    FrameType.BASE_LINK,
    "Base_link body frame (x=forward, y=left, z=up)",
)

FRAME_ECEF = Frame(
    FrameType.ECEF,
    "Earth-Centered Earth-Fixed (x=0°E 0°N, y=90°E 0°N, z=North Pole)",
)


class FramePair(Enum):
    """The two fixed conventions a static conversion can belong to.

    Attributes:
        WORLD: NED <-> ENU. Expressed in the reference frame, so orientations
            are premultiplied.
        BODY: Aircraft <-> base_link. Expressed in the body frame, so
            orientations are postmultiplied.
    """

    WORLD = "ned_enu"
    BODY = "aircraft_baselink"

    @property
    def premultiplies(self) -> bool:
        """Whether the static quaternion is applied on the left."""
        return self is FramePair.WORLD


class StaticTF(Enum):
    """Named static frame conversions.

    Both directions of a pair share one rotation: each pair is a 180°
    rotation, optionally composed with a 90° one, and is its own inverse.

    Example:
        >>> tag = StaticTF.coerce("ned_to_enu")
        >>> tag.source, tag.target
        (<FrameType.NED: 'ned'>, <FrameType.ENU: 'enu'>)
        >>> tag.inverse
        <StaticTF.ENU_TO_NED: 'enu_to_ned'>
    """

    NED_TO_ENU = "ned_to_enu"
    ENU_TO_NED = "enu_to_ned"
    AIRCRAFT_TO_BASELINK = "aircraft_to_baselink"
    BASELINK_TO_AIRCRAFT = "baselink_to_aircraft"

    @classmethod
    def coerce(cls, value: Union["StaticTF", str]) -> "StaticTF":
        """Return the tag named by ``value``.

        Args:
            value: A StaticTF member or its string value (case insensitive).

        Returns:
            The matching StaticTF member.

        Raises:
            ValueError: If ``value`` does not name a static conversion.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        valid = ", ".join(tag.value for tag in cls)
        raise ValueError(
            f"Unknown static transform {value!r}, expected one of: {valid}"
        )

    @property
    def source(self) -> FrameType:
        """Frame the input is expressed in."""
        return _ENDPOINTS[self][0]

    @property
    def target(self) -> FrameType:
        """Frame the output is expressed in."""
        return _ENDPOINTS[self][1]

    @property
    def frame_pair(self) -> FramePair:
        """Convention pair whose rotation this tag applies."""
        return _FRAME_PAIRS[self]

    @property
    def inverse(self) -> "StaticTF":
        """Tag converting in the opposite direction."""
        return _INVERSES[self]


_ENDPOINTS = {
    StaticTF.NED_TO_ENU: (FrameType.NED, FrameType.ENU),
    StaticTF.ENU_TO_NED: (FrameType.ENU, FrameType.NED),
    StaticTF.AIRCRAFT_TO_BASELINK: (FrameType.AIRCRAFT, FrameType.BASE_LINK),
    StaticTF.BASELINK_TO_AIRCRAFT: (FrameType.BASE_LINK, FrameType.AIRCRAFT),
}

_FRAME_PAIRS = {
    StaticTF.NED_TO_ENU: FramePair.WORLD,
    StaticTF.ENU_TO_NED: FramePair.WORLD,
    StaticTF.AIRCRAFT_TO_BASELINK: FramePair.BODY,
    StaticTF.BASELINK_TO_AIRCRAFT: FramePair.BODY,
}

_INVERSES = {
    StaticTF.NED_TO_ENU: StaticTF.ENU_TO_NED,
    StaticTF.ENU_TO_NED: StaticTF.NED_TO_ENU,
    StaticTF.AIRCRAFT_TO_BASELINK: StaticTF.BASELINK_TO_AIRCRAFT,
    StaticTF.BASELINK_TO_AIRCRAFT: StaticTF.AIRCRAFT_TO_BASELINK,
}

# Every tag must resolve; a missing entry is a programming error
for _table in (_ENDPOINTS, _FRAME_PAIRS, _INVERSES):
    if set(_table) != set(StaticTF):
        raise RuntimeError(
            f"Static transform table is incomplete: "
            f"missing {sorted(t.name for t in set(StaticTF) - set(_table))}"
        )
del _table
