"""Example: Converting flight-controller data into the robotics convention.

This example walks one telemetry sample from a flight controller
(NED world frame, aircraft body frame) into the robotics middleware
convention (ENU world frame, base_link body frame):
1. Convert the attitude quaternion
2. Convert position and velocity vectors
3. Rotate a body-frame velocity into the world frame
4. Convert position/velocity covariance
5. Rotate an ECEF vector into the local ENU frame

Usage:
    python examples/example_frame_conversions.py
    python examples/example_frame_conversions.py --heading 45 --plot
"""

import argparse
import logging

import matplotlib.pyplot as plt
import numpy as np

from frameconv.coords import (
    StaticTF,
    quat_to_rotation_matrix,
    quaternion_from_rpy,
    quaternion_to_rpy,
    transform_frame,
    transform_frame_covariance,
    transform_frame_ecef_enu,
    transform_orientation,
    transform_static_frame,
    transform_static_frame_covariance,
)
from frameconv.utils import covariance_to_urt


def plot_axes(q_ned: np.ndarray, q_enu: np.ndarray, output_file: str) -> None:
    """Draw the vehicle body axes in both world conventions."""
    fig = plt.figure(figsize=(12, 6))
    titles = ("NED world / aircraft body", "ENU world / base_link body")
    world_labels = (("N", "E", "D"), ("E", "N", "U"))

    for idx, (q, title, labels) in enumerate(zip((q_ned, q_enu), titles, world_labels)):
        ax = fig.add_subplot(1, 2, idx + 1, projection="3d")
        R = quat_to_rotation_matrix(q)

        for axis, color, name in zip(range(3), ("r", "g", "b"), ("x", "y", "z")):
            world_axis = np.eye(3)[axis]
            ax.quiver(0, 0, 0, *world_axis, color="gray", alpha=0.4)
            ax.text(*(1.1 * world_axis), labels[axis], color="gray")

            body_axis = R[:, axis]
            ax.quiver(0, 0, 0, *body_axis, color=color, linewidth=2, label=f"body {name}")

        ax.set_xlim(-1, 1)
        ax.set_ylim(-1, 1)
        ax.set_zlim(-1, 1)
        ax.set_title(title)
        ax.legend(loc="upper left")

    plt.tight_layout()
    plt.savefig(output_file, dpi=150, bbox_inches="tight")
    print(f"\nFigure saved to: {output_file}")
    plt.show()


def main() -> None:
    """Run frame conversion examples."""
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--roll", type=float, default=5.0, help="Roll in degrees (NED/aircraft)")
    parser.add_argument("--pitch", type=float, default=-3.0, help="Pitch in degrees (NED/aircraft)")
    parser.add_argument("--heading", type=float, default=30.0, help="Heading in degrees from North")
    parser.add_argument("--plot", action="store_true", help="Plot body axes in both conventions")
    parser.add_argument("--output", default="frame_conversions.png", help="Figure file for --plot")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(name)s: %(message)s")

    print("=" * 70)
    print("Frame Conversion Examples: NED/aircraft -> ENU/base_link")
    print("=" * 70)

    # Example 1: Attitude
    print("\n1. Attitude Quaternion")
    print("-" * 70)

    q_ned = quaternion_from_rpy(np.deg2rad(args.roll), np.deg2rad(args.pitch), np.deg2rad(args.heading))
    q_enu = transform_orientation(
        transform_orientation(q_ned, StaticTF.NED_TO_ENU),
        StaticTF.AIRCRAFT_TO_BASELINK,
    )

    rpy_ned = np.rad2deg(quaternion_to_rpy(q_ned))
    rpy_enu = np.rad2deg(quaternion_to_rpy(q_enu))
    print(f"NED/aircraft  q = {np.round(q_ned, 4)}")
    print(f"  roll/pitch/yaw: [{rpy_ned[0]:.1f}°, {rpy_ned[1]:.1f}°, {rpy_ned[2]:.1f}°]")
    print(f"ENU/base_link q = {np.round(q_enu, 4)}")
    print(f"  roll/pitch/yaw: [{rpy_enu[0]:.1f}°, {rpy_enu[1]:.1f}°, {rpy_enu[2]:.1f}°]")
    print(f"  (ENU yaw should be 90° - heading = {90.0 - args.heading:.1f}°)")

    # Example 2: Position and velocity
    print("\n2. Position and Velocity Vectors")
    print("-" * 70)

    p_ned = np.array([10.0, 5.0, -2.0])  # 10 m North, 5 m East, 2 m up
    v_ned = np.array([1.5, 0.5, 0.1])
    print(f"Position NED: {p_ned} -> ENU: {np.round(transform_static_frame(p_ned, StaticTF.NED_TO_ENU), 6)}")
    print(f"Velocity NED: {v_ned} -> ENU: {np.round(transform_static_frame(v_ned, StaticTF.NED_TO_ENU), 6)}")

    # Example 3: Body-frame velocity rotated by the current attitude
    print("\n3. Body Velocity to World Frame")
    print("-" * 70)

    v_baselink = np.array([2.0, 0.0, 0.0])  # 2 m/s forward
    v_world = transform_frame(v_baselink, q_enu)
    print(f"Velocity base_link: {v_baselink}")
    print(f"Velocity ENU:       {np.round(v_world, 4)}")

    # Example 4: Covariance
    print("\n4. Position/Velocity Covariance (order 6)")
    print("-" * 70)

    cov_ned = np.diag([4.0, 1.0, 9.0, 0.04, 0.01, 0.09])
    cov_ned[0, 3] = cov_ned[3, 0] = 0.2  # north position / north velocity

    cov_enu = transform_static_frame_covariance(cov_ned.reshape(-1), StaticTF.NED_TO_ENU).reshape(6, 6)
    print(f"Diagonal NED: {np.diag(cov_ned)}")
    print(f"Diagonal ENU: {np.round(np.diag(cov_enu), 6)}")
    print(f"Cross term moved from (0, 3) to (1, 4): {cov_enu[1, 4]:.3f}")
    print(f"Eigenvalues preserved: {np.allclose(np.linalg.eigvalsh(cov_ned), np.linalg.eigvalsh(cov_enu))}")
    print(f"Packed upper triangle: {covariance_to_urt(cov_enu).size} elements")

    cov_world = transform_frame_covariance(np.diag([0.1, 0.4, 0.2]).reshape(-1), q_enu)
    print(f"Body 3x3 covariance in ENU:\n{np.round(cov_world.reshape(3, 3), 4)}")

    # Example 5: ECEF to local ENU
    print("\n5. ECEF Vector in Local ENU")
    print("-" * 70)

    map_origin = (22.3045, 114.1798, 10.0)  # Hong Kong
    v_ecef = np.array([0.0, 0.0, 1.0])  # Earth rotation axis
    v_local = transform_frame_ecef_enu(v_ecef, map_origin)
    print(f"Map origin: {map_origin[0]:.4f}°N, {map_origin[1]:.4f}°E")
    print(f"ECEF z-axis in ENU: {np.round(v_local, 4)} (tilted North by the latitude)")

    print("\n" + "=" * 70)
    print("Examples completed successfully!")
    print("=" * 70)

    if args.plot:
        plot_axes(q_ned, q_enu, args.output)


if __name__ == "__main__":
    main()
