"""
Quick-start visualization for Reeds–Shepp connections.

What it does:
- Computes the shortest Reeds–Shepp path between two poses.
- Prints the selected word, signed segment lengths and total length.
- Plots the samples, forward gear in blue and reverse in red, with a heading
  arrow every few samples.

Run:
    python -m examples.plot_reeds_shepp --goal 0 3 3.14 --radius 1.5

If you don't have matplotlib installed, install it with:
    pip install matplotlib
"""

import argparse
import logging
import math
from pathlib import Path

from rsplan import PathGenerationError, PlanningConfig, Pose, ReedsShepp, VehicleParams

try:
    import matplotlib.pyplot as plt
except ImportError:
    plt = None


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Plot the shortest Reeds–Shepp path between two poses.")
    parser.add_argument("--start", type=float, nargs=3, default=(0.0, 0.0, 0.0), metavar=("X", "Y", "THETA"))
    parser.add_argument("--goal", type=float, nargs=3, default=(-1.0, 3.0, math.pi), metavar=("X", "Y", "THETA"))
    parser.add_argument("--radius", type=float, default=1.0, help="Minimum turning radius (m).")
    parser.add_argument("--step", type=float, default=0.1, help="Sampling step, in turning radii.")
    parser.add_argument("--arrow-every", type=int, default=5)
    parser.add_argument("--no-show", action="store_true", help="Save the figure without opening a window.")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def plot(path, start: Pose, goal: Pose, title: str, arrow_every: int, show: bool):
    if plt is None:
        print("matplotlib not available; install it with `pip install matplotlib` to see the plot.")
        return

    pts = path.as_array()
    fig, ax = plt.subplots(figsize=(6, 6))
    ax.scatter(start.x, start.y, c="green", marker="*", s=90, label="start")
    ax.scatter(goal.x, goal.y, c="black", marker="*", s=90, label="goal")

    # Consecutive samples share a gear within a segment; draw each run separately.
    run_start = 0
    for i in range(1, len(pts) + 1):
        if i == len(pts) or pts[i, 3] != pts[run_start, 3]:
            end = min(i + 1, len(pts))
            color = "tab:blue" if pts[run_start, 3] else "tab:red"
            ax.plot(pts[run_start:end, 0], pts[run_start:end, 1], c=color, lw=2)
            run_start = i

    step = max(1, arrow_every)
    for x, y, theta, _ in pts[::step]:
        ax.arrow(x, y, 0.2 * math.cos(theta), 0.2 * math.sin(theta), head_width=0.05, color="gray")

    ax.plot([], [], c="tab:blue", label="forward")
    ax.plot([], [], c="tab:red", label="reverse")
    ax.set_aspect("equal")
    ax.set_title(title)
    ax.legend(loc="best")
    out_dir = Path(__file__).resolve().parent / "outputs"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / f"reeds_shepp_{path.word.lower()}.png"
    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    print(f"Saved: {out_path}")
    if show:
        plt.show()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    start = Pose(*args.start)
    goal = Pose(*args.goal)
    planner = ReedsShepp(VehicleParams.from_turning_radius(args.radius), PlanningConfig(step_size=args.step))
    try:
        path = planner.shortest_path(start, goal)
    except PathGenerationError as exc:
        print(f"No Reeds–Shepp path: {exc}")
        return 1

    print("Start: ({:.3f}, {:.3f}, {:.3f})  goal: ({:.3f}, {:.3f}, {:.3f})".format(*start.as_tuple(), *goal.as_tuple()))
    lengths = ", ".join(f"{t}{v:+.3f}" for t, v in path.segments())
    print(f"Word: {path.word}  segments: [{lengths}]  total: {path.total_length:.3f} m  samples: {len(path.samples)}")
    plot(path, start, goal, f"{path.word} ({path.total_length:.2f} m)", args.arrow_every, show=not args.no_show)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
