"""Seed Drop — headless replay of the "building grows from a seed" animation.

A seed falls from the sky with a cubic ease-in. When it lands, a building
springs up with an elastic ease-out, and a camera point follows the action
with a damped smoother. Every frame is printed instead of drawn.

Run:
    python main.py --fps 30
"""
from __future__ import annotations

import argparse
import logging

from glide import DampConfig, Follower2D, Tween, TweenSequence, Vector2

START_Y = 10.0
GROUND_Y = 500.0
DROP_SECONDS = 0.5
GROW_SECONDS = 0.5


def build_sequence(on_step_complete) -> TweenSequence:
    return TweenSequence(
        [
            Tween(START_Y, GROUND_Y, DROP_SECONDS, easing="cubic_in"),
            Tween(0.0, 1.0, GROW_SECONDS, easing="elastic_out"),
        ],
        on_step_complete=on_step_complete,
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Replay the seed drop animation as text",
    )
    parser.add_argument(
        "--fps", type=int, default=30,
        help="Frames per second (default: 30)",
    )
    parser.add_argument(
        "--smooth-time", type=float, default=0.25,
        help="Camera settling time in seconds (default: 0.25)",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Log tween step completions",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    phases = ["drop", "grow"]

    def on_step_complete(index: int, tween: Tween) -> None:
        print(f"-- {phases[index]} finished at {tween.end_val:.2f}")

    sequence = build_sequence(on_step_complete)
    camera = Follower2D(Vector2(0.0, START_Y), DampConfig(smooth_time=args.smooth_time))
    dt = 1.0 / args.fps

    frame = 0
    while not sequence.is_complete:
        value = sequence.advance(dt)
        # advance may move on to the next step
        phase = phases[sequence.index]
        focus = Vector2(0.0, value if phase == "drop" else GROUND_Y)
        camera.update(focus, dt)
        frame += 1
        label = "y" if phase == "drop" else "scale"
        print(f"frame {frame:3d}  {phase:<4}  {label}={value:8.3f}  camera_y={camera.value.y:8.3f}")


if __name__ == "__main__":
    main()
