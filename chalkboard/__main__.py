"""Entry point for chalkboard package."""

import argparse
import dataclasses
import json
import logging
import sys

from pydantic import ValidationError


DEMO_PLAY = {
    "players": [
        {
            "id": "qb", "label": "QB", "team": "offense",
            "start": {"x": 0.5, "y": 0.7},
            "route": [
                {"to": {"x": 0.5, "y": 0.8}, "speed": 4,
                 "action": {"type": "pass", "targetId": "x"}},
            ],
        },
        {
            "id": "x", "label": "X", "team": "offense",
            "start": {"x": 0.2, "y": 0.667},
            "startDelay": -0.5,
            "route": [
                {"to": {"x": 0.2, "y": 0.4}, "speed": 7},
                {"to": {"x": 0.35, "y": 0.3}, "speed": 7},
            ],
        },
        {
            "id": "cb", "label": "CB", "team": "defense",
            "start": {"x": 0.2, "y": 0.5},
            "assignment": {"type": "man", "targetId": "x", "speed": 6.5},
        },
        {
            "id": "lb", "label": "LB", "team": "defense",
            "start": {"x": 0.45, "y": 0.5},
            "assignment": {"type": "zone", "radiusX": 6, "radiusY": 4, "speed": 5},
        },
    ]
}


def _load(path: str) -> dict:
    with open(path) as f:
        return json.load(f)


def main() -> None:
    """Main entry point for the Chalkboard CLI."""
    parser = argparse.ArgumentParser(
        description="Chalkboard - play timeline simulator",
        prog="chalkboard",
    )
    parser.add_argument(
        "play",
        nargs="?",
        help="Path to a play JSON file",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run the built-in pass play",
    )
    parser.add_argument(
        "--time",
        type=float,
        default=None,
        help="Print a single snapshot at this time instead of the full timeline",
    )
    parser.add_argument(
        "--fps",
        type=float,
        default=4.0,
        help="Frames per second for the timeline (default: 4)",
    )
    parser.add_argument(
        "--ball-speed",
        type=float,
        default=None,
        help="Ball speed in yards per second",
    )
    parser.add_argument(
        "--json",
        dest="json_out",
        default=None,
        help="Write sampled frames to this JSON file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from chalkboard.core.config import get_config
    from chalkboard.export import frame_at, playback_range, sample_frames
    from chalkboard.schemas import load_play
    from chalkboard.systems.coverage import DefenseOptions

    if args.demo:
        data = DEMO_PLAY
    elif args.play:
        try:
            data = _load(args.play)
        except (OSError, json.JSONDecodeError) as e:
            print(f"Could not read {args.play}: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        parser.error("a play file or --demo is required")

    try:
        play = load_play(data)
    except ValidationError as e:
        print(f"Invalid play:\n{e}", file=sys.stderr)
        sys.exit(2)

    if args.fps <= 0:
        parser.error("--fps must be positive")
    if args.json_out and args.time is not None:
        parser.error("--json exports the full timeline and cannot be combined with --time")

    config = get_config()
    if args.ball_speed is not None:
        if args.ball_speed <= 0:
            parser.error("--ball-speed must be positive")
        config = dataclasses.replace(config, ball_speed_yps=args.ball_speed)

    start, end = playback_range(play, config.ball_speed_yps)
    print("Chalkboard - Play Timeline")
    print("=" * 50)
    print(f"Players: {len(play.players)}  Ball speed: {config.ball_speed_yps:.1f} yd/s")
    print(f"Playback: {start:.2f}s -> {end:.2f}s")
    print()

    if args.time is not None:
        frames = [frame_at(play, args.time, config.ball_speed_yps, DefenseOptions.from_config(config))]
    else:
        export = sample_frames(play, fps=args.fps, config=config)
        frames = export.frames
        if args.json_out:
            export.save(args.json_out)
            print(f"Wrote {len(frames)} frames to {args.json_out}")
            print()

    for frame in frames:
        ball = frame.ball
        if ball.in_air:
            ball_desc = f"in air ({ball.flight_progress:.0%}) from {ball.carrier_id}"
        elif ball.carrier_id:
            ball_desc = f"held by {ball.carrier_id}"
        else:
            ball_desc = "none"
        print(f"[{frame.time:6.2f}s] ball {ball_desc}")
        for p in frame.players:
            marker = " *" if p.has_ball else ""
            print(f"    {p.label:6} ({p.team:7}) ({p.x:.3f}, {p.y:.3f}){marker}")


if __name__ == "__main__":
    main()
