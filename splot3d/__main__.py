import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from splot3d import ScriptWriteError, build_quaternion_scene, render_script, write_script

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Write a gnuplot splot script visualizing a quaternion rotation")
    parser.add_argument(
        "-o",
        "--output",
        default="quaternion.plt",
        help="Path of the generated script (default: quaternion.plt)",
    )
    parser.add_argument(
        "--quaternion",
        nargs=4,
        type=float,
        metavar=("X", "Y", "Z", "W"),
        default=(1.0, 2.0, 3.0, 0.3),
        help="Rotation quaternion x*i + y*j + z*k + w (normalized before use)",
    )
    parser.add_argument("--title", help="Override the plot title")
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the script instead of writing it to --output",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        scene = build_quaternion_scene(args.quaternion, title=args.title)
    except ValueError as exc:
        logger.error("Invalid quaternion: %s", exc)
        raise SystemExit(2)

    if args.stdout:
        sys.stdout.write(render_script(scene))
        return

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        write_script(scene, output_path)
    except ScriptWriteError as exc:
        logger.error("%s", exc)
        raise SystemExit(1)
    print(f"gnuplot script written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
