"""
Application Entry Point
=======================
This module wires the command line to the orientation kernel.

Why is this file needed?
------------------------
It acts as the orchestrator. It:
1. Parses the readings from the command line (or uses the sample readings).
2. Sets up logging.
3. Builds the frame and decomposes the measured vector.
4. Reports the result, and optionally plots it.
"""
import argparse
import logging
from typing import Optional, Sequence

from accorientation.config import SAMPLE_ACCELERATION, SAMPLE_UP, SAMPLE_UP_FRONT, PlotConfig
from accorientation.logging_config import setup_logging
from accorientation.model.errors import DegenerateGeometryError
from accorientation.model.orientation import Frame, build_frame, decompose, magnitudes
from accorientation.model.vector import Vector3

logger = logging.getLogger(__name__)


def _vector(values: Sequence[float]) -> Vector3:
    return Vector3(*(float(v) for v in values))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="accorientation",
        description="Find the orientation of a device from accelerometer readings "
                    "and split a measured vector into UP, FRONT and RIGHT magnitudes.",
    )
    parser.add_argument('--up', nargs=3, type=float, metavar=('X', 'Y', 'Z'),
                        default=list(SAMPLE_UP),
                        help='Reading with the device at rest (gravity only)')
    parser.add_argument('--up-front', nargs=3, type=float, metavar=('X', 'Y', 'Z'),
                        default=list(SAMPLE_UP_FRONT),
                        help='Reading while the device accelerates forward')
    parser.add_argument('--vector', nargs=3, type=float, metavar=('X', 'Y', 'Z'),
                        default=list(SAMPLE_ACCELERATION),
                        help='Measured vector to decompose')
    parser.add_argument('--default-orientation', action='store_true',
                        help='Use the axis-aligned frame (UP=Z, FRONT=Y, RIGHT=X)')
    parser.add_argument('--plot', action='store_true',
                        help='Show the orientation plot')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--log-file', default=None,
                        help='Also write the log to this file')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    v_up = _vector(args.up)
    v_up_front = _vector(args.up_front)
    v = _vector(args.vector)

    try:
        if args.default_orientation:
            frame = Frame.default()
        else:
            frame = build_frame(v_up, v_up_front)
        components = decompose(v, frame)
        result = magnitudes(v, frame)
    except DegenerateGeometryError as e:
        logger.error(f"Cannot compute orientation: {e}")
        return 1

    logger.info(f"Orientation: UP={tuple(frame.up)} FRONT={tuple(frame.front)} RIGHT={tuple(frame.right)}")
    logger.info(f"Components: UP={tuple(components.up)} FRONT={tuple(components.front)} "
                f"RIGHT={tuple(components.right)}")
    logger.info("Magnitudes: " + ", ".join(f"{name}={value:.3f}" for name, value in result.directions().items()))

    if args.plot:
        from accorientation.view.plot_orientation import plot_orientation
        plot_orientation(
            frame,
            vector=v,
            up_front=None if args.default_orientation else v_up_front,
            config=PlotConfig(plot_up_front=not args.default_orientation),
            show=True,
        )

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
