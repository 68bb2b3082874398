"""Command-line interface: ``python -m watchface``."""
import argparse
import logging
import sys
from datetime import datetime

from . import angles, config
from .assets import load_images
from .logging_config import setup_logging
from .model import WatchModel
from .render import snapshot

logger = logging.getLogger(__name__)


def parse_time(text):
    """Parse ``HH:MM`` or ``HH:MM:SS`` into a datetime.time."""
    for fmt in ('%H:%M:%S', '%H:%M'):
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    raise argparse.ArgumentTypeError(f"invalid time {text!r}; expected HH:MM or HH:MM:SS")


def build_parser():
    parser = argparse.ArgumentParser(prog='watchface', description="Analog watch face.")
    parser.add_argument('--assets', metavar='DIR',
                        help="directory holding body/face/hour_hand/minute_hand/second_hand .png files")
    parser.add_argument('--style', choices=angles.STYLES, default=config.DEFAULT_STYLE,
                        help="description format (default: %(default)s)")
    parser.add_argument('--snapshot', metavar='PATH',
                        help="render one reading to an image file and exit")
    parser.add_argument('--time', type=parse_time, metavar='HH:MM[:SS]',
                        help="time to render with --snapshot (default: now)")
    parser.add_argument('--log-level', default='INFO', choices=('DEBUG', 'INFO', 'WARNING', 'ERROR'))
    parser.add_argument('--log-file', metavar='PATH')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.time is not None and args.snapshot is None:
        parser.error("--time requires --snapshot")

    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    try:
        images = load_images(args.assets)
    except FileNotFoundError as exc:
        parser.error(str(exc))

    model = WatchModel(style=args.style)

    if args.snapshot:
        model.update(args.time if args.time is not None else datetime.now())
        snapshot(args.snapshot, model.reading, images)
        return 0

    # Qt is only needed for the live window
    from .qt import get_app, run_app
    from .watch import WatchWidget

    app = get_app()
    app.setApplicationName(config.WINDOW_TITLE)
    widget = WatchWidget(model, images)
    widget.show()
    logger.info("Watch window shown")
    return run_app()


if __name__ == '__main__':
    sys.exit(main())
