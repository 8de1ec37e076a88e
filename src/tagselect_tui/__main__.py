"""Entry point for tagselect-tui."""

import sys

from tagselect_tui.app import TagSelectApp
from tagselect_tui.config import load_host, parse_args, resolve_options
from tagselect_tui.errors import ConfigurationError
from tagselect_tui.logger import setup_logger


def main() -> None:
    """Run the tagselect-tui application and print the chosen values."""
    args = parse_args()
    setup_logger(log_file=args.log_file, log_level=args.log_level.upper())
    try:
        options = resolve_options(args)
        host = load_host(args)
        app = TagSelectApp(host, options)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    values = app.run()
    if values is None:
        sys.exit(1)
    for value in values:
        print(value)


if __name__ == "__main__":
    main()
