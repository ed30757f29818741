"""Entry point for bible-reader."""

import logging
import sys

from textual.logging import TextualHandler

from bible_reader.app import BibleReaderApp
from bible_reader.config import get_config


def main() -> None:
    """Run the bible-reader application."""
    config = get_config()
    level = logging.getLevelName(config.log_level)
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.WARNING,
        handlers=[TextualHandler()],
    )

    app = BibleReaderApp(config)
    try:
        app.run()
    except Exception as exc:
        print(f"Error running program: {exc}")
        sys.exit(1)
    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main()
