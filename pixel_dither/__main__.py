"""Entry point for running the dither service as a module."""

from __future__ import annotations

import logging

from .app import app
from .config import SETTINGS


def main() -> None:
    """Run the Flask development server."""
    logging.getLogger("pixel-dither").info("Dither service listening on port %s", SETTINGS.port)
    app.run(host="0.0.0.0", port=SETTINGS.port, debug=False)


if __name__ == "__main__":
    main()
