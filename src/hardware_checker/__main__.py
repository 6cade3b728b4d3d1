"""``python -m hardware_checker``."""

import logging

from hardware_checker.cli import main

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    main()
