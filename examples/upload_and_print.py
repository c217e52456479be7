# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Upload a G-code file into a folder and start printing it.

Usage::

    python upload_and_print.py path/to/part.gcode [folder]
"""

from __future__ import annotations

import sys

from dotenv import load_dotenv

import octoprint_client as octoprint
from octoprint_client import Location
from octoprint_client.exceptions import ConflictError
from octoprint_client.utils import get_logger, setup_logger


load_dotenv()
setup_logger(logger_name="")

logger = get_logger("examples.upload_and_print")


def main(gcode: str, folder: str | None = None) -> None:
    with octoprint.configure_from_env():
        if folder:
            existing = octoprint.Files.list(Location.LOCAL)
            if not any(entry.is_folder and entry.name == folder for entry in existing.files or []):
                octoprint.Files.create_folder(folder)

        result = octoprint.Files.upload(gcode, Location.LOCAL, path=folder, select=True)
        uploaded = result.files[Location.LOCAL]
        logger.info("Uploaded %s (%s bytes)", uploaded.path, uploaded.size)

        try:
            octoprint.Job.start()
        except ConflictError as exc:
            logger.error("Could not start the print: %s", exc)
            raise SystemExit(1) from exc
        logger.info("Printing %s", uploaded.display_name or uploaded.name)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        raise SystemExit(__doc__)
    main(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None)
