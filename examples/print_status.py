# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Print server, connection and job status.

Reads ``OCTOPRINT_HOST`` and ``OCTOPRINT_API_KEY`` from the environment or a
``.env`` file next to where the script runs.
"""

from __future__ import annotations

from dotenv import load_dotenv

import octoprint_client as octoprint
from octoprint_client.utils import get_logger, setup_logger


load_dotenv()
setup_logger(logger_name="")

logger = get_logger("examples.print_status")


def main() -> None:
    with octoprint.configure_from_env():
        version = octoprint.ServerVersion.get()
        logger.info("Connected to %s (API %s)", version.text, version.api)

        connection = octoprint.Connection.get()
        logger.info("Printer: %s on %s", connection.current.state, connection.current.port)

        job = octoprint.Job.get()
        if job.information is None or job.progress is None:
            logger.info("No job loaded")
            return
        logger.info(
            "Job %s: %s, %.1f%% done",
            (job.information.file or {}).get("name"),
            job.state,
            job.progress.completion or 0.0,
        )


if __name__ == "__main__":
    main()
