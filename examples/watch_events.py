# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Log OctoPrint events pushed over SockJS until interrupted."""

from __future__ import annotations

import time

from dotenv import load_dotenv

import octoprint_client as octoprint
from octoprint_client.utils import get_logger, setup_logger


load_dotenv()
setup_logger(logger_name="")

logger = get_logger("examples.watch_events")


def main() -> None:
    with octoprint.configure_from_env():
        push = octoprint.Push.subscribe(state=False, events=True, plugins=False)
        push.listen()
        logger.info("Listening on session %s, Ctrl+C to stop", push.session_id)
        try:
            while push.listening():
                for message in push.receive():
                    event = message.get("event")
                    if event:
                        logger.info("%s %s", event.get("type"), event.get("payload"))
                time.sleep(0.5)
        except KeyboardInterrupt:
            pass
        finally:
            push.unsubscribe()


if __name__ == "__main__":
    main()
