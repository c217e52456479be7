# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

from __future__ import annotations

from collections.abc import Iterator

import pytest

from octoprint_client.client import Client, reset_client, set_client
from tests.helpers import API_KEY, HOST, Recorder, mock_factory


@pytest.fixture(autouse=True)
def _no_configured_client() -> Iterator[None]:
    token = set_client(None)
    yield
    reset_client(token)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def client(recorder: Recorder) -> Iterator[Client]:
    """A configured client whose traffic goes to ``recorder``."""
    octo = Client(HOST, API_KEY, http_client_factory=mock_factory(recorder))
    with octo.use():
        yield octo
    octo.close()
