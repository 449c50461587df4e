from __future__ import annotations

import pytest

from saavnpy.adapters.jiosaavn import JioSaavnClient
from saavnpy.config import JioSaavnConfig
from tests.helpers.jiosaavn import RecordingTransport


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(transport: RecordingTransport) -> JioSaavnClient:
    return JioSaavnClient(config=JioSaavnConfig(), client_factory=transport.client_factory())
