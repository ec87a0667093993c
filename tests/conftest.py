import json
import sys
from pathlib import Path
from typing import List, Union

import pytest

# Make the package importable without installing it.
ROOT = Path(__file__).resolve().parent.parent
if ROOT.as_posix() not in sys.path:
    sys.path.insert(0, ROOT.as_posix())

from opentdb.client import OpenTDBClient  # noqa: E402
from opentdb.errors import TransportError  # noqa: E402


class FakeTransport:
    """In-memory transport: hands out queued bodies and records requested URLs."""

    def __init__(self, *responses: Union[str, dict, Exception]):
        self.responses: List[Union[str, dict, Exception]] = list(responses)
        self.urls: List[str] = []

    def queue(self, response: Union[str, dict, Exception]) -> None:
        self.responses.append(response)

    async def send(self, url: str) -> str:
        self.urls.append(url)
        if not self.responses:
            raise TransportError("no response queued", url=url)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, dict):
            return json.dumps(response)
        return response


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport) -> OpenTDBClient:
    return OpenTDBClient(transport=transport)
