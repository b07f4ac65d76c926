import json

import httpx
import pytest

from prompt_improver_api.clients.perplexity_client import build_openai_client
from prompt_improver_api.services.remote_improver import RemoteImprover


def completion_body(content):
    return {
        "id": "cmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "llama-3.1-sonar-small-128k-online",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
    }


class FakePerplexity:
    """Records every request and answers with the configured status and body."""

    def __init__(self) -> None:
        self.requests = []
        self.status_code = 200
        self.body = completion_body("  A sharper prompt.  ")
        self.content_type = "application/json"
        self.error = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        content = self.body if isinstance(self.body, str) else json.dumps(self.body)
        return httpx.Response(
            self.status_code,
            content=content.encode(),
            headers={"content-type": self.content_type},
        )

    @property
    def sent_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def fake_api():
    return FakePerplexity()


@pytest.fixture
def client_factory(mocker, fake_api):
    """Real OpenAI clients from the production factory, wired to the fake endpoint."""

    def build(api_key):
        http_client = httpx.Client(transport=httpx.MockTransport(fake_api.handler))
        return build_openai_client(api_key, http_client=http_client)

    return mocker.Mock(side_effect=build)


@pytest.fixture
def remote_improver(client_factory):
    return RemoteImprover(client_factory=client_factory)
