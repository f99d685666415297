import pytest

from navigator.errors import CompletionServiceError
from navigator.schemas import AnswerOutput, LinksOutput


class FakeCompletionClient:
    """Scripted stand-in for CompletionClient.

    ``answer`` / ``links`` are returned for the matching output schema. Either
    may be an exception instance, which is raised instead.
    """

    def __init__(self, answer=None, links=None):
        self.responses = {AnswerOutput: answer, LinksOutput: links}
        self.calls = []

    def calls_for(self, schema) -> list[dict]:
        return [c for c in self.calls if c["output_schema"] is schema]

    async def complete(self, *, system_prompt, user_message, output_schema, tools=()):
        self.calls.append({
            "system_prompt": system_prompt,
            "user_message": user_message,
            "output_schema": output_schema,
            "tools": list(tools),
        })
        response = self.responses.get(output_schema)
        if isinstance(response, BaseException):
            raise response
        return response


@pytest.fixture
def fake_client():
    return FakeCompletionClient(
        answer={"answer": "Paris is lovely in spring.", "mapUrl": "https://www.google.com/maps/search/?api=1&query=Paris"},
        links={"links": ["https://example.com/paris"]},
    )


@pytest.fixture
def failing_client():
    error = CompletionServiceError("ConnectError: service unreachable")
    return FakeCompletionClient(answer=error, links=error)
