import json
from types import SimpleNamespace


def make_chunk(text):
    return SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=text))])


class FakeStream:
    """Async iterable standing in for an OpenAI AsyncStream."""

    def __init__(self, fragments, error=None):
        self.fragments = list(fragments)
        self.error = error
        self.closed = False
        self.consumed = 0

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for fragment in self.fragments:
            self.consumed += 1
            yield make_chunk(fragment)
        if self.error is not None:
            raise self.error

    async def close(self):
        self.closed = True


class FakeCompletionClient:
    def __init__(self, fragments=(), setup_error=None, stream_error=None):
        self.fragments = fragments
        self.setup_error = setup_error
        self.stream_error = stream_error
        self.calls = []
        self.streams = []

    async def open_stream(self, user_content):
        self.calls.append(user_content)
        if self.setup_error is not None:
            raise self.setup_error
        stream = FakeStream(self.fragments, error=self.stream_error)
        self.streams.append(stream)
        return stream


def parse_events(body):
    events = []
    for block in body.split("\n\n"):
        if not block:
            continue
        assert block.startswith("data: "), block
        events.append(json.loads(block[len("data: "):])["content"])
    return events
