import httpx
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from essay_router.api.chat import ChatConfig


TEST_CONFIG = ChatConfig(model_id="@cf/test/model", system_prompt="SYS {essay}", max_tokens=1024)


class FakeStream(httpx.AsyncByteStream):
    def __init__(self, chunks):
        self._chunks = list(chunks)
        self.closed = False

    async def __aiter__(self):
        for chunk in self._chunks:
            yield chunk

    async def aclose(self):
        self.closed = True


def sse_response(chunks=(b"data: {\"response\":\"a\"}\n\n", b"data: [DONE]\n\n"), status_code=200, headers=None):
    stream = FakeStream(chunks)
    resp = httpx.Response(
        status_code,
        headers=headers or {"content-type": "text/event-stream"},
        stream=stream,
    )
    return resp, stream


class FakeInference:
    name = "fake"

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    async def run(self, model, inputs, *, return_raw_response=True):
        self.calls.append({"model": model, "inputs": inputs, "raw": return_raw_response})
        if self.error is not None:
            raise self.error
        return self.response

    async def aclose(self):
        self.closed = True


class FakeAssets:
    async def fetch(self, request: Request):
        return PlainTextResponse(
            f"asset {request.method} {request.url.path}",
            headers={"x-asset": "1"},
        )
