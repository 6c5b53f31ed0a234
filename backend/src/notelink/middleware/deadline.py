"""Request deadline middleware."""

from ..core.deadline import request_deadline, set_deadline


class DeadlineMiddleware:
    """ASGI middleware that bounds storage calls by the request's lifetime.

    Repositories read the deadline from a context variable and give up
    with a StorageError once it passes.
    """

    def __init__(self, app, timeout: float):
        self.app = app
        self.timeout = timeout

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        token = set_deadline(self.timeout)
        try:
            await self.app(scope, receive, send)
        finally:
            request_deadline.reset(token)
