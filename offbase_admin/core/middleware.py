"""HTTP adapter for the authorization gate: cookie in, redirect or pass-through out."""

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from offbase_admin.core.security import ADMIN_COOKIE_NAME, SessionTokenCodec
from offbase_admin.schemas.gate import RedirectTo
from offbase_admin.services.gate import RoleLookup, evaluate


class AdminGateMiddleware(BaseHTTPMiddleware):
    """
    Run every request through the gate before routing.

    The role lookup is synchronous (it hits the database), so it runs in the
    threadpool together with token verification.
    """

    def __init__(
        self,
        app: ASGIApp,
        codec: SessionTokenCodec,
        role_lookup: RoleLookup,
    ) -> None:
        super().__init__(app)
        self.codec = codec
        self.role_lookup = role_lookup

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        token = request.cookies.get(ADMIN_COOKIE_NAME)
        decision = await run_in_threadpool(
            evaluate, request.url.path, token, self.codec, self.role_lookup
        )
        if isinstance(decision, RedirectTo):
            return RedirectResponse(url=decision.location, status_code=307)
        return await call_next(request)
