from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from google.auth.transport import requests as google_requests
from google.oauth2 import id_token

from utils.errors import VerificationError

logger = logging.getLogger(__name__)

VerifyFn = Callable[..., Mapping[str, Any]]


@dataclass
class GoogleIdentity:
    sub: str
    email: str
    name: str
    picture: Optional[str] = None
    email_verified: Optional[bool] = None


class GoogleTokenVerifier:
    """
    Verifies Google ID tokens against a single OAuth client id.

    google-auth verifies synchronously (certificate fetch plus signature
    check), so the call runs in a worker thread raced against ``timeout``.
    When the timer wins the thread is left to finish on its own and its
    result is dropped.
    """

    def __init__(
        self,
        client_id: Optional[str],
        timeout: float = 10.0,
        verify_fn: VerifyFn = id_token.verify_oauth2_token,
        request_factory: Callable[[], Any] = google_requests.Request,
    ):
        self.client_id = client_id
        self.timeout = timeout
        self._verify_fn = verify_fn
        self._request_factory = request_factory

    def _verify_blocking(self, raw_token: str) -> Mapping[str, Any]:
        return self._verify_fn(raw_token, self._request_factory(), self.client_id)

    async def verify(self, raw_token: str) -> GoogleIdentity:
        """
        Verify ``raw_token`` and return the identity it asserts.

        Raises:
            VerificationError: for any rejection, transport failure, timeout,
                or a payload without a subject. Callers cannot tell these apart.
        """
        if not self.client_id:
            logger.error("Google token verification error: GOOGLE_CLIENT_ID is not configured")
            raise VerificationError()

        try:
            payload = await asyncio.wait_for(
                asyncio.to_thread(self._verify_blocking, raw_token),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.warning(f"Google token verification error: timed out after {self.timeout}s")
            raise VerificationError() from e
        except Exception as e:
            logger.warning(f"Google token verification error: {e}")
            raise VerificationError() from e

        if not isinstance(payload, Mapping) or not payload.get("sub"):
            logger.warning("Google token verification error: payload has no subject")
            raise VerificationError()

        return GoogleIdentity(
            sub=str(payload["sub"]),
            email=payload.get("email") or "",
            name=payload.get("name") or "",
            picture=payload.get("picture"),
            email_verified=payload.get("email_verified"),
        )
