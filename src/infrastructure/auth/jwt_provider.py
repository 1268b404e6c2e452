"""JWT authentication provider for Supabase-issued tokens.

Supabase projects sign access tokens either with asymmetric ES256 keys
published at the project's JWKS endpoint or with the legacy shared HS256
secret. Both are accepted; locally created HS256 tokens are used in tests.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Optional
from uuid import UUID

import httpx
from jose import JWTError, jwt
from jose.backends import ECKey

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = logging.getLogger(__name__)


class JWKSCache:
    """Lazily fetched ``kid -> JWK`` mapping, refreshed on unknown key ids."""

    def __init__(
        self,
        jwks_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._jwks_url = jwks_url
        self._transport = transport
        self._keys: dict[str, dict[str, Any]] | None = None

    async def get_key(self, kid: str) -> dict[str, Any] | None:
        """Return the JWK for ``kid``, refetching once to pick up key rotation."""
        if self._keys is None or kid not in self._keys:
            self._keys = await self._fetch()
        return self._keys.get(kid)

    def clear(self) -> None:
        self._keys = None

    async def _fetch(self) -> dict[str, dict[str, Any]]:
        if not self._jwks_url:
            return {}
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(self._jwks_url, timeout=10.0)
                response.raise_for_status()
        except httpx.HTTPError:
            logger.exception("Failed to fetch JWKS from %s", self._jwks_url)
            return {}

        keys = {k["kid"]: k for k in response.json().get("keys", []) if k.get("kid")}
        logger.info("Fetched %d JWKS keys", len(keys))
        return keys


class JWTAuthProvider:
    """Validates Supabase JWTs and issues HS256 tokens for tests."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
        jwks: JWKSCache | None = None,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes
        self._jwks = jwks or JWKSCache(settings.supabase_jwks_url)

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """Decode a token and build the user it identifies.

        Returns None for bad signatures, expired tokens, unknown signing
        keys, or payloads missing ``sub``/``email``.
        """
        try:
            header = jwt.get_unverified_header(token)
            if header.get("alg") == "ES256":
                payload = await self._decode_es256(token, header.get("kid"))
            else:
                payload = jwt.decode(
                    token,
                    self._secret_key,
                    algorithms=[self._algorithm],
                    options={"verify_aud": False},
                )
        except JWTError:
            return None

        if not payload:
            return None
        return self._to_user(payload)

    async def _decode_es256(self, token: str, kid: str | None) -> dict[str, Any] | None:
        if not kid:
            return None
        key_data = await self._jwks.get_key(kid)
        if not key_data:
            logger.warning("JWKS key not found for kid=%s", kid)
            return None
        return jwt.decode(
            token,
            ECKey(key_data, algorithm="ES256"),
            algorithms=["ES256"],
            options={"verify_aud": False},
        )

    @staticmethod
    def _to_user(payload: dict[str, Any]) -> Optional[TokenUser]:
        user_id = payload.get("sub")
        email = payload.get("email")
        if not user_id or not email:
            return None
        try:
            parsed_id = UUID(user_id)
        except ValueError:
            return None

        metadata = payload.get("user_metadata") or {}
        return TokenUser(
            id=parsed_id,
            email=email,
            display_name=metadata.get("display_name") or metadata.get("full_name"),
            role=payload.get("role"),
        )

    def create_token(self, user: TokenUser) -> str:
        """Create an HS256 token for a user (tests and local development)."""
        payload: dict[str, Any] = {
            "sub": str(user.id),
            "email": user.email,
            "aud": "authenticated",
            "role": user.role or "authenticated",
            "exp": datetime.utcnow() + timedelta(minutes=self._expire_minutes),
            "user_metadata": {"display_name": user.display_name},
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
