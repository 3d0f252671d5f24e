from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

import structlog

from domain.exceptions import InvalidArgumentError, SigningNotSupportedError
from domain.value_objects.signed_url_permission import SignedUrlPermission

if TYPE_CHECKING:
    from collections.abc import Callable

    from application.ports.object_backend import ObjectBackend
    from domain.services.object_path_resolver import ObjectPathResolver
    from domain.value_objects.storage_options import StorageOptions

logger = structlog.get_logger()


def _utc_now() -> datetime:
    return datetime.now(UTC)


class SignedUrlIssuer:
    """Mint time-limited, read-only access URLs through the backend's signer.

    The requested duration is always honoured; when omitted the configured
    default applies. Signing is never silently degraded to an unsigned URL.
    """

    def __init__(
        self,
        backend: ObjectBackend,
        path_resolver: ObjectPathResolver,
        options: StorageOptions,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.backend = backend
        self.path_resolver = path_resolver
        self.options = options
        self.clock = clock

    async def sign_full_url(self, full_url: str, duration_minutes: int | None = None) -> str:
        """Create a signed URL for the object behind a full download URL.

        Args:
            full_url: Full URL of the object, starting with the root client path
            duration_minutes: Token lifetime; defaults to the configured duration

        Raises:
            InvalidArgumentError: If the URL is not under the root client path
            SigningNotSupportedError: If the credentials cannot sign URLs

        """
        location = self.path_resolver.decompose_url(full_url)
        return await self.sign(location.container, location.object_path, duration_minutes)

    async def sign(
        self,
        container: str,
        object_path: str,
        duration_minutes: int | None = None,
    ) -> str:
        """Create a signed URL for ``object_path`` inside ``container``.

        Args:
            container: Container holding the object
            object_path: Container-relative object path
            duration_minutes: Token lifetime; defaults to the configured duration

        Returns:
            A URL embedding a read-only token valid until now + duration

        Raises:
            InvalidArgumentError: If the duration is not positive
            SigningNotSupportedError: If the credentials cannot sign URLs

        """
        if duration_minutes is None:
            duration_minutes = self.options.default_signed_url_duration_minutes
        if duration_minutes <= 0:
            msg = f"Signed URL duration must be positive, got {duration_minutes} minutes"
            raise InvalidArgumentError(msg)

        expires_on = self.clock() + timedelta(minutes=duration_minutes)
        try:
            signed_url = await self.backend.sign_url(
                container.lower(),
                object_path,
                expires_on,
                SignedUrlPermission.READ,
            )
        except SigningNotSupportedError:
            logger.error(
                "signed_url_not_supported",
                container=container,
                object_path=object_path,
            )
            raise

        if not signed_url:
            logger.error("signed_url_empty", container=container, object_path=object_path)
            msg = "Storage backend returned no signed URL"
            raise SigningNotSupportedError(msg)

        logger.info(
            "signed_url_created",
            container=container,
            object_path=object_path,
            expires_on=expires_on.isoformat(),
        )
        return signed_url
