"""Site provisioning domain service.

Turns a signup request into a site record plus its backing files:

    RECEIVED -> VALIDATED -> AUTHORIZED -> PERSISTED -> PROVISIONED -> COMPLETE

Each gate can exit with a ``SignupError``. The pipeline is linear, runs
each step once, and undoes the site record and any partial files if the
files cannot be created, so a reported success always means both exist.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import Field

from sitehost.domain.error import PersistenceError, StorageError, UsernameTakenError
from sitehost.domain.model import Site
from sitehost.domain.validation import (
    normalize_tags,
    validate_password,
    validate_username,
)
from sitehost.domain.value import (
    ProvisioningStage,
    SignupError,
    SignupErrorKind,
    SignupField,
    SiteId,
    Username,
)
from sitehost.domain.value.common import ValueObject

from .base import Service
from .site_service import SiteService
from .site_storage import SiteStorage

USERNAME_TAKEN_MESSAGE = "This user/site name is already taken."
INFRASTRUCTURE_MESSAGE = (
    "Your site could not be created right now. Please try again later."
)


class ProvisioningRequest(ValueObject):
    """Signup input as submitted. Never persisted."""

    username: str
    password: str = Field(repr=False)
    tags: str = ""


class ProvisioningResult(ValueObject):
    """Outcome of a signup.

    Exactly one of ``site`` and ``error`` is set.
    """

    stage: ProvisioningStage
    site: Optional[Site] = None
    error: Optional[SignupError] = None

    @property
    def ok(self) -> bool:
        """Whether the site was fully created."""
        return self.error is None

    @classmethod
    def failed(cls, stage: ProvisioningStage, error: SignupError) -> "ProvisioningResult":
        """Build a failure result at the stage that was last reached."""
        return cls(stage=stage, error=error)


class ProvisioningService(Service):
    """Domain service orchestrating validation, persistence and file provisioning."""

    def __init__(self, site_service: SiteService, site_storage: SiteStorage) -> None:
        """Initialize provisioning service.

        Args:
            site_service: Site domain service
            site_storage: Backing file storage for sites
        """
        self.site_service = site_service
        self.site_storage = site_storage

    async def submit(self, request: ProvisioningRequest) -> ProvisioningResult:
        """Run a signup through the provisioning pipeline.

        Expected failures come back as results, never as exceptions.

        Args:
            request: Signup request

        Returns:
            Result holding the created site, or the single error that stopped it
        """
        with logfire.span("provisioning_service.submit", username=request.username):
            stage = ProvisioningStage.RECEIVED

            # Validation: one error at a time, username first
            error = validate_username(request.username) or validate_password(
                request.password
            )
            if error:
                return self._reject(stage, error)

            tag_names = normalize_tags(request.tags)
            if isinstance(tag_names, SignupError):
                return self._reject(stage, tag_names)

            username = Username(request.username)
            stage = ProvisioningStage.VALIDATED

            if await self.site_service.exists(username):
                return self._reject(stage, self._username_taken())
            stage = ProvisioningStage.AUTHORIZED

            site = Site(
                id=SiteId(uuid4()),
                username=username,
                password_hash=await self.site_service.hash_password(request.password),
                tag_names=tag_names,
                created_at=datetime.now(),
            )

            try:
                site = await self.site_service.create(site)
            except UsernameTakenError:
                # Lost a race with a concurrent signup after the existence check
                return self._reject(stage, self._username_taken())
            except PersistenceError as e:
                logfire.error(
                    "Site persistence failed",
                    username=username.root,
                    error=str(e),
                    _exc_info=True,
                )
                return ProvisioningResult.failed(
                    stage,
                    SignupError(
                        kind=SignupErrorKind.PERSISTENCE_FAILED,
                        message=INFRASTRUCTURE_MESSAGE,
                    ),
                )
            stage = ProvisioningStage.PERSISTED

            try:
                await self.site_storage.provision(username.root)
            except StorageError as e:
                logfire.error(
                    "Site file provisioning failed, removing site record",
                    site_id=str(site.id),
                    username=username.root,
                    error=str(e),
                    _exc_info=True,
                )
                await self._compensate(site)
                return ProvisioningResult.failed(
                    stage,
                    SignupError(
                        kind=SignupErrorKind.PROVISION_FAILED,
                        message=INFRASTRUCTURE_MESSAGE,
                    ),
                )
            stage = ProvisioningStage.PROVISIONED

            logfire.info(
                "Site provisioned",
                stage=stage.value,
                site_id=str(site.id),
                username=username.root,
                tags=[t.root for t in site.tag_names],
            )
            return ProvisioningResult(stage=ProvisioningStage.COMPLETE, site=site)

    async def _compensate(self, site: Site) -> None:
        """Undo a persisted site whose files could not be provisioned.

        Both steps are attempted even if one fails. Failures are logged and
        never raised, the caller still reports PROVISION_FAILED.
        """
        with logfire.span("provisioning_service.compensate", site_id=str(site.id)):
            try:
                await self.site_service.delete(site.id)
            except PersistenceError as e:
                logfire.error(
                    "Could not remove site record after failed provisioning",
                    site_id=str(site.id),
                    username=site.username.root,
                    error=str(e),
                    _exc_info=True,
                )

            # A timed-out write may still finish in its worker thread
            try:
                await self.site_storage.remove(site.username.root)
            except StorageError as e:
                logfire.error(
                    "Could not remove partial site files after failed provisioning",
                    site_id=str(site.id),
                    username=site.username.root,
                    error=str(e),
                    _exc_info=True,
                )

    @staticmethod
    def _username_taken() -> SignupError:
        return SignupError(
            field=SignupField.USERNAME,
            kind=SignupErrorKind.USERNAME_TAKEN,
            message=USERNAME_TAKEN_MESSAGE,
        )

    @staticmethod
    def _reject(stage: ProvisioningStage, error: SignupError) -> ProvisioningResult:
        logfire.warn(
            "Signup rejected",
            stage=stage.value,
            kind=error.kind.value,
            field=error.field.value if error.field else None,
        )
        return ProvisioningResult.failed(stage, error)
