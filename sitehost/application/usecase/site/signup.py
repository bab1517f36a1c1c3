"""Signup use case."""

import logfire
from pydantic import BaseModel, Field

from sitehost.application.usecase.base import BaseUseCase
from sitehost.domain.service import ProvisioningRequest, ProvisioningService
from sitehost.domain.value import (
    ErrorCategory,
    ProvisioningStage,
    SignupErrorKind,
    SignupField,
)

from .common import SiteItem


class SignupRequest(BaseModel):
    """Signup form as submitted."""

    username: str = ""
    password: str = Field(default="", repr=False)
    tags: str = ""  # Comma-separated


class SignupErrorItem(BaseModel):
    """Signup error in response."""

    field: SignupField | None
    kind: SignupErrorKind
    category: ErrorCategory
    message: str


class SignupResponse(BaseModel):
    """Signup response. Exactly one of site and error is set."""

    ok: bool
    stage: ProvisioningStage
    site: SiteItem | None = None
    error: SignupErrorItem | None = None


class SignupUseCase(BaseUseCase):
    """Use case for creating a new site from the signup form."""

    def __init__(self, provisioning_service: ProvisioningService) -> None:
        """Initialize signup use case.

        Args:
            provisioning_service: Provisioning domain service
        """
        self.provisioning_service = provisioning_service

    async def execute(self, request: SignupRequest) -> SignupResponse:
        """Execute signup flow.

        Args:
            request: Signup request

        Returns:
            The created site, or the error that stopped the signup
        """
        with logfire.span("signup.execute", username=request.username):
            result = await self.provisioning_service.submit(
                ProvisioningRequest(
                    username=request.username,
                    password=request.password,
                    tags=request.tags,
                )
            )

            if result.site is not None:
                logfire.info("Signup complete", site_id=str(result.site.id))
                return SignupResponse(
                    ok=True, stage=result.stage, site=SiteItem.from_site(result.site)
                )

            error = result.error
            return SignupResponse(
                ok=False,
                stage=result.stage,
                error=SignupErrorItem(
                    field=error.field,
                    kind=error.kind,
                    category=error.category,
                    message=error.message,
                ),
            )
