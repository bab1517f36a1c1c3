"""Sign-in use case."""

import logfire
from pydantic import BaseModel, Field

from sitehost.domain.error import InvalidCredentialsError
from sitehost.domain.service import SiteService


class SignInRequest(BaseModel):
    """Sign-in form as submitted."""

    username: str = ""
    password: str = Field(default="", repr=False)


class SignInResponse(BaseModel):
    """Sign-in response."""

    site_id: str
    username: str


class SignInUseCase:
    """Use case for signing in to an existing site."""

    def __init__(self, site_service: SiteService) -> None:
        """Initialize sign-in use case.

        Args:
            site_service: Site domain service
        """
        self.site_service = site_service

    async def execute(self, request: SignInRequest) -> SignInResponse:
        """Execute sign-in flow.

        Args:
            request: Sign-in request

        Returns:
            The signed-in site

        Raises:
            InvalidCredentialsError: If the username or password doesn't match
        """
        with logfire.span("sign_in.execute", username=request.username):
            site = await self.site_service.authenticate(
                request.username, request.password
            )
            if not site:
                raise InvalidCredentialsError()

            return SignInResponse(site_id=str(site.id), username=site.username.root)
