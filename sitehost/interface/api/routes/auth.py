"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from sitehost.application.usecase.auth import (
    SignInRequest,
    SignInResponse,
    SignInUseCase,
)
from sitehost.domain.error import InvalidCredentialsError

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.post("/signin", response_model=SignInResponse)
async def sign_in(
    request: SignInRequest,
    use_case: FromDishka[SignInUseCase],
) -> SignInResponse:
    """Sign in to an existing site.

    Args:
        request: Username and password
        use_case: Sign-in use case from DI

    Returns:
        The signed-in site

    Raises:
        HTTPException: 401 if the credentials don't match
    """
    with logfire.span("api.sign_in", username=request.username):
        try:
            return await use_case.execute(request)
        except InvalidCredentialsError as e:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=str(e),
            )
