"""Site routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from sitehost.application.usecase.site import (
    GetSiteRequest,
    GetSiteUseCase,
    ListSitesRequest,
    ListSitesResponse,
    ListSitesUseCase,
    SignupRequest,
    SignupUseCase,
    SiteItem,
)
from sitehost.config import Settings
from sitehost.domain.error import NotFoundError
from sitehost.interface.error import SignupRejectedError

router = APIRouter(prefix="/sites", tags=["sites"], route_class=DishkaRoute)


@router.post("", response_model=SiteItem, status_code=status.HTTP_201_CREATED)
async def create_site(
    request: SignupRequest,
    use_case: FromDishka[SignupUseCase],
) -> SiteItem:
    """Sign up for a new site.

    Args:
        request: Username, password and comma-separated tags
        use_case: Signup use case from DI

    Returns:
        The created site

    Raises:
        SignupRejectedError: 400 for invalid input, 409 for a taken username,
            503 if the site could not be stored
    """
    with logfire.span("api.create_site", username=request.username):
        response = await use_case.execute(request)

        if response.site is not None:
            return response.site

        error = response.error
        raise SignupRejectedError(error.category, error.model_dump(mode="json"))


@router.get("", response_model=ListSitesResponse)
async def list_sites(
    use_case: FromDishka[ListSitesUseCase],
    settings: FromDishka[Settings],
    tag: str | None = None,
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
) -> ListSitesResponse:
    """List the newest sites, optionally only those with a tag.

    Example:
        GET /sites?tag=art&limit=10
    """
    limit = min(limit or settings.feed.default_limit, settings.feed.max_limit)

    with logfire.span("api.list_sites", tag=tag, limit=limit, offset=offset):
        request = ListSitesRequest(tag=tag, limit=limit, offset=offset)
        return await use_case.execute(request)


@router.get("/{username}", response_model=SiteItem)
async def get_site(
    username: str,
    use_case: FromDishka[GetSiteUseCase],
) -> SiteItem:
    """Get a site by username.

    Raises:
        HTTPException: 404 if there is no such site
    """
    try:
        return await use_case.execute(GetSiteRequest(username=username))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
