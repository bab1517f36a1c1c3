"""Site use cases."""

from .common import SiteItem
from .get_site import GetSiteRequest, GetSiteUseCase
from .list_sites import ListSitesRequest, ListSitesResponse, ListSitesUseCase
from .signup import SignupErrorItem, SignupRequest, SignupResponse, SignupUseCase

__all__ = [
    "GetSiteRequest",
    "GetSiteUseCase",
    "ListSitesRequest",
    "ListSitesResponse",
    "ListSitesUseCase",
    "SignupErrorItem",
    "SignupRequest",
    "SignupResponse",
    "SignupUseCase",
    "SiteItem",
]
