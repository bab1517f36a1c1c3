"""Site file storage interface."""


class SiteStorage:
    """Backing file storage for hosted sites.

    Every site owns an isolated namespace keyed by its username, holding at
    least a default landing document.
    """

    async def provision(self, username: str) -> None:
        """Create the site's namespace and its default landing document.

        Calling it again for an existing site rewrites the landing document.

        Args:
            username: Canonical username

        Raises:
            StorageError: If the files could not be written
        """
        raise NotImplementedError

    async def remove(self, username: str) -> None:
        """Delete the site's namespace and everything in it.

        Removing a site that has no files is not an error.

        Args:
            username: Canonical username

        Raises:
            StorageError: If the files could not be removed
        """
        raise NotImplementedError

    async def index_exists(self, username: str) -> bool:
        """Check whether the site's landing document exists.

        Args:
            username: Canonical username

        Returns:
            True if the landing document is present
        """
        raise NotImplementedError
