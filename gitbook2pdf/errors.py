class DownloadError(Exception):
    """A page answered with a non-success response."""

    @classmethod
    def from_response(cls, url, response):
        if response is None:
            return cls(f"No response received - {url}")
        return cls(f"{response.status_text} ({response.status})")


class NotGitBookError(DownloadError):
    """The entry page is not a GitBook website."""
