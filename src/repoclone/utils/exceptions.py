"""Custom exceptions for the repoclone package."""

from repoclone.utils.git_utils import mask_url


class CloneFailedError(RuntimeError):
    """Exception raised when ``git clone`` exits with a non-zero status or cannot be started.

    The message is the formatted output captured from git. No distinction is made between
    network, authentication, or directory-conflict failures; git's own text is the only discriminator.
    """

    def __init__(self, output: str) -> None:
        self.output = output
        super().__init__(output)


class MalformedURLError(ValueError):
    """Exception raised when credentials cannot be embedded because the URL has no ``//`` separator."""

    def __init__(self, url: str) -> None:
        self.url = url
        msg = f"Cannot embed credentials into {mask_url(url)!r}: expected a URL of the form '<scheme>://<host>/<path>'."
        super().__init__(msg)
