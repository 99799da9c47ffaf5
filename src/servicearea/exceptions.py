"""Custom exception hierarchy for servicearea.

Only the loading and validation edges raise these; name matching never does.
"""


class ServiceAreaError(Exception):
    """Base exception for all servicearea errors."""


class CityListNotFound(ServiceAreaError):
    """A city-list file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"City list not found at: {path}")


class CityListInvalid(ServiceAreaError):
    """A city list exists but its content cannot be used."""

    def __init__(self, source: str, detail: str):
        self.source = source
        self.detail = detail
        super().__init__(f"Invalid city list {source}: {detail}")


class UnsupportedFormat(ServiceAreaError):
    """The file extension is not one we know how to read."""

    def __init__(self, path: str, extension: str):
        self.path = path
        self.extension = extension
        super().__init__(
            f"Unsupported format '{extension}' for {path}. "
            "Please use .csv or .xlsx"
        )


class CityListFetchError(ServiceAreaError):
    """A remote city list could not be downloaded."""

    def __init__(self, url: str, detail: str):
        self.url = url
        self.detail = detail
        super().__init__(f"Failed to fetch city list from {url}: {detail}")
