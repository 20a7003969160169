class SiteError(Exception):
    """Base class for everything this site raises on purpose."""


# SERVER SIDE

class FixtureNotFoundError(SiteError):
    def __init__(self, filename):
        super().__init__(f"File not found: {filename}")
        self.filename = filename


class MalformedFixtureError(SiteError):
    def __init__(self, filename, reason):
        super().__init__(f"Invalid JSON in {filename}: {reason}")
        self.filename = filename
        self.reason = reason


# PAGE SIDE

class PageError(SiteError):
    """Failure inside the page controller. Never fatal to the rest of the page."""


class FetchError(PageError):
    def __init__(self, resource, message, status_code=None):
        super().__init__(message)
        self.resource = resource
        self.status_code = status_code


class MissingNodeError(PageError):
    def __init__(self, node_id):
        super().__init__(f"Node not mounted: {node_id}")
        self.node_id = node_id


class DataShapeError(PageError):
    pass
