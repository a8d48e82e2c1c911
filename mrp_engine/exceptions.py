class MrpEngineError(Exception):
    """Base class for projection engine errors."""


class ProjectionInputError(MrpEngineError):
    """One of the input fetches failed, so no projection was computed."""

    def __init__(self, source: str, cause: Exception):
        self.source = source
        self.cause = cause
        super().__init__(f"Failed to fetch {source}: {cause}")
