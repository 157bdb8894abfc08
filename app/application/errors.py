"""Pipeline error kinds.

Every error carries the HTTP status it maps to and a human-readable detail
string that is safe to return to the caller.
"""


class PipelineError(Exception):
    """Base class for failures that terminate a request pipeline."""

    status_code: int = 500

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class InvalidPayload(PipelineError):
    """Body is neither parseable JSON nor a JSON object."""

    status_code = 400


class MissingField(PipelineError):
    """A required field is absent or blank after trimming."""

    status_code = 400


class ConfigurationMissing(PipelineError):
    """A required environment value is absent (deployment error)."""

    status_code = 500


class PersistenceFailure(PipelineError):
    """The lead insert was rejected or errored."""

    status_code = 500


class NotificationFailure(PipelineError):
    """An email send was rejected or errored."""

    status_code = 502


class UpstreamServiceFailure(PipelineError):
    """The AI completion call errored or its transport failed."""

    status_code = 502
