"""Domain exceptions: all public errors of patchscan.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application use these, not define their own public exceptions.
"""


class PatchScanError(Exception):
    """Base for all patchscan error exceptions.

    Allows: except PatchScanError to catch all library errors.
    """


class SourceUnavailableError(PatchScanError):
    """Patch source cannot be read at all.

    Whole-scan failure: no method can be enumerated.

    Attributes:
        source: Description of the source (path, name).
        reason: Why the source is unavailable.
    """

    def __init__(self, source: str, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if not source:
            raise ValueError("source must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.source = source
        self.reason = reason
        super().__init__(f"Patch source {source} unavailable: {reason}")


class MalformedRecordError(PatchScanError, ValueError):
    """Patch data of one target method is invalid.

    Per-target failure: the scan records it and continues.
    Inherits ValueError for semantic correctness (bad value).

    Attributes:
        target: Target method key.
        reason: What is wrong with the data.
    """

    def __init__(self, target: str, reason: str) -> None:
        if not target:
            raise ValueError("target must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.target = target
        self.reason = reason
        super().__init__(f"Malformed patch data for {target}: {reason}")


class ReportWriteError(PatchScanError, OSError):
    """Report could not be written to the sink.

    Attributes:
        location: Where the report was going.
        reason: Underlying error message.
    """

    def __init__(self, location: str, reason: str) -> None:
        if not location:
            raise ValueError("location must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.location = location
        self.reason = reason
        super().__init__(f"Cannot write report {location}: {reason}")


class InvalidSettingsError(PatchScanError, ValueError):
    """Scanner settings are invalid.

    Attributes:
        field: Offending settings field.
        reason: Why the value is rejected.
    """

    def __init__(self, field: str, reason: str) -> None:
        if not field:
            raise ValueError("field must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.field = field
        self.reason = reason
        super().__init__(f"Invalid setting '{field}': {reason}")
