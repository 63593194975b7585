"""Exception classes for Hornbook.

Rendering itself has no failure path: exceptions raised by a sink's
underlying writer propagate unchanged. These types cover the few places
where Hornbook reports a problem of its own.
"""

from __future__ import annotations


class HornbookError(Exception):
    """Base exception for all Hornbook errors.

    Subclass this for specific error categories.
    """

    pass


class TemplateError(HornbookError):
    """Errors recorded while rendering a template.

    Producers report problems through ``TemplateBuilder.record_error()``
    without interrupting output. Finalization raises this once rendering
    has finished if anything was recorded.
    """

    def __init__(self, errors: list[BaseException | str]) -> None:
        """Initialize with the recorded errors.

        Args:
            errors: Errors in the order they were recorded
        """
        self.errors = list(errors)

        if len(self.errors) == 1:
            message = f"render failed: {self.errors[0]}"
        else:
            details = "; ".join(str(e) for e in self.errors)
            message = f"render failed with {len(self.errors)} errors: {details}"

        super().__init__(message)


class ConsumedError(HornbookError):
    """A once-only producer was rendered after it had been consumed.

    Raised by call-once renderers and by erasure handles after their
    final consuming render.
    """

    def __init__(self, producer: object) -> None:
        """Initialize consumed error.

        Args:
            producer: The spent producer
        """
        self.producer = producer
        super().__init__(f"{type(producer).__name__} has already been rendered once")
