"""Domain exceptions for configuration and CLI diagnostics."""

from __future__ import annotations


class StageError(RuntimeError):
    """Raised when a specific command stage (config, input, output) fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
