"""Interactive prompt result model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PromptResult:
    """Outcome of one interactive request.

    Keeps "user cancelled" apart from "user answered with nothing".
    """

    cancelled: bool
    value: str | None = field(default=None, repr=False)

    @classmethod
    def answered(cls, value: str) -> "PromptResult":
        """User submitted a value (possibly empty)."""
        return cls(cancelled=False, value=value)

    @classmethod
    def cancel(cls) -> "PromptResult":
        """User dismissed the prompt."""
        return cls(cancelled=True)

    @property
    def token(self) -> str | None:
        """Submitted value, or None when cancelled or empty."""
        if self.cancelled or not self.value:
            return None
        return self.value
