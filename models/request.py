"""StripRequest Pydantic model with strict validation (extra=forbid)."""

from models.config import StripConfig


class StripRequest(StripConfig):
    """Incoming request body for the POST /strip endpoint.

    Carries the markup to process alongside every ``StripConfig`` field.
    Extra fields are rejected with a 422 response.
    """

    html: str = ""

    def to_config(self) -> StripConfig:
        """Return the extraction policy without the markup payload."""
        return StripConfig(**self.model_dump(exclude={"html"}))
