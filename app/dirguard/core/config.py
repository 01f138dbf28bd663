"""Runtime configuration for the watcher.

The watcher reads no configuration file and no environment variables;
this model only validates what the command line supplies.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Pause between two monitoring cycles, in seconds
DEFAULT_INTERVAL = 0.5


class WatchConfig(BaseModel):
    """Validated watcher settings.

    Attributes:
        roots: Directories to watch, in the order they were given.
        interval: Seconds to sleep between monitoring cycles.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    roots: Annotated[
        list[str],
        Field(min_length=1, description="Directories to watch"),
    ]
    interval: Annotated[
        float,
        Field(gt=0, description="Seconds between cycles"),
    ] = DEFAULT_INTERVAL

    @field_validator("roots")
    @classmethod
    def validate_roots(cls, v: list[str]) -> list[str]:
        """Reject blank root paths."""
        for root in v:
            if not root.strip():
                msg = "Root path cannot be empty"
                raise ValueError(msg)
        return v
