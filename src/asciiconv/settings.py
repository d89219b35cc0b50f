import dataclasses
from dataclasses import dataclass

from asciiconv.charsets import get_ramp

DEFAULT_RESOLUTION = 0.15
DEFAULT_CHARSET = "standard"

# Range offered by interactive presenters; convert() accepts anything in (0, 1]
MIN_RESOLUTION = 0.05
MAX_RESOLUTION = 0.30


@dataclass(frozen=True)
class ConversionSettings:
    resolution: float = DEFAULT_RESOLUTION
    charset: str = DEFAULT_CHARSET
    inverted: bool = False
    grayscale: bool = True

    def __post_init__(self):
        if not 0 < self.resolution <= 1:
            raise ValueError(f"Resolution must be in (0, 1], got {self.resolution}")
        get_ramp(self.charset)

    @property
    def ramp(self) -> str:
        return get_ramp(self.charset)

    def replace(self, **changes) -> "ConversionSettings":
        return dataclasses.replace(self, **changes)
