from dataclasses import dataclass
from types import MappingProxyType

# Ramps run from sparsest (background) to densest glyph
STANDARD = " .:-=+*#%@"
DETAILED = " .,:;i1tfLCG08@"
BLOCKS = " ░▒▓█"
MINIMAL = " .:█"
ARTISTIC = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"
RETRO = " .:;+=xX$&@"


@dataclass(frozen=True)
class Ramp:
    name: str
    label: str
    chars: str

    def __post_init__(self):
        if len(self.chars) < 2:
            raise ValueError(f"Ramp {self.name!r} needs at least two characters")

    def __len__(self) -> int:
        return len(self.chars)


RAMPS = MappingProxyType(
    {
        ramp.name: ramp
        for ramp in (
            Ramp("standard", "Standard", STANDARD),
            Ramp("detailed", "Detailed", DETAILED),
            Ramp("blocks", "Block Characters", BLOCKS),
            Ramp("minimal", "Minimal", MINIMAL),
            Ramp("artistic", "Artistic", ARTISTIC),
            Ramp("retro", "Retro", RETRO),
        )
    }
)


def charset_names() -> list[str]:
    return list(RAMPS)


def get_ramp(name: str) -> str:
    """Return the characters of a registered ramp."""
    try:
        return RAMPS[name].chars
    except KeyError:
        raise ValueError(f"Unknown character set: {name!r}") from None
