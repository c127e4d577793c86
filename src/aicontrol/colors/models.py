"""Color value type.

Hides the internal color representation (RGBA floats in [0, 1]) and the
derived quantities the rest of the system needs: canonical hex form,
perceived brightness and the contrasting text color.
"""

from pydantic import BaseModel, ConfigDict, Field

# Weights for perceived brightness (ITU-R BT.601 luma)
_LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def _channel_to_byte(value: float) -> int:
    return max(0, min(255, round(value * 255)))


class Color(BaseModel):
    """An RGBA color with all components in [0.0, 1.0]."""

    model_config = ConfigDict(frozen=True)

    red: float = Field(ge=0.0, le=1.0)
    green: float = Field(ge=0.0, le=1.0)
    blue: float = Field(ge=0.0, le=1.0)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    @classmethod
    def from_rgb255(cls, red: int, green: int, blue: int, alpha: float = 1.0) -> "Color":
        """Create a color from 8-bit channels and a float alpha."""
        return cls(red=red / 255, green=green / 255, blue=blue / 255, alpha=alpha)

    def to_rgb255(self) -> tuple[int, int, int]:
        """Quantize the color channels to 8 bits."""
        return (
            _channel_to_byte(self.red),
            _channel_to_byte(self.green),
            _channel_to_byte(self.blue),
        )

    @property
    def hex(self) -> str:
        """Uppercase #RRGGBB form (alpha dropped)."""
        r, g, b = self.to_rgb255()
        return f"#{r:02X}{g:02X}{b:02X}"

    @property
    def css(self) -> str:
        """Canonical external form: #RRGGBB, or #RRGGBBAA when translucent."""
        if self.alpha >= 1.0:
            return self.hex
        return f"{self.hex}{_channel_to_byte(self.alpha):02X}"

    @property
    def brightness(self) -> float:
        """Perceived brightness in [0.0, 1.0]."""
        wr, wg, wb = _LUMA_WEIGHTS
        return wr * self.red + wg * self.green + wb * self.blue

    def contrasting_text(self) -> str:
        """Text color readable on top of this color."""
        return "black" if self.brightness > 0.5 else "white"

    def __str__(self) -> str:
        return self.css
