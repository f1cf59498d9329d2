import numbers
from dataclasses import dataclass
from typing import Any, Tuple

import matplotlib.colors as mcolors


@dataclass(frozen=True)
class Color:
    """
    An RGBA line color with 8-bit channels.

    ``Color.TRANSPARENT`` is the default for charts that never had a color set;
    such lines are drawn with matplotlib's automatic color cycle.
    """

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for channel, value in zip("rgba", (self.r, self.g, self.b, self.a)):
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
                raise ValueError(
                    f"Color channel '{channel}' must be an int in [0, 255]. Got {value!r}."
                )

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        return cls(r, g, b)

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> "Color":
        return cls(r, g, b, a)

    @classmethod
    def from_gray(cls, level: int) -> "Color":
        return cls(level, level, level)

    @classmethod
    def parse(cls, value: Any) -> "Color":
        """
        Build a Color from a Color, an 8-bit channel tuple or a matplotlib color spec.

        Parameters
        ----------
        value : Any
            A ``Color``, a tuple of 3 or 4 ints in [0, 255], or anything
            `matplotlib.colors.to_rgba` understands ("red", "#ff8800", "C1",
            float RGB(A) tuples in [0, 1]).

        Returns
        -------
        Color
            The parsed color.

        Raises
        ------
        ValueError
            If the value is not a valid color.
        """
        if isinstance(value, Color):
            return value
        if (
            isinstance(value, tuple)
            and len(value) in (3, 4)
            and all(
                isinstance(c, numbers.Integral) and not isinstance(c, bool)
                for c in value
            )
        ):
            return cls(*(int(c) for c in value))
        try:
            rgba = mcolors.to_rgba(value)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Invalid color: {value!r}") from e
        return cls(*(int(round(c * 255)) for c in rgba))

    def is_transparent(self) -> bool:
        return self.a == 0

    def to_rgba(self) -> Tuple[float, float, float, float]:
        """Channels scaled to [0, 1], the form matplotlib expects."""
        return (self.r / 255, self.g / 255, self.b / 255, self.a / 255)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"


_NAMED_COLORS = {
    "TRANSPARENT": (0, 0, 0, 0),
    "BLACK": (0, 0, 0),
    "DARK_GRAY": (96, 96, 96),
    "GRAY": (160, 160, 160),
    "LIGHT_GRAY": (220, 220, 220),
    "WHITE": (255, 255, 255),
    "BROWN": (165, 42, 42),
    "DARK_RED": (139, 0, 0),
    "RED": (255, 0, 0),
    "LIGHT_RED": (255, 128, 128),
    "YELLOW": (255, 255, 0),
    "LIGHT_YELLOW": (255, 255, 224),
    "KHAKI": (240, 230, 140),
    "DARK_GREEN": (0, 100, 0),
    "GREEN": (0, 255, 0),
    "LIGHT_GREEN": (144, 238, 144),
    "DARK_BLUE": (0, 0, 139),
    "BLUE": (0, 0, 255),
    "LIGHT_BLUE": (173, 216, 230),
    "GOLD": (255, 215, 0),
    "ORANGE": (255, 165, 0),
}

for _name, _channels in _NAMED_COLORS.items():
    setattr(Color, _name, Color(*_channels))
