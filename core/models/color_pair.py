from __future__ import annotations

from pydantic import BaseModel

from core.enums.color import MajorColor, MinorColor


class ColorPair(BaseModel):
    """A wire pair identified by exactly one major and one minor color."""

    major: MajorColor
    minor: MinorColor

    model_config = {
        "frozen": True,
    }

    def to_string(self) -> str:
        return f"{self.major.value} {self.minor.value}"

    def __str__(self) -> str:
        return self.to_string()
