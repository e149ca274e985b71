from __future__ import annotations

from dataclasses import dataclass

from respondkit.breakpoints.table import DEFAULT_UNIT


@dataclass(frozen=True)
class MediaCondition:
    min_width: int | None = None
    max_width: int | None = None
    unit: str = DEFAULT_UNIT

    @property
    def is_empty(self) -> bool:
        # Widths are never negative.
        if self.max_width is not None and self.max_width < 0:
            return True
        if self.min_width is None or self.max_width is None:
            return False
        return self.min_width > self.max_width

    def matches(self, width: int) -> bool:
        # Both media features are inclusive.
        if self.min_width is not None and width < self.min_width:
            return False
        if self.max_width is not None and width > self.max_width:
            return False
        return True

    def features(self) -> tuple[str, ...]:
        parts: list[str] = []
        if self.min_width is not None:
            parts.append(f"(min-width: {self.min_width}{self.unit})")
        if self.max_width is not None:
            parts.append(f"(max-width: {self.max_width}{self.unit})")
        return tuple(parts)

    def query(self) -> str:
        features = self.features()
        if not features:
            return "@media all"
        return "@media " + " and ".join(features)

    def to_dict(self) -> dict:
        return {
            "min_width": self.min_width,
            "max_width": self.max_width,
            "unit": self.unit,
            "query": self.query(),
        }


@dataclass(frozen=True)
class ConditionalBlock:
    condition: MediaCondition
    content: str

    def render(self, *, indent: int = 2) -> str:
        pad = " " * indent
        body = "\n".join(f"{pad}{line}" if line.strip() else "" for line in self.content.strip("\n").splitlines())
        if not body:
            return f"{self.condition.query()} {{\n}}"
        return f"{self.condition.query()} {{\n{body}\n}}"

    def to_dict(self) -> dict:
        return {
            "condition": self.condition.to_dict(),
            "content": self.content,
        }


def render_blocks(blocks, *, indent: int = 2) -> str:
    rendered = [block.render(indent=indent) for block in blocks if block is not None]
    return "\n\n".join(rendered)


__all__ = ["ConditionalBlock", "MediaCondition", "render_blocks"]
