"""Converter configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConverterOptions:
    """Settings threaded through one conversion call."""

    max_depth: int = 100
    """Deepest block or flow nesting accepted before raising ``StructuralError``."""
    yaml11_booleans: bool = True
    """Treat ``yes``/``no``/``on``/``off`` as booleans in addition to ``true``/``false``."""

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")


DEFAULT_OPTIONS = ConverterOptions()
