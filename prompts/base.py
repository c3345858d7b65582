"""Prompt loading utilities for UnitLedger AI features."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from string import Formatter

__all__ = ["PromptTemplate", "load_prompt", "render_prompt"]


@dataclass(frozen=True)
class PromptTemplate:
    """A prompt template stored as ``prompts/<name>.txt``.

    Placeholders use ``str.format`` syntax, e.g. ``{transaction_summary}``.
    """

    name: str
    content: str

    @property
    def placeholders(self) -> frozenset[str]:
        return frozenset(field for _, field, _, _ in Formatter().parse(self.content) if field)

    def render(self, **values: object) -> str:
        missing = self.placeholders - values.keys()
        if missing:
            raise KeyError(f"Prompt '{self.name}' is missing values for: {', '.join(sorted(missing))}")
        return self.content.format(**values)


PROMPTS_DIR = Path(__file__).resolve().parent


@lru_cache(maxsize=32)
def load_prompt(name: str) -> PromptTemplate:
    """Load a prompt template by stem name (without extension)."""

    path = PROMPTS_DIR / f"{name}.txt"
    if not path.exists():
        raise FileNotFoundError(f"Prompt template not found: {path}")

    content = path.read_text(encoding="utf-8").strip()
    return PromptTemplate(name=name, content=content)


def render_prompt(name: str, **values: object) -> str:
    return load_prompt(name).render(**values)
