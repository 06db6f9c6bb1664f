"""Template-driven random text with weighted, nested token substitution.

A template body contains ``{token}`` markers. Each marker is replaced by a
weighted random pick from the template's table for that token, and the pick
is expanded in turn. Expansion never aborts part-way:

- a marker with no table entry is left in the text as-is and listed in
  ``ExpansionResult.missing_tokens``;
- a marker reached at ``max_depth`` is left in the text as-is and
  ``ExpansionResult.depth_exceeded`` is set;
- once MAX_SUBSTITUTIONS markers have been replaced, the rest are left
  literal and ``depth_exceeded`` is set.

Top-level markers sit at depth 0, so ``max_depth=0`` substitutes nothing.
"""

from __future__ import annotations

import logging
import re

from config import DEFAULT_MAX_DEPTH, MAX_SUBSTITUTIONS
from engine.errors import DepthExceededError, InvalidInputError, NotFoundError
from engine.rng import RandomSource
from models.settings import Candidate, GeneratorTemplate, SettingsDocument
from models.templates import ExpansionResult

logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(r"\{[^{}\s]+\}")


def find_template(settings: SettingsDocument, name: str) -> GeneratorTemplate:
    """Look up a template by name (case-insensitive).

    Raises:
        NotFoundError: If no template has that name.
    """
    for template in settings.random.generators:
        if template.name.lower() == name.lower():
            return template
    raise NotFoundError(f"Template '{name}' not found")


def _lookup(tables: dict[str, list[Candidate]], marker: str) -> list[Candidate] | None:
    """Table entry for a marker, keyed either as '{adj}' or 'adj'."""
    if marker in tables:
        return tables[marker]
    return tables.get(marker[1:-1])


class _Expander:
    def __init__(self, template: GeneratorTemplate, rng: RandomSource, max_depth: int):
        self.tables = template.tables
        self.rng = rng
        self.max_depth = max_depth
        self.missing: list[str] = []
        self.depth_exceeded = False
        self.substitutions = 0

    def expand(self, text: str, depth: int) -> str:
        return TOKEN_PATTERN.sub(lambda m: self._replace(m.group(0), depth), text)

    def _replace(self, marker: str, depth: int) -> str:
        candidates = _lookup(self.tables, marker)
        if not candidates:
            if marker not in self.missing:
                self.missing.append(marker)
            return marker
        if depth >= self.max_depth:
            self.depth_exceeded = True
            return marker
        if self.substitutions >= MAX_SUBSTITUTIONS:
            self.depth_exceeded = True
            return marker
        self.substitutions += 1
        pick = self.rng.weighted_choice(
            [c.text for c in candidates], [c.weight for c in candidates]
        )
        return self.expand(pick, depth + 1)


def expand(
    template: GeneratorTemplate,
    rng: RandomSource | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> ExpansionResult:
    """Expand a template's body.

    Args:
        template: The template and its token tables.
        rng: Random source for the weighted picks.
        max_depth: Nesting cap; markers at this depth are left literal.

    Returns:
        The expanded text with partial-result flags.

    Raises:
        InvalidInputError: Negative ``max_depth``, or a token table whose
            weights sum to zero.
    """
    if max_depth < 0:
        raise InvalidInputError(f"max_depth must not be negative, got {max_depth}")
    expander = _Expander(template, rng or RandomSource(), max_depth)
    text = expander.expand(template.template, 0)

    result = ExpansionResult(
        text=text,
        missing_tokens=expander.missing,
        depth_exceeded=expander.depth_exceeded,
    )
    if expander.missing:
        logger.warning(
            "Template '%s' has no table for %s", template.name, ", ".join(expander.missing)
        )
    if expander.depth_exceeded:
        logger.warning("Template '%s' truncated at depth %d", template.name, max_depth)
    return result


def expand_template(
    name: str,
    settings: SettingsDocument,
    rng: RandomSource | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> ExpansionResult:
    """Expand a named template from the settings snapshot.

    Raises:
        NotFoundError: If no template has that name.
    """
    return expand(find_template(settings, name), rng, max_depth)


def raise_for_partial(result: ExpansionResult) -> None:
    """Raise if the expansion left any literal token behind.

    Raises:
        NotFoundError: A token had no table entry.
        DepthExceededError: Expansion stopped at the depth or size limit.
    """
    if result.missing_tokens:
        raise NotFoundError(
            f"No table entry for token(s): {', '.join(result.missing_tokens)}"
        )
    if result.depth_exceeded:
        raise DepthExceededError("Template expansion hit its depth limit")
