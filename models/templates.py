"""Random text template request/result models."""

from pydantic import BaseModel

from config import DEFAULT_MAX_DEPTH


class ExpandOptions(BaseModel):
    max_depth: int = DEFAULT_MAX_DEPTH
    seed: int | None = None


class ExpansionResult(BaseModel):
    """Output of a template expansion.

    Unknown tokens and tokens past the depth cap are left as literal
    markers in ``text``; the flags tell the caller the result is partial.
    """
    text: str
    missing_tokens: list[str] = []
    depth_exceeded: bool = False

    @property
    def complete(self) -> bool:
        return not self.missing_tokens and not self.depth_exceeded

