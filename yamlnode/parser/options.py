"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

DEFAULT_MAX_DEPTH: Final[int] = 256


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


class DuplicateKeyPolicy(StrEnum):
    """What to do when a mapping repeats a key."""

    LAST_WINS = "last_wins"
    FIRST_WINS = "first_wins"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Flags controlling duplicate key handling and resource limits."""

    mode: ParseMode = ParseMode.PERMISSIVE
    # None follows the mode: ERROR when strict, LAST_WINS otherwise.
    duplicate_keys: DuplicateKeyPolicy | None = None
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        if self.duplicate_keys is None:
            policy = DuplicateKeyPolicy.ERROR if self.mode == ParseMode.STRICT else DuplicateKeyPolicy.LAST_WINS
            object.__setattr__(self, "duplicate_keys", policy)

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        return ParserOptions(mode=mode)
