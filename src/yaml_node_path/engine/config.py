"""NavigatorConfig and SetMode for path engine configuration.

NavigatorConfig is a frozen (immutable) dataclass holding the engine
parameters. SetMode selects how writes treat already-populated structure.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class SetMode(StrEnum):
    """How a write treats intermediate structure that already exists.

    - CREATE_MISSING: Descend through existing mappings and sequences and
      synthesize whatever tail of the path is missing.
    - BOOTSTRAP_ONLY: Only write into an empty document; reaching a populated
      mapping or sequence is an UnexpectedNodeKindError.
    """

    CREATE_MISSING = auto()
    BOOTSTRAP_ONLY = auto()


@dataclass(frozen=True, slots=True)
class NavigatorConfig:
    """Immutable configuration for the path engine.

    Attributes:
        set_mode: How writes treat populated intermediate structure.
        prune_empty: When True, a delete that leaves a mapping or sequence
            empty also removes that container from its parent, cascading
            upwards. Default True.
        max_depth: Upper bound on the number of path tokens accepted by any
            operation. None disables the check.
    """

    set_mode: SetMode = SetMode.CREATE_MISSING
    prune_empty: bool = True
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.set_mode, SetMode):
            msg = f"set_mode must be a SetMode, got {self.set_mode!r}"
            raise ValueError(msg)
        if self.max_depth is not None and self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
