from __future__ import annotations
from dataclasses import dataclass, field

from PySubclean.Denylist import Denylist
from PySubclean.Options import MIN_LINES_PER_BLOCK, Options

@dataclass(frozen=True)
class CleanerSettings:
    """
    Immutable configuration for the cleaning pipeline
    """
    denylist : Denylist = field(default_factory=Denylist)
    min_lines_per_block : int = MIN_LINES_PER_BLOCK

    def __post_init__(self):
        if self.min_lines_per_block < 0:
            raise ValueError(f"min_lines_per_block must not be negative: {self.min_lines_per_block}")

    @classmethod
    def FromOptions(cls, options : Options, denylist : Denylist) -> CleanerSettings:
        return cls(denylist=denylist, min_lines_per_block=options.min_lines_per_block)
