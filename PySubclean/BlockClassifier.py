from __future__ import annotations

import regex

from PySubclean.CleanerEvents import CleanerEvents
from PySubclean.CleanerSettings import CleanerSettings
from PySubclean.SubtitleBlock import SubtitleBlock

REASON_BLACKLIST = "blacklist"
REASON_TOO_FEW_LINES = "too_few_lines"
REASON_NO_LETTERS_OR_DIGITS = "no_letters_or_digits_in_text"

# Letters, decimal digits or letter-like numerals in any script
letter_or_digit_pattern = regex.compile(r'[\p{L}\p{Nd}\p{Nl}]')

diagnostic_fence = "==============="

class BlockRejection:
    """
    Record of a block removed by the classifier
    """
    def __init__(self, position : int, reasons : list[str], text : str):
        self.position : int = position
        self.reasons : list[str] = reasons
        self.text : str = text

    def __str__(self) -> str:
        return f"REJECTED BLOCK {self.position} ({', '.join(self.reasons)}):\n{diagnostic_fence}\n{self.text}\n{diagnostic_fence}\n"

    def __repr__(self) -> str:
        return f"BlockRejection(position={self.position}, reasons={self.reasons})"


class BlockClassifier:
    """
    Decides which blocks to keep.

    A block is rejected if it contains denylisted text, has too few lines to be a valid cue,
    or has no letters or digits once the index, timecode and markup are removed.
    """
    def __init__(self, settings : CleanerSettings, events : CleanerEvents|None = None):
        self.settings = settings
        self.events = events or CleanerEvents()

    def ContainsDenylistedText(self, block : SubtitleBlock) -> bool:
        return self.settings.denylist.Matches(block.text)

    def HasTooFewLines(self, block : SubtitleBlock) -> bool:
        return block.linecount < self.settings.min_lines_per_block

    def HasNoLettersOrDigits(self, block : SubtitleBlock) -> bool:
        return letter_or_digit_pattern.search(block.payload) is None

    def GetRejectionReasons(self, block : SubtitleBlock) -> list[str]:
        """
        Evaluate every rejection predicate, returning the names of those that apply
        """
        reasons = []
        if self.ContainsDenylistedText(block):
            reasons.append(REASON_BLACKLIST)
        if self.HasTooFewLines(block):
            reasons.append(REASON_TOO_FEW_LINES)
        if self.HasNoLettersOrDigits(block):
            reasons.append(REASON_NO_LETTERS_OR_DIGITS)
        return reasons

    def FilterBlocks(self, blocks : list[SubtitleBlock]) -> tuple[list[SubtitleBlock], list[BlockRejection]]:
        """
        Split blocks into those to keep and rejections, preserving relative order.
        Each rejection is announced via the block_rejected event.
        """
        kept : list[SubtitleBlock] = []
        rejections : list[BlockRejection] = []

        for block in blocks:
            reasons = self.GetRejectionReasons(block)
            if not reasons:
                kept.append(block)
                continue

            rejection = BlockRejection(block.position, reasons, block.text)
            rejections.append(rejection)
            self.events.block_rejected.send(self, rejection=rejection)

        return kept, rejections
