from __future__ import annotations

from PySubclean.BlockClassifier import BlockClassifier, BlockRejection
from PySubclean.BlockSplitter import SplitBlocks
from PySubclean.CleanerEvents import CleanerEvents
from PySubclean.CleanerSettings import CleanerSettings
from PySubclean.Renumberer import ComposeContent, RenumberBlocks
from PySubclean.SubtitleBlock import SubtitleBlock
from PySubclean.TextNormalizer import NormalizeBlock

class CleanResult:
    """
    Outcome of cleaning the content of one subtitle file
    """
    def __init__(self, original : str, content : str, blocks : list[SubtitleBlock], rejections : list[BlockRejection]):
        self.original : str = original
        self.content : str = content
        self.blocks : list[SubtitleBlock] = blocks
        self.rejections : list[BlockRejection] = rejections
        # Updated by the caller when the original came from a file whose bytes differ from the decoded text
        self.changed : bool = content != original

    @property
    def kept_count(self) -> int:
        return len(self.blocks)

    @property
    def rejected_count(self) -> int:
        return len(self.rejections)

    def __repr__(self) -> str:
        return f"CleanResult(kept={self.kept_count}, rejected={self.rejected_count}, changed={self.changed})"


class SubtitleCleaner:
    """
    Splits content into blocks, removes unwanted blocks, normalizes the text of the rest and renumbers them
    """
    def __init__(self, settings : CleanerSettings, events : CleanerEvents|None = None):
        self.settings = settings
        self.events = events or CleanerEvents()
        self.classifier = BlockClassifier(settings, self.events)

    def CleanContent(self, content : str) -> CleanResult:
        blocks = SplitBlocks(content)

        kept, rejections = self.classifier.FilterBlocks(blocks)

        normalized = [ NormalizeBlock(block) for block in kept ]

        renumbered = RenumberBlocks(normalized)

        return CleanResult(content, ComposeContent(renumbered), renumbered, rejections)
