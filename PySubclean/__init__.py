"""
PySubclean - SubRip subtitle cleaning library

Removes advertising and junk blocks from .srt files, tidies their typography
and renumbers the remaining blocks.

Basic Usage
-----------

# Configure options
opts = init_options(denylist_file="denylist.txt")

# Clean subtitle content held in memory
cleaner = init_cleaner(opts)
result = cleaner.CleanContent(content)
print(result.content)

# Or clean a file or a directory of files in place
processor = init_batch_processor(opts)
stats = processor.run("path/to/subtitles")
"""
from __future__ import annotations

from PySubclean.BatchProcessor import BatchProcessor, BatchStatistics
from PySubclean.BlockClassifier import BlockClassifier, BlockRejection
from PySubclean.CleanerEvents import CleanerEvents
from PySubclean.CleanerSettings import CleanerSettings
from PySubclean.Denylist import Denylist, LoadDenylist
from PySubclean.Options import Options
from PySubclean.SettingsType import SettingType, SettingsType
from PySubclean.SubtitleBlock import SubtitleBlock
from PySubclean.SubtitleCleaner import CleanResult, SubtitleCleaner
from PySubclean.SubtitleError import SubtitleError, DenylistError, InvalidPathError, SubtitleParseError
from PySubclean.TextNormalizer import NormalizeText
from PySubclean.version import __version__


def init_options(**settings: SettingType) -> Options:
    """
    Create and return an :class:`Options` instance.

    Parameters
    ----------
    **settings : SettingType
        denylist_file = "denylist.txt",
        min_lines_per_block = 3,
        preview = False,
        validate_output = False

        Options that are not specified are taken from the environment or assigned default values.
    """
    return Options(SettingsType(settings))


def init_cleaner(options : Options|SettingsType|None = None, *, denylist : Denylist|None = None, events : CleanerEvents|None = None) -> SubtitleCleaner:
    """
    Create a :class:`SubtitleCleaner` for cleaning subtitle content.

    Parameters
    ----------
    options : Options or SettingsType, optional
        Settings for the cleaner. Defaults are used if not provided.

    denylist : Denylist, optional
        Denylist to use instead of loading the configured denylist file.

    events : CleanerEvents, optional
        Signals to emit rejected block notifications on.

    Raises
    ------
    DenylistError
        If the denylist file cannot be loaded.
    """
    options = options if isinstance(options, Options) else Options(options)
    if denylist is None:
        denylist = LoadDenylist(options.denylist_file)

    return SubtitleCleaner(CleanerSettings.FromOptions(options, denylist), events)


def init_batch_processor(options : Options|SettingsType|None = None, *, denylist : Denylist|None = None, events : CleanerEvents|None = None) -> BatchProcessor:
    """
    Create a :class:`BatchProcessor` for cleaning files in place.

    Raises
    ------
    DenylistError
        If the denylist file cannot be loaded.
    """
    options = options if isinstance(options, Options) else Options(options)
    return BatchProcessor(options, denylist=denylist, events=events)


__all__ = [
    '__version__',
    'init_options',
    'init_cleaner',
    'init_batch_processor',
    'BatchProcessor',
    'BatchStatistics',
    'BlockClassifier',
    'BlockRejection',
    'CleanerEvents',
    'CleanerSettings',
    'CleanResult',
    'Denylist',
    'LoadDenylist',
    'NormalizeText',
    'Options',
    'SettingsType',
    'SubtitleBlock',
    'SubtitleCleaner',
    'SubtitleError',
    'DenylistError',
    'InvalidPathError',
    'SubtitleParseError',
]
