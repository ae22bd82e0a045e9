from __future__ import annotations
from collections.abc import Iterable, Iterator
import logging
import os

from PySubclean.Helpers.Resources import GetResourcePath
from PySubclean.SubtitleError import DenylistError

default_denylist_file = "denylist.txt"

class Denylist:
    """
    Immutable, ordered set of lowercase substrings that mark a block as spam.

    Matching is case-insensitive substring containment against the whole block text.
    """
    def __init__(self, entries : Iterable[str] = ()):
        unique : dict[str, None] = {}
        for entry in entries:
            entry = entry.rstrip('\r\n').lower()
            # An empty entry would match every block
            if entry.strip():
                unique[entry] = None

        self._entries : tuple[str, ...] = tuple(unique)

    @property
    def entries(self) -> tuple[str, ...]:
        return self._entries

    def FindMatch(self, text : str) -> str|None:
        """
        Return the first entry contained in the text, if any
        """
        lowered = text.lower()
        return next((entry for entry in self._entries if entry in lowered), None)

    def Matches(self, text : str) -> bool:
        return self.FindMatch(text) is not None

    def __contains__(self, entry : object) -> bool:
        return isinstance(entry, str) and entry.lower() in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Denylist({len(self._entries)} entries)"


def GetDefaultDenylistPath() -> str:
    """
    Path of the denylist shipped alongside the package
    """
    return GetResourcePath(default_denylist_file)


def LoadDenylist(filepath : str|None = None) -> Denylist:
    """
    Load a denylist file with one substring per line.

    Uses the packaged denylist when no path is given.
    Any failure is a configuration error: nothing should be cleaned without the denylist.
    """
    filepath = filepath or GetDefaultDenylistPath()

    if not os.path.isfile(filepath):
        raise DenylistError(f"Could not find the denylist file: {filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            denylist = Denylist(f.readlines())

    except (OSError, UnicodeDecodeError) as e:
        raise DenylistError(f"Unable to read the denylist file: {filepath}", e)

    logging.debug(f"Loaded {len(denylist)} denylist entries from {filepath}")
    return denylist
