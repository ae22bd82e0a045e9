from __future__ import annotations
import logging
import os
import shutil
import tempfile

import srt # type: ignore

from PySubclean.Helpers import GetInputPath
from PySubclean.SubtitleError import SubtitleError, SubtitleParseError

# Invalid byte sequences are replaced rather than treated as an error
default_encoding = 'utf-8-sig'
output_encoding = 'utf-8'

class SubtitleFile:
    """
    A SubRip file on disk. Read once, then overwritten once with the cleaned content.
    """
    def __init__(self, path : str):
        filepath = GetInputPath(path)
        if not filepath:
            raise SubtitleError("No subtitle file path provided")

        self.path : str = filepath
        self.content : str|None = None
        self.raw : bytes|None = None

    def Load(self) -> str:
        """
        Read the file, coercing invalid UTF-8 sequences to the replacement character
        and line endings to \\n. The bytes on disk are kept for comparison with the output.
        """
        with open(self.path, 'rb') as f:
            self.raw = f.read()

        text = self.raw.decode(default_encoding, errors='replace')
        self.content = text.replace('\r\n', '\n').replace('\r', '\n')

        if '\ufffd' in self.content:
            logging.warning(f"{self.path} contains invalid UTF-8 sequences, which have been replaced")

        return self.content

    def MatchesContent(self, content : str) -> bool:
        """
        True if saving the content would write exactly the bytes already on disk
        """
        return self.raw is not None and content.encode(output_encoding) == self.raw

    def Save(self, content : str) -> None:
        """
        Replace the file content atomically, so a failed write never leaves a partial file
        """
        directory = os.path.dirname(os.path.abspath(self.path))
        fd, temp_path = tempfile.mkstemp(prefix='.subclean-', suffix='.srt', dir=directory)
        try:
            with os.fdopen(fd, 'w', encoding=output_encoding, newline='') as f:
                f.write(content)

            shutil.copymode(self.path, temp_path)
            os.replace(temp_path, self.path)

        except BaseException:
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise

        self.content = content
        self.raw = content.encode(output_encoding)

    def __repr__(self) -> str:
        return f"SubtitleFile({self.path!r})"


def ValidateSubRip(content : str) -> int:
    """
    Check that content parses as SubRip, returning the number of subtitles.

    Raises:
        SubtitleParseError: If the content is not valid SubRip
    """
    try:
        return len(list(srt.parse(content)))

    except srt.SRTParseError as e:
        raise SubtitleParseError("Cleaned content is not valid SubRip", e)
