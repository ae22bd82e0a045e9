from __future__ import annotations

import logging
import pathlib

from PySubclean.CleanerEvents import CleanerEvents
from PySubclean.CleanerSettings import CleanerSettings
from PySubclean.Denylist import Denylist, LoadDenylist
from PySubclean.Helpers import SUBRIP_EXTENSION, IsSubRipPath
from PySubclean.Options import Options
from PySubclean.SubtitleCleaner import CleanResult, SubtitleCleaner
from PySubclean.SubtitleError import InvalidPathError, SubtitleError, SubtitleParseError
from PySubclean.SubtitleFile import SubtitleFile, ValidateSubRip

class BatchStatistics:
    """Summary of the batch processing run."""

    def __init__(
        self,
        discovered_files : int = 0,
        processed_files : int = 0,
        unchanged_files : int = 0,
        previewed_files : int = 0,
        failed_files : int = 0,
        rejected_blocks : int = 0,
    ):
        self.discovered_files = discovered_files
        self.processed_files = processed_files
        self.unchanged_files = unchanged_files
        self.previewed_files = previewed_files
        self.failed_files = failed_files
        self.rejected_blocks = rejected_blocks

    def as_message(self) -> str:
        """Return a human readable summary string."""
        message = f"Processed {self.processed_files}/{self.discovered_files} files."
        details = []
        if self.rejected_blocks:
            details.append(f"{self.rejected_blocks} block(s) rejected")
        if self.unchanged_files:
            details.append(f"{self.unchanged_files} unchanged")
        if self.previewed_files:
            details.append(f"{self.previewed_files} previewed")
        if self.failed_files:
            details.append(f"{self.failed_files} failed")

        return f"{message} ({', '.join(details)})" if details else message


class BatchProcessor:
    """
    Clean a single SubRip file or every SubRip file under a directory, one file at a time.

    The denylist is loaded on construction, so a configuration error is raised before any file is touched.
    """
    def __init__(self, options : Options, denylist : Denylist|None = None, events : CleanerEvents|None = None):
        self.options = options
        self.logger = logging.getLogger(__name__)
        self.events = events or CleanerEvents()

        if denylist is None:
            denylist = LoadDenylist(options.denylist_file)

        self.settings = CleanerSettings.FromOptions(options, denylist)
        self.cleaner = SubtitleCleaner(self.settings, self.events)

    def run(self, path : str) -> BatchStatistics:
        """
        Process every file found at the path

        Raises:
            InvalidPathError: If the path does not exist or is a file without the .srt extension
        """
        files = self.DiscoverFiles(path)
        stats = BatchStatistics(discovered_files=len(files))

        if not files:
            self.logger.warning("No %s files found in %s", SUBRIP_EXTENSION, path)

        for file in files:
            self.logger.info("Processing file %s", file)

            try:
                result = self.ProcessFile(file)

            except (SubtitleError, OSError) as exc:
                self.logger.error("Failed to process %s: %s", file, exc)
                self.events.file_failed.send(self, path=file, error=exc)
                stats.failed_files += 1
                continue

            stats.processed_files += 1
            stats.rejected_blocks += result.rejected_count

            if self.options.preview:
                stats.previewed_files += 1
            elif not result.changed:
                stats.unchanged_files += 1

            self.events.file_processed.send(self, path=file, result=result)

        self.logger.info(stats.as_message())
        return stats

    def DiscoverFiles(self, path : str) -> list[pathlib.Path]:
        """
        Return the file itself, or every SubRip file under a directory in sorted order
        """
        root = pathlib.Path(path).expanduser()

        if root.is_dir():
            return sorted(file for file in root.rglob('*') if file.is_file() and IsSubRipPath(file.name))

        if not root.exists():
            raise InvalidPathError(f"The provided path does not exist: {path}", path)

        if not IsSubRipPath(root.name):
            raise InvalidPathError(f"The provided file is not an SRT file: {path}", path)

        return [root]

    def ProcessFile(self, path : pathlib.Path|str) -> CleanResult:
        """
        Clean one file and write it back in place unless previewing
        """
        subtitle_file = SubtitleFile(str(path))
        content = subtitle_file.Load()

        result = self.cleaner.CleanContent(content)

        # A byte order mark, CRLF line endings or invalid bytes are lost in decoding but still need rewriting
        result.changed = not subtitle_file.MatchesContent(result.content)

        self.logger.debug("%s: kept %d block(s), rejected %d", path, result.kept_count, result.rejected_count)

        if self.options.validate_output:
            self._validate(path, result)

        if self.options.preview:
            self.logger.info("Preview mode enabled - skipping save for %s", path)
        elif result.changed:
            subtitle_file.Save(result.content)
        else:
            self.logger.debug("%s is already clean", path)

        return result

    def _validate(self, path : pathlib.Path|str, result : CleanResult) -> None:
        try:
            count = ValidateSubRip(result.content)
            self.logger.debug("%s: %d valid SubRip entries", path, count)

        except SubtitleParseError as exc:
            self.logger.warning("%s: %s", path, exc)
