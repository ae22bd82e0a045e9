import logging
from blinker import Signal
from typing import Protocol


class LoggerProtocol(Protocol):
    """Protocol for objects that can be used as loggers"""
    def error(self, msg : object, *args, **kwargs) -> None: ...
    def info(self, msg : object, *args, **kwargs) -> None: ...


class CleanerEvents:
    """
    Container for blinker signals emitted while cleaning subtitles.

    Subscribe to events to audit rejected blocks or to track progress through a batch.

    Signals:
        block_rejected(sender, rejection):
            Emitted for every block removed by the classifier, with the reasons and original text

        file_processed(sender, path, result):
            Emitted after a file has been cleaned (and written, unless previewing)

        file_failed(sender, path, error):
            Emitted when a file could not be processed
    """
    block_rejected: Signal
    file_processed: Signal
    file_failed: Signal

    def __init__(self):
        self.block_rejected = Signal("cleaner-block-rejected")
        self.file_processed = Signal("cleaner-file-processed")
        self.file_failed = Signal("cleaner-file-failed")

        # Wrapper function to adapt signal kwargs to logger positional args
        self._default_rejection_wrapper = lambda sender, rejection: logging.info(str(rejection))

    def connect_default_loggers(self):
        """
        Log rejected blocks with the root logger.
        """
        self.block_rejected.connect(self._default_rejection_wrapper, weak=False)

    def disconnect_default_loggers(self):
        """
        Disconnect the default logging handlers from the signals.
        """
        self.block_rejected.disconnect(self._default_rejection_wrapper)

    def connect_logger(self, logger : LoggerProtocol):
        """
        Connect a custom logger to report rejected blocks and failed files.

        Args:
            logger: A logger-like object with error and info methods
        """
        def rejection_wrapper(sender, rejection):
            logger.info(str(rejection))

        def file_failed_wrapper(sender, path, error):
            logger.error(f"Failed to process {path}: {error}")

        # Use weak=False to prevent garbage collection of closures
        self.block_rejected.connect(rejection_wrapper, weak=False)
        self.file_failed.connect(file_failed_wrapper, weak=False)
