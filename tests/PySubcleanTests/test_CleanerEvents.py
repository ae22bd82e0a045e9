import logging

from PySubclean.BlockClassifier import REASON_BLACKLIST, BlockRejection
from PySubclean.CleanerEvents import CleanerEvents
from PySubclean.Helpers.TestCases import LoggedTestCase

class TestCleanerEvents(LoggedTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.rejection = BlockRejection(2, [REASON_BLACKLIST], "2\n00:00:01,000 --> 00:00:02,000\nwww.spamsite.com")

    def test_DefaultLoggers(self):
        events = CleanerEvents()
        events.connect_default_loggers()

        with self.assertLogs(level='INFO') as logs:
            events.block_rejected.send(self, rejection=self.rejection)

        self.assertLoggedIn("diagnostic", "REJECTED BLOCK 2 (blacklist):", logs.output[0])

        events.disconnect_default_loggers()
        self.assertLoggedFalse("receivers", bool(events.block_rejected.receivers))

    def test_ConnectLogger(self):
        events = CleanerEvents()
        logger = logging.getLogger("subclean-test")
        events.connect_logger(logger)

        with self.assertLogs(logger, level='INFO') as logs:
            events.block_rejected.send(self, rejection=self.rejection)
            events.file_failed.send(self, path="broken.srt", error=OSError("device not ready"))

        self.assertLoggedEqual("messages", 2, len(logs.records))
        self.assertLoggedIn("rejection", "www.spamsite.com", logs.output[0])
        self.assertLoggedEqual("failure", "Failed to process broken.srt: device not ready", logs.records[1].getMessage())
