import os
import shutil
import tempfile
import unittest
from collections.abc import Callable
from typing import Any

from PySubclean.CleanerEvents import CleanerEvents
from PySubclean.CleanerSettings import CleanerSettings
from PySubclean.Denylist import Denylist
from PySubclean.Helpers.Tests import log_input_expected_error, log_input_expected_result, log_test_name
from PySubclean.SubtitleCleaner import SubtitleCleaner

class LoggedTestCase(unittest.TestCase):
    """
    TestCase that logs the name of each test, and the inputs and results of logged assertions
    """
    @classmethod
    def setUpClass(cls) -> None:
        super().setUpClass()
        log_test_name(f"{cls.__name__}")

    def setUp(self) -> None:
        super().setUp()
        log_test_name(self._testMethodName)

    def assertLoggedEqual(self, name : str, expected : Any, result : Any, input_value : Any = None, msg : str|None = None) -> None:
        log_input_expected_result(input_value if input_value is not None else name, expected, result)
        self.assertEqual(expected, result, msg or name)

    def assertLoggedSequenceEqual(self, name : str, expected : Any, result : Any, input_value : Any = None, msg : str|None = None) -> None:
        log_input_expected_result(input_value if input_value is not None else name, expected, result)
        self.assertSequenceEqual(expected, result, msg or name)

    def assertLoggedTrue(self, name : str, result : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else name, True, result)
        self.assertTrue(result, name)

    def assertLoggedFalse(self, name : str, result : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else name, False, result)
        self.assertFalse(result, name)

    def assertLoggedIn(self, name : str, member : Any, container : Any) -> None:
        log_input_expected_result(name, member, container)
        self.assertIn(member, container, name)

    def assertLoggedNotIn(self, name : str, member : Any, container : Any) -> None:
        log_input_expected_result(name, f"not {member}", container)
        self.assertNotIn(member, container, name)

    def assertLoggedIs(self, name : str, expected : Any, result : Any) -> None:
        log_input_expected_result(name, expected, result)
        self.assertIs(expected, result, name)

    def assertLoggedIsNone(self, name : str, result : Any) -> None:
        log_input_expected_result(name, None, result)
        self.assertIsNone(result, name)

    def assertLoggedIsInstance(self, name : str, obj : Any, cls : type) -> None:
        log_input_expected_result(name, cls.__name__, type(obj).__name__)
        self.assertIsInstance(obj, cls, name)

    def assertLoggedRaises(self, name : str, expected_error : type[BaseException], function : Callable[..., Any], *args, **kwargs) -> BaseException:
        with self.assertRaises(expected_error) as context:
            function(*args, **kwargs)
        log_input_expected_error(name, expected_error, context.exception)
        return context.exception


class CleanerTestCase(LoggedTestCase):
    """
    TestCase with a small denylist and a cleaner that records rejected blocks
    """
    denylist_entries = ["spamsite", "opensubtitles", "subtitles by"]

    def setUp(self) -> None:
        super().setUp()
        self.denylist = Denylist(self.denylist_entries)
        self.settings = CleanerSettings(denylist=self.denylist)
        self.events = CleanerEvents()
        self.rejections : list = []
        self.events.block_rejected.connect(self._on_block_rejected)
        self.cleaner = SubtitleCleaner(self.settings, self.events)

    def tearDown(self) -> None:
        self.events.block_rejected.disconnect(self._on_block_rejected)
        super().tearDown()

    def _on_block_rejected(self, sender, rejection) -> None:
        self.rejections.append(rejection)


class TempDirectoryTestCase(LoggedTestCase):
    """
    TestCase with a temporary directory that is removed after each test
    """
    def setUp(self) -> None:
        super().setUp()
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self) -> None:
        shutil.rmtree(self.temp_dir, ignore_errors=True)
        super().tearDown()

    def write_file(self, relative_path : str, content : str|bytes) -> str:
        path = os.path.join(self.temp_dir, relative_path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        if isinstance(content, bytes):
            with open(path, 'wb') as f:
                f.write(content)
        else:
            with open(path, 'w', encoding='utf-8', newline='') as f:
                f.write(content)
        return path

    def read_file(self, path : str) -> str:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()


def BuildBlock(index : int|str, start : str, end : str, *lines : str) -> str:
    """
    Build the text of one SubRip block
    """
    return '\n'.join([str(index), f"{start} --> {end}", *lines])


def BuildSubRip(*blocks : str) -> str:
    """
    Join block texts into SubRip file content
    """
    return '\n\n'.join(blocks) + '\n'
