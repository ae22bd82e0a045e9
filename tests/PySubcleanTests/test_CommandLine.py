import os
from unittest.mock import patch

from PySubclean.CommandLine import (
    EXIT_CONFIGURATION_ERROR,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    build_options,
    main,
    parse_args,
)
from PySubclean.Helpers.TestCases import TempDirectoryTestCase

from ..TestData.sample_subtitles import dirty_subtitles, dirty_subtitles_cleaned

@patch('PySubclean.CommandLine.configure_logging')
class TestCommandLine(TempDirectoryTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.denylist_path = self.write_file("denylist.txt", "spamsite\n")
        self.subtitle_path = self.write_file(os.path.join("subs", "movie.srt"), dirty_subtitles)

    def test_CleanDirectory(self, _):
        exit_code = main([os.path.join(self.temp_dir, "subs"), '--denylist', self.denylist_path])
        self.assertLoggedEqual("exit code", EXIT_SUCCESS, exit_code)
        self.assertLoggedEqual("cleaned file", dirty_subtitles_cleaned, self.read_file(self.subtitle_path))

    def test_CleanSingleFile(self, _):
        exit_code = main([self.subtitle_path, '--denylist', self.denylist_path])
        self.assertLoggedEqual("exit code", EXIT_SUCCESS, exit_code)
        self.assertLoggedEqual("cleaned file", dirty_subtitles_cleaned, self.read_file(self.subtitle_path))

    def test_Preview(self, _):
        exit_code = main([self.subtitle_path, '--denylist', self.denylist_path, '--preview'])
        self.assertLoggedEqual("exit code", EXIT_SUCCESS, exit_code)
        self.assertLoggedEqual("file unchanged", dirty_subtitles, self.read_file(self.subtitle_path))

    def test_InvalidPaths(self, _):
        invalid_paths = [
            os.path.join(self.temp_dir, "missing"),
            self.denylist_path,
        ]
        for path in invalid_paths:
            with self.subTest(path=path):
                exit_code = main([path, '--denylist', self.denylist_path])
                self.assertLoggedEqual("exit code", EXIT_FAILURE, exit_code, input_value=path)

    def test_MissingDenylist(self, _):
        exit_code = main([self.subtitle_path, '--denylist', os.path.join(self.temp_dir, "missing.txt")])
        self.assertLoggedEqual("exit code", EXIT_CONFIGURATION_ERROR, exit_code)
        self.assertLoggedEqual("file unchanged", dirty_subtitles, self.read_file(self.subtitle_path))

    def test_InvalidMinimumLines(self, _):
        exit_code = main([self.subtitle_path, '--denylist', self.denylist_path, '--min-lines', '-1'])
        self.assertLoggedEqual("exit code", EXIT_CONFIGURATION_ERROR, exit_code)

    def test_BuildOptions(self, _):
        args = parse_args([self.subtitle_path, '--min-lines', '2', '--validate', '--log-file', 'subclean.log'])
        options = build_options(args)
        self.assertLoggedEqual("min_lines_per_block", 2, options.min_lines_per_block)
        self.assertLoggedTrue("validate_output", options.validate_output)
        self.assertLoggedFalse("preview", options.preview)
        self.assertLoggedEqual("log_path", "subclean.log", options.log_path)
