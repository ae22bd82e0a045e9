from PySubclean.Helpers.TestCases import LoggedTestCase
from PySubclean.Renumberer import ComposeContent, RenumberBlock, RenumberBlocks
from PySubclean.SubtitleBlock import SubtitleBlock

class TestRenumberer(LoggedTestCase):
    renumber_cases = [
        ("7\n00:00:01,000 --> 00:00:02,000\nHello", 1, "1\n00:00:01,000 --> 00:00:02,000\nHello"),
        ("123 \n00:00:01,000 --> 00:00:02,000\nHello", 4, "4\n00:00:01,000 --> 00:00:02,000\nHello"),
        ("\ufeff12\n00:00:01,000 --> 00:00:02,000\nHello", 2, "2\n00:00:01,000 --> 00:00:02,000\nHello"),
        ("\u200b9\n00:00:01,000 --> 00:00:02,000\nHello", 3, "3\n00:00:01,000 --> 00:00:02,000\nHello"),
        ("00:00:01,000 --> 00:00:02,000\nHello", 5, "5\n00:00:01,000 --> 00:00:02,000\nHello"),
        ("5\n00:00:01,000 --> 00:00:02,000\n10\n20", 1, "1\n00:00:01,000 --> 00:00:02,000\n10\n20"),
        ("Episode 3\n00:00:01,000 --> 00:00:02,000", 6, "6\n00:00:01,000 --> 00:00:02,000"),
        ("l2\n00:00:01,000 --> 00:00:02,000\nHello", 2, "2\n00:00:01,000 --> 00:00:02,000\nHello"),
        ("I7\n00:00:01,000 --> 00:00:02,000\nHello", 8, "8\n00:00:01,000 --> 00:00:02,000\nHello"),
        ("Scene 3 here\n00:00:01,000 --> 00:00:02,000", 4, "Scene 3 here\n00:00:01,000 --> 00:00:02,000"),
        ("Hello\nWorld", 2, "Hello\nWorld"),
    ]

    def test_RenumberBlock(self):
        for text, number, expected in self.renumber_cases:
            with self.subTest(text=text):
                block = RenumberBlock(SubtitleBlock(9, text), number)
                self.assertLoggedEqual("renumbered", expected, block.text, input_value=repr(text))
                self.assertLoggedEqual("position", 9, block.position)

    def test_RenumberBlocks(self):
        blocks = [
            SubtitleBlock(1, "7\n00:00:01,000 --> 00:00:02,000\nFirst"),
            SubtitleBlock(3, "99\n00:00:03,000 --> 00:00:04,000\nSecond"),
            SubtitleBlock(4, "3\n00:00:05,000 --> 00:00:06,000\nThird"),
        ]
        renumbered = RenumberBlocks(blocks)
        self.assertLoggedSequenceEqual("indices", ["1", "2", "3"], [block.lines[0] for block in renumbered])
        self.assertLoggedSequenceEqual("positions", [1, 3, 4], [block.position for block in renumbered])
        self.assertLoggedSequenceEqual("text", ["First", "Second", "Third"], [block.lines[2] for block in renumbered])

    def test_RenumberBlocksEmpty(self):
        self.assertLoggedSequenceEqual("no blocks", [], RenumberBlocks([]))

    def test_ComposeContent(self):
        blocks = [ SubtitleBlock(1, "1\nA"), SubtitleBlock(2, "2\nB\n") ]
        self.assertLoggedEqual("content", "1\nA\n\n2\nB\n", ComposeContent(blocks))

    def test_ComposeContentSingleBlock(self):
        self.assertLoggedEqual("content", "1\nA\n", ComposeContent([SubtitleBlock(1, "1\nA")]))
