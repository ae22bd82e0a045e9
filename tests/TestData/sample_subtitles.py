# Content with out of order indices, a spam block and typography to tidy
dirty_subtitles = """7
00:00:01,000 --> 00:00:03,000
Hello  world ...

8
00:00:04,000 --> 00:00:05,000
Subtitles by SpamSite.com

99
00:00:06,000 --> 00:00:08,000
Goodbye--friend
"""

dirty_subtitles_cleaned = """1
00:00:01,000 --> 00:00:03,000
Hello world...

2
00:00:06,000 --> 00:00:08,000
Goodbye—friend
"""

# Blocks that should be rejected for structural reasons
junk_subtitles = """1
00:00:01,000 --> 00:00:02,000
<i>Are you there?</i>

2
00:00:03,000 --> 00:00:04,000

3
00:00:05,000 --> 00:00:06,000
♪ ♪

4
00:00:07,000 --> 00:00:08,000
1984
"""

junk_subtitles_cleaned = """1
00:00:01,000 --> 00:00:02,000
<i>Are you there?</i>

2
00:00:07,000 --> 00:00:08,000
1984
"""

clean_subtitles = """1
00:00:01,000 --> 00:00:02,500
- Who's there?
- It's me... Open up.

2
00:00:03,000 --> 00:00:05,000
♪ La la la ♪

3
00:00:06,000 --> 00:00:07,000
[door opens] Finally, 1,000 years later!
"""
