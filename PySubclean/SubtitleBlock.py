import regex

# A leading index line, in any script's digits
index_line_pattern = regex.compile(r'\p{N}+')

# HH:MM:SS,mmm --> HH:MM:SS,mmm with optional trailing positioning data
timecode_pattern = regex.compile(r'[0-9]{2}:[0-9]{2}:[0-9]{2}[,.][0-9]{3}\s*-->\s*[0-9]{2}:[0-9]{2}:[0-9]{2}[,.][0-9]{3}')

tag_pattern = regex.compile(r'</?[^>]+>')

def IsTimecodeLine(line : str) -> bool:
    return timecode_pattern.match(line.strip()) is not None

def IsIndexLine(line : str) -> bool:
    return index_line_pattern.fullmatch(line.strip()) is not None

class SubtitleBlock:
    """
    Raw text of a single subtitle cue, as found between blank lines.

    The position is the 1-based location of the block in the original file,
    which is retained through cleaning so diagnostics can refer to it.
    """
    def __init__(self, position : int, text : str):
        self.position : int = position
        self.text : str = text

    @property
    def lines(self) -> list[str]:
        return self.text.split('\n')

    @property
    def linecount(self) -> int:
        return len(self.lines)

    @property
    def payload(self) -> str:
        """
        Dialogue text only, without the index line, timecodes or markup tags
        """
        lines = [ line.strip() for line in self.lines ]

        if lines and IsIndexLine(lines[0]):
            lines = lines[1:]

        lines = [ line for line in lines if not IsTimecodeLine(line) ]

        return tag_pattern.sub('', '\n'.join(lines))

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, SubtitleBlock):
            return False
        return (self.position, self.text) == (other.position, other.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"SubtitleBlock(position={self.position}, text={self.text[:30]!r})"
