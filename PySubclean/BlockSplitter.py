import regex

from PySubclean.SubtitleBlock import SubtitleBlock

# A run of whitespace containing at least two newlines
block_separator = regex.compile(r'\s*\n\s*\n+\s*')

def PrepareContent(content : str) -> str:
    """
    Trim leading and trailing whitespace from file content
    """
    return content.strip()

def SplitBlocks(content : str) -> list[SubtitleBlock]:
    """
    Split file content into blocks on blank lines, preserving order.
    """
    content = PrepareContent(content)
    if not content:
        return []

    texts = [ text for text in block_separator.split(content) if text.strip() ]

    return [ SubtitleBlock(position, text) for position, text in enumerate(texts, start=1) ]
