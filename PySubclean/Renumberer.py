import logging

import regex

from PySubclean.SubtitleBlock import IsTimecodeLine, SubtitleBlock

# The index line, possibly preceded by stray, invisible or misread characters such as l2 or I7
leading_index_pattern = regex.compile(r'\A[^\p{Nd}\n]*\p{Nd}+[^\S\n]*$', regex.MULTILINE)

def RenumberBlock(block : SubtitleBlock, number : int) -> SubtitleBlock:
    """
    Replace the block's index line with the given number, or add one if the block starts with a timecode
    """
    text = block.text
    if leading_index_pattern.match(text):
        text = leading_index_pattern.sub(str(number), text, count=1)
    elif IsTimecodeLine(block.lines[0]):
        text = f"{number}\n{text}"
    else:
        logging.debug(f"Block {block.position} does not start with an index or timecode, leaving it unnumbered")

    return SubtitleBlock(block.position, text)

def RenumberBlocks(blocks : list[SubtitleBlock]) -> list[SubtitleBlock]:
    """
    Number blocks sequentially from 1, in their current order
    """
    return [ RenumberBlock(block, number) for number, block in enumerate(blocks, start=1) ]

def ComposeContent(blocks : list[SubtitleBlock]) -> str:
    """
    Join blocks with a blank line and terminate with a single newline
    """
    return '\n\n'.join(block.text.rstrip('\n') for block in blocks) + '\n'
