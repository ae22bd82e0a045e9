"""
Typography rules applied to every block that survives classification.

Each rule is a pure function from text to text. NORMALIZATION_RULES lists them in the
order they must run: later rules assume the output of earlier ones, e.g. ellipsis spacing
only sees three-dot runs after double periods have been expanded and long runs collapsed.
The whole list is repeated until the text is stable, so normalized text is left unchanged.

Character classes are Unicode-aware, since subtitles may be in any script.
"""
import logging
from collections.abc import Callable

import regex

from PySubclean.SubtitleBlock import SubtitleBlock

MOJIBAKE_APOSTROPHE = 'â€™'     # UTF-8 right single quote decoded as cp1252
CURSIVE_APOSTROPHES = '’‘'
CURSIVE_QUOTES = '“”'
PARAGRAPH_MARK = '¶'
MUSIC_NOTE = '♪'
DASH = '-'
EM_DASH = '—'
ELLIPSIS = '…'

# No-break space, the typographic spaces, narrow no-break space and medium mathematical space
variant_space_pattern = regex.compile('[\u00a0\u2000-\u200a\u202f\u205f]')

music_note_between_text = regex.compile(rf'(?<=\S){MUSIC_NOTE}(?=\S)')
music_note_after_text = regex.compile(rf'(?<!\s){MUSIC_NOTE}')
music_note_before_text = regex.compile(rf'{MUSIC_NOTE}(?!\s)')
space_between_music_notes = regex.compile(rf'(?<={MUSIC_NOTE})\s+(?={MUSIC_NOTE})')
space_run = regex.compile(r' {2,}')

# A trailing > means this is part of an arrow or tag, e.g. -->
double_dash = regex.compile(r'--(?!>)')
dash_at_line_start = regex.compile(rf'^{DASH}', regex.MULTILINE)
em_dash_at_line_start = regex.compile(rf'^{EM_DASH}', regex.MULTILINE)
em_dash_at_line_end = regex.compile(rf'{EM_DASH}$', regex.MULTILINE)

space_inside_brackets = regex.compile(r'(?<=[(\{\[])\s+|\s+(?=[)\}\]])')

ellipsis_at_line_end = regex.compile(rf'{ELLIPSIS}$', regex.MULTILINE)
excess_periods = regex.compile(r'\.{4,}')
ellipsis_before_word = regex.compile(rf'(\.\.\.|{ELLIPSIS})(?=[\p{{L}}\p{{Nd}}\p{{Nl}}\p{{Ps}}\p{{Pi}}])')
ellipsis_before_em_dash = regex.compile(rf'(\.\.\.|{ELLIPSIS})(?={EM_DASH})')

font_tag = regex.compile(r'<font[^>]*>|</font>', regex.IGNORECASE)

# Skip words containing a further period, which are more likely a version number or domain
period_before_capital = regex.compile(r'\.(?=\p{Lu}(?!\w*\.\w*))')
question_or_exclamation_before_word = regex.compile(r'([?!])(?=[\p{L}\p{Nd}])')
# Three digits after a comma are probably a thousands separator
comma_before_word = regex.compile(r',(?=\p{L}|(?!\d{3})\d)')

square_bracket_after_text = regex.compile(r'(?<![\s\[])\[(.*?)\]')
square_bracket_before_text = regex.compile(r'\](?=\S)')

space_inside_tag = regex.compile(r'(<\w+>)[^\S\n]+|[^\S\n]+(</\w+>)')
adjacent_tags = regex.compile(r'>[^\S\n]*<')


def _strip_lines(text : str, strip : Callable[[str], str]) -> str:
    return '\n'.join(strip(line) for line in text.split('\n'))


def SubstituteCharacters(text : str) -> str:
    """
    Replace mis-encoded and cursive apostrophes/quotes, variant spaces and paragraph marks
    """
    text = text.replace(MOJIBAKE_APOSTROPHE, "'")
    for apostrophe in CURSIVE_APOSTROPHES:
        text = text.replace(apostrophe, "'")
    for quote in CURSIVE_QUOTES:
        text = text.replace(quote, '"')
    text = variant_space_pattern.sub(' ', text)
    # Both glyphs are used to mark music
    return text.replace(PARAGRAPH_MARK, MUSIC_NOTE)


def SpaceMusicNotes(text : str) -> str:
    """
    Surround music notes with single spaces, keeping runs of notes together
    """
    text = music_note_between_text.sub(f' {MUSIC_NOTE} ', text)
    text = music_note_after_text.sub(f' {MUSIC_NOTE}', text)
    text = music_note_before_text.sub(f'{MUSIC_NOTE} ', text)
    text = space_run.sub(' ', text)
    return space_between_music_notes.sub('', text)


def NormalizeDashes(text : str) -> str:
    """
    Convert double dashes to em dashes and space dashes at the edges of lines
    """
    text = double_dash.sub(EM_DASH, text)
    text = dash_at_line_start.sub(f'{DASH} ', text)
    text = em_dash_at_line_start.sub(f'{EM_DASH} ', text)
    return em_dash_at_line_end.sub(f' {EM_DASH}', text)


def TightenPunctuation(text : str) -> str:
    """
    Remove spaces before punctuation and just inside brackets
    """
    for mark in '.:;?!':
        text = text.replace(f' {mark}', mark)
    return space_inside_brackets.sub('', text)


def CompressWhitespace(text : str) -> str:
    text = space_run.sub(' ', text)
    return _strip_lines(text, str.rstrip)


def NormalizeEllipses(text : str) -> str:
    """
    Use three periods for ellipses, followed by a space when they run into a word
    """
    text = ellipsis_at_line_end.sub('...', text)
    text = text.replace('..', '...')
    text = excess_periods.sub('...', text)
    text = ellipsis_before_word.sub(r'\1 ', text)
    return ellipsis_before_em_dash.sub(r'\1 ', text)


def RemoveFontTags(text : str) -> str:
    return font_tag.sub('', text)


def SpaceSentenceBoundaries(text : str) -> str:
    """
    Add missing spaces after sentence punctuation and commas
    """
    text = period_before_capital.sub('. ', text)
    text = question_or_exclamation_before_word.sub(r'\1 ', text)
    return comma_before_word.sub(', ', text)


def SpaceSquareBrackets(text : str) -> str:
    text = square_bracket_after_text.sub(r' [\1]', text)
    return square_bracket_before_text.sub('] ', text)


def SpaceInlineTags(text : str) -> str:
    """
    No spaces just inside a tag pair, a single space between adjacent tags
    """
    text = space_inside_tag.sub(r'\1\2', text)
    return adjacent_tags.sub('> <', text)


def TrimLines(text : str) -> str:
    return _strip_lines(text, str.strip)


NORMALIZATION_RULES : list[Callable[[str], str]] = [
    SubstituteCharacters,
    SpaceMusicNotes,
    NormalizeDashes,
    TightenPunctuation,
    CompressWhitespace,
    NormalizeEllipses,
    RemoveFontTags,
    SpaceSentenceBoundaries,
    SpaceSquareBrackets,
    SpaceInlineTags,
    TrimLines,
]


# A rule can leave text that an earlier rule would rewrite, e.g. removing a font tag can leave a double space
MAX_NORMALIZATION_PASSES = 5

def ApplyRules(text : str) -> str:
    """
    Apply every normalization rule once, in order
    """
    for rule in NORMALIZATION_RULES:
        text = rule(text)
    return text


def NormalizeText(text : str) -> str:
    """
    Apply the normalization rules repeatedly until the text no longer changes
    """
    for _ in range(MAX_NORMALIZATION_PASSES):
        normalized = ApplyRules(text)
        if normalized == text:
            return text
        text = normalized

    logging.debug(f"Text still changing after {MAX_NORMALIZATION_PASSES} normalization passes: {text!r}")
    return text


def NormalizeBlock(block : SubtitleBlock) -> SubtitleBlock:
    return SubtitleBlock(block.position, NormalizeText(block.text))
