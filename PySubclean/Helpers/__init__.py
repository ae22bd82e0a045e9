import os

SUBRIP_EXTENSION = '.srt'

def GetInputPath(filepath : str|None) -> str|None:
    """
    Normalize the input file path for cross-platform compatibility.

    Args:
        filepath: Input file path

    Returns:
        str: Normalized path preserving original extension
        None: If filepath is None
    """
    if not filepath:
        return None
    return os.path.normpath(filepath)

def IsSubRipPath(filepath : str) -> bool:
    """
    Check whether a path has the SubRip extension (case-insensitive)
    """
    return os.path.splitext(filepath)[1].lower() == SUBRIP_EXTENSION
