class SubtitleError(Exception):
    """
    Base class for errors raised while cleaning subtitles
    """
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message : str|None = message
        self.error : Exception|None = error

    def __str__(self) -> str:
        if self.error:
            return f"{self.message} ({str(self.error)})"
        return self.message or super().__str__()

class DenylistError(SubtitleError):
    """
    The denylist could not be loaded. Nothing can be cleaned without it.
    """
    pass

class InvalidPathError(SubtitleError):
    """
    The input path does not exist or is not a SubRip file
    """
    def __init__(self, message : str, path : str|None = None):
        super().__init__(message)
        self.path = path

class SubtitleParseError(SubtitleError):
    """
    Cleaned content could not be parsed as SubRip
    """
    pass
