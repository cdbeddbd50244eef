class Pptx2TextError(Exception):
    """Base class for all errors raised while converting a presentation."""

    def __init__(self, message: str = None, *, cause: Exception = None):
        if message is None:
            message = "Error when extracting text from presentation"
        super().__init__(message)
        # Optional chaining for debugging
        self.__cause__ = cause


class ArchiveOpenError(Pptx2TextError):
    """Raised when the input is not a readable zip archive."""

    def __init__(self, path: str, message: str = None, *, cause: Exception = None):
        self.path = path
        if message is None:
            message = f"Cannot open presentation archive: {path}"
            if cause is not None:
                message = f"{message} ({cause})"
        super().__init__(message, cause=cause)


class MemberNotFoundError(Pptx2TextError):
    """Raised when an archive has no member with the requested name."""

    def __init__(self, name: str, message: str = None):
        self.name = name
        if message is None:
            message = f"Archive member not present: {name}"
        super().__init__(message)


class ArchiveReadError(Pptx2TextError):
    """Raised when an archive member exists but cannot be decompressed."""

    def __init__(self, name: str, message: str = None, *, cause: Exception = None):
        self.name = name
        if message is None:
            message = f"Cannot read archive member {name}"
            if cause is not None:
                message = f"{message} ({cause})"
        super().__init__(message, cause=cause)


class SlideParseError(Pptx2TextError):
    """Raised when slide XML is malformed or cannot be decoded."""

    def __init__(self, message: str = None, *, cause: Exception = None):
        if message is None:
            message = "Error when parsing slide XML"
            if cause is not None:
                message = f"{message} ({cause})"
        super().__init__(message, cause=cause)


class OutputWriteError(Pptx2TextError):
    """Raised when the extracted text cannot be written to its destination."""

    def __init__(self, path: str, message: str = None, *, cause: Exception = None):
        self.path = path
        if message is None:
            message = f"Cannot write output file: {path}"
            if cause is not None:
                message = f"{message} ({cause})"
        super().__init__(message, cause=cause)
