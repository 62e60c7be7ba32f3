"""
Error taxonomy.

Command handlers raise these; the router turns them into "ERROR: ..." results.
FormatError is the one raised for a corrupt dictionary file.
"""


class WordbookError(Exception):
    """Base class for every recoverable command failure."""


class NoOpenDictionary(WordbookError):
    def __init__(self, message: str = "No dictionary is open!"):
        super().__init__(message)


class MalformedArgument(WordbookError):
    pass


class InvalidDate(MalformedArgument):
    pass


class NotFound(WordbookError):
    def __init__(self, word: str):
        self.word = word
        super().__init__(f'No definition exists for "{word}"!')


class IOFailure(WordbookError):
    pass


class InvalidCommand(WordbookError):
    def __init__(self, keyword: str = ""):
        self.keyword = keyword
        super().__init__("Invalid command!")


class InvalidVersionArgument(WordbookError):
    def __init__(self, arg: str):
        self.arg = arg
        super().__init__(f'Invalid argument "{arg}"! Expected "new" or "current"')


class StatisticsUnavailable(WordbookError):
    pass


class FormatError(WordbookError):
    """The file exists but does not hold a valid dictionary."""
