"""
Exceptions raised by permgroups.

All of them are ValueErrors: they signal that an argument (a permutation, a
point, a generating set, a string) does not describe what the caller claims it
does.
"""


class InvalidPermutation(ValueError):
    pass


class EmptyGeneratorSet(ValueError):
    pass


class PointNotInOrbit(ValueError):
    pass


class ImpossibleImage(ValueError):
    pass


class IncompleteStrongGeneratingSet(ValueError):
    def __init__(self, message, witness=None):
        super().__init__(message)
        self.witness = witness


class ParseError(ValueError):
    """Raised for malformed cycle notation.

    The offending input is kept as `text` and the index of the first bad
    character (if known) as `position`.
    """
    def __init__(self, message, text=None, position=None):
        if position is not None:
            message = f'{message} at position {position} in {text!r}'
        elif text is not None:
            message = f'{message}: {text!r}'
        super().__init__(message)
        self.text = text
        self.position = position


class InvalidCharacterError(ParseError):
    pass


class MissingOpenError(ParseError):
    pass


class StraySeparatorError(ParseError):
    pass


class StrayTerminatorError(ParseError):
    pass


class EmptyCycleError(ParseError):
    pass


class UnterminatedCycleError(ParseError):
    pass
