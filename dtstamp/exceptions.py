class DtStampException(Exception):
    pass

class FormatStringInvalid(DtStampException, ValueError):
    def __init__(self, which, format, reason):
        self.which = which
        self.format = format
        self.reason = reason
        self.args = (f'The {which} format {format!r} is invalid: {reason}',)

class UnparsableInput(DtStampException, ValueError):
    '''
    None of the parse strategies matched the input. `failures` is a list of
    (strategy, format, ValueError) tuples in the order they were tried.
    '''
    def __init__(self, input, failures):
        self.input = input
        self.failures = failures
        summary = '\n'.join(
            f'    {strategy} {format!r}: {exc}'
            for (strategy, format, exc) in failures
        )
        self.args = (f'{input!r} did not match any of the configured formats:\n{summary}',)

class NonexistentLocalTime(DtStampException, ValueError):
    '''
    The wall-clock time falls into a gap where the clocks jump forward, so
    there is no instant that it could refer to.
    '''
    def __init__(self, naive, zone):
        self.naive = naive
        self.zone = zone
        self.args = (f'{naive.isoformat(sep=" ")} does not exist in {zone}, the clocks skip over it.',)

class InvalidStyle(DtStampException, ValueError):
    def __init__(self, token, choices):
        self.token = token
        self.choices = choices
        self.args = (f'{token!r} is not a style. Expected one of: {", ".join(choices)}',)

class ClipboardUnavailable(DtStampException):
    pass

class InstantOutOfRange(DtStampException, ValueError):
    '''
    The wall-clock time is so close to year 1 or year 9999 that moving it to
    UTC leaves the range of datetime.
    '''
    def __init__(self, naive, zone):
        self.naive = naive
        self.zone = zone
        self.args = (f'{naive.isoformat(sep=" ")} in {zone} is outside the range of dates that can be converted.',)
