class PrefnError(Exception):
    """ Base class for all prefn errors"""

    def __init__(self, message: str, source: str = "", position: int | None = None):
        super().__init__(message)
        self.message = message
        self.source = source
        self.position = position


class PrefnEndOfInput(PrefnError):
    """ Raised when the input runs out while a token is still expected"""


class PrefnSyntaxError(PrefnError):
    """ Raised when a character does not fit the grammar at the current point"""


class PrefnUnboundFunction(PrefnError):
    """ Raised when a function is applied before any definition exists"""


class PrefnArithmeticError(PrefnError):
    """ Raised on division by zero"""


class PrefnConfigError(PrefnError):
    """ Raised when an environment setting has an invalid value"""
