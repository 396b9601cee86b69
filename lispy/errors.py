
class LispyError(Exception):
    """ Base class for all host-level Lispy errors"""
    pass

class LispySyntaxError(LispyError):
    """ Raised by the reader when source text does not parse"""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self):
        return f"<stdin>:{self.line}:{self.column}: error: {self.args[0]}"

class LispyConfigError(LispyError):
    """ Raised when a setting read from the environment is invalid"""

# Errors raised while evaluating Lispy code are not exceptions: they are
# LispError values (see lispy.types.values) returned up the call chain.
