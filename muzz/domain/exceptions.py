class MuzzException(Exception):
    """
    Base exception for all calculator errors.
    """


class UsageError(MuzzException):
    """
    Raised when the command line has the wrong number of arguments.
    """


class ParseError(MuzzException, ValueError):
    """
    Raised when a supplied argument is not a valid finite number.
    """


class DomainError(MuzzException, ArithmeticError):
    """
    Raised when a formula would divide by zero, take the square root
    of a negative number or otherwise produce a non-finite result.
    """
