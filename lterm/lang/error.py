"""Error handling for the term engine. Only TermExceptions should be encountered while building terms: if another type
of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class TermException(Exception):
    """Templates an error message so that it can be used to throw a term engine error. exprs fill the '{}' slots of
    msg, and exprs[0] should be the offending expr that caused the error.
    """

    def __init__(self, msg, exprs=None, internal=False):
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        self.msg = msg.format(*exprs)
        self.expr = exprs[0]
        self.internal = internal

        super().__init__(self.msg)


class ArityError(TermException):
    """apply was given fewer than two terms."""

    def __init__(self, args):
        self.args_given = len(args)
        super().__init__("apply requires at least two arguments", [str(arg) for arg in args] or None)


class SubstitutionError(TermException):
    """Substitution was asked to rename a free variable into a different free variable."""

    def __init__(self, replace, substitute):
        self.replace = replace
        self.substitute = substitute
        super().__init__("Cannot substitute a free variable with another free variable", [str(replace), str(substitute)])


class ErrorHandler:
    """Context manager that suppresses term engine errors and reports them as a single 'Error: ' line."""
    ERROR = "red"
    PREFIX = "Error: "

    def __init__(self, fatal=True, stream=None):
        self.fatal = fatal
        self.stream = stream
        self.errors = []

    def throw(self, error):
        """Prints error, which must be a TermException, to self.stream. Exits with status 1 if self.fatal."""
        error_msg = colored(ErrorHandler.PREFIX, ErrorHandler.ERROR, attrs=["bold"])
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])
        error_msg += error.msg

        print(error_msg, file=self.stream if self.stream is not None else sys.stderr)
        self.errors.append(error)

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(TermException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(TermException("term is too deep to process (maximum recursion depth exceeded)"))
        elif exc_type is not None and issubclass(exc_type, TermException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(TermException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
