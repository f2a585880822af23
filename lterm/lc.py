"""Runs the term engine demonstration: builds a handful of terms with apply and abstract and prints their canonical
renderings. Errors are reported on standard error as a single 'Error: ' line. Called from the lterm executable script.
"""

import argparse
import sys

from lterm.lang.error import ErrorHandler
from lterm.lang.session import Session
from lterm.pure.lexical import variable
from lterm.term import abstract, apply

# some variables
x = "x"
y = "y"
z = "z"
w = "w"
f = "f"
g = "g"
h = "h"

X_BOUND = variable(x, free=False)


def demonstration(sess):
    """Adds the demonstration statements to sess."""
    sess.add("nested application", lambda: apply(x, y, apply(z, w)))
    sess.add("application", lambda: apply(f, x))
    sess.add("abstraction over argument", lambda: abstract(x, apply(f, x)))
    sess.add("abstraction over function", lambda: abstract(f, apply(f, x)))
    sess.add("nested abstractions", lambda: apply(x, abstract(f, abstract(x, apply(f, x, y))), z, w))
    return sess


def main(argv=None):
    """Runs lterm demonstration. Called from lterm executable script."""
    parser = argparse.ArgumentParser(description="Build and render untyped lambda calculus terms.")
    parser.add_argument("--tree", help="print each term as a tree instead of a single line", action="store_true")
    parser.add_argument("--no-fatal", help="do not exit with status 1 on error", action="store_true")
    args = parser.parse_args(argv)

    sess = Session(ErrorHandler(fatal=not args.no_fatal), tree=args.tree)
    demonstration(sess).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
