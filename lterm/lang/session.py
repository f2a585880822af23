"""Session control for the term engine. A session is an ordered list of term-building statements that are run,
printed, and kept for inspection, all under the session's error handler.
"""


class Session:
    """Governs a term-building session."""

    def __init__(self, error_handler, tree=False, stream=None):
        self.error_handler = error_handler
        self.tree = tree        # whether results are printed as display() trees, headed by their labels
        self.stream = stream    # where results are printed (stdout if None)

        self.to_exec = []  # list of (label, build) statements to execute
        self.results = []  # LambdaTerms produced so far

    def add(self, label, build):
        """Adds a statement to the session. build is a zero-argument callable returning a LambdaTerm, and is not
        called until run.
        """
        self.to_exec.append((label, build))

    def run(self):
        """Runs this session's statements in order, printing each result. The first error stops the run and is
        reported by the error handler; statements after it are not executed.
        """
        with self.error_handler:
            while self.to_exec:
                label, build = self.to_exec.pop(0)
                term = build()

                print(f";; {label}\n{term.display()}" if self.tree else term.to_string(), file=self.stream)
                self.results.append(term)

    def pop(self):
        """Removes the last result and returns its rendering."""
        return self.results.pop().to_string()
