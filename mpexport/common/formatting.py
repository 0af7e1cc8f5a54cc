#  ___________________________________________________________________________
#
#  mpexport: LP and MPS writers for linear and mixed-integer models
#  Copyright (c) 2008-2025
#  National Technology and Engineering Solutions of Sandia, LLC
#  Under the terms of Contract DE-NA0003525 with National Technology and
#  Engineering Solutions of Sandia, LLC, the U.S. Government retains certain
#  rights in this software.
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

from io import StringIO


class LineBreaker(object):
    """Accumulate tokens into word-wrapped text.

    Lines are broken so that:

    - tokens given to :py:meth:`append` are never split, and
    - no line grows past ``max_line_size`` characters, unless a single
      token is itself longer than that (in which case it is placed on
      its own, unsplit line).

    Each break is written as a newline followed by a single space, which
    is the continuation convention of free-form LP files.

    Parameters
    ----------
    max_line_size: int
        The maximum number of characters on a line

    """

    def __init__(self, max_line_size):
        self.max_line_size = max_line_size
        self.line_size = 0
        self._output = StringIO()

    def append(self, token):
        # No break on an empty line, so an over-long first token does not
        # leave an empty line before it
        if self.line_size and self.line_size + len(token) > self.max_line_size:
            self._output.write("\n ")
            self.line_size = len(token)
        else:
            self.line_size += len(token)
        self._output.write(token)

    def would_fit(self, token):
        """Return True if `token` fits on the current line without a break.

        This does not record `token`: callers use it to decide whether
        text written outside of the breaker needs its own line.
        """
        return self.line_size + len(token) < self.max_line_size

    def consume(self, size):
        """Reserve `size` characters on the current line (e.g., for a
        prefix written directly by the caller)"""
        self.line_size += size

    def result(self):
        return self._output.getvalue()

    __str__ = result
