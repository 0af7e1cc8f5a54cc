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

"""Logging helpers shared by the writers and the test suite."""

import io
import logging


def is_debug_set(logger):
    """Return True only if DEBUG messages sent to `logger` will be emitted.

    Unlike :py:meth:`logging.Logger.isEnabledFor`, a logger whose
    effective level is NOTSET is treated as *not* logging debug output.
    The writers call this once per export to decide whether to collect
    section timings.
    """
    if logger.manager.disable >= logging.DEBUG:
        return False
    return logging.NOTSET < logger.getEffectiveLevel() <= logging.DEBUG


class LoggingIntercept(object):
    r"""Redirect the records sent to one logger into a text stream.

    While the context is active the target logger has a single handler
    (writing to `output`), does not propagate, and has its level set to
    `level`.  The previous handlers, level and propagation flag are
    restored on exit.  The context value is the output stream (a new
    :py:class:`io.StringIO` if `output` was not given).

    Parameters
    ----------
    output: io.TextIOBase, optional
        Stream receiving the formatted records

    module: str, optional
        Name of the logger to intercept (the root logger by default)

    level: int
        Minimum level captured (``logging.WARNING`` by default)

    formatter: logging.Formatter, optional
        Defaults to ``'%(message)s'``

    logger: logging.Logger, optional
        The logger to intercept; may not be combined with `module`

    Examples
    --------
    >>> import io, logging
    >>> from mpexport.common.log import LoggingIntercept
    >>> buf = io.StringIO()
    >>> with LoggingIntercept(buf, 'mpexport.core', logging.WARNING):
    ...     logging.getLogger('mpexport.core').warning('a simple message')
    >>> buf.getvalue()
    'a simple message\n'

    """

    def __init__(
        self, output=None, module=None, level=logging.WARNING, formatter=None, logger=None
    ):
        if logger is None:
            logger = logging.getLogger(module)
        elif module is not None:
            raise ValueError(
                "LoggingIntercept: only one of 'module' and 'logger' is allowed"
            )
        self._logger = logger
        self.output = output
        self._level = level
        self._formatter = formatter or logging.Formatter('%(message)s')
        self.handler = None
        self._saved_state = None

    @property
    def module(self):
        return self._logger.name

    def __enter__(self):
        target = self._logger
        if self.handler is not None:
            raise RuntimeError("LoggingIntercept contexts cannot be nested")
        self._saved_state = (target.level, target.propagate, list(target.handlers))
        stream = io.StringIO() if self.output is None else self.output
        level = target.getEffectiveLevel() if self._level is None else self._level

        self.handler = logging.StreamHandler(stream)
        self.handler.setFormatter(self._formatter)
        self.handler.setLevel(level)
        for h in self._saved_state[2]:
            target.removeHandler(h)
        target.addHandler(self.handler)
        target.setLevel(level)
        target.propagate = False
        return stream

    def __exit__(self, et, ev, tb):
        target = self._logger
        level, propagate, handlers = self._saved_state
        target.removeHandler(self.handler)
        self.handler = None
        for h in handlers:
            target.addHandler(h)
        target.setLevel(level)
        target.propagate = propagate
