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

"""Wall-clock timing of writer sections"""

import logging
import sys
import time

from mpexport.common.config import NOTSET

_logger = logging.getLogger('mpexport.common.timing')
_logger.propagate = False
_logger.setLevel(logging.WARNING)

default_timer = time.perf_counter


class TicTocTimer(object):
    """Report the time elapsed between calls to :py:meth:`tic` and
    :py:meth:`toc`.

    Messages go to `logger` (at ``INFO`` unless another level is given
    for the call) and/or to `ostream`.  With neither, they are printed
    to ``sys.stdout``; giving only a logger disables the stream output.

    Examples:
       >>> from mpexport.common.timing import TicTocTimer
       >>> timer = TicTocTimer()
       >>> timer.tic('starting timer')
       [    0.00] starting timer
       >>> dT = timer.toc('task 1')
       [+   0.00] task 1

    """

    def __init__(self, ostream=NOTSET, logger=None):
        if ostream is NOTSET:
            ostream = sys.stdout if logger is None else None
        self.ostream = ostream
        self.logger = logger
        self.level = logging.INFO
        self._start = self._last = default_timer()

    def tic(self, msg=NOTSET, *args, level=NOTSET):
        """Restart both the cumulative and the delta clocks.

        `msg` defaults to "Resetting the tic/toc delta timer"; pass
        ``None`` to restart silently.
        """
        self._start = self._last = default_timer()
        if msg is NOTSET:
            msg = "Resetting the tic/toc delta timer"
        if msg is not None:
            self.toc(msg, *args, delta=False, level=level)

    def toc(self, msg, *args, delta=True, level=NOTSET):
        """Report and return the elapsed time.

        With `delta` the time since the previous :py:meth:`tic` or
        :py:meth:`toc` is reported, otherwise the time since the last
        :py:meth:`tic`.  Either way the delta clock restarts.  `msg` is
        %-formatted with `args`; a `msg` of ``None`` reports nothing.
        """
        now = default_timer()
        if delta:
            elapsed = now - self._last
            template = "[+%7.2f] %s"
        else:
            elapsed = now - self._start
            template = "[%8.2f] %s"
        self._last = now

        if msg is None:
            return elapsed
        if args:
            msg = msg % args
        line = template % (elapsed, msg)
        if self.logger is not None:
            self.logger.log(self.level if level is NOTSET else level, line)
        if self.ostream is not None:
            self.ostream.write(line + '\n')
        return elapsed
