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

"""The unittest environment used by the mpexport test suite.

Test modules import this module in place of :py:mod:`unittest`::

    import mpexport.common.unittest as unittest

It re-exports everything from the standard library module and replaces
:py:class:`TestCase` with a subclass carrying a few extra helpers.
"""

import logging
import re

from unittest import *
import unittest as _unittest

from mpexport.common.log import LoggingIntercept


class _WhitespaceInsensitiveRaisesContext(_unittest.case._AssertRaisesContext):
    # Matches expected_regex against the message with every run of
    # whitespace collapsed to one space (wrapped messages then match).
    def __exit__(self, exc_type, exc_value, tb):
        pattern = self.expected_regex
        self.expected_regex = None
        try:
            if not super().__exit__(exc_type, exc_value, tb):
                return False
        finally:
            self.expected_regex = pattern

        message = re.sub(r'\s+', ' ', str(exc_value))
        if not pattern.search(message):
            self._raiseFailure('"%s" does not match "%s"' % (pattern.pattern, message))
        return True


class TestCase(_unittest.TestCase):
    """:py:class:`unittest.TestCase` with full diffs, a
    `normalize_whitespace` option for :py:meth:`assertRaisesRegex`, and
    :py:meth:`captureLog`."""

    maxDiff = None

    def assertRaisesRegex(self, expected_exception, expected_regex, *args, **kwargs):
        """:py:meth:`unittest.TestCase.assertRaisesRegex`, plus the
        `normalize_whitespace` keyword (default False)."""
        if kwargs.pop('normalize_whitespace', False):
            context_class = _WhitespaceInsensitiveRaisesContext
        else:
            context_class = _unittest.case._AssertRaisesContext
        context = context_class(expected_exception, self, expected_regex)
        return context.handle('assertRaisesRegex', args, kwargs)

    def captureLog(self, module='mpexport', level=logging.WARNING):
        """Intercept the `module` logger; the context value is a
        StringIO holding the captured messages"""
        return LoggingIntercept(module=module, level=level)
