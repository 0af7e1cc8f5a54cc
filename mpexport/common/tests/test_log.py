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

import logging
from io import StringIO

import mpexport.common.unittest as unittest

from mpexport.common.log import LoggingIntercept, is_debug_set

logger = logging.getLogger('mpexport.common.tests.test_log')


class TestIsDebugSet(unittest.TestCase):
    def test_levels(self):
        with LoggingIntercept(logger=logger, level=logging.DEBUG):
            self.assertTrue(is_debug_set(logger))
        with LoggingIntercept(logger=logger, level=logging.INFO):
            self.assertFalse(is_debug_set(logger))

    def test_disabled(self):
        with LoggingIntercept(logger=logger, level=logging.DEBUG):
            logging.disable(logging.DEBUG)
            try:
                self.assertFalse(is_debug_set(logger))
            finally:
                logging.disable(logging.NOTSET)
            self.assertTrue(is_debug_set(logger))


class TestLoggingIntercept(unittest.TestCase):
    def test_capture(self):
        OUT = StringIO()
        with LoggingIntercept(OUT, 'mpexport.common.tests') as LOG:
            self.assertIs(LOG, OUT)
            logger.info("hidden")
            logger.warning("shown %s", 1)
        self.assertEqual(OUT.getvalue(), "shown 1\n")

    def test_restores_logger(self):
        target = logging.getLogger('mpexport.common.tests.intercepted')
        handler = logging.NullHandler()
        target.addHandler(handler)
        try:
            target.setLevel(logging.ERROR)
            with LoggingIntercept(module=target.name, level=logging.INFO) as LOG:
                self.assertEqual(len(target.handlers), 1)
                self.assertIsNot(target.handlers[0], handler)
                self.assertFalse(target.propagate)
                target.info("message")
            self.assertEqual(LOG.getvalue(), "message\n")
            self.assertEqual(target.handlers, [handler])
            self.assertEqual(target.level, logging.ERROR)
            self.assertTrue(target.propagate)
        finally:
            target.removeHandler(handler)
            target.setLevel(logging.NOTSET)

    def test_module_and_logger(self):
        with self.assertRaisesRegex(ValueError, "only one of 'module' and 'logger'"):
            LoggingIntercept(module='mpexport', logger=logger)
        self.assertEqual(LoggingIntercept(logger=logger).module, logger.name)

    def test_captureLog(self):
        with self.captureLog() as LOG:
            logging.getLogger('mpexport.core').warning("from core")
        self.assertEqual(LOG.getvalue(), "from core\n")


if __name__ == "__main__":
    unittest.main()
