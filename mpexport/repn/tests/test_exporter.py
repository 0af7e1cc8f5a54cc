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

import mpexport.common.unittest as unittest

from mpexport.common.errors import InvalidNameError, OutOfRangeReferenceError
from mpexport.repn.exporter import ModelExporter, export_as_lp, export_as_mps
from mpexport.repn.plugins.lp_writer import LPWriter
from mpexport.repn.plugins.mps import MPSWriter
from mpexport.repn.tests.test_lp_writer import demo_model, integer_model


class TestModelExporter(unittest.TestCase):
    def test_lp(self):
        m = demo_model()
        exporter = ModelExporter(m)
        self.assertEqual(exporter.export_as_lp(), LPWriter().to_string(m))
        self.assertEqual(
            exporter.export_as_lp(obfuscate=True),
            LPWriter().to_string(m, obfuscate=True),
        )

    def test_mps(self):
        m = demo_model()
        exporter = ModelExporter(m)
        self.assertEqual(exporter.export_as_mps(), MPSWriter().to_string(m))
        self.assertEqual(
            exporter.export_as_mps(fixed_format=True, obfuscate=True),
            MPSWriter().to_string(m, fixed_format=True, obfuscate=True),
        )

    def test_shared_analysis(self):
        m = demo_model()
        exporter = ModelExporter(m)
        self.assertFalse(exporter.analyzer.setup_done)
        first = exporter.export_as_lp()
        self.assertTrue(exporter.analyzer.setup_done)
        exporter.export_as_mps()
        self.assertEqual(exporter.export_as_lp(), first)

    def test_options(self):
        m = integer_model()
        exporter = ModelExporter(m, show_unused_variables=True, max_line_length=20)
        self.assertEqual(exporter.config.max_line_length, 20)
        self.assertEqual(
            exporter.export_as_lp(),
            LPWriter().to_string(m, show_unused_variables=True, max_line_length=20),
        )
        # Per-call options override the exporter defaults
        self.assertEqual(
            exporter.export_as_lp(show_unused_variables=False),
            LPWriter().to_string(m, max_line_length=20),
        )
        self.assertTrue(exporter.config.show_unused_variables)
        # LP-only options do not affect the MPS output
        self.assertEqual(exporter.export_as_mps(), MPSWriter().to_string(m))

    def test_string_options(self):
        m = integer_model()
        exporter = ModelExporter(m, "show_unused_variables=yes, max_line_length=20")
        self.assertTrue(exporter.config.show_unused_variables)
        self.assertEqual(exporter.config.max_line_length, 20)
        self.assertEqual(
            exporter.export_as_lp(),
            LPWriter().to_string(m, show_unused_variables=True, max_line_length=20),
        )

    def test_bad_options(self):
        with self.assertRaisesRegex(ValueError, "key 'obfuscate' not defined"):
            ModelExporter(demo_model(), obfuscate=True)
        with self.assertRaisesRegex(ValueError, "key 'fixed_format' not defined"):
            ModelExporter(demo_model()).export_as_lp(fixed_format=True)

    def test_errors(self):
        m = demo_model()
        m.variables[0].name = ''
        exporter = ModelExporter(m, log_invalid_names=True)
        with self.captureLog() as LOG:
            with self.assertRaises(InvalidNameError):
                exporter.export_as_lp()
            with self.assertRaises(InvalidNameError):
                exporter.export_as_mps()
        self.assertEqual(
            LOG.getvalue(),
            "check_name_validity() should not be passed an empty name.\n" * 2,
        )
        self.assertTrue(exporter.export_as_mps(obfuscate=True).endswith("ENDATA\n"))

        m = demo_model()
        m.constraints[0].terms.append((7, 1))
        with self.assertRaises(OutOfRangeReferenceError):
            ModelExporter(m).export_as_lp()
        with self.assertRaises(IndexError):
            ModelExporter(m).export_as_mps()


class TestExportFunctions(unittest.TestCase):
    def test_export_as_lp(self):
        m = integer_model()
        self.assertEqual(export_as_lp(m), LPWriter().to_string(m))
        self.assertEqual(
            export_as_lp(m, obfuscate=True, show_unused_variables=True),
            LPWriter().to_string(m, obfuscate=True, show_unused_variables=True),
        )

    def test_export_as_mps(self):
        m = integer_model()
        self.assertEqual(export_as_mps(m), MPSWriter().to_string(m))
        self.assertEqual(
            export_as_mps(m, fixed_format=True),
            MPSWriter().to_string(m, fixed_format=True),
        )
        self.assertTrue(export_as_mps(m).endswith("ENDATA\n"))
        self.assertTrue(export_as_lp(m).endswith("End\n"))


if __name__ == "__main__":
    unittest.main()
