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
from mpexport.common.errors import (
    format_exception,
    DeveloperError,
    InvalidNameError,
    MPExportException,
    OutOfRangeReferenceError,
)


class LocalException(Exception):
    pass


class TestFormatException(unittest.TestCase):
    def test_basic_message(self):
        self.assertEqual(format_exception("Hello world"), "Hello world")

    def test_formatted_message(self):
        self.assertEqual(format_exception("Hello\nworld"), "Hello\nworld")

    def test_long_basic_message(self):
        self.assertEqual(
            format_exception(
                "Hello world, this is a very long message that will "
                "inevitably wrap onto another line."
            ),
            "Hello world, this is a very long message that will\n"
            "    inevitably wrap onto another line.",
        )

    def test_long_basic_message_exception(self):
        self.assertEqual(
            format_exception(
                "Hello world, this is a very long message that will "
                "inevitably wrap onto another line.",
                exception=LocalException(),
            ),
            "Hello world, this is a very\n"
            "    long message that will inevitably wrap onto another line.",
        )

    def test_basic_message_prolog(self):
        self.assertEqual(
            format_exception(
                "This is a very, very, very long message that will "
                "inevitably wrap onto another line.",
                prolog="Hello world:",
            ),
            "Hello world:\n"
            "    This is a very, very, very long message that will inevitably "
            "wrap onto\n"
            "    another line.",
        )


class TestExportExceptions(unittest.TestCase):
    def test_invalid_name_error(self):
        err = InvalidNameError(kind='variable', index=3, name='x y')
        self.assertIsInstance(err, MPExportException)
        self.assertIsInstance(err, ValueError)
        self.assertEqual(err.kind, 'variable')
        self.assertEqual(err.index, 3)
        self.assertEqual(err.name, 'x y')
        self.assertEqual(str(err), InvalidNameError.default_message)

        err = InvalidNameError("bad name")
        self.assertEqual(str(err), "bad name")
        self.assertIsNone(err.kind)

    def test_out_of_range_reference_error(self):
        err = OutOfRangeReferenceError(
            "In constraint #0, var_index #1 is 5, which is out of bounds.",
            constraint=0,
            variable=5,
        )
        self.assertIsInstance(err, MPExportException)
        self.assertIsInstance(err, IndexError)
        self.assertEqual(err.constraint, 0)
        self.assertEqual(err.variable, 5)
        self.assertEqual(
            " ".join(str(err).split()),
            "In constraint #0, var_index #1 is 5, which is out of bounds.",
        )
        with self.assertRaisesRegex(
            IndexError,
            r"var_index #1 is 5, which is out of bounds\.",
            normalize_whitespace=True,
        ):
            raise err

    def test_long_out_of_range_message_is_wrapped(self):
        msg = (
            "In constraint #12, var_index #3 is 42, which is out of bounds "
            "(the model has 7 variables)."
        )
        err = OutOfRangeReferenceError(msg)
        self.assertIn('\n    ', str(err))
        with self.assertRaisesRegex(
            OutOfRangeReferenceError,
            r"which is out of bounds \(the model has 7 variables\)",
            normalize_whitespace=True,
        ):
            raise err

    def test_developer_error(self):
        err = DeveloperError("unreachable")
        with self.assertRaisesRegex(
            DeveloperError,
            r"^Internal mpexport implementation error: 'unreachable' "
            r"Please report this to the mpexport developers\.$",
            normalize_whitespace=True,
        ):
            raise err


if __name__ == "__main__":
    unittest.main()
