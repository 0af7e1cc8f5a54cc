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

from mpexport.common.formatting import LineBreaker


class TestLineBreaker(unittest.TestCase):
    def test_no_break(self):
        lb = LineBreaker(20)
        lb.append(" Obj: ")
        lb.append("+1 x ")
        self.assertEqual(lb.result(), " Obj: +1 x ")
        self.assertEqual(lb.line_size, 11)
        self.assertEqual(str(lb), " Obj: +1 x ")

    def test_break_between_tokens(self):
        lb = LineBreaker(20)
        lb.append(" Obj: ")
        for i in range(1, 6):
            lb.append("+1 x%s " % i)
        self.assertEqual(lb.result(), " Obj: +1 x1 +1 x2 \n +1 x3 +1 x4 +1 x5 ")
        self.assertEqual(lb.line_size, 18)

    def test_token_exactly_filling_line(self):
        lb = LineBreaker(10)
        lb.append("12345")
        lb.append("67890")
        self.assertEqual(lb.result(), "1234567890")
        lb.append("x")
        self.assertEqual(lb.result(), "1234567890\n x")
        self.assertEqual(lb.line_size, 1)

    def test_oversized_token_is_not_split(self):
        lb = LineBreaker(5)
        lb.append("abcdefghij")
        self.assertEqual(lb.result(), "abcdefghij")
        lb.append("kl")
        lb.append("mnopqrstuv")
        self.assertEqual(lb.result(), "abcdefghij\n kl\n mnopqrstuv")

    def test_tokens_are_never_split(self):
        tokens = ["+%s v%s " % (i, i) for i in range(1, 40)]
        lb = LineBreaker(25)
        for tok in tokens:
            lb.append(tok)
        text = lb.result()
        for line in text.split("\n"):
            self.assertLessEqual(len(line), 26)
        self.assertEqual(text.replace("\n ", ""), "".join(tokens))

    def test_consume(self):
        lb = LineBreaker(20)
        lb.consume(15)
        self.assertEqual(lb.result(), "")
        lb.append("+1 x ")
        self.assertEqual(lb.result(), "+1 x ")
        lb.append("+2 y ")
        self.assertEqual(lb.result(), "+1 x \n +2 y ")

    def test_would_fit(self):
        lb = LineBreaker(10)
        lb.append("12345")
        self.assertTrue(lb.would_fit("1234"))
        # A token that would exactly fill the line does not "fit"
        self.assertFalse(lb.would_fit("12345"))
        # would_fit() does not record the token
        self.assertEqual(lb.line_size, 5)
        self.assertEqual(lb.result(), "12345")


if __name__ == "__main__":
    unittest.main()
