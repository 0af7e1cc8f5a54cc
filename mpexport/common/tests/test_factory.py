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

from mpexport.common.factory import Factory


class TestFactory(unittest.TestCase):
    def setUp(self):
        self.factory = Factory('test writer')

        @self.factory.register('txt', 'Write text')
        class TextWriter(object):
            def __init__(self, width=80):
                self.width = width

        self.TextWriter = TextWriter

    def test_create(self):
        obj = self.factory('txt')
        self.assertIsInstance(obj, self.TextWriter)
        self.assertEqual(obj.width, 80)
        self.assertEqual(self.factory('txt', width=10).width, 10)

    def test_unknown(self):
        self.assertIsNone(self.factory('csv'))
        with self.assertRaisesRegex(
            ValueError, r"Unknown test writer: 'csv' \(registered: txt\)"
        ):
            self.factory('csv', exception=True)
        with self.assertRaisesRegex(ValueError, "Unknown factory object type: 'csv'"):
            Factory()('csv', exception=True)

    def test_registry(self):
        self.assertIn('txt', self.factory)
        self.assertEqual(list(self.factory), ['txt'])
        self.assertIs(self.factory.get_class('txt'), self.TextWriter)
        self.assertEqual(self.factory.doc('txt'), 'Write text')
        # Re-registering the same class is allowed
        self.factory.register('txt', 'Write text')(self.TextWriter)
        with self.assertRaisesRegex(ValueError, "Duplicate registration of test writer"):
            self.factory.register('txt')(object)
        self.factory.unregister('txt')
        self.assertNotIn('txt', self.factory)
        # unregistering an unknown name is a no-op
        self.factory.unregister('txt')


if __name__ == "__main__":
    unittest.main()
