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


class Factory(object):
    """A registry mapping format names to the classes that implement them.

    Classes are added with the :py:meth:`register` decorator; calling
    the factory with a registered name returns a new instance::

        WriterFactory = Factory('problem writer')

        @WriterFactory.register('lp', 'Generate the corresponding LP file.')
        class LPWriter(object): ...

        writer = WriterFactory('lp')

    """

    def __init__(self, description=None):
        self._description = description
        self._cls = {}
        self._doc = {}

    def __call__(self, name, exception=False, **kwds):
        name = str(name)
        if name not in self._cls:
            if not exception:
                return None
            if self._description is None:
                raise ValueError("Unknown factory object type: '%s'" % name)
            raise ValueError(
                "Unknown %s: '%s' (registered: %s)"
                % (self._description, name, ', '.join(sorted(self._cls)))
            )
        return self._cls[name](**kwds)

    def __iter__(self):
        return iter(self._cls)

    def __contains__(self, name):
        return str(name) in self._cls

    def get_class(self, name):
        return self._cls[name]

    def doc(self, name):
        return self._doc[name]

    def unregister(self, name):
        name = str(name)
        if name in self._cls:
            del self._cls[name]
            del self._doc[name]

    def register(self, name, doc=None):
        def fn(cls):
            if name in self._cls and self._cls[name] is not cls:
                raise ValueError(
                    "Duplicate registration of %s '%s'" % (self._description, name)
                )
            self._cls[name] = cls
            self._doc[name] = doc
            return cls

        return fn
