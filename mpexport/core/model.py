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

"""In-memory linear / mixed-integer model containers.

The writers treat these objects as read-only: a model is built (either
directly or through :py:meth:`Model.add_variable` /
:py:meth:`Model.add_constraint`) and then handed to the exporter, which
never modifies it.
"""

__all__ = ['Model', 'Variable', 'Constraint']

_inf = float('inf')
_ninf = -_inf


class Variable(object):
    """A decision variable (a column of the model).

    Parameters
    ----------
    name: str, optional
        The name written to LP / MPS files.  Unnamed variables are
        written using a synthetic index-based name.
    lower_bound: float
        Lower bound (may be ``-inf``).  Defaults to 0.
    upper_bound: float
        Upper bound (may be ``+inf``).  Defaults to ``+inf``.
    is_integer: bool
        True if the variable is restricted to integer values.
    objective_coefficient: float
        Coefficient of this variable in the (linear) objective.

    """

    __slots__ = (
        'name',
        'lower_bound',
        'upper_bound',
        'is_integer',
        'objective_coefficient',
    )

    def __init__(
        self,
        name=None,
        lower_bound=0.0,
        upper_bound=_inf,
        is_integer=False,
        objective_coefficient=0.0,
    ):
        self.name = name
        self.lower_bound = float(lower_bound)
        self.upper_bound = float(upper_bound)
        self.is_integer = bool(is_integer)
        self.objective_coefficient = float(objective_coefficient)

    @property
    def bounds(self):
        return self.lower_bound, self.upper_bound

    def __repr__(self):
        return '%s(%r, lb=%r, ub=%r%s)' % (
            self.__class__.__name__,
            self.name,
            self.lower_bound,
            self.upper_bound,
            ', integer' if self.is_integer else '',
        )


class Constraint(object):
    """A linear constraint ``lower_bound <= sum(coef * x[i]) <= upper_bound``

    Parameters
    ----------
    name: str, optional
        The name written to LP / MPS files.  Unnamed constraints are
        written using a synthetic index-based name.
    lower_bound: float
        Lower bound on the row activity (may be ``-inf``).
    upper_bound: float
        Upper bound on the row activity (may be ``+inf``).  Equal
        bounds denote an equality constraint.
    terms: iterable of (int, float)
        Sparse row: pairs of (variable index, coefficient).

    """

    __slots__ = ('name', 'lower_bound', 'upper_bound', 'terms')

    def __init__(self, name=None, lower_bound=_ninf, upper_bound=_inf, terms=()):
        self.name = name
        self.lower_bound = float(lower_bound)
        self.upper_bound = float(upper_bound)
        self.terms = [(index, float(coef)) for index, coef in terms]

    @property
    def bounds(self):
        return self.lower_bound, self.upper_bound

    @property
    def equality(self):
        return self.lower_bound == self.upper_bound

    def __repr__(self):
        return '%s(%r, lb=%r, ub=%r, nnz=%d)' % (
            self.__class__.__name__,
            self.name,
            self.lower_bound,
            self.upper_bound,
            len(self.terms),
        )


class Model(object):
    """A linear / mixed-integer programming model.

    Variables and constraints are addressed by their position in the
    :py:attr:`variables` and :py:attr:`constraints` lists.
    """

    __slots__ = ('name', 'maximize', 'objective_offset', 'variables', 'constraints')

    def __init__(self, name=None, maximize=False, objective_offset=0.0):
        self.name = name
        self.maximize = bool(maximize)
        self.objective_offset = float(objective_offset)
        self.variables = []
        self.constraints = []

    def add_variable(self, *args, **kwds):
        """Append a :py:class:`Variable` and return its index"""
        self.variables.append(Variable(*args, **kwds))
        return len(self.variables) - 1

    def add_constraint(self, *args, **kwds):
        """Append a :py:class:`Constraint` and return its index"""
        self.constraints.append(Constraint(*args, **kwds))
        return len(self.constraints) - 1

    @property
    def num_variables(self):
        return len(self.variables)

    @property
    def num_constraints(self):
        return len(self.constraints)

    def __repr__(self):
        return '%s(%r, %d variables, %d constraints)' % (
            self.__class__.__name__,
            self.name,
            len(self.variables),
            len(self.constraints),
        )
