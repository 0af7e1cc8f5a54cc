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

import math
import operator

from mpexport.common.errors import (
    DeveloperError,
    InvalidNameError,
    OutOfRangeReferenceError,
)
from mpexport.core.label import PaddedNumericLabeler, check_name_validity

inf = float('inf')
neg_inf = float('-inf')

# Fixed-format MPS name fields are 8 characters wide
MPS_FIELD_SIZE = 8


def is_binary(var):
    """Return True if `var` is an integer variable whose rounded bounds
    are exactly [0, 1].

    This is ``ceil(lb) == 0 and floor(ub) == 1``, written so that
    infinite bounds are handled without overflowing.
    """
    if not var.is_integer:
        return False
    lb, ub = var.lower_bound, var.upper_bound
    return -1 < lb <= 0 and 1 <= ub < 2


def is_integral(val):
    """Return True if `val` is a finite float with no fractional part"""
    return math.isfinite(val) and val == round(val)


class ModelAnalyzer(object):
    """Derived (read-only) information about a model used by the writers.

    :py:meth:`setup` makes a single pass over the model to classify the
    variables and to size the synthetic (index-based) names.  The result
    is cached: calling :py:meth:`setup` again is a no-op, and the
    analyzer can be shared by any number of LP / MPS export calls as
    long as the model is not modified.

    Parameters
    ----------
    model: Model
        The model to analyze

    """

    def __init__(self, model):
        self.model = model
        self.num_binary_variables = 0
        self.num_integer_variables = 0
        self.num_continuous_variables = 0
        self.num_digits_for_variables = 0
        self.num_digits_for_constraints = 0
        self._var_labeler = None
        self._con_labeler = None
        self._names = {}
        self._setup_done = False

    def setup(self):
        if self._setup_done:
            return self
        variables = self.model.variables
        n_binary = n_integer = 0
        for var in variables:
            if var.is_integer:
                if is_binary(var):
                    n_binary += 1
                else:
                    n_integer += 1
        self.num_binary_variables = n_binary
        self.num_integer_variables = n_integer
        self.num_continuous_variables = len(variables) - n_binary - n_integer

        self._var_labeler = PaddedNumericLabeler('V', len(variables))
        self._con_labeler = PaddedNumericLabeler('C', len(self.model.constraints))
        self.num_digits_for_variables = self._var_labeler.width
        self.num_digits_for_constraints = self._con_labeler.width
        self._setup_done = True
        return self

    @property
    def setup_done(self):
        return self._setup_done

    def _check_setup(self):
        if not self._setup_done:
            raise DeveloperError(
                "ModelAnalyzer.setup() must be called before generating names"
            )

    def variable_name(self, index, obfuscate=False):
        self._check_setup()
        name = self.model.variables[index].name
        if obfuscate or name is None:
            return self._var_labeler(index)
        return name

    def constraint_name(self, index, obfuscate=False):
        self._check_setup()
        name = self.model.constraints[index].name
        if obfuscate or name is None:
            return self._con_labeler(index)
        return name

    def variable_names(self, obfuscate=False):
        """Return the display names of all variables (built once per
        obfuscation mode; callers must not modify the list)"""
        key = ('variable', bool(obfuscate))
        if key not in self._names:
            self._names[key] = [
                self.variable_name(i, obfuscate)
                for i in range(len(self.model.variables))
            ]
        return self._names[key]

    def constraint_names(self, obfuscate=False):
        """Return the display names of all constraints (built once per
        obfuscation mode; callers must not modify the list)"""
        key = ('constraint', bool(obfuscate))
        if key not in self._names:
            self._names[key] = [
                self.constraint_name(i, obfuscate)
                for i in range(len(self.model.constraints))
            ]
        return self._names[key]

    def check_all_names(self, log_invalid_names=False):
        """Validate the declared names of all variables and constraints.

        Returns
        -------
        None if every name is valid; otherwise the first offending
        ``(kind, index, name)`` tuple, where `kind` is ``'variable'`` or
        ``'constraint'``.

        """
        for i, name in enumerate(self.variable_names()):
            if not check_name_validity(name, log_invalid_names):
                return 'variable', i, name
        for i, name in enumerate(self.constraint_names()):
            if not check_name_validity(name, log_invalid_names):
                return 'constraint', i, name
        return None

    def can_use_fixed_mps(self, obfuscate=False):
        """True if every name fits the 8-character fixed MPS name field"""
        if obfuscate:
            return (
                self.num_digits_for_constraints < MPS_FIELD_SIZE
                and self.num_digits_for_variables < MPS_FIELD_SIZE
            )
        return all(
            len(name) <= MPS_FIELD_SIZE for name in self.constraint_names()
        ) and all(len(name) <= MPS_FIELD_SIZE for name in self.variable_names())

    def check_variable_index(self, con_index, position, var_index):
        """Return `var_index` as an int, raising
        :py:class:`OutOfRangeReferenceError` if it is not an integer
        index into the model variables"""
        try:
            index = operator.index(var_index)
        except TypeError:
            index = None
        if index is None or index < 0 or index >= len(self.model.variables):
            raise OutOfRangeReferenceError(
                "In constraint #%s, var_index #%s is %r, which is out of "
                "bounds (the model has %s variables)."
                % (con_index, position, var_index, len(self.model.variables)),
                constraint=con_index,
                variable=var_index,
            )
        return index

    def build_transpose(self):
        """Return the column-major view of the constraint matrix.

        The result is a list (one entry per variable) of lists of
        ``(constraint_index, coefficient)`` pairs, skipping zero
        coefficients.
        """
        transpose = [[] for _ in self.model.variables]
        for con_index, con in enumerate(self.model.constraints):
            for k, (var_index, coef) in enumerate(con.terms):
                var_index = self.check_variable_index(con_index, k, var_index)
                if coef != 0.0:
                    transpose[var_index].append((con_index, coef))
        return transpose


def write_comment_header(ostream, sep, analyzer, format_name, show_unused=False):
    """Write the descriptive comment block that starts LP and MPS files"""
    model = analyzer.model
    ostream.write(f"{sep} Generated by mpexport\n")
    ostream.write("%s   %-16s : %s\n" % (sep, "Name", model.name or "NoName"))
    ostream.write("%s   %-16s : %s\n" % (sep, "Format", format_name))
    ostream.write("%s   %-16s : %d\n" % (sep, "Constraints", len(model.constraints)))
    ostream.write("%s   %-16s : %d\n" % (sep, "Variables", len(model.variables)))
    ostream.write("%s     %-14s : %d\n" % (sep, "Binary", analyzer.num_binary_variables))
    ostream.write(
        "%s     %-14s : %d\n" % (sep, "Integer", analyzer.num_integer_variables)
    )
    ostream.write(
        "%s     %-14s : %d\n" % (sep, "Continuous", analyzer.num_continuous_variables)
    )
    if show_unused:
        ostream.write(f"{sep} Unused variables are shown\n")


def invalid_name_error(invalid):
    """Build the :py:class:`InvalidNameError` for a
    :py:meth:`ModelAnalyzer.check_all_names` result"""
    kind, index, name = invalid
    return InvalidNameError(
        "Invalid name for %s #%s: %r.  Names must be non-empty, at most 255 "
        "characters, contain none of ' +-*/<>=:\\' and must not start with "
        "one of '$.0123456789' (or export with obfuscated names)."
        % (kind, index, name),
        kind=kind,
        index=index,
        name=name,
    )
