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

from mpexport.common.config import (
    Bool,
    ConfigBlock,
    ConfigValue,
    PositiveInt,
    document_kwargs_from_configdict,
)
from mpexport.common.formatting import LineBreaker
from mpexport.common.log import is_debug_set
from mpexport.common.timing import TicTocTimer
from mpexport.repn import WriterFactory
from mpexport.repn.util import (
    ModelAnalyzer,
    inf,
    invalid_name_error,
    is_binary,
    is_integral,
    neg_inf,
    write_comment_header,
)

# Room reserved on the first line of a constraint for the leading
# space, the ': ' separator and a possible '_rhs' / '_lhs' suffix.
_NUM_FORMATTING_CHARS = 10


@WriterFactory.register('lp', 'Generate the corresponding LP file.')
class LPWriter(object):
    CONFIG = ConfigBlock('lpwriter')
    CONFIG.declare(
        'obfuscate',
        ConfigValue(
            default=False,
            domain=Bool,
            description='Write synthetic index-based names',
            doc="""
            Replace the declared variable and constraint names with
            synthetic names (V<index> / C<index>).  Name validation is
            skipped when names are obfuscated.""",
        ),
    )
    CONFIG.declare(
        'show_unused_variables',
        ConfigValue(
            default=False,
            domain=Bool,
            description='Include variables not used in the objective or constraints',
            doc="""
            Write bounds and integrality declarations for variables that
            have no nonzero coefficient in the objective or in any
            constraint.""",
        ),
    )
    CONFIG.declare(
        'max_line_length',
        ConfigValue(
            default=10000,
            domain=PositiveInt,
            description='Maximum line length in the LP file',
            doc="""
            Objective and constraint lines are wrapped (between terms)
            so that they do not exceed this length.  The default was
            chosen so that SCIP can read the files.""",
        ),
    )
    CONFIG.declare(
        'log_invalid_names',
        ConfigValue(
            default=False,
            domain=Bool,
            description='Log a warning explaining each invalid name',
        ),
    )

    def __init__(self):
        self.config = self.CONFIG()

    @document_kwargs_from_configdict(CONFIG)
    def write(self, model, ostream, analyzer=None, **options):
        """Write a model in LP format.

        Nothing is written to `ostream` if the export fails.

        Parameters
        ----------
        model: Model
            The model to write out.

        ostream: io.TextIOBase
            The text output stream where the LP "file" will be written.
            Could be an opened file or a io.StringIO.

        analyzer: ModelAnalyzer, optional
            A (possibly shared) analyzer for `model`.  A new one is
            created if not provided.

        """
        ostream.write(self.to_string(model, analyzer, **options))

    def to_string(self, model, analyzer=None, **options):
        """Return the LP representation of `model` as a string"""
        config = self.config(options)
        if analyzer is None:
            analyzer = ModelAnalyzer(model)
        return _LPWriter_impl(config, analyzer).write()


class _LPWriter_impl(object):
    def __init__(self, config, analyzer):
        self.config = config
        self.analyzer = analyzer
        self.model = analyzer.model

    def write(self):
        timing_logger = logging.getLogger('mpexport.common.timing.writer')
        timer = TicTocTimer(logger=timing_logger)
        with_debug_timing = is_debug_set(timing_logger)

        config = self.config
        obfuscate = config.obfuscate
        show_unused = config.show_unused_variables
        max_line_length = config.max_line_length
        model = self.model
        analyzer = self.analyzer

        analyzer.setup()
        if not obfuscate:
            invalid = analyzer.check_all_names(config.log_invalid_names)
            if invalid is not None:
                raise invalid_name_error(invalid)

        self.var_names = var_names = analyzer.variable_names(obfuscate)
        con_names = analyzer.constraint_names(obfuscate)
        ostream = StringIO()

        write_comment_header(ostream, "\\", analyzer, "LP", show_unused)

        #
        # Objective
        #
        ostream.write("Maximize\n" if model.maximize else "Minimize\n")
        obj_line = LineBreaker(max_line_length)
        obj_line.append(" Obj: ")
        if model.objective_offset != 0.0:
            obj_line.append("%-+.17G Constant " % (model.objective_offset,))
        show_variable = [show_unused] * len(model.variables)
        for var_index, var in enumerate(model.variables):
            coef = var.objective_coefficient
            if coef != 0.0:
                obj_line.append(self.term(var_index, coef))
                show_variable[var_index] = True
        ostream.write(obj_line.result())
        ostream.write("\nSubject to\n")
        if with_debug_timing:
            timer.toc('Wrote objective', level=logging.DEBUG)

        #
        # Constraints
        #
        for con_index, con in enumerate(model.constraints):
            name = con_names[con_index]
            line = LineBreaker(max_line_length)
            line.consume(_NUM_FORMATTING_CHARS + len(name))
            for k, (var_index, coef) in enumerate(con.terms):
                var_index = analyzer.check_variable_index(con_index, k, var_index)
                if coef != 0.0:
                    line.append(self.term(var_index, coef))
                    show_variable[var_index] = True

            lb, ub = con.lower_bound, con.upper_bound
            if lb == ub:
                line.append(" = %-.17G\n" % (ub,))
                ostream.write(f" {name}: {line.result()}")
                continue
            if ub != inf:
                label = name + "_rhs" if lb != neg_inf else name
                self.write_relation(ostream, label, line, " <= %-.17G\n" % (ub,))
            if lb != neg_inf:
                label = name + "_lhs" if ub != inf else name
                self.write_relation(ostream, label, line, " >= %-.17G\n" % (lb,))
        if with_debug_timing:
            timer.toc('Wrote %s constraints', len(model.constraints), level=logging.DEBUG)

        #
        # Bounds
        #
        ostream.write("Bounds\n")
        if model.objective_offset != 0.0:
            ostream.write(" 1 <= Constant <= 1\n")
        for var_index, var in enumerate(model.variables):
            if not show_variable[var_index]:
                continue
            lb, ub = var.lower_bound, var.upper_bound
            name = var_names[var_index]
            if var.is_integer and is_integral(lb) and is_integral(ub):
                ostream.write(" %.0f <= %s <= %.0f\n" % (lb, name, ub))
            elif lb == neg_inf and ub == inf:
                ostream.write(f" {name} free\n")
            else:
                if lb != neg_inf:
                    ostream.write(" %-.17G <=" % (lb,))
                ostream.write(f" {name}")
                if ub != inf:
                    ostream.write(" <= %-.17G" % (ub,))
                ostream.write("\n")

        #
        # Integrality
        #
        binaries = []
        generals = []
        for var_index, var in enumerate(model.variables):
            if not show_variable[var_index] or not var.is_integer:
                continue
            if is_binary(var):
                binaries.append(var_names[var_index])
            else:
                generals.append(var_names[var_index])
        if binaries:
            ostream.write("Binaries\n")
            ostream.write(''.join(f" {name}\n" for name in binaries))
        if generals:
            ostream.write("Generals\n")
            ostream.write(''.join(f" {name}\n" for name in generals))
        ostream.write("End\n")

        timer.toc("Generated LP representation", delta=False, level=logging.DEBUG)
        return ostream.getvalue()

    def term(self, var_index, coef):
        return "%+.17G %-s " % (coef, self.var_names[var_index])

    def write_relation(self, ostream, label, line, relation):
        # The relation is written outside of the line breaker: the same
        # term list may be reused for the opposite side of a ranged row.
        ostream.write(f" {label}: {line.result()}")
        if not line.would_fit(relation):
            ostream.write("\n ")
        ostream.write(relation)
