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

#
# Problem Writer for (Fixed and Free) MPS Format Files
#

import logging
from io import StringIO

from mpexport.common.config import (
    Bool,
    ConfigBlock,
    ConfigValue,
    document_kwargs_from_configdict,
)
from mpexport.common.log import is_debug_set
from mpexport.common.timing import TicTocTimer
from mpexport.repn import WriterFactory
from mpexport.repn.util import (
    ModelAnalyzer,
    inf,
    invalid_name_error,
    is_binary,
    neg_inf,
    write_comment_header,
)

logger = logging.getLogger(__name__)

# Width of the numeric fields in fixed-format MPS files
_FIXED_MPS_DOUBLE_WIDTH = 12
_INT_MARKER_FORMAT = "  %-10s%-36s%-10s\n"


@WriterFactory.register('mps', 'Generate the corresponding MPS file')
class MPSWriter(object):
    CONFIG = ConfigBlock('mpswriter')
    CONFIG.declare(
        'fixed_format',
        ConfigValue(
            default=False,
            domain=Bool,
            description='Write fixed-column (instead of free) MPS',
            doc="""
            Write the file using the rigid column layout of fixed MPS
            (8-character names, 12-character values).  If any name does
            not fit in 8 characters, a warning is logged and the free
            format is used instead.""",
        ),
    )
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
        """Write a model in MPS format.

        Nothing is written to `ostream` if the export fails.

        Parameters
        ----------
        model: Model
            The model to write out.

        ostream: io.TextIOBase
            The text output stream where the MPS "file" will be written.

        analyzer: ModelAnalyzer, optional
            A (possibly shared) analyzer for `model`.  A new one is
            created if not provided.

        """
        ostream.write(self.to_string(model, analyzer, **options))

    def to_string(self, model, analyzer=None, **options):
        """Return the MPS representation of `model` as a string"""
        config = self.config(options)
        if analyzer is None:
            analyzer = ModelAnalyzer(model)
        return _MPSWriter_impl(config, analyzer).write()


class _MPSWriter_impl(object):
    def __init__(self, config, analyzer):
        self.config = config
        self.analyzer = analyzer
        self.model = analyzer.model
        self.fixed_format = False
        # Number of (name, value) pairs written on the current line
        self.current_column = 0

    def write(self):
        timing_logger = logging.getLogger('mpexport.common.timing.writer')
        timer = TicTocTimer(logger=timing_logger)
        with_debug_timing = is_debug_set(timing_logger)

        config = self.config
        obfuscate = config.obfuscate
        model = self.model
        analyzer = self.analyzer

        analyzer.setup()
        if not obfuscate:
            invalid = analyzer.check_all_names(config.log_invalid_names)
            if invalid is not None:
                raise invalid_name_error(invalid)

        self.fixed_format = config.fixed_format
        if self.fixed_format and not analyzer.can_use_fixed_mps(obfuscate):
            logger.warning("Cannot use fixed format. Falling back to free format")
            self.fixed_format = False

        var_names = analyzer.variable_names(obfuscate)
        con_names = analyzer.constraint_names(obfuscate)

        # As the information regarding a column needs to be contiguous,
        # map each variable to the constraints where it appears.  This
        # also validates every variable reference before anything is
        # rendered.
        transpose = analyzer.build_transpose()
        if with_debug_timing:
            timer.toc('Transposed constraint matrix', level=logging.DEBUG)

        ostream = StringIO()
        write_comment_header(
            ostream, "*", analyzer, "Fixed" if self.fixed_format else "Free"
        )
        ostream.write("%-14s%s\n" % ("NAME", model.name or ""))

        #
        # ROWS section
        #
        section = StringIO()
        self.write_line_header(section, "N", "COST")
        section.write("\n")
        for con_index, con in enumerate(model.constraints):
            lb, ub = con.lower_bound, con.upper_bound
            if lb == ub:
                row_type = "E"
            elif lb == neg_inf:
                row_type = "L"
            else:
                # A finite upper bound on a 'G' row is written in RANGES
                row_type = "G"
            self.write_line_header(section, row_type, con_names[con_index])
            section.write("\n")
        self.write_section(ostream, "ROWS", section)

        #
        # COLUMNS section
        #
        section = StringIO()
        self.write_columns(section, True, transpose, var_names, con_names)
        if section.tell():
            integer_columns = section.getvalue()
            section = StringIO()
            section.write(_INT_MARKER_FORMAT % ("INTSTART", "'MARKER'", "'INTORG'"))
            section.write(integer_columns)
            section.write(_INT_MARKER_FORMAT % ("INTEND", "'MARKER'", "'INTEND'"))
        self.write_columns(section, False, transpose, var_names, con_names)
        self.write_section(ostream, "COLUMNS", section)
        if with_debug_timing:
            timer.toc('Wrote %s columns', len(model.variables), level=logging.DEBUG)

        #
        # RHS section
        #
        self.current_column = 0
        section = StringIO()
        for con_index, con in enumerate(model.constraints):
            lb, ub = con.lower_bound, con.upper_bound
            if lb != neg_inf:
                self.write_term(section, "RHS", con_names[con_index], lb)
            elif ub != inf:
                self.write_term(section, "RHS", con_names[con_index], ub)
        self.end_term_line(section)
        self.write_section(ostream, "RHS", section)

        #
        # RANGES section
        #
        self.current_column = 0
        section = StringIO()
        for con_index, con in enumerate(model.constraints):
            span = abs(con.upper_bound - con.lower_bound)
            if span != 0.0 and span != inf:
                self.write_term(section, "RANGE", con_names[con_index], span)
        self.end_term_line(section)
        self.write_section(ostream, "RANGES", section)

        #
        # BOUNDS section
        #
        section = StringIO()
        for var_index, var in enumerate(model.variables):
            self.write_bounds(section, var, var_names[var_index])
        self.write_section(ostream, "BOUNDS", section)

        ostream.write("ENDATA\n")
        timer.toc("Generated MPS representation", delta=False, level=logging.DEBUG)
        return ostream.getvalue()

    def write_section(self, ostream, header, section):
        if section.tell():
            ostream.write(header + "\n")
            ostream.write(section.getvalue())

    def write_pair(self, ostream, name, value):
        if self.fixed_format:
            precision = _FIXED_MPS_DOUBLE_WIDTH
            value_str = "%.*G" % (precision, value)
            # Use the largest precision that can fit into the field width.
            while len(value_str) > _FIXED_MPS_DOUBLE_WIDTH:
                precision -= 1
                value_str = "%.*G" % (precision, value)
            ostream.write(
                "  %-8s  %*s " % (name, _FIXED_MPS_DOUBLE_WIDTH, value_str)
            )
        else:
            ostream.write("  %-16s  %21.16G " % (name, value))

    def write_line_header(self, ostream, field_id, name):
        if self.fixed_format:
            ostream.write(" %-2s %-8s" % (field_id, name))
        else:
            ostream.write(" %-2s  %-16s" % (field_id, name))

    def write_term(self, ostream, head_name, name, value):
        # Two (name, value) pairs are packed on each line
        if self.current_column == 0:
            self.write_line_header(ostream, "", head_name)
        self.write_pair(ostream, name, value)
        self.end_term_line(ostream)

    def end_term_line(self, ostream):
        self.current_column += 1
        if self.current_column == 2:
            ostream.write("\n")
            self.current_column = 0

    def write_columns(self, ostream, integrality, transpose, var_names, con_names):
        for var_index, var in enumerate(self.model.variables):
            if var.is_integer != integrality:
                continue
            var_name = var_names[var_index]
            self.current_column = 0
            if var.objective_coefficient != 0.0:
                self.write_term(ostream, var_name, "COST", var.objective_coefficient)
            for con_index, coef in transpose[var_index]:
                self.write_term(ostream, var_name, con_names[con_index], coef)
            self.end_term_line(ostream)

    def write_bound(self, ostream, bound_type, name, value):
        self.write_line_header(ostream, bound_type, "BOUND")
        self.write_pair(ostream, name, value)
        ostream.write("\n")

    def write_unvalued_bound(self, ostream, bound_type, name):
        self.write_line_header(ostream, bound_type, "BOUND")
        ostream.write(f"  {name}\n")

    def write_bounds(self, ostream, var, name):
        lb, ub = var.lower_bound, var.upper_bound
        if var.is_integer:
            if is_binary(var):
                self.write_unvalued_bound(ostream, "BV", name)
                return
            if lb != 0.0:
                self.write_bound(ostream, "LI", name, lb)
            if ub != inf:
                self.write_bound(ostream, "UI", name, ub)
        elif lb == neg_inf and ub == inf:
            self.write_unvalued_bound(ostream, "FR", name)
        elif lb == ub:
            self.write_bound(ostream, "FX", name, lb)
        else:
            if lb != 0.0:
                self.write_bound(ostream, "LO", name, lb)
            elif ub == inf:
                self.write_unvalued_bound(ostream, "PL", name)
            if ub != inf:
                self.write_bound(ostream, "UP", name, ub)
