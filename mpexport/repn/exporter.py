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
"""High-level entry points for exporting a :py:class:`Model` as LP or MPS text.

Example
-------

>>> from mpexport.environ import Model, export_as_lp
>>> m = Model(name='demo')
>>> x = m.add_variable(name='x', upper_bound=4, objective_coefficient=1)
>>> c = m.add_constraint(name='c', upper_bound=10, terms=[(x, 2)])
>>> print(export_as_lp(m))  # doctest: +SKIP

"""

from mpexport.common.config import ConfigBlock
from mpexport.repn.plugins.lp_writer import LPWriter
from mpexport.repn.plugins.mps import MPSWriter
from mpexport.repn.util import ModelAnalyzer


class ModelExporter(object):
    """Export one model in LP and/or MPS format.

    The options common to all export calls are fixed when the exporter
    is created; the model analysis (variable classification and
    synthetic name widths) is performed once and shared by every
    export.  Each export returns a complete string, or raises without
    producing any partial text.

    Parameters
    ----------
    model: Model
        The model to export.  It must not be modified while the
        exporter is in use.

    options: dict or str, optional
        Values for the options below, as a dict or as a
        ``"key=value, key=value"`` string.

    """

    CONFIG = ConfigBlock('exporter')
    CONFIG.declare_from(LPWriter.CONFIG, skip={'obfuscate'})

    def __init__(self, model, options=None, **kwds):
        self.model = model
        self.config = self.CONFIG(options)
        self.config.set_value(kwds)
        self.analyzer = ModelAnalyzer(model)

    def export_as_lp(self, obfuscate=False, **options):
        """Return the model in LP format"""
        config = self.config(options)
        return LPWriter().to_string(
            self.model, self.analyzer, obfuscate=obfuscate, **config.value()
        )

    def export_as_mps(self, fixed_format=False, obfuscate=False, **options):
        """Return the model in (fixed or free) MPS format"""
        config = self.config(options)
        return MPSWriter().to_string(
            self.model,
            self.analyzer,
            fixed_format=fixed_format,
            obfuscate=obfuscate,
            log_invalid_names=config.log_invalid_names,
        )


def export_as_lp(model, obfuscate=False, **options):
    """Return `model` in LP format.

    See :py:class:`ModelExporter` for the accepted options.
    """
    return ModelExporter(model, **options).export_as_lp(obfuscate=obfuscate)


def export_as_mps(model, fixed_format=False, obfuscate=False, **options):
    """Return `model` in MPS format.

    See :py:class:`ModelExporter` for the accepted options.
    """
    return ModelExporter(model, **options).export_as_mps(
        fixed_format=fixed_format, obfuscate=obfuscate
    )
