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

import sys as _sys

import importlib


def _do_import(pkg_name):
    importlib.import_module(pkg_name)


#
# These packages contain plugins that need to be loaded
#
_packages = ['mpexport.repn']


def _import_packages():
    #
    # Import required packages
    #
    for _package in _packages:
        pname = _package + '.plugins'
        _do_import(pname)
        pkg = _sys.modules[pname]
        pkg.load()


_import_packages()

#
# Expose the model and exporter APIs
#
from mpexport.core.model import Model, Variable, Constraint
from mpexport.common.errors import (
    MPExportException,
    InvalidNameError,
    OutOfRangeReferenceError,
)
from mpexport.repn import WriterFactory
from mpexport.repn.exporter import ModelExporter, export_as_lp, export_as_mps
