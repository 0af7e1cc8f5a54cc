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

def load():
    from mpexport.repn.plugins import lp_writer, mps


def writer_names():
    """Return the sorted names of all registered problem writers"""
    from mpexport.repn import WriterFactory

    load()
    return sorted(WriterFactory)
