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
"""mpexport: LP and MPS writers for linear and mixed-integer models

mpexport.version provides a mechanism for managing stuff that is related
to releases of the mpexport package.
"""

from mpexport.version.info import version, version_info, __version__
