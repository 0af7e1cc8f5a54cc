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

__all__ = ['check_name_validity', 'PaddedNumericLabeler']

import logging

logger = logging.getLogger('mpexport.core')

# Names must conform to both the LP and the MPS grammar.
MAX_NAME_LENGTH = 255
FORBIDDEN_SYMBOLS = '+-*/<>=:\\'
FORBIDDEN_CHARS = ' ' + FORBIDDEN_SYMBOLS
FORBIDDEN_FIRST_CHARS = '$.0123456789'


def check_name_validity(name, log_invalid_names=False):
    """Return True if `name` can be written to LP and MPS files.

    A valid name is non-empty, at most 255 characters long, contains
    none of the characters ``' +-*/<>=:\\'`` and does not start with one
    of ``'$.0123456789'``.

    Parameters
    ----------
    name: str
        The candidate name

    log_invalid_names: bool
        If True, log a warning (on the ``mpexport.core`` logger)
        explaining why the name was rejected

    """
    if not name:
        if log_invalid_names:
            logger.warning("check_name_validity() should not be passed an empty name.")
        return False
    if len(name) > MAX_NAME_LENGTH:
        if log_invalid_names:
            logger.warning(
                "Invalid name %s: length > %d. Will be unable to write model to file.",
                name,
                MAX_NAME_LENGTH,
            )
        return False
    if any(c in FORBIDDEN_CHARS for c in name):
        if log_invalid_names:
            logger.warning(
                "Invalid name %s contains forbidden character: %s or space. "
                "Will be unable to write model to file.",
                name,
                FORBIDDEN_SYMBOLS,
            )
        return False
    if name[0] in FORBIDDEN_FIRST_CHARS:
        if log_invalid_names:
            logger.warning(
                "Invalid name %s. First character is one of: %s "
                "Will be unable to write model to file.",
                name,
                FORBIDDEN_FIRST_CHARS,
            )
        return False
    return True


class PaddedNumericLabeler(object):
    """Generate synthetic ``<prefix><index>`` labels.

    Indices are zero-padded to the number of decimal digits in `count`
    so that all labels of one kind have the same width and sort in index
    order (``V00``, ``V01``, ..., ``V10``).

    """

    def __init__(self, prefix, count):
        self.prefix = prefix
        self.width = len(str(count))

    def __call__(self, index):
        return '%s%0*d' % (self.prefix, self.width, index)
