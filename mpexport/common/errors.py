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

"""Exceptions raised by the exporters and the message formatting they use"""

import inspect
import textwrap


def _fill(text, width, first, rest):
    # Messages that already contain line breaks are kept as given
    if '\n' in text:
        return text
    return textwrap.fill(
        text,
        width=width,
        initial_indent=first,
        subsequent_indent=rest,
        break_long_words=False,
        break_on_hyphens=False,
    )


def format_exception(msg, prolog=None, epilog=None, exception=None, width=76):
    """Line-wrap an exception message for display on the console.

    The first line is wrapped as if it followed the exception class
    name (``"ValueError: "``, or ``"module.Class: "`` for exceptions
    defined outside the builtins).  Without an `exception` the room
    left for the name is that of ``NotImplementedError``.

    Parameters
    ----------
    msg: str
        The exception message

    prolog: str, optional
        Text placed before `msg`; `msg` then starts on its own
        (indented) line

    epilog: str, optional
        Text placed (indented) after `msg`; `msg` is indented one more
        level

    exception: Exception or type, optional
        The exception (or exception class) that will carry the message

    width: int, optional
        Maximum line length

    Returns
    -------
    str
    """
    if exception is None:
        lead = 21
    else:
        cls = exception if inspect.isclass(exception) else type(exception)
        lead = len(cls.__name__) + 2
        if cls.__module__ != 'builtins':
            lead += len(cls.__module__) + 1
    first = ' ' * lead
    indent = ' ' * (8 if epilog else 4)

    lines = []
    if prolog is not None:
        prolog = _fill(prolog, width, first, ' ' * 4).lstrip()
        if '\n' in prolog:
            indent = ' ' * 8
        lines.append(prolog)
        first = indent

    msg = _fill(msg, width, first, indent)
    lines.append(msg if lines else msg.lstrip())

    if epilog is not None:
        lines.append(_fill(epilog, width, ' ' * 4, ' ' * 4))
    return '\n'.join(lines)


class MPExportException(Exception):
    """Base class of the mpexport exceptions.

    A subclass may set `default_message`, used when the exception is
    raised without arguments.
    """

    def __init__(self, *args):
        if not args and getattr(self, 'default_message', None):
            args = (self.default_message,)
        super().__init__(*args)


class DeveloperError(MPExportException, NotImplementedError):
    """Raised when mpexport itself is used inconsistently (a bug in
    mpexport rather than a problem with the model)."""

    def __str__(self):
        return format_exception(
            repr(super().__str__()),
            prolog="Internal mpexport implementation error:",
            epilog="Please report this to the mpexport developers.",
            exception=self,
        )


class InvalidNameError(MPExportException, ValueError):
    """A variable or constraint name cannot be written to an LP / MPS file.

    Raised before any output is generated.  Exporting with obfuscated
    (index-based) names never raises this exception.

    """

    default_message = "Model contains a name that is not valid in LP / MPS files"

    def __init__(self, *args, kind=None, index=None, name=None):
        self.kind = kind
        self.index = index
        self.name = name
        super().__init__(*args)


class OutOfRangeReferenceError(MPExportException, IndexError):
    """A constraint row references a variable index outside the model."""

    def __init__(self, *args, constraint=None, variable=None):
        self.constraint = constraint
        self.variable = variable
        super().__init__(*args)

    def __str__(self):
        return format_exception(super().__str__(), exception=self)
