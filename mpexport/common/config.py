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

"""The mpexport configuration system.

This module provides classes for building standardized configuration
objects based on the :class:`ConfigDict` and :class:`ConfigValue`
classes.  Writers declare a class-level ``CONFIG`` dictionary and
create a per-call copy holding the user's options::

    config = self.CONFIG(options)

Options may be supplied as a dict, another :class:`ConfigDict`, or a
string of ``key=value`` pairs (separated by whitespace and/or commas).
"""

import inspect
import io
import textwrap

import ply.lex

from collections.abc import Mapping


class NOTSET(object):
    """Marker indicating that an optional argument was not specified
    (used where ``None`` is a legitimate value)."""


_TRUE_STRINGS = {'TRUE', 'YES', 'T', 'Y', '1'}
_FALSE_STRINGS = {'FALSE', 'NO', 'F', 'N', '0'}


def Bool(val):
    """Validate and convert a writer flag.

    Accepts ``True`` / ``False``, the numbers 0 and 1, and (case
    insensitive) ``'true'``, ``'yes'``, ``'t'``, ``'y'``, ``'1'``,
    ``'false'``, ``'no'``, ``'f'``, ``'n'`` and ``'0'``, so that flags
    can be given in option strings.  Anything else is an error.

    """
    if type(val) is bool:
        return val
    if isinstance(val, str):
        key = val.upper()
        if key in _TRUE_STRINGS:
            return True
        if key in _FALSE_STRINGS:
            return False
    elif int(val) == float(val) and int(val) in (0, 1):
        return bool(int(val))
    raise ValueError("Expected Boolean, but received %s" % (val,))


def PositiveInt(val):
    """Validate and convert a strictly positive integer (e.g., a line
    length).  Non-integral numbers are rejected rather than truncated."""
    ans = int(val)
    if ans != float(val) or ans <= 0:
        raise ValueError("Expected positive int, but received %s" % (val,))
    return ans


def _domain_name(domain):
    if domain is None:
        return ""
    return getattr(domain, '__name__', type(domain).__name__)


def _clean_doc(doc):
    if not doc:
        return doc
    return inspect.cleandoc(doc)


def _build_lexer(literals=''):
    # Separators between tokens
    t_ignore = " \t\r,"

    tokens = ["STRING", "WORD"]

    # Single- or double-quoted, with backslash escapes
    _quoted_str = r"'(?:[^'\\]|\\.)*'"
    _general_str = "|".join([_quoted_str, _quoted_str.replace("'", '"')])

    @ply.lex.TOKEN(_general_str)
    def t_STRING(t):
        t.value = t.value[1:-1]
        return t

    # Anything else up to the next separator or literal
    @ply.lex.TOKEN(r'[^' + repr(t_ignore + literals) + r']+')
    def t_WORD(t):
        return t

    def t_error(t):
        # Option strings are a single line: lexpos is the column
        raise ValueError(
            "ERROR: Token '%s' Line %s Column %s" % (t.value, t.lineno, t.lexpos + 1)
        )

    return ply.lex.lex()


def _default_string_dict_lexer(value):
    """Yield the (key, value) pairs of a ``"key=value, key: value"``
    option string.

    Pairs are separated by whitespace and/or commas, which are otherwise
    ignored.  Values containing separators may be quoted.
    """
    _lex = _default_string_dict_lexer._lex
    if _lex is None:
        _default_string_dict_lexer._lex = _lex = _build_lexer(':=')
    _lex.input(value)
    while True:
        key = _lex.token()
        if not key:
            break
        sep = _lex.token()
        if not sep:
            raise ValueError("Expected ':' or '=' but encountered end of string")
        if sep.type not in ':=':
            raise ValueError(
                f"Expected ':' or '=' but found '{sep.value}' at "
                f"Line {sep.lineno} Column {sep.lexpos+1}"
            )
        val = _lex.token()
        if not val:
            raise ValueError(
                f"Expected value following '{sep.type}' "
                f"but encountered end of string"
            )
        yield key.value, val.value


_default_string_dict_lexer._lex = None


class ConfigBase(object):
    __slots__ = (
        '_parent',
        '_domain',
        '_name',
        '_userSet',
        '_data',
        '_default',
        '_description',
        '_doc',
    )

    def __init__(self, default=None, domain=None, description=None, doc=None):
        self._parent = None
        self._name = None
        self._userSet = False
        self._data = NOTSET
        self._default = default
        self._domain = domain
        self._description = _clean_doc(description)
        self._doc = _clean_doc(doc)

    def __call__(self, value=NOTSET, description=NOTSET, doc=NOTSET):
        """Return an independent copy of this configuration.

        The copy starts from the current values (which become its
        defaults); `value`, if given, is then applied with
        :py:meth:`set_value`.
        """
        if description is NOTSET:
            description = self._description
        if doc is NOTSET:
            doc = self._doc
        ans = self._copy(description, doc)
        if value is not NOTSET:
            ans.set_value(value)
        return ans

    def name(self, fully_qualified=False):
        # The top-level dict is anonymous
        if self._name is None:
            return ""
        if fully_qualified and self._parent is not None:
            parent = self._parent.name(fully_qualified)
            if parent:
                return parent + '.' + self._name
        return self._name

    def domain_name(self):
        return _domain_name(self._domain)

    def _cast(self, value):
        if value is None or self._domain is None:
            return value
        try:
            return self._domain(value)
        except Exception as err:
            raise ValueError(
                "invalid value for configuration '%s':\n"
                "\tFailed casting %s\n\tto %s\n\tError: %s"
                % (self.name(True), value, self.domain_name(), err)
            )

    def user_values(self):
        """Return the entries that were explicitly set by the user"""
        return [obj for _, _, obj in self._data_collector(None, "") if obj._userSet]

    def generate_documentation(self, indent_spacing=4, width=78):
        """Return numpydoc-style documentation for this configuration"""
        out = io.StringIO()
        wrapper = textwrap.TextWrapper(width=width)
        for lvl, _, obj in self._data_collector(0, ""):
            if isinstance(obj, ConfigDict):
                continue
            indent = ' ' * (indent_spacing * lvl)
            default = 'optional' if obj._default is None else f'default={obj._default!r}'
            typeinfo = ', '.join(filter(None, [obj.domain_name(), default]))
            out.write(f'\n{indent}{obj.name()}: {typeinfo}\n')
            wrapper.initial_indent = wrapper.subsequent_indent = (
                indent + ' ' * indent_spacing
            )
            itemdoc = obj._doc or obj._description
            if itemdoc:
                paragraphs = itemdoc.split('\n\n')
                out.write('\n'.join(wrapper.fill(p) for p in paragraphs) + '\n')
        return inspect.cleandoc(out.getvalue())


class ConfigValue(ConfigBase):
    """A single (validated) writer option.

    Parameters
    ----------
    default: optional
        The value used until the option is set (and restored by
        :py:meth:`reset`).

    domain: Callable, optional
        Called with each candidate value; returns the value to store or
        raises an exception if the value is not acceptable.  Typically
        one of the validators in this module (:py:func:`Bool`,
        :py:func:`PositiveInt`) or a type such as ``int``.

    description: str, optional
        One-line summary of the option

    doc: str, optional
        Longer documentation, used in generated docstrings

    """

    __slots__ = ()

    def __init__(self, *args, **kwds):
        super().__init__(*args, **kwds)
        self.reset()

    def _copy(self, description, doc):
        return ConfigValue(self.value(), self._domain, description, doc)

    def value(self):
        return self._data

    def set_value(self, value):
        self._data = self._cast(value)
        self._userSet = True

    def reset(self):
        self._data = self._cast(self._default)
        self._userSet = False

    def _data_collector(self, level, prefix):
        yield (level, prefix, self)


class ConfigDict(ConfigBase, Mapping):
    """An ordered collection of declared options.

    Entries are added with :py:meth:`declare` and read either by key
    (``config['max_line_length']``) or as attributes
    (``config.max_line_length``).  Storing a value for an undeclared
    key raises :py:class:`ValueError`.

    Parameters
    ----------
    description: str, optional
        One-line summary of this collection

    doc: str, optional
        Longer documentation for this collection

    """

    __slots__ = ()
    _reserved_words = set()

    def __init__(self, description=None, doc=None):
        ConfigBase.__init__(self, None, dict, description, doc)
        self._data = {}

    def _copy(self, description, doc):
        ans = ConfigDict(description, doc)
        for key, cfg in self._data.items():
            ans.declare(cfg._name, cfg())
        return ans

    @staticmethod
    def _key(key):
        return str(key).replace(' ', '_')

    def __getitem__(self, key):
        return self._data[self._key(key)].value()

    def get(self, key, default=None):
        """Return the :py:class:`ConfigValue` declared as `key` (not its
        value), or `default` if there is no such entry"""
        return self._data.get(self._key(key), default)

    def __setitem__(self, key, val):
        _key = self._key(key)
        if _key not in self._data:
            raise ValueError(
                "Key '%s' not defined in ConfigDict '%s'"
                " and Dict disallows implicit entries" % (key, self.name(True))
            )
        cfg = self._data[_key]
        # Assigning an entry to itself is a no-op
        if cfg is not val:
            cfg.set_value(val)

    def __contains__(self, key):
        return self._key(key) in self._data

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return (cfg._name for cfg in self._data.values())

    def __getattr__(self, attr):
        # Only reached when normal attribute lookup fails.  '_data' is
        # excluded to avoid recursing on a partially built instance.
        _attr = self._key(attr)
        if _attr == "_data" or _attr not in self._data:
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{attr}'"
            )
        return self[_attr]

    def __setattr__(self, name, value):
        if name in ConfigDict._reserved_words:
            super().__setattr__(name, value)
        else:
            self[name] = value

    def declare(self, name, config):
        """Add the `config` entry to this dict as `name`, returning `config`"""
        name = str(name)
        _name = self._key(name)
        if config._parent is not None:
            raise ValueError(
                "config '%s' is already assigned to ConfigDict '%s'; "
                "cannot reassign to '%s'"
                % (name, config._parent.name(True), self.name(True))
            )
        if _name in self._data:
            raise ValueError(
                "duplicate config '%s' defined for ConfigDict '%s'"
                % (name, self.name(True))
            )
        self._data[_name] = config
        config._parent = self
        config._name = name
        return config

    def declare_from(self, other, skip=None):
        """Declare copies of the entries of `other` (except those in `skip`)"""
        if not isinstance(other, ConfigDict):
            raise ValueError("ConfigDict.declare_from() only accepts other ConfigDicts")
        for key in other:
            if skip and key in skip:
                continue
            if key in self:
                raise ValueError(
                    "ConfigDict.declare_from passed a block "
                    "with a duplicate field, '%s'" % (key,)
                )
            self.declare(key, other.get(key)())

    def value(self):
        return {cfg._name: cfg.value() for cfg in self._data.values()}

    def set_value(self, value):
        """Set several entries at once.

        `value` may be a dict, another ConfigDict, or a string of
        ``key=value`` (or ``key: value``) pairs.  Either every entry is
        updated, or (if any key is unknown or any value is rejected) the
        dict is left unchanged and the error is raised.
        """
        if value is None:
            return self
        if isinstance(value, str):
            value = dict(_default_string_dict_lexer(value))
        if type(value) is not dict and not isinstance(value, ConfigDict):
            raise ValueError(
                "Expected dict value for %s.set_value, found %s"
                % (self.name(True), type(value).__name__)
            )
        incoming = {}
        for key in value:
            _key = self._key(key)
            if _key not in self._data:
                raise ValueError(
                    "key '%s' not defined for ConfigDict '%s' and "
                    "implicit (undefined) keys are not allowed"
                    % (key, self.name(True))
                )
            incoming[_key] = value[key]
        if not incoming:
            return self

        saved = {key: (cfg._data, cfg._userSet) for key, cfg in self._data.items()}
        try:
            # Entries are set in declaration order
            for key, cfg in self._data.items():
                if key in incoming:
                    cfg.set_value(incoming[key])
        except Exception:
            for key, cfg in self._data.items():
                cfg._data, cfg._userSet = saved[key]
            raise
        self._userSet = True
        return self

    def reset(self):
        for cfg in self._data.values():
            cfg.reset()
        self._userSet = False

    def _data_collector(self, level, prefix):
        if prefix:
            yield (level, prefix, self)
            if level is not None:
                level += 1
        for cfg in self._data.values():
            yield from cfg._data_collector(level, cfg._name + ': ')


ConfigDict._reserved_words.update(dir(ConfigDict))

# The writers declare their options as a "block"
ConfigBlock = ConfigDict


class document_kwargs_from_configdict(object):
    """Decorator appending the documentation of a :py:class:`ConfigDict`
    to a function's docstring (as a numpydoc keyword-argument section).

    >>> from mpexport.common.config import (
    ...     ConfigDict, ConfigValue, PositiveInt, document_kwargs_from_configdict
    ... )
    >>> class MyWriter(object):
    ...     CONFIG = ConfigDict()
    ...     CONFIG.declare('max_line_length', ConfigValue(
    ...         default=80,
    ...         domain=PositiveInt,
    ...         doc="Wrap lines longer than this"
    ...     ))
    ...
    ...     @document_kwargs_from_configdict(CONFIG)
    ...     def write(self, model, **kwargs):
    ...         config = self.CONFIG(kwargs)

    """

    def __init__(self, config, section='Keyword Arguments', indent_spacing=4, width=78):
        self.config = config
        self.section = section
        self.indent_spacing = indent_spacing
        self.width = width

    def __call__(self, fcn):
        header = self.section + '\n' + '-' * len(self.section) + '\n'
        doc = inspect.cleandoc(fcn.__doc__) + '\n\n' if fcn.__doc__ else ""
        fcn.__doc__ = (
            doc
            + header
            + self.config.generate_documentation(
                indent_spacing=self.indent_spacing, width=self.width
            )
        )
        return fcn
