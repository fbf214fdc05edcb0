"""Tunable settings declared next to the code that reads them.

The quadrature rules have a subdivision count and a rounding scale, and the
log has a verbosity switch.  Each module declares an Option for its own
settings; `setup` then exposes every Option declared so far on an argparse
parser and `read` copies the parsed values back.

Usage:

    subdivisions = Option("subdivisions", int, 1000, description="...")
    ...
    n = subdivisions.value
"""

# All Option objects that have ever been created, in declaration order.
_OPTS = []

# Values that override declared defaults.  `restore` fills this in so that
# options in modules imported later still pick up the restored value.
_DEFAULT_VALUE_OVERRIDES = {}

class Option(object):
    def __init__(self, name, type, default, description="", metavar=None):
        assert type in (bool, str, int), "unsupported option type {}".format(type)
        self.name = name
        self.description = description
        self.type = type
        self.default = default
        self.value = _DEFAULT_VALUE_OVERRIDES.get(name, default)
        self.metavar = metavar
        _OPTS.append(self)

    def __repr__(self):
        return "Option({!r}, {}, {!r})".format(self.name, self.type.__name__, self.value)

    def __bool__(self):
        raise Exception(
            "Option {} was used as a boolean; read its `.value` instead.".format(self.name))

def _argname(o):
    if o.type is bool and o.default:
        return "no-" + o.name
    return o.name

def _help(o):
    if o.type is bool:
        return o.description
    default = "default={!r}".format(o.default)
    return "{} ({})".format(o.description, default) if o.description else default

def setup(parser):
    """Add a command-line flag to `parser` for every declared Option."""
    for o in _OPTS:
        flag = "--" + _argname(o)
        if o.type is bool:
            parser.add_argument(flag, action="store_true", default=False, help=_help(o))
        else:
            parser.add_argument(flag, metavar=o.metavar, type=o.type, default=o.value, help=_help(o))

def read(args):
    """Copy parsed argparse values into the declared Options."""
    for o in _OPTS:
        value = getattr(args, _argname(o).replace("-", "_"))
        if o.type is bool and o.default:
            value = not value
        o.value = o.type(value)

def snapshot():
    """Produce a snapshot of current option values."""
    return { o.name : o.value for o in _OPTS }

def restore(snap):
    """Restore a snapshot of option values."""
    global _DEFAULT_VALUE_OVERRIDES
    for o in _OPTS:
        o.value = snap.get(o.name, o.value)
    _DEFAULT_VALUE_OVERRIDES = dict(snap)
