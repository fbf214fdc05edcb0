"""Parsers for polynomial text.

The important functions are:
 - parse_expression: str -> Polynomial   ("5x^3-8+3x^2-x")
 - parse_csv_line:   str -> Polynomial   ("-8,-1,3,5", lowest power first)
 - parse_bounds:     str -> (Decimal, Decimal)   ("0, 10")

Each raises InvalidArgument when the text does not match its grammar.
"""

# builtin
import re
from decimal import Decimal

# 3rd party
from ply import lex, yacc

# ours
from polyquad import parsetools
from polyquad.common import InvalidArgument
from polyquad.logging import event
from polyquad.polynomials import Polynomial

# Each operator becomes an OP_* token for the lexer. So, e.g. ("PLUS", "+")
# matches "+" and the token will be named OP_PLUS.
_OPERATORS = [
    ("PLUS", "+"),
    ("MINUS", "-"),
    ("TIMES", "*"),
    ("CARET", "^"),
    ]

# The one variable polynomials may mention.
_VARIABLE = "x"

# Decimal magnitude: no leading zeros, optional fraction.
_MAGNITUDE_RGX = r"(0|[1-9][0-9]*)(\.[0-9]+)?"
_NUMBER_RGX = r"[+-]?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?"
_COMMA_RGX = r"\s*,\s*"

# Largest exponent accepted in an expression (a signed 32-bit int).
_MAX_EXPONENT = 2**31 - 1

_CSV_LINE = re.compile(r"{num}(?:{comma}{num})*".format(num=_NUMBER_RGX, comma=_COMMA_RGX))
_BOUNDS_LINE = re.compile(r"\s*({num}){comma}({num})\s*".format(num=_NUMBER_RGX, comma=_COMMA_RGX))

def _rules(name, ldict):
    # ply normally discovers rules by inspecting its caller's local variables;
    # handing it an explicit namespace lets the rules be assembled in a dict.
    return type(name, (), dict(ldict))

# Lexer ########################################################################

def op_token_name(opname):
    return "OP_{}".format(opname.upper())

tokens = ["NUM", "VAR"]
for opname, op in _OPERATORS:
    tokens.append(op_token_name(opname))
tokens = tuple(tokens) # freeze tokens

def make_lexer():

    # Whitespace is not skipped: "5 x" is not an expression.
    @lex.TOKEN(_MAGNITUDE_RGX)
    def t_NUM(t):
        return t

    def t_error(t):
        raise InvalidArgument("Illegal character {!r} at position {}".format(t.value[0], t.lexpos))

    rules = dict(locals())
    rules["tokens"] = tokens
    rules["t_VAR"] = re.escape(_VARIABLE)
    for opname, op in _OPERATORS:
        rules["t_{}".format(op_token_name(opname))] = re.escape(op)

    return lex.lex(module=_rules("ExpressionLexer", rules))

_lexer = make_lexer()
def tokenize(s):
    lexer = _lexer.clone() # Because lexer objects are stateful
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

# Parser #######################################################################

def make_parser():
    start = "expression"

    def p_expression(p):
        """expression : first_term rest"""
        result = Polynomial.ZERO
        for coefficient, exponent in (p[1],) + p[2]:
            result = result.add(Polynomial.monomial(coefficient, exponent))
        p[0] = result

    def p_first_term(p):
        """first_term : signed_term
                      | term"""
        p[0] = p[1]

    def p_signed_term(p):
        """signed_term : OP_PLUS term
                       | OP_MINUS term"""
        coefficient, exponent = p[2]
        if p[1] == "-":
            coefficient = coefficient.copy_negate()
        p[0] = (coefficient, exponent)

    def p_term(p):
        """term : NUM
                | NUM power
                | NUM OP_TIMES power
                | power"""
        if len(p) == 2:
            if isinstance(p[1], int):
                p[0] = (Decimal(1), p[1])
            else:
                p[0] = (Decimal(p[1]), 0)
        else:
            p[0] = (Decimal(p[1]), p[len(p) - 1])

    def p_power(p):
        """power : VAR
                 | VAR OP_CARET NUM"""
        if len(p) == 2:
            p[0] = 1
        elif "." in p[3]:
            raise InvalidArgument("Exponent {} at position {} is not an integer".format(p[3], p.lexpos(3)))
        elif len(p[3]) > len(str(_MAX_EXPONENT)) or int(p[3]) > _MAX_EXPONENT:
            raise InvalidArgument("Exponent {} at position {} is larger than {}".format(p[3], p.lexpos(3), _MAX_EXPONENT))
        else:
            p[0] = int(p[3])

    def p_empty(p):
        'empty :'
        pass

    def p_error(p):
        if p is None:
            raise InvalidArgument("Unexpected end of expression")
        raise InvalidArgument("Unexpected {!r} at position {}".format(p.value, p.lexpos))

    rules = dict(locals())
    rules["tokens"] = tokens
    parsetools.multi(rules, "rest", "signed_term")
    return yacc.yacc(module=_rules("ExpressionGrammar", rules), debug=False, write_tables=False)

_parser = make_parser()

def parse_expression(s):
    """Parse an algebraic expression such as "5x^3-8+3x^2-x".

    The first term may omit its sign; every later term must start with + or
    -.  A term is a decimal coefficient, x, x^n, or a coefficient followed by
    x or x^n with an optional * in between.  Like terms are summed.
    """
    if s is None:
        raise InvalidArgument("Expression cannot be None")
    try:
        result = _parser.parse(s, lexer=_lexer.clone())
    except InvalidArgument as e:
        raise InvalidArgument("{!r} is not a polynomial expression: {}".format(s, e)) from e
    event("parsed expression {!r} as {}".format(s, result))
    return result

def parse_csv_line(s):
    """Parse comma-separated decimal coefficients, lowest power first."""
    if s is None:
        raise InvalidArgument("CSV line cannot be None")
    if not _CSV_LINE.fullmatch(s):
        raise InvalidArgument("{!r} is not a line of comma-separated numbers".format(s))
    result = Polynomial(Decimal(field) for field in re.split(_COMMA_RGX, s))
    event("parsed coefficients {!r} as {}".format(s, result))
    return result

def parse_bounds(s):
    """Parse integration bounds "lower, upper"; lower must be less than upper."""
    if s is None:
        raise InvalidArgument("Bounds line cannot be None")
    m = _BOUNDS_LINE.fullmatch(s)
    if not m:
        raise InvalidArgument("Unable to find valid bounds in {!r}".format(s))
    lower, upper = Decimal(m.group(1)), Decimal(m.group(2))
    if lower >= upper:
        raise InvalidArgument("Lower bound {} should be less than upper bound {}".format(lower, upper))
    return lower, upper
