#!/usr/bin/env python

"""
Main entry point for polyquad. Run with --help for options.

The input's first line holds the integration bounds ("lower, upper"); every
following line holds one polynomial, either as comma-separated coefficients
(lowest power first) or, with --expressions, as an algebraic expression.
"""

import sys
import argparse

from polyquad import common
from polyquad import logging
from polyquad import opts
from polyquad import parse
from polyquad.decimals import plain

def calculate_integrals(lines, expressions=False):
    """Yield the output lines for the given input lines.

    All polynomials are parsed before anything is integrated, so malformed
    input is reported before any output is produced.
    """
    if not lines:
        raise common.InvalidArgument("Input is empty; expected a bounds line")
    lower, upper = parse.parse_bounds(lines[0])
    read = parse.parse_expression if expressions else parse.parse_csv_line

    with logging.task("parsing", lines=len(lines) - 1):
        polynomials = [read(line) for line in lines[1:]]

    yield "bounds: {}, {}".format(plain(lower), plain(upper))
    for polynomial in polynomials:
        with logging.task("integrating", polynomial=polynomial):
            yield "integrated using rectangles: {}, integrated using trapezoids: {}".format(
                polynomial.integrate_using_rectangles(lower, upper),
                polynomial.integrate_using_trapezoids(lower, upper))

def run(argv=None):
    """Entry point for the polyquad executable.

    Reads the command line, integrates every polynomial in the input and
    returns the process exit status.
    """

    parser = argparse.ArgumentParser(description='Numerically integrate polynomials with exact decimal arithmetic.')
    parser.add_argument("-o", "--output", metavar="FILE", default="-", help="Output file; default is stdout")
    parser.add_argument("-e", "--expressions", action="store_true", help="Read polynomials as expressions like 5x^3-8 instead of coefficient lists")

    internal_opts = parser.add_argument_group("Quadrature and logging")
    opts.setup(internal_opts)

    parser.add_argument("file", nargs="?", default=None, help="Input file (omit to use stdin)")
    args = parser.parse_args(argv)
    opts.read(args)

    try:
        lines = common.read_lines(args.file or "-")
        with common.open_maybe_stdout(args.output) as out:
            for line in calculate_integrals(lines, expressions=args.expressions):
                out.write(line + "\n")
    except (ValueError, OSError, MemoryError) as e:
        print("OPERATION FAILED!", file=sys.stderr)
        print("Reason: {}".format(e), file=sys.stderr)
        return 1
    finally:
        if logging.profile.value:
            logging.dump_profile(logging.profile.value)

    print("OPERATION SUCCEEDED!", file=sys.stderr)
    return 0

if __name__ == "__main__":
    sys.exit(run())
