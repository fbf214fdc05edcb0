"""Helper functions for the expression grammar.

The expression grammar needs one repeated production: every term after the
first is a signed term, and there may be any number of them.  `multi`
generates the two ply rules for such a list so the grammar in parse.py can
stay flat.
"""

from polyquad.common import fresh_name

def multi(ldict, selfname, production):
    """
    Usage:
        multi(rules, NAME, P)
        where P is a production name and `rules` is the namespace of p_*
        functions that will be handed to ply.

    This adds a production named NAME of the form

        NAME ::= empty | P+

    whose value is a tuple of whatever each P produced, in input order, e.g.
    multi(rules, "rest", "signed_term") turns "+3x-1" into
    ((3, 1), (-1, 0)).  The grammar must define the `empty` production.
    """

    itemsname = fresh_name("items")
    def p_items(p):
        if len(p) > 2:
            p[0] = (p[1],) + p[2]
        else:
            p[0] = (p[1],)
    p_items.__doc__ = (
        """{items} : {prod}
                   | {prod} {items}""".format(items=itemsname, prod=production))
    p_items.__name__ = "p_{}".format(itemsname)
    ldict[p_items.__name__] = p_items

    def p_list(p):
        p[0] = p[1] or ()
    p_list.__doc__ = (
        """{self} : empty
                  | {items}""".format(self=selfname, items=itemsname))
    p_list.__name__ = "p_{}".format(selfname)
    ldict[p_list.__name__] = p_list
