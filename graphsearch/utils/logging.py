from graphsearch.utils.documentation import internal_only


@internal_only
def log(*args, **kwargs):
    """
    Like print, but the one place in graphsearch that is allowed to write output.
    Pass ``file=sys.stderr`` to report errors.
    """
    print(*args, **kwargs)
