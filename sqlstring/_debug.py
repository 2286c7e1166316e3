"""Used for debugging"""

STATE = {"DEBUG": False}


def if_debug_print(*args, sep=" ", end="\n", flush=True):
    """If debug? print!"""
    if STATE["DEBUG"]:
        arg0 = args[0]
        print(
            arg0,
            *(repr(arg) for arg in args[1:]),
            sep=sep,
            end=end,
            flush=flush,
        )


def trace_render(builder: object, query: str):
    """Trace a rendered statement"""
    if_debug_print(f"[{type(builder).__name__}]", query)
    return query
