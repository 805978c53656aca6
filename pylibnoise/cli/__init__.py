"""
Command Line Interface for pylibnoise

Command line utilities for previewing noise graphs without writing Python
scripts.

Available Commands:
- render (pln-render): Render a noise preset to a PNG image
"""

_CLI_SUBMODULES = {
    "render": (".render_commands", "render"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
