# backend
# (source of secure random bytes)
#

from importlib import import_module

# ordered by priority, the first importable one provides `randombytes`
all_backend_names = ('pynacl', 'standard')


class MissingError(RuntimeError):
    pass


def _load_backends():
    backends = ()
    for name in all_backend_names:
        try:
            backends += (import_module('.' + name, __name__),)
        except ImportError:
            pass
    return backends


available_backends = _load_backends()


def __getattr__(name):
    if name != 'randombytes':
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    if not available_backends:
        raise MissingError(f"Missing randombytes. Please install {' or '.join(all_backend_names)}.")
    return available_backends[0].randombytes
