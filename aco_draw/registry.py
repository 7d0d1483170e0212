"""Colour space auto-discovery and registration.

Scans aco_draw/spaces/ for modules that define a `space` object of type
ColourSpace. Collects them into a dict keyed by wire id. The dict is
built once and only read afterwards.

Handles both normal Python (pkgutil.iter_modules) and frozen PyInstaller
binaries (where iter_modules returns nothing — falls back to explicit
imports from spaces/__init__.py).
"""

import importlib
import pkgutil

from aco_draw.core.errors import UnsupportedColourSpaceError
from aco_draw.core.types import ColourSpace

_registry: dict[int, ColourSpace] = {}

# Known space module names — fallback for frozen binaries
_SPACE_MODULES = [
    'cmyk',
    'grayscale',
    'hsb',
    'lab',
    'rgb',
    'wide_cmyk',
]


def discover() -> dict[int, ColourSpace]:
    """Import all colour space modules and return the registry."""
    if _registry:
        return _registry

    import aco_draw.spaces as pkg

    # Try pkgutil first (works in normal Python)
    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]

    # Frozen binary fallback: pkgutil finds nothing, use known list
    if not found_modules:
        found_modules = _SPACE_MODULES

    found: dict[int, ColourSpace] = {}
    for modname in found_modules:
        module = importlib.import_module(f'aco_draw.spaces.{modname}')
        space = getattr(module, 'space', None)
        if isinstance(space, ColourSpace):
            if space.id in found:
                raise RuntimeError(f'Colour space id {int(space.id)} claimed by {found[space.id].name} and {space.name}')
            found[int(space.id)] = space

    _registry.update(found)
    return _registry


def get(space_id: int) -> ColourSpace:
    """Get a colour space by wire id."""
    reg = discover()
    if space_id not in reg:
        raise UnsupportedColourSpaceError(space_id)
    return reg[space_id]


def by_name(name: str) -> ColourSpace:
    """Get a colour space by its CLI name (e.g. 'wide-cmyk')."""
    for space in discover().values():
        if space.name == name:
            return space
    raise KeyError(f'Unknown colour space: {name}. Available: {", ".join(sorted(s.name for s in discover().values()))}')


def all_spaces() -> dict[int, ColourSpace]:
    """Return all registered colour spaces."""
    return discover()
