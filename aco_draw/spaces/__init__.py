"""Auto-discovery of colour space modules.

Every .py file in this package that defines a `space` object is
auto-registered by aco_draw.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the space files at runtime.
"""

# PyInstaller hidden imports — keep this list in sync with space modules
import aco_draw.spaces.cmyk as _cmyk  # noqa: F401
import aco_draw.spaces.grayscale as _grayscale  # noqa: F401
import aco_draw.spaces.hsb as _hsb  # noqa: F401
import aco_draw.spaces.lab as _lab  # noqa: F401
import aco_draw.spaces.rgb as _rgb  # noqa: F401
import aco_draw.spaces.wide_cmyk as _wide_cmyk  # noqa: F401
