"""Grid ray casting, XPM textures and first-person rendering into pixel buffers."""

__version__ = "0.1.0"
__all__ = ["__version__"]