"""Small pygame + OpenGL demos built on a shared 2D figure library."""

__version__ = "0.1.0"
