from __future__ import annotations

__version__ = "3.0.0"
version = __version__
