"""Landscape Grid layout service"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("landscape-grid")
except PackageNotFoundError:
    __version__ = "dev"
