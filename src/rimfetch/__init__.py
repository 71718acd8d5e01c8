import importlib.metadata

try:
    __version__ = importlib.metadata.version("rimfetch")
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"
