"""Package version, reported by ``mods-normalizer --version``."""

__version__ = "0.1.0"
