"""Resolution of sound ids into downloadable audio files."""

from .filebin_client import DEFAULT_CONTENT_TYPE, ManifestFile, ResolutionClient

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "ManifestFile",
    "ResolutionClient",
]
