"""Building blocks for a Google Drive client: file system interfaces, hashing, range options, pacing, directory caching and token storage."""

__version__ = "0.2.0"