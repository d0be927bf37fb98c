"""Download the media files attached to a 1500chan.org thread, filtered by format."""

__version__ = "0.1.0"