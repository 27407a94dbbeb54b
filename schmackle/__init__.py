"""Terminal ASCII-art images and block-letter banners."""

__version__ = "0.1.0"
__all__ = ["asciiart", "bitmaps", "cli"]