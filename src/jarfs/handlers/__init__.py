"""
Archive handlers package for the JAR File System.
Contains implementations for the supported archive formats.

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT
"""

from .zip_handler import ZipHandler

__all__ = ['ZipHandler']
