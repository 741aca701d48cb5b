"""
Public API modules for the JAR File System.

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT
"""
