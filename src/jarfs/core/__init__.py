"""
Core building blocks for the JAR File System: entry model, handler base
class, manifest parsing, naming, errors, configuration and logging.

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT
"""
