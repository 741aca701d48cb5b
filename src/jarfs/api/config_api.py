"""
Configuration operations for the JAR File System.

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT
"""

from jarfs.core.global_config import GlobalConfig


class ConfigAPI:
    """
    JARFS Public API: Configuration Operations

    Provides unified attribute and dict-style access to the global JARFS
    configuration (debug level, encoding, entry extensions, manifest path).

    Examples:
        config = ConfigAPI()
        config.debug_level = 2
        config['source_extensions'] = ('.clj', '.cljc')
        x = config.encoding
        config.reset('source_extensions')
    """

    def set(self, key, value):
        """
        Set a global config value by key.
        """
        if not GlobalConfig.is_known(key):
            raise KeyError(f"No config option '{key}'")
        if key == 'source_extensions':
            GlobalConfig.set_source_extensions(value)
        elif key == 'debug_level':
            GlobalConfig.set_debug_level(value)
        else:
            GlobalConfig.set(key, value)

    def get(self, key):
        if not GlobalConfig.is_known(key):
            raise KeyError(f"No config option '{key}'")
        return GlobalConfig.get(key)

    def reset(self, key=None):
        """
        Reset all global config, or just a single key if provided.
        """
        GlobalConfig.reset(key)

    def __getattr__(self, key):
        try:
            return self.get(key)
        except KeyError:
            raise AttributeError(f"No config option '{key}'") from None

    def __setattr__(self, key, value):
        try:
            self.set(key, value)
        except KeyError:
            raise AttributeError(f"No config option '{key}'") from None

    def __getitem__(self, key):
        return self.get(key)

    def __setitem__(self, key, value):
        self.set(key, value)

    def __iter__(self):
        yield from GlobalConfig._defaults.keys()

    def __len__(self):
        return len(GlobalConfig._defaults)
