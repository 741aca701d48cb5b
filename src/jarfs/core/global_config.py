"""
global_config.py
Central configuration for the JARFS library: debug level, text encoding and
the extensions and reserved paths used to classify archive entries.

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT
"""


class GlobalConfig:
    _defaults = {
        "debug_level": 0,
        "encoding": "utf-8",
        "class_extension": ".class",
        "source_extensions": (".clj", ".cljs", ".cljc"),
        "manifest_path": "META-INF/MANIFEST.MF",
        "include_manifest_entry": False,
    }
    _settings = _defaults.copy()

    @classmethod
    def set(cls, key, value):
        cls._settings[key] = value

    @classmethod
    def get(cls, key):
        return cls._settings.get(key, cls._defaults.get(key))

    @classmethod
    def reset(cls, key=None):
        if key is None:
            cls._settings = cls._defaults.copy()
        else:
            if key in cls._defaults:
                cls._settings[key] = cls._defaults[key]
            else:
                cls._settings.pop(key, None)

    @classmethod
    def is_known(cls, key) -> bool:
        return key in cls._settings or key in cls._defaults

    @classmethod
    def set_debug_level(cls, value: int):
        cls.set("debug_level", int(value))

    @classmethod
    def get_debug_level(cls) -> int:
        return cls.get("debug_level")

    @classmethod
    def get_encoding(cls) -> str:
        return cls.get("encoding")

    @classmethod
    def get_class_extension(cls) -> str:
        return cls.get("class_extension")

    @classmethod
    def get_source_extensions(cls):
        return tuple(cls.get("source_extensions"))

    @classmethod
    def set_source_extensions(cls, extensions):
        cls.set("source_extensions", tuple(extensions))

    @classmethod
    def get_manifest_path(cls) -> str:
        return cls.get("manifest_path")
