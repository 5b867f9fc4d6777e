import configparser
from pathlib import Path
from typing import Optional, Union

DEFAULT_SETTINGS = {
    "Deck": {
        "min_size": "40",
    },
    "Logging": {
        "log_level": "INFO",
        "log_to_file": "false",
        "log_dir": "logs",
    },
    "Yaml": {
        "sort_keys": "false",
    },
}


class Settings:
    """
    Application settings read from an INI file, layered over built-in defaults.

    Pass one instance to the objects that need it instead of reading a global.
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        self.config: configparser.ConfigParser = configparser.ConfigParser()
        self.config.read_dict(DEFAULT_SETTINGS)
        self.config_file: Optional[Path] = Path(config_file) if config_file else None
        if self.config_file is not None:
            if not self.config_file.is_file():
                raise FileNotFoundError(
                    f"The configuration file was not found at {self.config_file}"
                )
            self.config.read(self.config_file, encoding="utf-8")

    def get(
        self, section: str, key: str, fallback: Optional[str] = None
    ) -> Optional[str]:
        """
        Get a string value from the configuration.

        Args:
            section: Section name in config.
            key: Setting name.
            fallback: Default value if setting doesn't exist.

        Returns:
            The setting value or fallback.
        """
        return self.config.get(section, key, fallback=fallback)

    def get_bool(self, section: str, key: str, fallback: bool = False) -> bool:
        return self.config.getboolean(section, key, fallback=fallback)

    def get_int(self, section: str, key: str, fallback: int = 0) -> int:
        return self.config.getint(section, key, fallback=fallback)

    @property
    def min_deck_size(self) -> int:
        return self.get_int("Deck", "min_size", 40)

    @property
    def log_level(self) -> str:
        return self.get("Logging", "log_level", "INFO") or "INFO"

    @property
    def log_to_file(self) -> bool:
        return self.get_bool("Logging", "log_to_file", False)

    @property
    def log_dir(self) -> Path:
        return Path(self.get("Logging", "log_dir", "logs") or "logs")

    @property
    def yaml_sort_keys(self) -> bool:
        return self.get_bool("Yaml", "sort_keys", False)
