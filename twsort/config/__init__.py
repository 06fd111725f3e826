from .load import CONFIG_FILENAMES, cfg_from_dict, find_config, load_config
from .model import TwsortCfg
from .typed import ConfigError, build_typed

__all__ = [
    "CONFIG_FILENAMES",
    "ConfigError",
    "TwsortCfg",
    "build_typed",
    "cfg_from_dict",
    "find_config",
    "load_config",
]
