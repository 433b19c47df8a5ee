from .config_editor import ConfigDraft
from .config_store import load_config, save_config
from .image_helper import read_file_base64, to_data_uri

__all__ = [
    "ConfigDraft",
    "load_config",
    "read_file_base64",
    "save_config",
    "to_data_uri",
]
