"""
Configuration layer: global.json model/loader and the CSV dataset loader.
"""

from .model import GlobalConfig
from .loader import load_global_config
from .dataset_loader import load_dataset, from_config

__all__ = ["GlobalConfig", "load_global_config", "load_dataset", "from_config"]
