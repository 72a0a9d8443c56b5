from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from poke_browser.config.model import GlobalConfig
from poke_browser.core.dataset import Dataset
from poke_browser.core.view_registry import ViewRegistry


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    dataset: Dataset
    registry: Optional[ViewRegistry] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
