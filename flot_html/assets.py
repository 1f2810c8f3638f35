from __future__ import annotations

from dataclasses import dataclass
import logging
import os


LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://cdnjs.cloudflare.com/ajax/libs/jquery/3.2.1"
DEFAULT_FLOT_URL = "https://cdnjs.cloudflare.com/ajax/libs/flot/0.8.3"
ASSET_ENV_VAR = "FLOT"

BASE_SCRIPT = "jquery.min.js"
FLOT_SCRIPT = "jquery.flot.min.js"
TIME_SCRIPT = "jquery.flot.time.min.js"
SYMBOL_SCRIPT = "jquery.flot.symbol.min.js"


@dataclass(frozen=True)
class AssetSources:
    base_url: str = DEFAULT_BASE_URL
    flot_url: str = DEFAULT_FLOT_URL

    @classmethod
    def from_env(cls, *, env_var: str = ASSET_ENV_VAR) -> "AssetSources":
        raw = os.getenv(env_var, "").strip()
        if raw == "":
            return cls()
        LOGGER.debug("using local flot assets from %s=%s", env_var, raw)
        return cls.local(raw)

    @classmethod
    def local(cls, prefix: str) -> "AssetSources":
        location = f"file://{prefix.rstrip('/')}"
        return cls(base_url=location, flot_url=location)

    def base(self, name: str) -> str:
        return f"{self.base_url}/{name}"

    def flot(self, name: str) -> str:
        return f"{self.flot_url}/{name}"
