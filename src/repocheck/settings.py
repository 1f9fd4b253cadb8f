from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    # paths are relative to the repository root
    assets_dir: str = "compile-assets"
    css_artifact: str = "assets/mdbook-admonish.css"
    integration_script: str = "./integration/scripts/check"


def from_env() -> Settings:
    defaults = Settings()
    return Settings(
        assets_dir=os.environ.get("REPOCHECK_ASSETS_DIR", defaults.assets_dir),
        css_artifact=os.environ.get("REPOCHECK_CSS_ARTIFACT", defaults.css_artifact),
        integration_script=os.environ.get(
            "REPOCHECK_INTEGRATION_SCRIPT", defaults.integration_script
        ),
    )
