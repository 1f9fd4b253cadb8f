"""The fixed list of checks run before every push."""

from __future__ import annotations

from typing import List, Optional

from .dsl import drift, matrix, pipeline, sh
from .model import Step
from .settings import Settings

# cargo test is run once per feature configuration
TEST_FEATURES = [
    [],
    ["--no-default-features"],
    ["--no-default-features", "--features", "cli"],
]


def _test_step(features: list[str]) -> Step:
    label = " ".join(features) or "default features"
    return sh(f"Run tests ({label})", ["cargo", "test", *features])


def pipeline_steps(settings: Optional[Settings] = None) -> List[Step]:
    s = settings or Settings()
    return pipeline(
        sh("Lint styles", "yarn run lint", cwd=s.assets_dir),
        drift(
            "Check compiled CSS is up to date",
            "yarn run build",
            artifact=s.css_artifact,
            cwd=s.assets_dir,
        ),
        sh("Check formatting", "cargo fmt -- --check"),
        sh("Run clippy", "cargo clippy -- -D warnings"),
        matrix("features", TEST_FEATURES).steps(_test_step),
        sh("Build docs", "cargo doc --no-deps --lib"),
        sh("Run integration tests", [s.integration_script]),
    )
