"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import os
import sys
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local codedelta package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of codedelta modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("codedelta"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the user's global config and CODEDELTA__ env vars out of tests."""
    from codedelta.config import loader

    monkeypatch.setattr(loader, "GLOBAL_CONFIG_PATH", tmp_path / "global-config.yaml")
    for key in list(os.environ):
        if key.upper().startswith("CODEDELTA__"):
            monkeypatch.delenv(key)
