"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import os
import sys
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local testplane package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of testplane modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("testplane"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the user's global config and TESTPLANE__* variables out of tests."""
    for key in list(os.environ):
        if key.startswith("TESTPLANE__"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(
        "testplane.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "no-global-config.yaml"
    )
