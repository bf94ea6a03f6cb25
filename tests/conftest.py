import io
from pathlib import Path
import sys

import pytest

# Add only the src directory to path, not the project root
project_root = Path(__file__).parent.parent
src_path = str(project_root / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from ha_config_wizard.wizard import WizardSession, new_session  # noqa: E402


@pytest.fixture
def make_session():
    """Build a WizardSession fed by the given answer lines."""

    def _make(*lines: str, **kwargs) -> WizardSession:
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        return new_session(stdin, io.StringIO(), **kwargs)

    return _make
