import sys
from pathlib import Path


# Pytest 8 defaults to `--import-mode=importlib`, which does not prepend the
# repository root to `sys.path`. Add it so `import rsplan` works from a plain
# checkout.
REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

import pytest  # noqa: E402

from rsplan.reeds_shepp.discretize import interpolate  # noqa: E402


@pytest.fixture
def drive():
    """Exact end pose of a word driven from (0, 0, 0) on a unit turning radius."""

    def _drive(types, lengths):
        x, y, phi = 0.0, 0.0, 0.0
        for seg_type, length in zip(types, lengths):
            x, y, phi = interpolate(seg_type, length, x, y, phi)
        return x, y, phi

    return _drive
