"""k_license — add license headers to the source files of a tree."""

__all__ = [
    "__version__",
    "add_headers",
    "run_add",
    "ScanConfig",
    "ScanReport",
]
__version__ = "0.1.0"

from k_license.api import add_headers  # noqa: E402, F401
from k_license.core.config import ScanConfig  # noqa: E402, F401
from k_license.core.runner import run_add  # noqa: E402, F401
from k_license.model.report import ScanReport  # noqa: E402, F401
