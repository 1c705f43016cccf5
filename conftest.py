# =============================================================================
# CONFTEST - Root
# =============================================================================
# Makes the examprep package importable when running pytest from a checkout
# =============================================================================

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))
