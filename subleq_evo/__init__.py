"""
subleq_evo - Evolutionary search for self-replicating SUBLEQ programs

Evolves integer programs for a one-instruction (subtract and branch if not
positive) machine until one leaves an exact copy of itself in memory.
"""

__version__ = "0.1.0"

# Expose common submodules for convenience
from .config import PRESET_MINIMAL, PRESET_STANDARD, validate_config  # noqa: F401
from .evolution import *  # noqa: F401,F403
from .reporting import *  # noqa: F401,F403
from .utils import *  # noqa: F401,F403
from .vm import *  # noqa: F401,F403
