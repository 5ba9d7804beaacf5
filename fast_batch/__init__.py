"""
FastBatch - batch commands for FastApp-style projects

This package provides the pieces a batch command needs:
- A command base with declared arguments and options
- Interactive completion of missing required arguments
- Verbosity-gated styled output (titles, sections, banners, progress bars)
- Timing and OK/KO exit codes
- A `fast-batch` CLI to scaffold and run app batch commands
"""

__version__ = "0.1.0"
__author__ = "Patrik Mojzis"
__email__ = "patrikm53@gmail.com"
__license__ = "MIT"
__url__ = "https://github.com/patrikmojzis/fast-batch"

from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .decorators import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
