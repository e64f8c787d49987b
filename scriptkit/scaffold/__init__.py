"""New application scaffolding.

Generates a bun project skeleton, installs dependencies and sets up git and
the GitHub remote.
"""

from .core import ScaffoldError, ScaffoldManager
from .templates import ProjectType, RepoVisibility

__all__ = [
    "ScaffoldError",
    "ScaffoldManager",
    "ProjectType",
    "RepoVisibility",
]
