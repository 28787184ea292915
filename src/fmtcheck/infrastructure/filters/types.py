"""Filter type alias.

Python 3.12+ PEP 695 type alias syntax.
Filter function: takes root-relative POSIX path, returns True to keep.
"""

from collections.abc import Callable
from typing import TypeAlias

Filter: TypeAlias = Callable[[str], bool]
