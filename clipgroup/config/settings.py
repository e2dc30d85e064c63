"""Configuration settings and constants for the clipgroup package."""

import re
from pathlib import Path
from typing import FrozenSet, Pattern, Tuple

# Card layout: clips live two levels below the mount point
CONTENT_PATH: Tuple[str, ...] = ("DCIM", "100CANON")

# Clip filenames, e.g. MVI_0042.MOV (case-sensitive, ASCII digits only)
MEDIA_PATTERN: Pattern[str] = re.compile(r"MVI_([0-9]{4})\.MOV")

# OS artifacts allowed in an otherwise empty output directory (lowercase)
TOLERATED_OUTPUT_ENTRIES: FrozenSet[str] = frozenset({
    ".ds_store",
    "thumbs.db",
    "desktop.ini",
})

# Default card mount point
DEFAULT_ROOT = Path(".")

# Largest clip ID / range bound accepted
U32_MAX: int = 2**32 - 1

# Interactive prompts
PROMPT_GROUP_NAME = "Enter group name (empty = done): "
PROMPT_OPERATION = "Enter map operation: "
PROMPT_START = "Enter start range (incl.): "
PROMPT_END = "Enter end range (excl.): "

# Log file rotation
LOG_ROTATION = "10 MB"
LOG_RETENTION = "7 days"
