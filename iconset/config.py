"""
Configuration constants for the icon set package.

Values here are fixed at import time; nothing is read from the environment.
"""

import json
import os
from functools import lru_cache
from typing import Any, Dict

# Maximum number of parent hops when resolving aliases or cascading removals.
# Must match the depth limit used by icon set consumers.
MAX_ITERATION = 6

# Theme tables stored on an icon set
THEME_KEYS = ("prefixes", "suffixes")

# Entry types, in the order they are traversed by default
ENTRY_TYPES = ("icon", "variation", "alias")

package_path = os.path.dirname(__file__)
SCHEMA_PATH = os.path.join(package_path, "schemas", "icon-set-schema.json")


@lru_cache(maxsize=1)
def load_schema() -> Dict[str, Any]:
    """Load bundled JSON schema for icon set documents"""
    with open(SCHEMA_PATH, "r", encoding="utf-8") as schema_file:
        return json.load(schema_file)
