"""Patch rule sets for generator-produced files"""

from basinas.domain.patches.layout import GROUPED_LAYOUT_RULES, ROOT_LAYOUT_RULES
from basinas.domain.patches.manifest import PACKAGE_JSON_RULES
from basinas.domain.patches.navigation import HEADER_RULES, MOBILE_MENU_RULES
from basinas.domain.patches.stylesheet import GLOBALS_CSS_RULES

__all__ = [
    "ROOT_LAYOUT_RULES",
    "GROUPED_LAYOUT_RULES",
    "GLOBALS_CSS_RULES",
    "HEADER_RULES",
    "MOBILE_MENU_RULES",
    "PACKAGE_JSON_RULES",
]
