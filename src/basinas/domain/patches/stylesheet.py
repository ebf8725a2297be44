"""Patch rules for the global stylesheet (app/globals.css)"""

import re
from typing import Tuple

from basinas.domain.models.patch_rule import PatchRule, anchored_rule

FUMADOCS_IMPORTS = """@import "tailwindcss";
@import "tw-animate-css";
@import "fumadocs-ui/css/neutral.css";
@import "fumadocs-ui/css/preset.css";

@source "../node_modules/fumadocs-ui/dist/**/*.js";"""

FUMADOCS_STYLES_RULE = anchored_rule(
    "globals-fumadocs-styles",
    marker="fumadocs-ui/css",
    anchor=re.compile(r'@import "tailwindcss";\s*\n@import "tw-animate-css";'),
    replacement=FUMADOCS_IMPORTS,
)

GLOBALS_CSS_RULES: Tuple[PatchRule, ...] = (FUMADOCS_STYLES_RULE,)
