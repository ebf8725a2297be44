"""Patch rules for the generated root layout (app/layout.tsx)"""

import re
from typing import Tuple

from basinas.domain.models.patch_rule import PatchRule, anchored_rule

STYLESHEET_IMPORT = 'import "./globals.css";'

LAYOUT_IMPORTS = """import "./globals.css";
import { inter } from "@/lib/fonts";
import { ThemeProvider } from "@/components/theme-provider";
import { Header } from "@/components/header";
import { Footer } from "@/components/footer";"""

BODY_PATTERN = re.compile(r"(<body[^>]*>)([\s\S]*?)(</body>)")

HTML_TAG = '<html lang="en" suppressHydrationWarning className={`${inter.variable} antialiased`}>'


def _wrap_body(match: "re.Match[str]") -> str:
    opening, body, closing = match.groups()
    return (
        f"{opening}\n"
        "          <ThemeProvider\n"
        '            attribute="class"\n'
        '            defaultTheme="system"\n'
        "            enableSystem\n"
        "            disableTransitionOnChange\n"
        "          >\n"
        '            <div className="min-h-screen flex flex-col">\n'
        "              <Header />\n"
        '              <main className="flex-1 bg-white dark:bg-black">\n'
        f"                {body.strip()}\n"
        "              </main>\n"
        "              <Footer />\n"
        "            </div>\n"
        "          </ThemeProvider>\n"
        f"        {closing}"
    )


LAYOUT_IMPORTS_RULE = anchored_rule(
    "layout-imports",
    marker='from "@/components/theme-provider"',
    anchor=STYLESHEET_IMPORT,
    replacement=LAYOUT_IMPORTS,
)

THEME_PROVIDER_RULE = anchored_rule(
    "layout-theme-provider",
    marker="<ThemeProvider",
    anchor=BODY_PATTERN,
    replacement=_wrap_body,
)

HTML_ATTRIBUTES_RULE = anchored_rule(
    "layout-html-attributes",
    marker="suppressHydrationWarning",
    anchor=re.compile(r"<html[^>]*>"),
    replacement=HTML_TAG,
)

ROOT_LAYOUT_RULES: Tuple[PatchRule, ...] = (
    LAYOUT_IMPORTS_RULE,
    THEME_PROVIDER_RULE,
    HTML_ATTRIBUTES_RULE,
)

# After the move into app/(main) the stylesheet lives one directory up
GROUPED_STYLESHEET_RULE = anchored_rule(
    "route-group-stylesheet-path",
    marker='import "../globals.css";',
    anchor=STYLESHEET_IMPORT,
    replacement='import "../globals.css";',
)

GROUPED_LAYOUT_RULES: Tuple[PatchRule, ...] = (GROUPED_STYLESHEET_RULE,)
