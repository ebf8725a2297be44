"""Patch rules adding the Docs link to the header and the mobile menu"""

import re
from typing import Tuple

from basinas.domain.models.patch_rule import PatchRule, anchored_rule

DOCS_MARKER = 'href="/docs"'

# Opening <Link href="/contact" ...> tag; attribute values may hold one level of nested braces
MOBILE_CONTACT_LINK = re.compile(
    r'<Link\s+href="/contact"'
    r'(?:\s+[\w-]+=(?:"[^"]*"|\{(?:[^{}]|\{[^{}]*\})*\}))*'
    r"\s*>"
)


def _header_docs_link(match: "re.Match[str]") -> str:
    return (
        '<HoverPrefetchLink href="/docs">\n'
        '            <span className="text-neutral-600 dark:text-neutral-400 '
        'hover:text-black dark:hover:text-white transition-colors">\n'
        "              Docs\n"
        "            </span>\n"
        "          </HoverPrefetchLink>\n"
        f"          {match.group(0)}"
    )


def _mobile_docs_link(match: "re.Match[str]") -> str:
    return (
        "<Link\n"
        '              href="/docs"\n'
        "              onClick={() => setOpen(false)}\n"
        "            >\n"
        "              Docs\n"
        "            </Link>\n"
        f"            {match.group(0)}"
    )


HEADER_DOCS_LINK_RULE = anchored_rule(
    "header-docs-link",
    marker=DOCS_MARKER,
    anchor=re.compile(r'<HoverPrefetchLink href="/contact">'),
    replacement=_header_docs_link,
)

MOBILE_MENU_DOCS_LINK_RULE = anchored_rule(
    "mobile-menu-docs-link",
    marker=DOCS_MARKER,
    anchor=MOBILE_CONTACT_LINK,
    replacement=_mobile_docs_link,
)

HEADER_RULES: Tuple[PatchRule, ...] = (HEADER_DOCS_LINK_RULE,)
MOBILE_MENU_RULES: Tuple[PatchRule, ...] = (MOBILE_MENU_DOCS_LINK_RULE,)
