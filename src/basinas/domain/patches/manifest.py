"""Patch rules for the package manifest (package.json)"""

import json
from typing import Any, Dict, Tuple

from basinas.domain.models.patch_rule import PatchApplicationError, PatchRule

RULE_NAME = "package-fumadocs-scripts"

FUMADOCS_SCRIPTS = {
    "dev": "fumadocs-mdx && next dev",
    "build": "fumadocs-mdx && next build",
}


def _load_manifest(content: str) -> Dict[str, Any]:
    try:
        manifest = json.loads(content)
    except json.JSONDecodeError as e:
        raise PatchApplicationError(RULE_NAME, f"package.json is not valid JSON: {e}") from e
    if not isinstance(manifest, dict):
        raise PatchApplicationError(RULE_NAME, "package.json is not a JSON object")
    return manifest


def _has_fumadocs_scripts(content: str) -> bool:
    try:
        scripts = json.loads(content).get("scripts")
    except (json.JSONDecodeError, AttributeError):
        return False
    if not isinstance(scripts, dict):
        return False
    return all(scripts.get(name) == command for name, command in FUMADOCS_SCRIPTS.items())


def _add_fumadocs_scripts(content: str) -> str:
    manifest = _load_manifest(content)
    scripts = manifest.get("scripts")
    if not isinstance(scripts, dict):
        raise PatchApplicationError(RULE_NAME, 'anchor not found: "scripts" object')
    scripts.update(FUMADOCS_SCRIPTS)
    return json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"


FUMADOCS_SCRIPTS_RULE = PatchRule(
    name=RULE_NAME,
    detect=_has_fumadocs_scripts,
    transform=_add_fumadocs_scripts,
)

PACKAGE_JSON_RULES: Tuple[PatchRule, ...] = (FUMADOCS_SCRIPTS_RULE,)
