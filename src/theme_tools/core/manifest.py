"""Load, normalise and write ``package.json``."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from theme_tools.core.conventions import (
    FIELD_ORDER,
    MODULE_TYPE,
    PACKAGE_JSON,
    PACKAGE_MANAGER_VERSION,
    PREINSTALL_SCRIPT,
    VERSION_BUMP_SCRIPT,
    VERSION_SCRIPT,
)
from theme_tools.errors import ManifestNotFoundError, ManifestParseError

ManifestDocument = dict[str, Any]


@dataclass
class ManifestUpgrade:
    document: ManifestDocument
    changes: list[str] = field(default_factory=list)

    @property
    def updated(self) -> bool:
        return bool(self.changes)


def manifest_path(project_dir: Path) -> Path:
    return project_dir / PACKAGE_JSON


def load_manifest(path: Path) -> ManifestDocument:
    if not path.exists():
        raise ManifestNotFoundError(f"{PACKAGE_JSON} not found at {path}")
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ManifestParseError(f"Error reading {PACKAGE_JSON}: {exc}") from exc
    if not isinstance(document, dict):
        raise ManifestParseError(f"Error reading {PACKAGE_JSON}: top-level value must be a JSON object")
    return document


def dump_manifest(document: ManifestDocument) -> str:
    return json.dumps(document, indent="\t", ensure_ascii=False) + "\n"


def write_manifest(path: Path, document: ManifestDocument) -> None:
    path.write_text(dump_manifest(document), encoding="utf-8")


def reorder_fields(document: ManifestDocument) -> ManifestDocument:
    ordered = {key: document[key] for key in FIELD_ORDER if key in document}
    ordered.update((key, value) for key, value in document.items() if key not in ordered)
    return ordered


def normalize_manifest(document: ManifestDocument, project_dir: Path) -> ManifestUpgrade:
    """Apply every template rule to a copy of ``document``.

    Each rule only records a change when it actually alters the document, so
    normalising an already normalised manifest yields an empty change list.
    """
    doc = dict(document)
    changes: list[str] = []

    if "type" not in doc:
        doc["type"] = MODULE_TYPE
        changes.append(f'Added "type": "{MODULE_TYPE}"')
    elif doc["type"] != MODULE_TYPE:
        changes.append(f'Changed "type" from {json.dumps(doc["type"])} to "{MODULE_TYPE}"')
        doc["type"] = MODULE_TYPE

    scripts = doc.get("scripts")
    if not isinstance(scripts, dict):
        scripts = {}
        changes.append("Added scripts section")
    else:
        scripts = dict(scripts)

    if scripts.get("preinstall") != PREINSTALL_SCRIPT:
        rest = {name: command for name, command in scripts.items() if name != "preinstall"}
        scripts = {"preinstall": PREINSTALL_SCRIPT, **rest}
        changes.append("Added/updated preinstall script")

    if not scripts.get("version") and (project_dir / VERSION_BUMP_SCRIPT).exists():
        scripts["version"] = VERSION_SCRIPT
        changes.append("Added version script")

    doc["scripts"] = scripts

    if "keywords" in doc:
        del doc["keywords"]
        changes.append("Removed keywords field")

    current_manager = doc.get("packageManager")
    if current_manager != PACKAGE_MANAGER_VERSION:
        doc["packageManager"] = PACKAGE_MANAGER_VERSION
        if current_manager:
            changes.append(f"Updated packageManager field to {PACKAGE_MANAGER_VERSION}")
        else:
            changes.append("Added packageManager field")

    ordered = reorder_fields(doc)
    original_order = [key for key in document if key in ordered]
    if [key for key in ordered if key in document] != original_order:
        changes.append("Reordered fields")

    return ManifestUpgrade(document=ordered, changes=changes)
