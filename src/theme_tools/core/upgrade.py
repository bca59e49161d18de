import logging
from dataclasses import dataclass, field
from pathlib import Path

from theme_tools.core.conventions import NPM_LOCKFILE
from theme_tools.core.manifest import ManifestDocument, load_manifest, manifest_path, normalize_manifest, write_manifest
from theme_tools.core.wrapper import WrapperStatus, upgrade_wrapper

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageManagerOrigin:
    needs_conversion: bool
    has_npm_lockfile: bool
    declared: str | None


@dataclass
class UpgradeReport:
    project_dir: Path
    origin: PackageManagerOrigin
    manifest_changes: list[str] = field(default_factory=list)
    manifest_written: bool = False
    wrapper_status: WrapperStatus = WrapperStatus.MISSING
    dry_run: bool = False

    @property
    def manifest_up_to_date(self) -> bool:
        return not self.manifest_changes


def detect_package_manager_origin(project_dir: Path, manifest: ManifestDocument) -> PackageManagerOrigin:
    """Classify whether the project still looks like an npm project.

    A manifest that already declares pnpm is current even if an npm lockfile
    lingers; the lockfile is still reported so it can be removed by hand.
    """
    declared = manifest.get("packageManager")
    declared_str = declared if isinstance(declared, str) else None
    has_lockfile = (project_dir / NPM_LOCKFILE).exists()
    if declared_str and "pnpm" in declared_str:
        return PackageManagerOrigin(needs_conversion=False, has_npm_lockfile=has_lockfile, declared=declared_str)
    return PackageManagerOrigin(needs_conversion=True, has_npm_lockfile=has_lockfile, declared=declared_str)


def upgrade_project(project_dir: Path, dry_run: bool = False) -> UpgradeReport:
    """Bring ``package.json`` and the lint wrapper in ``project_dir`` up to date.

    Raises ``ManifestNotFoundError`` or ``ManifestParseError`` before touching
    any file.
    """
    path = manifest_path(project_dir)
    manifest = load_manifest(path)
    origin = detect_package_manager_origin(project_dir, manifest)
    report = UpgradeReport(project_dir=project_dir, origin=origin, dry_run=dry_run)

    upgrade = normalize_manifest(manifest, project_dir)
    report.manifest_changes = upgrade.changes
    if upgrade.updated and not dry_run:
        write_manifest(path, upgrade.document)
        report.manifest_written = True
        logger.info("Wrote %s (%d change(s))", path, len(upgrade.changes))

    report.wrapper_status = upgrade_wrapper(project_dir, dry_run=dry_run)
    logger.info("Lint wrapper status: %s", report.wrapper_status.value)
    return report
