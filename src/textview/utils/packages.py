"""Installed-package checks behind the parser and renderer dependency guards."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/textview/utils/packages.py
from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from importlib import metadata
from typing import List, Optional, Tuple

from packaging import version
from packaging.specifiers import InvalidSpecifier, SpecifierSet

# (install_name, import_name, version_spec), as in ``constants.DEPS_*``
PackageRequirement = Tuple[str, str, str]


@dataclass
class DependencyReport:
    """Outcome of checking a component's requirements.

    Attributes
    ----------
    missing : list of (install_name, version_spec)
        Packages that could not be imported
    mismatches : list of (install_name, version_spec, installed_version)
        Importable packages whose version is outside the specifier
    import_error : ImportError or None
        The first import failure, kept for exception chaining

    """

    missing: List[Tuple[str, str]] = field(default_factory=list)
    mismatches: List[Tuple[str, str, str]] = field(default_factory=list)
    import_error: Optional[ImportError] = None

    @property
    def ok(self) -> bool:
        return not self.missing and not self.mismatches


def get_package_version(package_name: str) -> Optional[str]:
    """Installed version of a distribution, or None when it is not installed."""
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Check an installed distribution against a specifier such as ``">=3.0.0"``.

    An unparsable specifier does not block the caller.

    Returns
    -------
    tuple
        (meets_requirement, installed_version); ``(False, None)`` when the
        distribution is not installed

    """
    installed_version = get_package_version(package_name)
    if installed_version is None:
        return False, None

    try:
        spec = SpecifierSet(version_spec)
    except InvalidSpecifier:
        return True, installed_version

    return version.parse(installed_version) in spec, installed_version


def check_dependencies(packages: List[PackageRequirement]) -> DependencyReport:
    """Import each required package and check its version.

    A package is first imported by its import name; only importable packages
    are checked against their version specifier, by install name.

    Parameters
    ----------
    packages : list of (install_name, import_name, version_spec)
        Requirements of one parser or renderer

    Returns
    -------
    DependencyReport
        Missing packages and version mismatches

    Examples
    --------
        >>> check_dependencies([("mistune", "mistune", ">=3.0.0")]).ok
        True

    """
    report = DependencyReport()
    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            report.missing.append((install_name, version_spec))
            if report.import_error is None:
                report.import_error = e
            continue

        if version_spec:
            meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
            if not meets_requirement:
                report.mismatches.append((install_name, version_spec, installed_version or "unknown"))
    return report
