#!/usr/bin/env python3
"""Loading and validation of the article registry (config.json)."""

import json
from typing import List, Optional, Set

from content_config import RepositoryLayout
from report import Report
from schemas import RegistryEntry, validate_registry_document


def load_registry(layout: RepositoryLayout, report: Report) -> Optional[List[RegistryEntry]]:
    """
    Read, parse and validate the registry file.

    Args:
        layout: Repository layout locating the registry file
        report: Accumulator receiving errors, warnings and progress lines

    Returns:
        Registry entries in declared order, or None when the registry is
        missing, unparseable or does not match the schema
    """
    path = layout.registry_path
    name = layout.registry_filename

    if not path.is_file():
        report.error(f"{name} not found at {path}")
        return None

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        report.error(f"Failed to parse {name}: {e}")
        return None
    except (OSError, UnicodeDecodeError) as e:
        report.error(f"Failed to read {name}: {e}")
        return None

    result = validate_registry_document(raw, layout.locales)
    if not result.ok:
        report.violations(name, result.violations)
        return None

    entries = result.value
    duplicates = check_duplicates(entries, report)

    for entry in entries:
        if entry.order is not None and not entry.pinned:
            report.info(f'Article "{entry.slug}" sets order={entry.order:g} but is not pinned (order is ignored)')

    if duplicates == 0:
        report.success(f"{name} is valid: {len(entries)} articles registered")
    return entries


def check_duplicates(entries: List[RegistryEntry], report: Report) -> int:
    """
    Report every repeated slug and every repeated route.

    Slugs and routes are checked independently, so one entry can produce
    two errors. The first occurrence of a value is never reported.

    Returns:
        Number of duplicate errors reported
    """
    seen_slugs: Set[str] = set()
    seen_routes: Set[str] = set()
    duplicates = 0

    for index, entry in enumerate(entries):
        if entry.slug in seen_slugs:
            report.error(f'Duplicate slug "{entry.slug}" (articles.{index})')
            duplicates += 1
        seen_slugs.add(entry.slug)

        if entry.route in seen_routes:
            report.error(f'Duplicate route "{entry.route}" (articles.{index}, slug "{entry.slug}")')
            duplicates += 1
        seen_routes.add(entry.route)

    return duplicates
