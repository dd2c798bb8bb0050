"""
Catalog Analyzer — inventory and consistency checks for declared families.

This module provides lightweight analysis of a FamilyRegistry:
    - Family and variant counts
    - Canonical name lengths
    - Canonical names shared between families
    - Identifiers hitting the adjacent-capitals edge case
    - Re-verification of per-family uniqueness, derivation and round trip

IMPORTANT: This is read-only. It does NOT modify the registry.
It only produces reports.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Set

from blockstate.family import FamilyRegistry, NoMatchingVariant
from blockstate.naming import canonical_name_length, has_adjacent_capitals, to_canonical_name


@dataclass
class CatalogReport:
    """Analysis report for a family registry."""

    total_families: int = 0
    total_variants: int = 0

    variants_per_family: Dict[str, int] = field(default_factory=dict)
    longest_canonical_name: str = ""

    # canonical name -> families using it; only names used more than once
    shared_names: Dict[str, List[str]] = field(default_factory=dict)

    # "Family.Identifier" entries
    adjacent_capitals: Set[str] = field(default_factory=set)
    collisions: Set[str] = field(default_factory=set)
    derivation_mismatches: Set[str] = field(default_factory=set)
    length_mismatches: Set[str] = field(default_factory=set)
    round_trip_failures: Set[str] = field(default_factory=set)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    @property
    def is_clean(self) -> bool:
        return not (
            self.collisions
            or self.derivation_mismatches
            or self.length_mismatches
            or self.round_trip_failures
        )


def analyze_registry(registry: FamilyRegistry) -> CatalogReport:
    """
    Analyze every family in a registry.

    Checks for:
    - Canonical name collisions inside a family
    - Canonical names that differ from to_canonical_name(identifier)
    - Canonical names whose length differs from canonical_name_length()
    - Variants that do not survive parse(canonical_name)
    - Identifiers with adjacent capitals

    Returns a CatalogReport with metrics and warnings.
    """
    report = CatalogReport(total_families=len(registry))
    families_by_name: Dict[str, List[str]] = defaultdict(list)

    for family in registry:
        family_name = family.family_name()
        members = list(family)
        report.variants_per_family[family_name] = len(members)
        report.total_variants += len(members)

        seen: Dict[str, str] = {}
        for member in members:
            label = f"{family_name}.{member.identifier}"
            name = member.canonical_name

            if name != to_canonical_name(member.identifier):
                report.derivation_mismatches.add(label)
            if len(name) != canonical_name_length(member.identifier):
                report.length_mismatches.add(label)

            if name in seen:
                report.collisions.add(f"{family_name}: {seen[name]}/{member.identifier} -> {name}")
            else:
                seen[name] = member.identifier

            try:
                if family.parse(name) is not member:
                    report.round_trip_failures.add(label)
            except NoMatchingVariant:
                report.round_trip_failures.add(label)

            if has_adjacent_capitals(member.identifier):
                report.adjacent_capitals.add(label)

            if len(name) > len(report.longest_canonical_name):
                report.longest_canonical_name = name

            families_by_name[name].append(family_name)

    report.shared_names = {
        name: families
        for name, families in sorted(families_by_name.items())
        if len(families) > 1
    }

    if report.collisions:
        report.add_warning(f"Canonical name collisions: {', '.join(sorted(report.collisions))}")

    if report.derivation_mismatches:
        report.add_warning(
            f"Canonical names not derived from identifiers: {', '.join(sorted(report.derivation_mismatches))}"
        )

    if report.length_mismatches:
        report.add_warning(
            f"Canonical names of unexpected length: {', '.join(sorted(report.length_mismatches))}"
        )

    if report.round_trip_failures:
        report.add_warning(
            f"Variants that do not round trip: {', '.join(sorted(report.round_trip_failures))}"
        )

    if report.adjacent_capitals:
        report.add_warning(
            f"Identifiers split letter by letter: {', '.join(sorted(report.adjacent_capitals))}"
        )

    return report
