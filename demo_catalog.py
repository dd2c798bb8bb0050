"""
Demo: Analyze the built-in catalog and dump a sample block state.
"""

from blockstate.analyzer import analyze_registry
from blockstate.serialization import properties_to_yaml, properties_from_yaml
from blockstate.values import REGISTRY, BlockFace, StairHalf, StairShape


def print_report(report):
    """Pretty-print a CatalogReport."""
    print()
    print("=" * 70)
    print("BLOCK STATE CATALOG REPORT")
    print("=" * 70)
    print()

    print("BASIC METRICS")
    print(f"  Families:              {report.total_families}")
    print(f"  Variants:              {report.total_variants}")
    print(f"  Longest Name:          {report.longest_canonical_name}")
    print()

    print("VARIANTS PER FAMILY")
    for name, count in report.variants_per_family.items():
        print(f"    {name}: {count}")
    print()

    if report.shared_names:
        print("NAMES SHARED ACROSS FAMILIES")
        for name, families in report.shared_names.items():
            print(f"    {name}: {', '.join(families)}")
        print()

    if report.warnings:
        print("WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("NO WARNINGS - Catalog looks clean!")
    print()


if __name__ == "__main__":
    print_report(analyze_registry(REGISTRY))

    stairs = {
        "facing": BlockFace.NORTH,
        "half": StairHalf.TOP,
        "shape": StairShape.INNER_LEFT,
    }
    yaml_str = properties_to_yaml(stairs)
    print("Sample stairs state:")
    print(yaml_str)

    schema = {"facing": BlockFace, "half": StairHalf, "shape": StairShape}
    restored = properties_from_yaml(yaml_str, schema)
    print(f"Round trip matches: {restored == stairs}")
