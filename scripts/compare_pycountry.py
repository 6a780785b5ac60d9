"""Report where the country table disagrees with pycountry.

Usage: python scripts/compare_pycountry.py
"""
import os
import sys

import pycountry

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from country_registry.table import get_table  # noqa: E402


def main():
    table = get_table()
    problems = []
    for rec in table.all():
        c = pycountry.countries.get(alpha_2=rec.alpha2)
        if c is None:
            problems.append(f"{rec.alpha2}: not in pycountry")
            continue
        if c.alpha_3 != rec.alpha3:
            problems.append(f"{rec.alpha2}: alpha3 {rec.alpha3} != {c.alpha_3}")
        if c.numeric != rec.code:
            problems.append(f"{rec.alpha2}: numeric {rec.code} != {c.numeric}")

    seen = {rec.alpha2 for rec in table.all()}
    for c in sorted(pycountry.countries, key=lambda x: getattr(x, "alpha_2", "")):
        if c.alpha_2 not in seen:
            problems.append(f"{c.alpha_2}: missing from table ({c.name})")

    for p in problems:
        print(p)
    print(f"{len(table)} records checked, {len(problems)} difference(s)")
    return 1 if problems else 0


if __name__ == "__main__":
    sys.exit(main())
