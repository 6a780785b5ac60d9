import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from country_registry.io.export import write_csv, write_json  # noqa: E402

os.makedirs("data", exist_ok=True)
csv_path = os.path.join("data", "countries.csv")
json_path = os.path.join("data", "countries.json")
n = write_csv(csv_path)
meta = write_json(json_path)

print(f"Wrote {n} countries to {csv_path}")
print(f"Wrote {meta['count']} countries to {json_path} (sha256 {meta['sha256'][:12]})")
