import argparse
import csv
import importlib
from typing import Any

PLT: Any | None
IMPORT_ERROR: Exception | None
try:
    PLT = importlib.import_module("matplotlib.pyplot")
except ImportError as exc:  # pragma: no cover
    PLT = None
    IMPORT_ERROR = exc
else:
    IMPORT_ERROR = None


def load_rows(path: str) -> list[dict[str, str]]:
    with open(path, newline="", encoding="utf-8") as f:
        return [dict(row) for row in csv.DictReader(f)]


def main():
    if PLT is None:
        assert IMPORT_ERROR is not None
        raise RuntimeError("matplotlib is required to plot results") from IMPORT_ERROR
    p = argparse.ArgumentParser(description="Plot benchmark CSV: runtime vs expansions by kind")
    p.add_argument("csv", help="CSV file from gridastar-benchmark")
    args = p.parse_args()
    rows = [r for r in load_rows(args.csv) if r["found"] == "True"]
    PLT.figure()
    for kind in sorted(set(r["kind"] for r in rows)):
        sub = [r for r in rows if r["kind"] == kind]
        x = [int(r["expansions"]) for r in sub]
        y = [float(r["runtime_ms"]) for r in sub]
        PLT.scatter(x, y, label=kind)
    PLT.xlabel("Expansions")
    PLT.ylabel("Runtime (ms)")
    PLT.legend()
    out_png = args.csv.replace(".csv", ".png")
    PLT.savefig(out_png, bbox_inches="tight")
    print(out_png)


if __name__ == "__main__":
    main()
