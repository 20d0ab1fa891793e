import argparse
import csv
from datetime import datetime
import itertools
from multiprocessing import Pool, cpu_count
import os
from typing import Any

from gridastar.pathfinder import Pathfinder
from gridastar.scenarios import (
    scenario_geometric,
    scenario_grid_4,
    scenario_grid_8,
    scenario_maze4,
    scenario_puzzle,
)

SCENARIO_CTORS = [
    (scenario_grid_4, {"width": 50, "height": 50, "density": 0.15}),
    (scenario_grid_8, {"width": 60, "height": 60, "density": 0.20}),
    (scenario_maze4, {"width": 51, "height": 51}),
    (scenario_geometric, {"n": 150, "k": 8}),
    (scenario_puzzle, {"steps": 25}),
]

KEYS = [
    "scenario",
    "kind",
    "seed",
    "found",
    "cost",
    "path_len",
    "expansions",
    "generated",
    "relaxations",
    "nodes",
    "runtime_ms",
]


def run_job(job: tuple[str, dict[str, Any]]) -> dict[str, Any]:
    # scenarios close over local functions, so each worker builds its own
    _, cfg = job
    sc = cfg["scenario_ctor"](**cfg["scenario_kwargs"])
    finder: Pathfinder[Any] = Pathfinder()
    path = finder.find(sc.query)
    st = finder.last_stats
    return {
        "scenario": sc.name,
        "kind": sc.meta["kind"],
        "seed": cfg["scenario_kwargs"].get("seed"),
        "found": bool(path),
        "cost": st.path_cost,
        "path_len": len(path),
        "expansions": st.expansions,
        "generated": st.generated,
        "relaxations": st.relaxations,
        "nodes": st.nodes,
        "runtime_ms": round(st.runtime_ms, 3),
    }


def main():
    p = argparse.ArgumentParser(description="Run the pathfinder over the benchmark scenarios")
    p.add_argument("--seeds", type=str, default="0,1,2,3")
    p.add_argument("--jobs", type=int, default=1, help="number of processes (0 -> cpu_count)")
    p.add_argument("--out", type=str, default=None)
    args = p.parse_args()

    seeds = [int(s.strip()) for s in args.seeds.split(",") if s.strip() != ""]
    jobs: list[tuple[str, dict[str, Any]]] = []
    for (ctor, base_kwargs), seed in itertools.product(SCENARIO_CTORS, seeds):
        kwargs = dict(base_kwargs)
        kwargs["seed"] = seed
        jobs.append(
            (f"{ctor.__name__}-seed{seed}", {"scenario_ctor": ctor, "scenario_kwargs": kwargs})
        )

    procs = args.jobs or cpu_count()
    if procs == 1:
        rows = [run_job(job) for job in jobs]
    else:
        with Pool(processes=procs) as pool:
            rows = pool.map(run_job, jobs)

    out_path = args.out or os.path.join(
        "results", f"benchmark_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv"
    )
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=KEYS)
        w.writeheader()
        w.writerows(rows)
    print(out_path)


if __name__ == "__main__":
    main()
