import argparse
import cProfile
import io
import pstats

from gridastar.pathfinder import Pathfinder
from gridastar.scenarios import scenario_grid_8


def main():
    p = argparse.ArgumentParser(description="cProfile for a heavy scenario")
    p.add_argument("--size", type=int, default=120)
    p.add_argument("--density", type=float, default=0.25)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--top", type=int, default=30)
    args = p.parse_args()

    sc = scenario_grid_8(args.size, args.size, density=args.density, seed=args.seed)
    finder = Pathfinder()
    pr = cProfile.Profile()
    pr.enable()
    finder.find(sc.query)
    pr.disable()
    s = io.StringIO()
    ps = pstats.Stats(pr, stream=s).sort_stats("tottime")
    ps.print_stats(args.top)
    print(s.getvalue())


if __name__ == "__main__":
    main()
