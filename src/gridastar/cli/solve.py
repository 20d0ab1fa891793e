import argparse

from gridastar.logging import get_logger
from gridastar.pathfinder import Pathfinder, PathfinderParams
from gridastar.queries import Grid, GridQuery
from gridastar.scenarios import generate_maze, make_grid_obstacles


def parse_point(s: str) -> tuple[int, int]:
    x, y = (int(tok) for tok in s.split(","))
    return x, y


def render(grid: Grid, path: list[tuple[int, int]]) -> str:
    on_path = set(path)
    rows = []
    for y in range(grid.height):
        row = []
        for x in range(grid.width):
            p = (x, y)
            row.append("#" if p in grid.walls else ("*" if p in on_path else "."))
        rows.append("".join(row))
    return "\n".join(rows)


def main():
    p = argparse.ArgumentParser(description="Find a shortest route across a grid")
    p.add_argument("--width", type=int, default=30)
    p.add_argument("--height", type=int, default=30)
    p.add_argument("--layout", choices=["wall", "obstacles", "maze"], default="wall")
    p.add_argument("--density", type=float, default=0.2)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--source", type=parse_point, default=None, help="x,y (default 0,0)")
    p.add_argument("--destination", type=parse_point, default=None, help="x,y (default far corner)")
    p.add_argument("--diagonal", action="store_true")
    p.add_argument("--log_level", default="INFO")
    p.add_argument("--log_every", type=int, default=None)
    p.add_argument("--json_logs", action="store_true")
    p.add_argument("--draw", action="store_true", help="print the grid with the path marked")
    args = p.parse_args()

    logger = get_logger("gridastar", level=args.log_level, json=args.json_logs)
    if args.layout == "maze":
        grid = generate_maze(args.width, args.height, seed=args.seed)
    elif args.layout == "obstacles":
        grid = make_grid_obstacles(args.width, args.height, args.density, seed=args.seed)
    else:
        walls = {(args.width // 2, y) for y in range(args.height)}
        walls.discard((args.width // 2, args.height // 3))
        grid = Grid(args.width, args.height, walls=walls)
    source = args.source or (0, 0)
    destination = args.destination or (args.width - 1, args.height - 1)
    grid.walls.discard(source)
    grid.walls.discard(destination)

    finder = Pathfinder[tuple[int, int]](
        params=PathfinderParams(log_every=args.log_every),
        logger=logger,
    )
    path = finder.find(GridQuery(grid, source, destination, diagonal=args.diagonal))
    st = finder.last_stats
    if not path:
        print("no path found")
    else:
        print(" -> ".join(f"({x},{y})" for x, y in path))
    print(
        f"cost={st.path_cost}, length={len(path)}, expansions={st.expansions}, "
        f"generated={st.generated}, relaxations={st.relaxations}, runtime_ms={st.runtime_ms:.2f}"
    )
    if args.draw:
        print(render(grid, path))
    return 0 if path else 1


if __name__ == "__main__":
    raise SystemExit(main())
