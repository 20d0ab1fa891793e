from gridastar import GraphQuery, Grid, GridQuery, Pathfinder

if __name__ == "__main__":
    finder = Pathfinder()

    g = Grid(30, 30, walls={(15, y) for y in range(30)} - {(15, 10)})
    for diagonal in (False, True):
        path = finder.find(GridQuery(g, (0, 0), (29, 29), diagonal=diagonal))
        st = finder.last_stats
        name = "8-connected" if diagonal else "4-connected"
        print(f"{name}: cost={st.path_cost}, steps={len(path) - 1}, expansions={st.expansions}")

    # A->B is dear; going through C first is cheaper
    graph = {"A": [("B", 5.0), ("C", 1.0)], "C": [("B", 1.0)], "B": [("D", 1.0)]}
    estimates = {"A": 1.0, "B": 1.0, "C": 1.0, "D": 0.0}
    print(finder.find(GraphQuery(graph, "A", estimates)), finder.last_stats.path_cost)
