from __future__ import annotations
import argparse

from park_core.board import Edge
from park_core.levels.resolve import load_level_by_id
from park_core.render import render_ascii, render_debug
from search.bfs import solve

def main():
    p = argparse.ArgumentParser()
    p.add_argument(
        "level_id",
        nargs="?",
        default=None,
        help="Level id like 'path/to/pack.txt#idx'.",
    )
    p.add_argument("--target", type=str, default="X", help="label of the piece that has to leave")
    p.add_argument("--exit", type=str, default="far", choices=["far", "near"], help="edge the target leaves through")
    p.add_argument("--time_limit", type=float, default=None)
    p.add_argument("--node_limit", type=int, default=None)
    p.add_argument("--quiet", action="store_true", help="do not print every step")
    args = p.parse_args()

    if args.level_id is not None:
        board = load_level_by_id(args.level_id, target=args.target, exit_edge=Edge(args.exit))
    else:
        raise ValueError("Level id is required")

    print(render_debug(board))
    res = solve(board, time_limit_s=args.time_limit, node_limit=args.node_limit)
    print("Result:", {k: v for k, v in res.items() if k not in ("path", "moves")})

    if res["termination"] == "unsolvable":
        print(f"Unsolvable! States analyzed = {res['nodes']}")
        return
    if not res["success"]:
        print(f"Stopped ({res['termination']}) after {res['nodes']} states")
        return

    if not args.quiet:
        path = res["path"]  # type: ignore
        moves = res["moves"]  # type: ignore
        for i, st in enumerate(path):
            label = "start" if i == 0 else str(moves[i - 1])
            print(f"\n-- step {i}: {label} --\n{render_ascii(st)}")
    print(f"\nSolved! States analyzed = {res['nodes']}")
    print(f"{res['solution_len']} moves in total")

if __name__ == "__main__":
    main()
