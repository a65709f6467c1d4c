from __future__ import annotations
import argparse, csv, os, time, yaml
from typing import List, Dict
from multiprocessing import Pool, cpu_count
from tqdm import tqdm

from park_core.levels.io import iterate_level_strings
from park_core.levels.resolve import load_level_by_id
from search.bfs import solve

FIELDS = ["level_id", "success", "termination", "nodes", "discovered", "runtime", "solution_len"]


def _run_one(args_tuple) -> Dict[str, object]:
    level_id, time_limit, node_limit = args_tuple
    try:
        board = load_level_by_id(level_id)
        res = solve(board, time_limit_s=time_limit, node_limit=node_limit)
        return {
            "level_id": level_id,
            "success": bool(res["success"]),
            "termination": res["termination"],
            "nodes": int(res["nodes"]),
            "discovered": int(res["discovered"]),
            "runtime": float(res["runtime"]),
            "solution_len": int(res.get("solution_len", -1)),
        }
    except (ValueError, IndexError, OSError) as e:
        tqdm.write(f"[error] {level_id}: {e}")
        return {"level_id": level_id, "success": False, "termination": "error", "nodes": 0,
                "discovered": 0, "runtime": 0.0, "solution_len": -1}


def _level_ids_from_config(cfg: dict) -> List[str]:
    root = cfg["levels"]["root_dir"]
    rels = cfg["levels"]["sources"]
    return [ref.level_id for ref, _ in iterate_level_strings(root, rels)]


def main():
    p = argparse.ArgumentParser(description="Batch BFS runs → CSV (flags, parallel)")
    p.add_argument("--list", default=None, help="path to a .txt list (lines: path#idx)")
    p.add_argument("--config", default="configs/data.yaml", help="used when --list is not given")
    p.add_argument("--out", default="results/batch.csv")
    p.add_argument("--time_limit", type=float, default=None)
    p.add_argument("--node_limit", type=int, default=None)
    p.add_argument("--jobs", type=int, default=0, help="processes (0→cpu_count)")
    args = p.parse_args()

    with open(args.config, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    limits = cfg.get("search", {})
    time_limit = args.time_limit if args.time_limit is not None else limits.get("time_limit")
    node_limit = args.node_limit if args.node_limit is not None else limits.get("node_limit")

    if args.list is not None:
        with open(args.list, "r", encoding="utf-8") as f:
            level_ids = [ln.strip() for ln in f if ln.strip() and not ln.strip().startswith("#")]
    else:
        level_ids = _level_ids_from_config(cfg)

    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)

    jobs = args.jobs or cpu_count()
    payload = [(lid, time_limit, node_limit) for lid in level_ids]

    started = time.time()
    if jobs == 1:
        rows = [_run_one(t) for t in tqdm(payload, desc="Running BFS", unit="level")]
    else:
        with Pool(processes=jobs) as pool:
            rows = list(tqdm(pool.imap_unordered(_run_one, payload), total=len(payload), desc="Running BFS", unit="level"))

    with open(args.out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    solved = sum(1 for r in rows if r["success"])
    print(f"done: {len(rows)} levels ({solved} solved) → {args.out}; total_time={time.time()-started:.2f}s; jobs={jobs}")


if __name__ == "__main__":
    main()
