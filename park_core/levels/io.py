from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple, Optional
import os

from park_core.parser import parse_level_str, level_lines, TOK_EMPTY

@dataclass
class LevelRef:
    path: str
    index: int  # index of the level inside the file (if there are multiple levels)

    @property
    def level_id(self) -> str:
        return f"{self.path}#{self.index}"


def split_on_blank_lines(text: str) -> List[str]:
    blocks: List[str] = []
    cur: List[str] = []
    for line in text.splitlines():
        if line.strip() == "":
            if cur:
                blocks.append("\n".join(cur))
                cur = []
        else:
            cur.append(line.rstrip("\n"))
    if cur:
        blocks.append("\n".join(cur))
    return blocks


def iterate_level_strings(root_dir: str, rel_dirs: List[str]) -> Iterator[Tuple[LevelRef, str]]:
    """Iterate over all .txt in the given subfolders and return (level reference, level string)."""
    for rel in rel_dirs:
        abs_dir = os.path.join(root_dir, rel)
        if not os.path.isdir(abs_dir):
            continue
        for fname in sorted(os.listdir(abs_dir)):
            if not fname.endswith(".txt"):
                continue
            fpath = os.path.join(abs_dir, fname)
            with open(fpath, "r", encoding="utf-8") as f:
                content = f.read()
            for i, block in enumerate(split_on_blank_lines(content)):
                yield LevelRef(path=fpath, index=i), block


def count_pieces(level_str: str) -> int:
    labels = {ch for line in level_lines(level_str) for ch in line if ch != TOK_EMPTY}
    return len(labels)


def dims(level_str: str) -> Tuple[int, int]:
    lines = level_lines(level_str)
    h = len(lines)
    w = max((len(ln) for ln in lines), default=0)
    return w, h


def filter_level(level_str: str, *, max_w: Optional[int], max_h: Optional[int], min_p: Optional[int], max_p: Optional[int]) -> bool:
    w, h = dims(level_str)
    p = count_pieces(level_str)
    if max_w is not None and w > max_w: return False
    if max_h is not None and h > max_h: return False
    if min_p is not None and p < min_p: return False
    if max_p is not None and p > max_p: return False
    # check if it parses
    try:
        _ = parse_level_str(level_str)
    except ValueError:
        return False
    return True
