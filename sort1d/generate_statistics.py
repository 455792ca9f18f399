import traceback
from collections.abc import Sequence
from functools import cmp_to_key
from itertools import product
from math import nan
from multiprocessing import Pool
from pathlib import Path
from random import Random
from time import thread_time
from typing import NamedTuple, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from .algorithms import algorithms
from .ArrayView import ArrayView
from .Config import *
from .Sort1dAlgorithm import Sort1dAlgorithm

HEADER = "name,N,samples,best cmp,worst cmp,avg cmp,best swaps,worst swaps,avg swaps,expected swaps"


class InvalidAlgorithmError(Exception):
    def __init__(self, name: str, val_array: Sequence) -> None:
        super().__init__(f"Invalid output of `{name}` for input {list(val_array)}")


class OperationStats(NamedTuple):
    samples: int
    best_cmp: int
    worst_cmp: int
    avg_cmp: float
    best_swaps: int
    worst_swaps: int
    avg_swaps: float


def get_operation_stats(algorithm: Sort1dAlgorithm, N: int, seed: int = SAMPLE_SEED) -> OperationStats:
    def cmp(x, y) -> int:
        nonlocal cmp_cnt
        cmp_cnt += 1
        return (x > y) - (x < y)

    def on_swap(_a: int, _b: int) -> None:
        nonlocal swap_cnt
        swap_cnt += 1

    key = cmp_to_key(cmp)
    r = Random(seed)
    cmp_cnts: list[int] = []
    swap_cnts: list[int] = []
    start_time = thread_time()
    for val_array in algorithm.sampler(N, r):
        arr = [key(x) for x in val_array]
        k = r.randrange(N)
        cmp_cnt = swap_cnt = 0
        ret = algorithm.func(ArrayView(arr, on_swap=on_swap), k, r)
        if not algorithm.validator([x.obj for x in arr], k, algorithm.ret_converter(ret)):
            raise InvalidAlgorithmError(algorithm.name, val_array)
        cmp_cnts.append(cmp_cnt)
        swap_cnts.append(swap_cnt)
        if len(cmp_cnts) >= SAMPLE_CNT or int((thread_time() - start_time) * 1000) > MAX_SAMPLE_TIME_MS:
            break

    cmps, swaps = np.array(cmp_cnts), np.array(swap_cnts)
    return OperationStats(len(cmps), int(cmps.min()), int(cmps.max()), float(cmps.mean()), int(swaps.min()), int(swaps.max()), float(swaps.mean()))


def _work(args: tuple[int, int]) -> str:
    algorithm_idx, N = args
    algorithm = algorithms[algorithm_idx]
    try:
        stats = get_operation_stats(algorithm, N)
    except Exception:
        traceback.print_exc()
        raise
    expected_swaps = nan if algorithm.expected_swaps is None else algorithm.expected_swaps(N)
    return ",".join(map(str, (algorithm.name, N, *stats, expected_swaps)))


def generate_statistics(Ns: Sequence[int] = DEFAULT_NS, result_path: Path = RESULT_PATH, processes: Optional[int] = None) -> None:
    tasks = list(product(range(len(algorithms)), Ns))
    result_path.parent.mkdir(parents=True, exist_ok=True)
    print(f"init: {len(tasks)} tasks -> {result_path}")
    with Pool(processes) as pool, open(result_path, "w") as f:
        f.write(HEADER + "\n")
        for result in tqdm(pool.imap_unordered(_work, tasks), total=len(tasks)):
            f.write(result + "\n")
            f.flush()
    print(f"fin:  {len(tasks)} tasks -> {result_path}")


def sort_result(result_path: Path = RESULT_PATH) -> pd.DataFrame:
    df = pd.read_csv(result_path)
    df = df.sort_values(["name", "N"])
    df.to_csv(result_path, index=False)
    for name, group in df.groupby("name"):
        group.drop(columns=["name"]).to_csv(result_path.parent / f"{name}.csv", index=False)
    return df


if __name__ == "__main__":
    generate_statistics()
    sort_result()
