from importlib import import_module
from pathlib import Path

from .Sort1dAlgorithm import Sort1dAlgorithm

algorithms: list[Sort1dAlgorithm] = []
for file in sorted((Path(__file__).parent / "impl").glob("*.py")):
    if file.stem.startswith("_"):
        continue
    module = import_module(f".{file.stem}", package="sort1d.impl")
    algorithms.append(module.algorithm)
