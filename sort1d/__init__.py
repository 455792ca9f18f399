"In-place order-statistic selection and Hoare partitioning of 1-D arrays"
from .algorithms import algorithms
from .ArrayView import ArrayView, ViewIndexError, as_view
from .impl.hoare_partition import partition_mut
from .impl.quickselect import IndexSampler, seeded_sampler, sorted_get_mut
from .Sort1dAlgorithm import Sort1dAlgorithm

__all__ = [
    "ArrayView",
    "IndexSampler",
    "Sort1dAlgorithm",
    "ViewIndexError",
    "algorithms",
    "as_view",
    "partition_mut",
    "seeded_sampler",
    "sorted_get_mut",
]
