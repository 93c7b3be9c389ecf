"""
Result types returned by the great circle engine
"""
from typing import NamedTuple, Tuple, Union


class ParallelCrossings(NamedTuple):
    """
    Longitudes where a great circle crosses a given parallel
    """
    first: float   # degrees, [-180, 180)
    second: float  # degrees, [-180, 180)


# Empty tuple when the parallel is never reached
CrossingResult = Union[ParallelCrossings, Tuple[()]]
