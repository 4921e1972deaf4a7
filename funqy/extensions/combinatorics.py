import typing
import math
from ..types import *
from .. import generators, arrays

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class CombinatoricsAccessor(Generic[T]):
    """chunking, windowing and combinatorial expansions, each yielding lists"""
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _lift(self, produce: Callable[[List[T]], Iterable[Any]]) -> 'Enumerable[Any]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(produce(self._enumerable._get_data())))

    def binomial_coefficient(self, r: int) -> int:
        """n choose r, 0 for negative r"""
        if r < 0: return 0
        return math.comb(self._enumerable.to.count(), r)

    def partitions(self, n: int = 1, pad: Optional[T] = None) -> 'Enumerable[List[T]]':
        """non-overlapping chunks of size n"""
        return self._lift(lambda data: generators.partition(data, n, pad))

    def overlapping(self, n: int = 2, pad: Optional[T] = None) -> 'Enumerable[List[T]]':
        """chunks of size n sharing one element with their predecessor"""
        return self._lift(lambda data: generators.overlapping(data, n, pad))

    def windows(self, n: int = 2) -> 'Enumerable[List[T]]':
        """every contiguous window of size n"""
        return self._lift(lambda data: generators.aperture(data, n))

    aperture = windows

    def pairwise(self) -> 'Enumerable[List[T]]':
        return self._lift(generators.pairwise)

    def permutations(self) -> 'Enumerable[List[T]]':
        """all orderings of the full sequence"""
        return self._lift(generators.permutation)

    def powerset(self) -> 'Enumerable[List[T]]':
        """every subset once, the empty one last"""
        return self._lift(generators.powerset)

    def xprod(self, other: Iterable[U]) -> 'Enumerable[List[Any]]':
        """cartesian product with other as [a, b] pairs"""
        return self._lift(lambda data: arrays.xprod(data, list(other)))
