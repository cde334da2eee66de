import copy
import pickle

import pytest
from pydantic import BaseModel, ValidationError
from unittest.mock import MagicMock, call

from blockwise import NULL, BlockArray, InvalidTransformResultError, NullArgumentError


@pytest.fixture
def numbers():
    return BlockArray.of(1, 2, 3, 4, 5)


class Computer:
    def __init__(self, name, is_ugly):
        self.name = name
        self.is_ugly = is_ugly


class TestBlockArrayBasics:

    def test_construction(self):
        assert BlockArray([1, 2]) == BlockArray.of(1, 2)
        assert BlockArray() == ()
        assert len(BlockArray(range(4))) == 4

    def test_is_immutable(self, numbers):
        with pytest.raises(TypeError):
            numbers[0] = 10

    def test_slicing_returns_block_array(self, numbers):
        head = numbers[:2]
        assert isinstance(head, BlockArray)
        assert head == BlockArray([1, 2])
        assert numbers[-1] == 5

    def test_concatenation_returns_block_array(self, numbers):
        assert isinstance(numbers + [6], BlockArray)
        assert (numbers + [6])[-1] == 6
        assert isinstance([0] + numbers, BlockArray)
        assert isinstance((0,) + numbers, BlockArray)
        assert ([0] + numbers)[0] == 0

    def test_repr(self):
        assert repr(BlockArray.of("a", 1)) == "BlockArray(['a', 1])"

    def test_pickle_and_copy(self, numbers):
        restored = pickle.loads(pickle.dumps(numbers))
        assert isinstance(restored, BlockArray)
        assert restored == numbers
        assert copy.deepcopy(BlockArray([NULL]))[0] is NULL


class TestBlockArrayOperations:

    def test_each(self, numbers):
        visitor = MagicMock()
        numbers.each(visitor)
        assert visitor.call_args_list == [call(n) for n in numbers]

    def test_match(self, numbers):
        assert BlockArray.of(3, 7, 2, 9).match(lambda n: n % 2 == 0) == 2
        assert numbers.match(lambda n: n > 10) is None
        assert numbers.match(lambda n: n > 10, default=0) == 0

    def test_select_reject(self, numbers):
        odd = numbers.select(lambda n: n % 2)
        even = numbers.reject(lambda n: n % 2)
        assert odd == BlockArray([1, 3, 5])
        assert even == BlockArray([2, 4])
        assert isinstance(odd, BlockArray) and isinstance(even, BlockArray)

    def test_reject_removes_elements(self):
        computers = BlockArray.of(
            Computer("laptop", False), Computer("tower", True), Computer("tablet", False)
        )
        kept = computers.reject(lambda computer: computer.is_ugly)
        assert [c.name for c in kept] == ["laptop", "tablet"]

    def test_empty_results_are_empty_block_arrays(self, numbers):
        assert numbers.select(lambda n: False) == BlockArray()
        assert numbers.reject(lambda n: True) == BlockArray()

    def test_map(self):
        result = BlockArray.of("a", "bb", "ccc").map(len)
        assert result == BlockArray([1, 2, 3])
        assert isinstance(result, BlockArray)

    def test_map_none_is_rejected(self, numbers):
        with pytest.raises(InvalidTransformResultError):
            numbers.map(lambda n: None)
        assert numbers.map(lambda n: NULL) == BlockArray([NULL] * 5)

    def test_reduce(self, numbers):
        assert numbers.reduce(0, lambda total, n: total + n) == 15
        assert BlockArray().reduce("initial", lambda total, n: total) == "initial"
        joined = BlockArray.of("x", "y").reduce("", lambda total, s: total + s)
        assert joined == "xy"

    def test_chaining(self, numbers):
        total = (
            numbers.select(lambda n: n > 1)
            .map(lambda n: n * 10)
            .reject(lambda n: n == 30)
            .reduce(0, lambda acc, n: acc + n)
        )
        assert total == 110

    def test_predicates(self, numbers):
        assert numbers.any(lambda n: n == 3)
        assert numbers.all(lambda n: n < 6)
        assert numbers.none(lambda n: n == 0)
        assert numbers.corresponds([2, 4, 6, 8, 10], lambda a, b: a * 2 == b)
        assert not numbers.corresponds([2], lambda a, b: True)

    def test_null_block_raises(self, numbers):
        with pytest.raises(NullArgumentError):
            numbers.select(None)

    def test_operations_leave_array_unchanged(self, numbers):
        snapshot = tuple(numbers)
        numbers.map(lambda n: n + 1)
        numbers.reject(lambda n: n > 2)
        assert tuple(numbers) == snapshot


class Basket(BaseModel):
    items: BlockArray
    counts: BlockArray[int] = BlockArray()


class TestPydanticField:

    def test_validates_from_list(self):
        basket = Basket(items=["egg", "milk"], counts=[1, "2"])
        assert isinstance(basket.items, BlockArray)
        assert basket.items.select(lambda item: item == "milk") == BlockArray(["milk"])
        assert basket.counts == BlockArray([1, 2])

    def test_serialises_as_list(self):
        basket = Basket(items=BlockArray.of("egg"))
        assert basket.model_dump() == {"items": ["egg"], "counts": []}

    def test_rejects_invalid_items(self):
        with pytest.raises(ValidationError):
            Basket(items=["egg"], counts=["many"])
