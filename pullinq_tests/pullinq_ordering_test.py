import suite
from pullinq import P, OrderedEnumerable, sort, sort_desc, empty
from sample_data import people

test = suite.test
assert_that = suite.assert_that


@test("order_by sorts by identity by default")
def test_order_by_identity():
    result = P([3, 1, 2, 1]).order_by().to.list()
    assert_that(result == [1, 1, 2, 3], f"got {result}")
    assert_that(isinstance(P([1]).order_by(), OrderedEnumerable), "ordered enumerable")


@test("order_by is stable")
def test_order_by_stable():
    data = [('b', 1), ('a', 2), ('b', 3), ('a', 4)]
    result = P(data).order_by(lambda x: x[0]).to.list()
    assert_that(result == [('a', 2), ('a', 4), ('b', 1), ('b', 3)], f"got {result}")


@test("order_by_descending keeps ties in source order")
def test_order_by_descending_stable():
    data = [('b', 1), ('a', 2), ('b', 3), ('a', 4)]
    result = P(data).order_by_descending(lambda x: x[0]).to.list()
    assert_that(result == [('b', 1), ('b', 3), ('a', 2), ('a', 4)], f"got {result}")


@test("order_by with custom comparer")
def test_order_by_comparer():
    by_length = lambda x, y: len(x) - len(y)
    result = P(['ccc', 'a', 'bb']).order_by(None, by_length).to.list()
    assert_that(result == ['a', 'bb', 'ccc'], f"got {result}")


@test("order and order_descending sort the items")
def test_order():
    assert_that(P([2, 3, 1]).order().to.list() == [1, 2, 3], "ascending")
    assert_that(P([2, 3, 1]).order_descending().to.list() == [3, 2, 1], "descending")


@test("then_by refines ties of the primary key")
def test_then_by():
    data = [('b', 2), ('a', 2), ('b', 1), ('a', 1)]
    result = P(data).order_by(lambda x: x[0]).then_by(lambda x: x[1]).to.list()
    assert_that(result == [('a', 1), ('a', 2), ('b', 1), ('b', 2)], f"got {result}")


@test("then_by_descending and three levels")
def test_then_by_levels():
    data = [(1, 'x', 3), (1, 'y', 1), (0, 'y', 2), (1, 'x', 1), (0, 'x', 9)]
    result = (P(data)
              .order_by(lambda x: x[0])
              .then_by_descending(lambda x: x[1])
              .then_by(lambda x: x[2])
              .to.list())
    assert_that(result == [(0, 'y', 2), (0, 'x', 9), (1, 'y', 1), (1, 'x', 1), (1, 'x', 3)], f"got {result}")


@test("then_by re-sorts from the original items")
def test_then_by_original_items():
    data = [1, 3, 2]
    ordered = P(iter(data)).order_by(lambda x: x % 2)
    refined = ordered.then_descending()
    assert_that(refined.to.list() == [2, 3, 1], "parity, then descending value")
    assert_that(ordered.to.list() == [2, 1, 3], "primary order keeps source order for ties")


@test("ordering a record set by two keys")
def test_order_records():
    data = people(30)
    result = P(data).order_by(lambda p: p['department']).then_by_descending(lambda p: p['salary']).to.list()
    keys = [(p['department'], -p['salary']) for p in result]
    assert_that(keys == sorted(keys), "department ascending, salary descending")


@test("ordered sequences are lazy and resettable")
def test_ordered_lazy_reset():
    pulled = []
    source = P(iter([2, 1])).util.side_effect(lambda x, i: pulled.append(x))
    ordered = source.order_by()
    assert_that(pulled == [], "nothing pulled before first item is requested")
    assert_that(ordered.to.list() == [1, 2], "sorted")
    assert_that(ordered.can_reset, "resettable")
    assert_that(ordered.reset().to.list() == [1, 2], "replayed without pulling the source again")
    assert_that(pulled == [2, 1], "source pulled once")


@test("selector and comparer are exposed")
def test_ordered_properties():
    ordered = P([1]).order_by(lambda x: -x)
    assert_that(ordered.selector(3) == -3, "selector")
    assert_that(ordered.comparer(1, 2) == -1, "default comparer")


@test("sort and sort_desc factories")
def test_sort_factories():
    assert_that(sort([3, 1, 2]).to.list() == [1, 2, 3], "sort")
    assert_that(sort_desc(['a', 'c', 'b']).to.list() == ['c', 'b', 'a'], "sort_desc")
    assert_that(empty().order_by().to.list() == [], "empty")


if __name__ == "__main__":
    suite.main(title="pullinq ordering tests")
