import suite
from pullinq import P, empty
from sample_data import people, DEPARTMENTS

test = suite.test
assert_that = suite.assert_that


# distinct

@test("distinct keeps the first appearance of each item")
def test_distinct_basic():
    assert_that(P([3, 1, 2, 1]).set.distinct().to.list() == [3, 1, 2], "first-seen order")


@test("distinct is idempotent")
def test_distinct_idempotent():
    data = [5, 1, 5, 2, 2, 9, 1]
    once = P(data).set.distinct().to.list()
    twice = P(data).set.distinct().set.distinct().to.list()
    assert_that(once == twice == [5, 1, 2, 9], f"got {once} and {twice}")


@test("distinct with strict equality separates types")
def test_distinct_strict():
    data = [1, 1.0, True, '1']
    assert_that(P(data).set.distinct().to.list() == [1, '1'], "loose: 1 == 1.0 == True")
    assert_that(P(data).set.distinct(True).to.list() == [1, 1.0, True, '1'], "strict keeps all")


@test("distinct works on unhashable items")
def test_distinct_unhashable():
    data = [[1, 2], [1, 2], {'a': 1}, {'a': 1}, [3]]
    assert_that(P(data).set.distinct().to.list() == [[1, 2], {'a': 1}, [3]], "lists and dicts")


@test("distinct with custom comparer")
def test_distinct_comparer():
    result = P(['Apple', 'apple', 'BANANA', 'banana']).set.distinct(
        lambda x, y: x.lower() == y.lower()).to.list()
    assert_that(result == ['Apple', 'BANANA'], f"got {result}")


@test("distinct_by keeps the first item of each key")
def test_distinct_by():
    data = people(40)
    result = P(data).set.distinct_by(lambda p: p['department']).to.list()
    departments = [p['department'] for p in result]
    assert_that(len(departments) == len(set(departments)), "one item per department")
    assert_that(set(departments) <= set(DEPARTMENTS), "known departments")
    first_seen = []
    for p in data:
        if p['department'] not in first_seen:
            first_seen.append(p['department'])
    assert_that(departments == first_seen, "first-seen order")


# union / intersect / except

@test("union is concat followed by distinct")
def test_union():
    assert_that(P([1, 2, 2]).set.union([2, 3, 1, 4]).to.list() == [1, 2, 3, 4], "union")
    assert_that(empty().set.union([1, 1]).to.list() == [1], "union with empty")


@test("intersect keeps duplicates of the source")
def test_intersect():
    assert_that(P([1, 2, 2, 3]).set.intersect([2, 3, 4]).to.list() == [2, 2, 3], "intersect")
    assert_that(P([1, 2]).set.intersect([]).to.list() == [], "nothing in common")


@test("except_ removes items found in the second sequence")
def test_except():
    assert_that(P([1, 2, 2, 3]).set.except_([2]).to.list() == [1, 3], "difference")
    assert_that(P([1, 2]).set.except_([]).to.list() == [1, 2], "empty second")


@test("intersect and except_ buffer the second sequence lazily")
def test_set_ops_lazy_second():
    pulled = []
    second = P(iter([2])).util.side_effect(lambda x, i: pulled.append(x))
    result = P([1, 2]).set.except_(second)
    assert_that(pulled == [], "not buffered at build time")
    assert_that(result.to.list() == [1], "difference")
    assert_that(pulled == [2], "buffered on first pull")


@test("except_ with strict comparer")
def test_except_strict():
    assert_that(P([1, 1.0, '1']).set.except_([1], True).to.list() == [1.0, '1'], "only the int is removed")


if __name__ == "__main__":
    suite.main(title="pullinq set tests")
