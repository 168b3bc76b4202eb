import suite
import re
from pullinq import P, from_range, empty, create
from sample_data import people

test = suite.test
assert_that = suite.assert_that

numbers = list(range(1, 11))  # 1 through 10
words = ['apple', 'banana', 'cherry', 'date', 'elderberry']


# where() tests

@test("where filters elements correctly")
def test_where_basic():
    evens = P(numbers).where(lambda x: x % 2 == 0).to.list()
    assert_that(evens == [2, 4, 6, 8, 10], "should filter even numbers")


@test("where with complex predicate")
def test_where_complex():
    senior_eng = P(people(40)).where(lambda p: p['department'] == 'eng' and p['age'] > 40).to.list()
    for person in senior_eng:
        assert_that(person['department'] == 'eng', "all should be engineers")
        assert_that(person['age'] > 40, "all should be over 40")


@test("where accepts constants and no predicate")
def test_where_constant():
    assert_that(P(numbers).where().to.list() == numbers, "no predicate keeps everything")
    assert_that(P(numbers).where(False).to.list() == [], "false constant drops everything")
    assert_that(P(numbers).where(1).to.list() == numbers, "truthy constant keeps everything")


@test("where with regex pattern")
def test_where_regex():
    text_data = P(['apple123', 'banana', 'cherry456', 'date', '789elderberry'])
    with_numbers = text_data.where(lambda x: bool(re.search(r'\d', x))).to.list()
    assert_that(with_numbers == ['apple123', 'cherry456', '789elderberry'], "items with digits")


# select() / select_many() tests

@test("select transforms elements")
def test_select_basic():
    squares = P(numbers).select(lambda x: x * x).to.list()
    assert_that(squares == [1, 4, 9, 16, 25, 36, 49, 64, 81, 100], "should square all numbers")


@test("select without selector is identity")
def test_select_identity():
    assert_that(P(words).select().to.list() == words, "unchanged items")


@test("select extracts object properties")
def test_select_property_extraction():
    names = P(people(5)).select(lambda p: p['name']).to.list()
    assert_that(len(names) == 5, "should extract 5 names")
    assert_that(all(isinstance(name, str) for name in names), "all names should be strings")


@test("select_many flattens sub-sequences in order")
def test_select_many():
    nested = P([[1, 2], [3, 4, 5], [], [6]])
    assert_that(nested.select_many(lambda x: x).to.list() == [1, 2, 3, 4, 5, 6], "flattened")


@test("select_many drains each sub-sequence before pulling upstream")
def test_select_many_order():
    pulled = []
    source = P(iter(['ab', 'cd'])).util.side_effect(lambda x, i: pulled.append(x))
    result = source.select_many(lambda s: s)
    assert_that(result.take(2).to.list() == ['a', 'b'], "first sub-sequence")
    assert_that(pulled == ['ab'], "second upstream item not pulled yet")


# take / skip

@test("take and skip on a range")
def test_take_skip_range():
    assert_that(from_range(0, 5).to.list() == [0, 1, 2, 3, 4], "range")
    assert_that(from_range(0, 5).skip(2).take(2).to.list() == [2, 3], "skip 2 take 2")
    assert_that(from_range(0, 5).take(10).to.list() == [0, 1, 2, 3, 4], "take more than available")
    assert_that(from_range(0, 5).take(0).to.list() == [], "take zero")
    assert_that(from_range(0, 5).skip(10).to.list() == [], "skip more than available")


@test("take and skip treat a missing or non-numeric count as 1")
def test_take_skip_count_fallback():
    assert_that(P([1, 2]).take(None).to.list() == [1], "take None")
    assert_that(P([1, 2]).skip(None).to.list() == [2], "skip None")
    assert_that(P([1, 2, 3]).take('x').to.list() == [1], "take non-numeric")
    assert_that(P([1, 2, 3]).take('2').to.list() == [1, 2], "numeric string")


@test("take never pulls past the last taken item")
def test_take_does_not_over_pull():
    source = P(iter([1, 2, 3, 4]))
    assert_that(source.take(2).to.list() == [1, 2], "taken")
    assert_that(source.to.list() == [3, 4], "rest is still in the source")


@test("take_while stops at the first miss")
def test_take_while():
    result = P([1, 2, 5, 1, 2]).take_while(lambda x: x < 3).to.list()
    assert_that(result == [1, 2], "later matches are not re-checked")


@test("skip_while yields everything after the first miss")
def test_skip_while():
    result = P([1, 2, 5, 1, 2]).skip_while(lambda x: x < 3).to.list()
    assert_that(result == [5, 1, 2], "later matches are kept")


@test("skip_last drops the final element")
def test_skip_last():
    assert_that(P([1, 2, 3]).skip_last().to.list() == [1, 2], "drops last")
    assert_that(empty().skip_last().to.list() == [], "empty stays empty")


# concat / prepend / defaults

@test("concat and append keep argument order")
def test_concat():
    assert_that(P([1]).concat([2, 3], (4,)).to.list() == [1, 2, 3, 4], "concat")
    assert_that(P([1]).append_array([[2], [3]]).to.list() == [1, 2, 3], "append_array")
    assert_that(P('ab').concat('cd').to.string() == 'abcd', "strings")


@test("prepend puts the arguments first")
def test_prepend():
    assert_that(P([3]).prepend([1], [2]).to.list() == [1, 2, 3], "prepend")
    assert_that(P([3]).prepend_array([[1, 2]]).to.list() == [1, 2, 3], "prepend_array")


@test("default_if_empty only applies to empty sequences")
def test_default_if_empty():
    assert_that(empty().default_if_empty(1, 2).to.list() == [1, 2], "defaults used")
    assert_that(P([5]).default_if_empty(1).to.list() == [5], "defaults ignored")
    assert_that(P([]).default_sequence_if_empty(from_range(7, 2)).to.list() == [7, 8], "default sequence")


# filters

@test("of_type filters by type")
def test_of_type():
    mixed = [1, 'hello', 2.5, 'x', None, [1, 2]]
    assert_that(P(mixed).of_type(str).to.list() == ['hello', 'x'], "strings only")
    assert_that(P(mixed).of_type((int, float)).to.list() == [1, 2.5], "numbers only")


@test("not_ inverts a predicate")
def test_not():
    assert_that(P(numbers).not_(lambda x: x > 3).to.list() == [1, 2, 3], "inverse filter")
    assert_that(P([0, 1, '', None, 2]).not_().to.list() == [0, '', None], "falsy items")
    assert_that(P([0, 1, '', None, 2]).not_empty().to.list() == [1, 2], "truthy items")


# ordering helpers

@test("reverse inverts the order")
def test_reverse():
    assert_that(create(1, 2, 3).reverse().to.list() == [3, 2, 1], "reversed")
    assert_that(P(iter([2, 2, 1])).reverse().to.list() == [1, 2, 2], "iterator source")


@test("shuffle orders by the provided sort values")
def test_shuffle():
    values = iter([0.3, 0.1, 0.2])
    result = P(['a', 'b', 'c']).shuffle(lambda: next(values)).to.list()
    assert_that(result == ['b', 'c', 'a'], f"got {result}")
    assert_that(sorted(P(numbers).shuffle().to.list()) == numbers, "random shuffle keeps items")


@test("make_resettable buffers single-pass sequences")
def test_make_resettable():
    seq = P(iter([1, 2])).make_resettable()
    assert_that(seq.can_reset, "now resettable")
    assert_that(seq.to.list() == [1, 2], "first pass")
    assert_that(seq.reset().to.list() == [1, 2], "second pass")
    indexed = P([1])
    assert_that(indexed.make_resettable() is indexed, "already resettable")


# chaining

@test("chained operations")
def test_chaining():
    result = (P(numbers)
              .where(lambda x: x > 3)
              .select(lambda x: x * 2)
              .skip(1)
              .take(3)
              .to.list())
    assert_that(result == [10, 12, 14], f"got {result}")


if __name__ == "__main__":
    suite.main(title="pullinq core tests")
