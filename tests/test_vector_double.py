import pytest

from jonoondb.exceptions import InvalidArgumentException, JonoonDBException
from jonoondb.index_info import FieldType, IndexInfo, IndexType
from jonoondb.indexer import Constraint, ConstraintOperator as Op
from jonoondb.null_helpers import JONOONDB_NULL_DOUBLE
from jonoondb.vector_double import VectorDoubleIndexer

VALUES = [-1.5, 0.0, 2.25, 3.0, 3.0, 7.5]
ALL_IDS = set(range(len(VALUES)))


def _info(name="idx", column="x", index_type=IndexType.VECTOR):
    return IndexInfo(name, index_type, column, True)


@pytest.fixture
def indexer():
    idx = VectorDoubleIndexer(_info(), FieldType.DOUBLE)
    for doc_id, value in enumerate(VALUES):
        idx.insert(doc_id, {"x": value})
    return idx


def test_values_round_trip(indexer):
    for doc_id, value in enumerate(VALUES):
        assert indexer.double_value(doc_id) == value


def test_value_out_of_range_is_none(indexer):
    assert indexer.double_value(len(VALUES)) is None


def test_double_values(indexer):
    assert indexer.double_values([5, 2]) == [VALUES[5], VALUES[2]]
    assert indexer.double_values([1, len(VALUES)]) is None


def test_equal_pinned(indexer):
    assert list(indexer.filter(Constraint(Op.EQUAL, 3.0))) == [3, 4]


def test_integer_operand_matches_double(indexer):
    assert indexer.filter(Constraint(Op.EQUAL, 3)) == indexer.filter(Constraint(Op.EQUAL, 3.0))


@pytest.mark.parametrize("pivot", [-5.0, -1.5, 0.0, 2.5, 3.0, 7.5, 9.0])
def test_less_than_and_greater_equal_partition(indexer, pivot):
    lt = set(indexer.filter(Constraint(Op.LESS_THAN, pivot)))
    ge = set(indexer.filter(Constraint(Op.GREATER_THAN_EQUAL, pivot)))
    assert lt | ge == ALL_IDS
    assert lt & ge == set()


@pytest.mark.parametrize("pivot", [-5.0, -1.5, 0.0, 2.5, 3.0, 7.5, 9.0])
def test_less_equal_and_greater_than_partition(indexer, pivot):
    le = set(indexer.filter(Constraint(Op.LESS_THAN_EQUAL, pivot)))
    gt = set(indexer.filter(Constraint(Op.GREATER_THAN, pivot)))
    assert le | gt == ALL_IDS
    assert le & gt == set()


@pytest.mark.parametrize("lower_op", [Op.GREATER_THAN, Op.GREATER_THAN_EQUAL])
@pytest.mark.parametrize("upper_op", [Op.LESS_THAN, Op.LESS_THAN_EQUAL])
def test_range_equals_intersection(indexer, lower_op, upper_op):
    lower = Constraint(lower_op, 0.0)
    upper = Constraint(upper_op, 3.0)
    expected = indexer.filter(lower).logical_and(indexer.filter(upper))
    assert indexer.filter_range(lower, upper) == expected


def test_range_with_unsupported_combination_is_empty(indexer):
    result = indexer.filter_range(Constraint(Op.LESS_THAN, 0.0), Constraint(Op.LESS_THAN, 9.0))
    assert result.is_empty()


def test_string_operand_compares_as_zero(indexer):
    assert indexer.filter(Constraint(Op.LESS_THAN, "abc")) == indexer.filter(
        Constraint(Op.LESS_THAN, 0.0)
    )


def test_match_is_rejected(indexer):
    with pytest.raises(JonoonDBException, match="is not valid"):
        indexer.filter(Constraint(Op.MATCH, 1.0))


@pytest.mark.parametrize(
    "info, field_type",
    [
        (_info(name=""), FieldType.DOUBLE),
        (_info(column=""), FieldType.DOUBLE),
        (_info(index_type=IndexType.INVERTED_COMPRESSED_BITMAP), FieldType.DOUBLE),
        (_info(), FieldType.INT32),
    ],
)
def test_constructor_rejects_bad_arguments(info, field_type):
    with pytest.raises(InvalidArgumentException):
        VectorDoubleIndexer(info, field_type)


@pytest.mark.parametrize(
    "field_type, valid",
    [
        (FieldType.FLOAT, True),
        (FieldType.DOUBLE, True),
        (FieldType.INT64, False),
        (FieldType.STRING, False),
    ],
)
def test_is_valid_field_type(field_type, valid):
    assert VectorDoubleIndexer.is_valid_field_type(field_type) is valid


def test_integer_in_document_stored_as_float():
    idx = VectorDoubleIndexer(_info(), FieldType.FLOAT)
    idx.insert(0, {"x": 4})
    stored = idx.double_value(0)
    assert stored == 4.0
    assert isinstance(stored, float)


def test_missing_field_stores_null():
    idx = VectorDoubleIndexer(_info(), FieldType.DOUBLE)
    idx.insert(0, {})
    assert idx.double_value(0) == JONOONDB_NULL_DOUBLE


def test_insert_out_of_sequence_raises():
    idx = VectorDoubleIndexer(_info(), FieldType.DOUBLE)
    with pytest.raises(InvalidArgumentException):
        idx.insert(3, {"x": 1.0})


def test_non_numeric_value_rejected():
    idx = VectorDoubleIndexer(_info(), FieldType.DOUBLE)
    with pytest.raises(InvalidArgumentException):
        idx.insert(0, {"x": "one"})


def test_index_stat(indexer):
    assert indexer.index_stat.index_info == _info()
    assert indexer.index_stat.field_type is FieldType.DOUBLE