import pytest

from cometa.datatype import (
    DataType,
    data_type_component_count,
    data_type_gl_enum,
    data_type_size,
)

KNOWN = [t for t in DataType if t is not DataType.NONE]
VECTORS = [
    DataType.FLOAT,
    DataType.FLOAT2,
    DataType.FLOAT3,
    DataType.FLOAT4,
    DataType.INT,
    DataType.INT2,
    DataType.INT3,
    DataType.INT4,
]


def test_mat4_size_pinned():
    assert data_type_size(DataType.MAT4) == 64


def test_float_gl_enum_pinned():
    assert data_type_gl_enum(DataType.FLOAT) == 0x1406


def test_bool_is_one_byte():
    assert data_type_size(DataType.BOOL) == 1


@pytest.mark.parametrize("data_type", VECTORS)
def test_vector_size_is_components_times_scalar(data_type):
    scalar = data_type_size(DataType.FLOAT)
    assert data_type_size(data_type) == data_type_component_count(data_type) * scalar


@pytest.mark.parametrize(
    "float_type,int_type",
    [
        (DataType.FLOAT, DataType.INT),
        (DataType.FLOAT2, DataType.INT2),
        (DataType.FLOAT3, DataType.INT3),
        (DataType.FLOAT4, DataType.INT4),
    ],
)
def test_int_and_float_vectors_match(float_type, int_type):
    assert data_type_size(float_type) == data_type_size(int_type)
    assert data_type_component_count(float_type) == data_type_component_count(int_type)


def test_matrices_count_column_vectors():
    assert data_type_component_count(DataType.MAT3) == data_type_component_count(DataType.FLOAT3)
    assert data_type_component_count(DataType.MAT4) == data_type_component_count(DataType.FLOAT4)
    assert data_type_size(DataType.MAT3) == 3 * data_type_size(DataType.FLOAT3)


def test_gl_enums_are_distinct():
    enums = [data_type_gl_enum(t) for t in KNOWN]
    assert len(set(enums)) == len(KNOWN)
    assert all(e > 0 for e in enums)


@pytest.mark.parametrize(
    "func", [data_type_size, data_type_component_count, data_type_gl_enum]
)
def test_none_type_warns_and_returns_zero(func):
    with pytest.warns(UserWarning):
        result = func(DataType.NONE)
    assert result == 0