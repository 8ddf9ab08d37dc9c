"""Shader data types and their sizes, component counts and GL enums."""

from __future__ import annotations

import warnings
from enum import Enum

GL_BOOL = 0x8B56
GL_INT = 0x1404
GL_FLOAT = 0x1406
GL_FLOAT_VEC2 = 0x8B50
GL_FLOAT_VEC3 = 0x8B51
GL_FLOAT_VEC4 = 0x8B52
GL_INT_VEC2 = 0x8B53
GL_INT_VEC3 = 0x8B54
GL_INT_VEC4 = 0x8B55
GL_FLOAT_MAT3 = 0x8B5B
GL_FLOAT_MAT4 = 0x8B5C


class DataType(Enum):
    """Kinds of data a shader attribute or uniform can hold."""

    NONE = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    MAT3 = 5
    MAT4 = 6
    INT = 7
    INT2 = 8
    INT3 = 9
    INT4 = 10
    BOOL = 11


_SIZES = {
    DataType.FLOAT: 4,
    DataType.FLOAT2: 8,
    DataType.FLOAT3: 12,
    DataType.FLOAT4: 16,
    DataType.MAT3: 36,
    DataType.MAT4: 64,
    DataType.INT: 4,
    DataType.INT2: 8,
    DataType.INT3: 12,
    DataType.INT4: 16,
    DataType.BOOL: 1,
}

# Matrices count as their column vectors: Mat3 is three float3, Mat4 four float4.
_COMPONENTS = {
    DataType.FLOAT: 1,
    DataType.FLOAT2: 2,
    DataType.FLOAT3: 3,
    DataType.FLOAT4: 4,
    DataType.MAT3: 3,
    DataType.MAT4: 4,
    DataType.INT: 1,
    DataType.INT2: 2,
    DataType.INT3: 3,
    DataType.INT4: 4,
    DataType.BOOL: 1,
}

_GL_ENUMS = {
    DataType.FLOAT: GL_FLOAT,
    DataType.FLOAT2: GL_FLOAT_VEC2,
    DataType.FLOAT3: GL_FLOAT_VEC3,
    DataType.FLOAT4: GL_FLOAT_VEC4,
    DataType.MAT3: GL_FLOAT_MAT3,
    DataType.MAT4: GL_FLOAT_MAT4,
    DataType.INT: GL_INT,
    DataType.INT2: GL_INT_VEC2,
    DataType.INT3: GL_INT_VEC3,
    DataType.INT4: GL_INT_VEC4,
    DataType.BOOL: GL_BOOL,
}


def _lookup(table: dict, data_type: DataType, what: str) -> int:
    try:
        return table[data_type]
    except KeyError:
        warnings.warn(f"Unknown data type {data_type!r} for {what}", stacklevel=3)
        return 0


def data_type_size(data_type: DataType) -> int:
    """Size of the data type in bytes; 0 (with a warning) for unknown types."""
    return _lookup(_SIZES, data_type, "getting size")


def data_type_component_count(data_type: DataType) -> int:
    """Number of components in the data type; 0 (with a warning) for unknown types."""
    return _lookup(_COMPONENTS, data_type, "counting number elements")


def data_type_gl_enum(data_type: DataType) -> int:
    """OpenGL enum value for the data type; 0 (with a warning) for unknown types."""
    return _lookup(_GL_ENUMS, data_type, "translating to a GL enum")