"""yamljson_core: YAML document streams to JSON-compatible value trees."""

from .converter import YamlToJsonConverter, convert, convert_all, iter_documents
from .errors import (
    EncodingError,
    ParseError,
    PathError,
    StructuralError,
    UnterminatedScalarError,
    YamlJsonError,
)
from .normalizer import normalize, to_python
from .options import DEFAULT_OPTIONS, ConverterOptions
from .serializer import FieldSpec, SerializationSchema, dumps, loads
from .values import (
    Null,
    Value,
    VBool,
    VFloat,
    VInt,
    VMapping,
    VSequence,
    VString,
    _Null,
)

__all__ = [
    "convert",
    "convert_all",
    "iter_documents",
    "YamlToJsonConverter",
    "normalize",
    "to_python",
    "dumps",
    "loads",
    "FieldSpec",
    "SerializationSchema",
    "ConverterOptions",
    "DEFAULT_OPTIONS",
    "Null",
    "Value",
    "VBool",
    "VFloat",
    "VInt",
    "VMapping",
    "VSequence",
    "VString",
    "YamlJsonError",
    "ParseError",
    "StructuralError",
    "UnterminatedScalarError",
    "EncodingError",
    "PathError",
]
