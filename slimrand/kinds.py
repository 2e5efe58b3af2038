# slimrand/kinds.py
# The closed set of value kinds a generator can sample.

from enum import Enum


class Kind(Enum):
    U8 = 'u8'
    I8 = 'i8'
    U16 = 'u16'
    I16 = 'i16'
    U32 = 'u32'
    I32 = 'i32'
    U64 = 'u64'
    I64 = 'i64'
    U128 = 'u128'
    I128 = 'i128'
    F32 = 'f32'
    F64 = 'f64'
    BOOL = 'bool'
