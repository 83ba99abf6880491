from typing import Union

Scalar = Union[str, int, float, bool]

# A multi-valued field keeps the order of the source values.
FieldValue = Union[Scalar, list[Scalar]]

FlatDocument = dict[str, FieldValue]
