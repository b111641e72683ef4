from typing import Literal, NewType

ElementType = Literal['node', 'way', 'relation']
ElementId = NewType('ElementId', int)

TypedElementKey = tuple[ElementType, ElementId]
"""Element ids are only unique within their type."""

LatLon = tuple[float, float]
