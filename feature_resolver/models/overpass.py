import msgspec

from feature_resolver.models.element import ElementId, ElementType, TypedElementKey

# Overpass API Documentation:
# https://wiki.openstreetmap.org/wiki/Overpass_API/Overpass_QL
# https://wiki.openstreetmap.org/wiki/Overpass_API/Output_Formats#JSON


class _OverpassElement(msgspec.Struct, frozen=True, kw_only=True, tag_field='type'):
    id: ElementId
    tags: dict[str, str] | None = None

    enclosing: bool = False
    """Whether the element was returned by the containment (is_in) query."""

    @property
    def type(self) -> ElementType:
        return self.__struct_config__.tag  # type: ignore

    @property
    def key(self) -> TypedElementKey:
        return self.type, self.id


class OverpassNode(_OverpassElement, frozen=True, kw_only=True, tag='node'):
    lat: float | None = None
    lon: float | None = None


class OverpassWay(_OverpassElement, frozen=True, kw_only=True, tag='way'):
    nodes: list[ElementId] = []


class OverpassRelation(_OverpassElement, frozen=True, kw_only=True, tag='relation'):
    pass


OverpassElement = OverpassNode | OverpassWay | OverpassRelation


class OverpassResponse(msgspec.Struct, frozen=True):
    elements: list[OverpassElement] = []
    remark: str | None = None
    """Set by Overpass when the query failed server-side, e.g. on timeout."""


__all__ = (
    'OverpassElement',
    'OverpassNode',
    'OverpassRelation',
    'OverpassResponse',
    'OverpassWay',
)
