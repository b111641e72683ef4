import msgspec

from feature_resolver.config import WEBSITE
from feature_resolver.models.element import ElementId, ElementType


class Feature(msgspec.Struct, frozen=True, kw_only=True, omit_defaults=True):
    id: ElementId
    type: ElementType
    tags: dict[str, str]
    """Properties view: tags left after hiding bookkeeping and surfaced keys."""

    name: str | None = None
    display_name: str | None = None
    prefix: str | None = None
    """Human-readable feature type, e.g. 'Restaurant' or 'Residential Street'."""

    address: str | None = None
    website: str | None = None
    phone: str | None = None
    opening_hours: str | None = None

    @property
    def url(self) -> str:
        return f'{WEBSITE}/{self.type}/{self.id}'
