from typing import Literal

import msgspec

from feature_resolver.models.feature import Feature
from feature_resolver.models.highlight import HIGHLIGHT_NONE, Highlight

SelectionStatus = Literal['empty', 'found', 'not_found', 'query_failed']


class SelectionState(msgspec.Struct, frozen=True, kw_only=True):
    """
    Outcome of one click resolution.

    The owner replaces the whole value on every resolution, fields are never updated in place.
    """

    feature: Feature | None
    highlight: Highlight
    status: SelectionStatus


SELECTION_EMPTY = SelectionState(feature=None, highlight=HIGHLIGHT_NONE, status='empty')
