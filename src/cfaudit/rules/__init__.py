"""
Resolution rules, tried in ascending priority order.

1. PublishRule - the path exists on author, publish it
2. LocaleFallbackRule - the content exists under a related locale
3. SimilarPathRule - a near-identical path exists
"""

from cfaudit.rules.base import BaseRule
from cfaudit.rules.locale_fallback import LocaleFallbackRule
from cfaudit.rules.publish import PublishRule
from cfaudit.rules.similar_path import SimilarPathRule

__all__ = [
    "BaseRule",
    "PublishRule",
    "LocaleFallbackRule",
    "SimilarPathRule",
]
