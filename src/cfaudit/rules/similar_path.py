"""
Rule: a near-identical path exists.

Handles two kinds of typo: accidental double slashes, and a file name that
is one edit away from a real sibling (``photo1.jpg`` vs ``photo.jpg``).
"""

from __future__ import annotations

from dataclasses import dataclass

from cfaudit.clients.base import ContentClient
from cfaudit.core.context import AuditContext
from cfaudit.domain.content_path import ContentPath
from cfaudit.domain.suggestion import Suggestion
from cfaudit.paths.levenshtein import levenshtein_distance
from cfaudit.paths.utils import (
    get_parent_path,
    has_double_slashes,
    remove_double_slashes,
    remove_locale_from_path,
)
from cfaudit.rules.base import BaseRule


@dataclass
class SimilarMatch:
    """A candidate path and its edit distance from the broken one."""

    path: str
    distance: int

    def __lt__(self, other: SimilarMatch) -> bool:
        return self.distance < other.distance


@dataclass
class DoubleSlashCheck:
    suggestion: Suggestion | None
    fixed_path: str


class SimilarPathRule(BaseRule):
    """Suggest a sibling whose name is within ``max_distance`` edits."""

    name = "SimilarPathRule"
    description = "A similarly named path exists"

    def __init__(
        self,
        context: AuditContext,
        client: ContentClient | None = None,
    ):
        super().__init__(context, priority=3, client=client)
        self.max_distance = context.config.max_distance

    def apply_rule(self, path: str) -> Suggestion | None:
        client = self.get_client()

        double_slash = self.check_double_slash(path)
        if double_slash is not None and double_slash.suggestion is not None:
            return double_slash.suggestion

        path_to_check = double_slash.fixed_path if double_slash else path

        parent = get_parent_path(path_to_check)
        if parent is None:
            return None

        children = client.get_children_from_path(parent)
        if not children:
            return None

        match = self.find_similar_path(path_to_check, children, self.max_distance)
        if match is None:
            return None
        return Suggestion.similar(path, match.path)

    def check_double_slash(self, path: str) -> DoubleSlashCheck | None:
        """Collapse double slashes and check the fixed path on author.

        Returns None when the path has no double slashes.
        """
        if not has_double_slashes(path):
            return None

        fixed_path = remove_double_slashes(path)
        suggestion = None
        if self.get_client().is_available(fixed_path):
            suggestion = Suggestion.similar(path, fixed_path)
        return DoubleSlashCheck(suggestion=suggestion, fixed_path=fixed_path)

    @staticmethod
    def find_similar_path(
        broken_path: str,
        candidates: list[ContentPath],
        max_distance: int = 1,
    ) -> SimilarMatch | None:
        """Return the closest candidate within ``max_distance`` edits.

        Locale segments are ignored when comparing. The first candidate wins
        ties.
        """
        target = remove_locale_from_path(broken_path)
        best: SimilarMatch | None = None

        for candidate in candidates:
            distance = levenshtein_distance(target, remove_locale_from_path(candidate.path))
            if distance > max_distance:
                continue
            match = SimilarMatch(path=candidate.path, distance=distance)
            if best is None or match < best:
                best = match

        return best
