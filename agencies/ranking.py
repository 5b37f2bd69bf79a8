"""Agency search: hierarchical location filtering plus weighted keyword ranking.

1. Location filters (department, province, zone) shrink the candidate list
   by accent/case-insensitive substring containment, composed with AND.
2. Keywords, when given, keep only agencies whose weighted fields contain
   every search term, and score them by which fields each term hits.
3. Keyword results are sorted by score (highest first); filter-only results
   keep the gateway order.
"""

from dataclasses import dataclass, field

import structlog

from agencies.text import normalize_text
from shalom.errors import InputError
from shalom.models import Agency

logger = structlog.get_logger()

EXCLUDED = -1

# (agency attribute, weight) pairs used for keyword scoring
WEIGHTED_FIELDS: tuple[tuple[str, int], ...] = (
    ("name", 3),
    ("zone", 5),
    ("address", 2),
    ("province", 4),
    ("department", 4),
    ("status", 1),
)

REQUESTED_FIELDS = ("coordinates", "hours", "status")

# Names accepted from older callers of the agency search tool
FIELD_ALIASES = {
    "lat-long": "coordinates",
    "horario": "hours",
    "estado-de-agencia": "status",
}

DEFAULT_MAX_RESULTS = 3


def _filled(value: str | None) -> bool:
    return bool(value and value.strip())


@dataclass(frozen=True)
class SearchCriteria:
    """A validated agency search request.

    Raises InputError on construction when no location filter or keyword
    is given, so an unusable request never reaches the network.
    """

    requested_fields: tuple[str, ...]
    department: str | None = None
    province: str | None = None
    zone: str | None = None
    keywords: str | None = None
    max_results: int = DEFAULT_MAX_RESULTS

    def __post_init__(self):
        for label, value in (
            ("department", self.department),
            ("province", self.province),
            ("district", self.zone),
            ("keywords", self.keywords),
        ):
            if value is not None and not isinstance(value, str):
                raise InputError(f"{label} must be text, got {type(value).__name__}.")
        if not isinstance(self.requested_fields, (list, tuple)) or not all(
            isinstance(f, str) for f in self.requested_fields
        ):
            raise InputError(
                "requested_fields must be a list of field names, e.g. ['hours', 'status']."
            )
        if isinstance(self.max_results, bool) or not isinstance(self.max_results, int):
            raise InputError("max_results must be a whole number.")

        if not any(
            _filled(v) for v in (self.department, self.province, self.zone, self.keywords)
        ):
            raise InputError(
                "Please provide at least one search criterion: "
                "department, province, district or keywords."
            )
        if not self.requested_fields:
            raise InputError(
                "Please request at least one data field: " + ", ".join(REQUESTED_FIELDS) + "."
            )
        resolved = tuple(FIELD_ALIASES.get(f, f) for f in self.requested_fields)
        unknown = [f for f in resolved if f not in REQUESTED_FIELDS]
        if unknown:
            raise InputError(
                f"Unknown data field(s): {', '.join(unknown)}. "
                f"Valid fields are: {', '.join(REQUESTED_FIELDS)}."
            )
        if self.max_results < 1:
            raise InputError("max_results must be at least 1.")
        object.__setattr__(self, "requested_fields", resolved)


@dataclass(frozen=True)
class ScoredAgency:
    """An agency with its keyword relevance score (0 when no keywords ran)."""

    agency: Agency
    score: int = 0


@dataclass
class RankedResult:
    """Ordered search outcome. An empty result is a valid "no results" answer."""

    agencies: list[ScoredAgency] = field(default_factory=list)
    keyword_ranked: bool = False

    @property
    def total(self) -> int:
        return len(self.agencies)

    def detailed(self, cap: int) -> list[ScoredAgency]:
        """Entries shown in full."""
        return self.agencies[:cap]

    def overflow(self, cap: int, preview: int = 5) -> tuple[list[ScoredAgency], int]:
        """Entries past ``cap``: up to ``preview`` of them, plus how many more remain."""
        rest = self.agencies[cap:]
        return rest[:preview], max(len(rest) - preview, 0)


# --- Filtering ---


def _contains(value: str | None, needle: str) -> bool:
    # A record without the field never matches a filter on it.
    return value is not None and needle in normalize_text(value)


def filter_by_location(
    agencies: list[Agency],
    department: str | None = None,
    province: str | None = None,
    zone: str | None = None,
) -> list[Agency]:
    """Keep agencies whose location fields contain every given filter.

    Filters are independent and optional; blank ones are skipped.
    Original order is preserved.
    """
    filters = [
        (attr, normalize_text(value.strip()))
        for attr, value in (("department", department), ("province", province), ("zone", zone))
        if _filled(value)
    ]
    return [
        agency
        for agency in agencies
        if all(_contains(getattr(agency, attr), needle) for attr, needle in filters)
    ]


# --- Keyword scoring ---


def search_terms(keywords: str) -> list[str]:
    """Split keywords into normalized, non-empty terms."""
    return normalize_text(keywords).split()


def score_agency(agency: Agency, terms: list[str]) -> int:
    """Weighted relevance of ``agency`` for ``terms``, or EXCLUDED.

    Every term must occur somewhere in the weighted fields. Each
    (term, field) hit adds that field's weight, so a term present in
    several fields counts once per field.
    """
    fields = [
        (normalize_text(text) if text else "", weight)
        for text, weight in ((getattr(agency, attr), w) for attr, w in WEIGHTED_FIELDS)
    ]
    haystack = " ".join(text for text, _ in fields)

    score = 0
    for term in terms:
        if term not in haystack:
            return EXCLUDED
        score += sum(weight for text, weight in fields if term in text)
    return score


def rank_by_keywords(agencies: list[Agency], terms: list[str]) -> list[ScoredAgency]:
    """Score every candidate, drop non-matches, sort by score descending."""
    scored = [ScoredAgency(agency, score_agency(agency, terms)) for agency in agencies]
    kept = [s for s in scored if s.score != EXCLUDED]
    kept.sort(key=lambda s: s.score, reverse=True)
    return kept


# --- Entry point ---


def search(criteria: SearchCriteria, agencies: list[Agency]) -> RankedResult:
    """Filter and rank ``agencies`` (the full catalog) for ``criteria``."""
    candidates = filter_by_location(
        agencies,
        department=criteria.department,
        province=criteria.province,
        zone=criteria.zone,
    )

    terms = search_terms(criteria.keywords or "")
    if terms:
        result = RankedResult(rank_by_keywords(candidates, terms), keyword_ranked=True)
    else:
        result = RankedResult([ScoredAgency(a) for a in candidates])

    logger.info(
        "agency_search_ranked",
        catalog=len(agencies),
        after_filters=len(candidates),
        matched=result.total,
        terms=terms,
    )
    return result
