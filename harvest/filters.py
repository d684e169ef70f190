"""Candidate filter and relevance gate."""

from harvest.profiles import ExtractionProfile
from harvest.records import CandidateRecord, RawFragment


def passes_filter(fragment: RawFragment, profile: ExtractionProfile) -> bool:
    """Reject fragments outside the length bounds or matching an exclusion.

    Exclusion takes precedence over any positive signal: "Order Biryani Now -
    Login to continue" is dropped even though it names a dish.
    """
    text = fragment.text
    if len(text) < profile.min_len or len(text) > profile.max_len:
        return False
    return not any(p.search(text) for p in profile.exclusion_keywords)


def is_relevant(fragment: RawFragment, profile: ExtractionProfile) -> bool:
    """True if any one of the profile's positive groups matches."""
    return any(group.search(fragment.text) for group in profile.positive_groups)


def admit(fragment: RawFragment, profile: ExtractionProfile) -> CandidateRecord | None:
    """Run the filter then the gate; return a candidate or ``None``."""
    if passes_filter(fragment, profile) and is_relevant(fragment, profile):
        return CandidateRecord(fragment=fragment)
    return None
