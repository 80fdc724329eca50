"""Hypothesis strategies for locale codes.

Codes are generated in and out of their conventional shape: the core never
validates them, so tests feed it malformed values too.
"""

from hypothesis import strategies as st

__all__ = [
    "any_codes",
    "languages",
    "optional_regions",
    "regions",
    "well_formed_languages",
    "well_formed_regions",
]

KNOWN_LANGUAGES = ["ar", "en", "fr", "de", "he", "fa", "ur", "ja", "zh", "ru"]
KNOWN_REGIONS = ["EG", "SA", "US", "GB", "FR", "DE", "IL", "IR", "JP", "CN"]

well_formed_languages = st.sampled_from(KNOWN_LANGUAGES)
well_formed_regions = st.sampled_from(KNOWN_REGIONS)

any_codes = st.text(
    alphabet=st.characters(min_codepoint=0x21, max_codepoint=0x7E, exclude_characters="_-"),
    min_size=1,
    max_size=8,
)

languages = st.one_of(well_formed_languages, any_codes)
regions = st.one_of(well_formed_regions, any_codes)
optional_regions = st.one_of(st.none(), st.just(""), regions)
