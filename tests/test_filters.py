"""Tests for the candidate filter and relevance gate."""

from harvest.filters import admit, is_relevant, passes_filter
from harvest.profiles import ExtractionProfile
from harvest.records import RawFragment


def _frag(text: str) -> RawFragment:
    return RawFragment(text=text)


def test_length_bounds_reject_regardless_of_keywords(
    menu_profile: ExtractionProfile,
) -> None:
    """Test that too-short and too-long fragments are rejected."""
    assert not passes_filter(_frag("Dal"), menu_profile)
    assert not passes_filter(_frag("Chicken Biryani ₹250 " * 60), menu_profile)
    assert passes_filter(_frag("Dal Makhani"), menu_profile)


def test_exclusion_wins_over_food_keyword(menu_profile: ExtractionProfile) -> None:
    """Test that a navigation phrase rejects a fragment naming a dish."""
    fragment = _frag("Order Biryani Now - Login to continue")

    assert is_relevant(fragment, menu_profile)
    assert not passes_filter(fragment, menu_profile)
    assert admit(fragment, menu_profile) is None


def test_exclusion_is_case_insensitive(menu_profile: ExtractionProfile) -> None:
    """Test exclusion matching ignores case."""
    assert not passes_filter(_frag("Butter Chicken - ADD TO CART"), menu_profile)


def test_exclusion_matches_whole_words_only(menu_profile: ExtractionProfile) -> None:
    """Test that exclusion words inside dish names do not reject them."""
    # "cartilage" contains "cart", "homemade" contains "home"
    assert passes_filter(_frag("Homemade chicken cartilage soup"), menu_profile)


def test_dish_words_are_not_page_chrome(menu_profile: ExtractionProfile) -> None:
    """Test dish names sharing words with site navigation still pass."""
    assert passes_filter(_frag("French Press Coffee ₹180"), menu_profile)
    assert passes_filter(_frag("Home Style Chicken Curry"), menu_profile)
    assert passes_filter(_frag("Newspaper Cone Fries ₹90"), menu_profile)
    assert passes_filter(_frag("Mutton Rogan Josh ₹500"), menu_profile)


def test_navigation_phrases_are_excluded(menu_profile: ExtractionProfile) -> None:
    """Test the multi-word chrome phrases that replaced single words."""
    assert not passes_filter(_frag("Back to Home"), menu_profile)
    assert not passes_filter(_frag("Terms and Conditions apply"), menu_profile)
    assert not passes_filter(_frag("Change location to see prices"), menu_profile)
    assert not passes_filter(_frag("Error 404 - Page not found"), menu_profile)


def test_relevance_is_or_across_groups(menu_profile: ExtractionProfile) -> None:
    """Test that either a food keyword or a price indicator is enough."""
    assert is_relevant(_frag("Paneer butter masala"), menu_profile)
    assert is_relevant(_frag("Special of the day ₹250"), menu_profile)
    assert is_relevant(_frag("Thali 180 only"), menu_profile)
    assert not is_relevant(_frag("Chef Ramesh welcomes you"), menu_profile)


def test_admit_returns_candidate(menu_profile: ExtractionProfile) -> None:
    """Test that an admitted fragment is wrapped unchanged."""
    fragment = RawFragment(text="Garlic Naan ₹60", position=4)
    candidate = admit(fragment, menu_profile)

    assert candidate is not None
    assert candidate.fragment == fragment


def test_restaurant_gate(listing_profile: ExtractionProfile) -> None:
    """Test restaurant listings: venue nouns, cuisines or ratings admit a card."""
    assert admit(_frag("Bombay Canteen\n4.5 ★\nNorth Indian"), listing_profile)
    assert admit(_frag("Leopold Cafe, Colaba"), listing_profile)
    assert admit(_frag("Paradise Biryani House"), listing_profile)
    assert admit(_frag("Shree Sagar\n4.1"), listing_profile)
    assert admit(_frag("Shree Sagar Juhu"), listing_profile) is None


def test_restaurant_exclusions(listing_profile: ExtractionProfile) -> None:
    """Test promotional cards are rejected for restaurant listings."""
    assert admit(
        _frag("Download the app for restaurant deals"), listing_profile
    ) is None
    assert admit(_frag("Top rated restaurants near you"), listing_profile) is None
