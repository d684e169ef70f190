"""Keyword groups and ordered rule tables used by the extraction profiles.

Every ordered decision (price currency, dish category, spice level) is a
tuple of :class:`Rule` rows evaluated top-down by :func:`first_match`; the
first row whose pattern matches decides the outcome.  Keyword groups are
single compiled alternations, matched case-insensitively on word boundaries.
"""

import re

from pydantic import BaseModel, ConfigDict


class Rule(BaseModel):
    """One row of a first-match-wins table."""

    model_config = ConfigDict(frozen=True)

    pattern: re.Pattern[str]
    outcome: str | None = None


def keywords(*phrases: str) -> re.Pattern[str]:
    """Compile *phrases* into one case-insensitive, word-bounded alternation.

    Phrases are regex fragments (``non.veg`` matches "non-veg" and "non veg").
    A trailing plural ``s``/``es`` is accepted so "starters" hits "starter".
    """
    body = "|".join(phrases)
    return re.compile(rf"(?<!\w)(?:{body})(?:e?s)?(?!\w)", re.IGNORECASE)


def first_match(
    table: tuple[Rule, ...],
    text: str,
) -> tuple[Rule, re.Match[str]] | None:
    """Return the first ``(rule, match)`` in *table* that matches *text*."""
    for rule in table:
        m = rule.pattern.search(text)
        if m:
            return rule, m
    return None


# --- Price ---------------------------------------------------------------------

_AMOUNT = r"(\d{1,3}(?:,\d{2,3})+(?:\.\d{1,2})?|\d+(?:\.\d{1,2})?)"

# Order matters: "₹299 (was Rs.350)" must resolve to the rupee-symbol price.
PRICE_TABLE: tuple[Rule, ...] = (
    Rule(pattern=re.compile(rf"₹\s*{_AMOUNT}"), outcome="INR"),
    Rule(pattern=re.compile(rf"(?<!\w)rs\.?\s*{_AMOUNT}", re.I), outcome="INR"),
    Rule(pattern=re.compile(rf"\$\s*{_AMOUNT}"), outcome="USD"),
    Rule(pattern=re.compile(rf"(?<!\w)aed\s*{_AMOUNT}", re.I), outcome="AED"),
    Rule(pattern=re.compile(rf"(?<!\w)sar\s*{_AMOUNT}", re.I), outcome="SAR"),
    Rule(pattern=re.compile(rf"{_AMOUNT}\s*₹"), outcome="INR"),
    Rule(pattern=re.compile(rf"{_AMOUNT}\s*rs(?!\w)", re.I), outcome="INR"),
    Rule(pattern=re.compile(rf"{_AMOUNT}\s*only(?!\w)", re.I), outcome=None),
)

# A description line holding nothing but a price, e.g. "$12.99" or "₹ 250 only"
PRICE_ONLY_LINE_RE = re.compile(
    rf"^\W*(?:₹|rs\.?|\$|aed|sar)?\s*{_AMOUNT}\s*(?:₹|rs|only)?\W*$",
    re.IGNORECASE,
)


# --- Menu item keyword groups --------------------------------------------------

FOOD_KEYWORDS = keywords(
    "biryani", "curry", "curries", "dal", "rice", "naan", "roti", "chapati",
    "paratha", "kulcha", "pizza", "burger", "pasta", "noodles", "sandwich",
    "soup", "salad", "dessert", "cake", "ice cream", "juice", "lassi", "tea",
    "coffee", "chicken", "mutton", "paneer", "fish", "prawn", "crab",
    "lobster", "beef", "lamb", "pork", "egg", "vegetable", "potato",
    "cauliflower", "spinach", "okra", "peas", "beans", "corn", "carrot",
    "onion", "tomato", "garlic", "ginger", "chili", "pepper", "masala",
    "tandoor", "tandoori", "tikka", "kebab", "samosa", "dosa", "idli",
    "grilled", "fried", "roasted", "steamed", "baked", "stuffed",
    "marinated", "crispy", "creamy", "spicy", "mild", "sweet", "tangy",
    "smoky", "fresh", "gulab jamun", "kulfi", "brownie", "smoothie",
    "milkshake", "mojito", "wrap", "roll",
)

# Currency symbols are not word characters, so this group is hand-written.
PRICE_INDICATORS = re.compile(
    r"₹|\$"
    r"|(?<!\w)(?:rs|rupees|dollars?|aed|dirhams?|sar|riyals?)\.?\s*\d"
    r"|\d+(?:\.\d{1,2})?\s*(?:rs|only)(?!\w)"
    r"|(?<!\w)(?:price|cost|per plate|per serving|per piece|starting from"
    r"|starting at)(?!\w)",
    re.IGNORECASE,
)

MENU_EXCLUSIONS = keywords(
    "login", "log in", "logout", "signup", "sign up", "sign in", "register",
    "download", "install", "app store", "play store", "home ?page", "back to home",
    "about us", "contact us", "privacy policy", "terms of (?:use|service)",
    "terms (?:and|&) conditions", "help", "support", "faq", "careers?", "jobs?",
    "blog", "latest news", "newsroom", "press release", "investors?",
    "advertise", "delivery partner", "restaurant partner", "cart",
    "checkout", "payment", "order history", "account", "profile",
    "settings", "search", "filter", "sort by", "category", "categories",
    "collection", "change location", "select location", "detect location",
    "explore", "discover", "trending", "coupon", "promo code",
    "free delivery", "cashback", "wallet", "refer a friend",
    "invite", "subscribe", "notification", "banner", "advertisement",
    "sponsored", "popup", "loading", "error", "404 not found", "page not found",
    "500 internal", "internal server error", "maintenance",
    "under construction", "footer", "header", "navbar", "sidebar",
    "breadcrumb", "pagination", "next page", "previous", "continue",
    "proceed", "submit", "cancel", "view all", "show more", "load more",
    "see all", "upload", "attachment",
)

# Canonical row order; rows overlap, so reordering changes classification.
CATEGORY_TABLE: tuple[Rule, ...] = (
    Rule(
        pattern=keywords(
            "starter", "appetizer", "soup", "salad", "tikka", "kebab", "samosa",
            "pakora", "chaat", "cutlet", "finger food", "mezze", "tapas",
            "dim sum", "spring roll", "dumpling",
        ),
        outcome="starter",
    ),
    Rule(
        pattern=keywords(
            "dessert", "sweet", "ice cream", "cake", "kulfi", "gulab jamun",
            "rasmalai", "kheer", "halwa", "payasam", "rabri", "falooda",
            "brownie", "pastry", "pastries", "mousse", "tart", "pie",
            "cheesecake", "pudding", "custard", "jelly", "sorbet", "gelato",
        ),
        outcome="dessert",
    ),
    Rule(
        pattern=keywords(
            "rice", "biryani", "pulao", "fried rice", "jeera rice",
            "coconut rice", "lemon rice", "steamed rice", "brown rice",
            "basmati",
        ),
        outcome="rice",
    ),
    Rule(
        pattern=keywords(
            "bread", "naan", "roti", "paratha", "kulcha", "chapati", "puri",
            "bhatura", "pita", "tortilla", "baguette", "ciabatta", "focaccia",
        ),
        outcome="bread",
    ),
    Rule(
        pattern=keywords(
            "dal", "curry", "curries", "gravy", "sabji", "subzi", "korma",
            "masala", "kadai", "palak", "matar", "aloo", "gobi", "bhindi",
            "baingan",
        ),
        outcome="curry",
    ),
    Rule(
        pattern=keywords(
            "drink", "beverage", "juice", "lassi", "tea", "coffee", "shake",
            "smoothie", "water", "soda", "cola", "lemonade", "mojito",
            "cocktail", "wine", "beer", "whiskey", "vodka", "gin", "rum",
            "champagne", "mocktail", "fresh lime", "coconut water",
        ),
        outcome="beverage",
    ),
    Rule(pattern=keywords("pizza"), outcome="pizza"),
    Rule(pattern=keywords("burger"), outcome="burger"),
    Rule(
        pattern=keywords(
            "pasta", "noodles", "spaghetti", "penne", "fusilli", "lasagna",
            "ravioli", "gnocchi", "linguine", "fettuccine", "ramen", "udon",
            "pho", "pad thai",
        ),
        outcome="pasta",
    ),
    Rule(
        pattern=keywords(
            "sandwich", "roll", "wrap", "sub", "panini", "club", "blt",
            "grilled cheese",
        ),
        outcome="snack",
    ),
)

DEFAULT_CATEGORY = "main"

# Mild is checked first, so "mild but very spicy" reads as mild.
SPICE_TABLE: tuple[Rule, ...] = (
    Rule(
        pattern=keywords("mild", "not spicy", "less spicy", "no spice", "bland"),
        outcome="mild",
    ),
    Rule(
        pattern=keywords("medium spicy", "moderately spicy", "medium heat"),
        outcome="medium",
    ),
    Rule(
        pattern=keywords(
            "spicy", "hot", "very spicy", "extra spicy", "fiery", "burning",
            "chili hot",
        ),
        outcome="spicy",
    ),
    Rule(
        pattern=keywords("extremely spicy", "super hot", "devil hot", "ghost pepper"),
        outcome="extra-spicy",
    ),
)

VEG_KEYWORDS = keywords(
    "veg", "vegetarian", "veggie", "paneer", "dal", "spinach", "potato",
    "cauliflower",
)
# Meats that rule out the vegetarian tag; seafood alone does not.
VEG_EXCLUSIONS = keywords(
    "non.veg", "chicken", "mutton", "fish", "egg", "meat", "beef", "lamb", "pork",
)
NON_VEG_KEYWORDS = keywords(
    "non.veg", "chicken", "mutton", "fish", "egg", "meat", "beef", "lamb",
    "pork", "seafood", "prawn", "crab", "lobster",
)

# Tags whose presence alone decides them; vegetarian is handled separately.
DIETARY_TAGS: tuple[Rule, ...] = (
    Rule(pattern=NON_VEG_KEYWORDS, outcome="non-vegetarian"),
    Rule(pattern=keywords("jain", "no onion", "no garlic"), outcome="jain"),
    Rule(pattern=keywords("vegan"), outcome="vegan"),
    Rule(pattern=keywords("gluten.free", "no gluten"), outcome="gluten-free"),
    Rule(
        pattern=keywords("dairy.free", "no dairy", "lactose.free"),
        outcome="dairy-free",
    ),
    Rule(pattern=keywords("keto", "ketogenic", "low carb"), outcome="keto"),
    Rule(pattern=keywords("organic", "natural", "farm fresh"), outcome="organic"),
)

UNAVAILABLE_KEYWORDS = keywords(
    "out of stock", "sold out", "unavailable", "not available",
    "temporarily unavailable", "coming soon",
)

POPULAR_KEYWORDS = keywords(
    "popular", "recommended", "bestseller", "best seller", "chef special",
    "chef's special", "house special", "signature", "most ordered",
    "top rated", "customer favou?rite", "must try", "highly recommended",
    "award winning", "famous", "legendary", "authentic", "traditional",
    "classic", "premium", "deluxe", "royal", "special", "exclusive",
    "limited edition",
)

PORTION_RE = re.compile(
    r"(?<!\w)(half|full|large|medium|small|family|sharing|single|double|triple"
    r"|serves \d+|\d+ pieces|\d+ pcs)(?!\w)",
    re.IGNORECASE,
)
PREP_TIME_RE = re.compile(r"(\d+)\s*(min|mins|minutes|hr|hrs|hours)(?!\w)", re.I)
CALORIES_RE = re.compile(r"(\d+)\s*(?:cal|calories|kcal)(?!\w)", re.IGNORECASE)


# --- Cuisine -------------------------------------------------------------------

CUISINES: tuple[str, ...] = (
    "north indian", "south indian", "chinese", "italian", "mexican", "thai",
    "american", "continental", "arabic", "lebanese", "turkish", "iranian",
    "punjabi", "gujarati", "maharashtrian", "bengali", "rajasthani",
    "kerala", "tamil", "kashmiri", "hyderabadi", "lucknowi", "awadhi",
    "mughlai", "street food", "fast food", "mediterranean", "japanese",
    "korean", "vietnamese", "malaysian", "singaporean", "indonesian",
    "filipino", "greek", "french", "spanish", "german", "russian", "african",
    "moroccan", "egyptian", "ethiopian", "brazilian", "peruvian",
    "argentinian", "canadian", "australian",
)

# The cuisine mentioned first in the text wins.
CUISINE_RE = re.compile(
    r"(?<!\w)(" + "|".join(CUISINES) + r")(?!\w)", re.IGNORECASE
)

# Listing cards tag venues with the regional cuisines plus a few signature dishes
LISTING_CUISINES: tuple[str, ...] = CUISINES[: CUISINES.index("fast food") + 1] + (
    "biryani", "pizza", "burger", "shawarma", "kebab",
)
LISTING_CUISINE_RE = re.compile(
    r"(?<!\w)(" + "|".join(LISTING_CUISINES) + r")(?!\w)", re.IGNORECASE
)


# --- Restaurant keyword groups -------------------------------------------------

RESTAURANT_NOUNS = keywords(
    "restaurant", "cafe", "café", "bar", "kitchen", "bistro", "pizzeria",
    "hotel", "dhaba", "dining", "eatery", "food court", "canteen", "mess",
    "tiffin", "caterer",
)
RESTAURANT_CUISINE_KEYWORDS = keywords(*LISTING_CUISINES, "indian")
RATING_INDICATORS = re.compile(
    r"\d+\.\d+|★|⭐|(?<!\w)(?:ratings?|reviews?|stars?)(?!\w)", re.IGNORECASE
)

RESTAURANT_EXCLUSIONS = keywords(
    "login", "signup", "sign up", "download", "app", "home", "about",
    "contact", "privacy", "terms", "help", "support", "cart", "search",
    "filter", "location", "explore", "trending", "show more", "view all",
    "advertisement", "ad", "sponsored", "promotion", "banner", "popup",
    "modal", "overlay", "loading", "error", "maintenance", "footer",
    "header", "navbar", "sidebar", "breadcrumb", "pagination", "sort",
    "category", "collection", "featured", "popular", "recommended", "new",
    "top rated", "best",
)

# Listing headings that survive filtering but are not venue names
RESTAURANT_NAME_REJECTIONS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^\d+$"),
    re.compile(r"^[a-z]$", re.IGNORECASE),
    re.compile(r"(?<!\w)(?:order|delivery|menu)(?!\w)", re.IGNORECASE),
    re.compile(
        r"^(?:explore|discover|find|search|filter|sort|view|show|see|more|all"
        r"|best|top|new|popular|recommended|featured|trending|offers|deals"
        r"|discount|free|save|get|book|reserve|call|directions|photos"
        r"|reviews)(?!\w)",
        re.IGNORECASE,
    ),
)

RATING_RE = re.compile(r"(\d+\.\d+)")
DELIVERY_TIME_RE = re.compile(r"(\d+)\s*min", re.IGNORECASE)
PHONE_RE = re.compile(r"(\+?\d[\d \-.()]{8,15})")
PINCODE_RE = re.compile(r"(?<!\d)(\d{5,6})(?!\d)")
ADDRESS_RE = re.compile(
    r"([^\n]{15,150}(?:road|street|lane|avenue|plaza|mall|building|tower"
    r"|complex|society|nagar|colony|sector|area|locality))(?!\w)",
    re.IGNORECASE,
)
