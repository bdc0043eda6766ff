"""Fixed word tables used by query rewriting, scoring and name cleanup."""

# Leading query words that reference databases place after the main food.
QUERY_DESCRIPTORS = frozenset(
    {
        "white",
        "brown",
        "black",
        "red",
        "green",
        "whole",
        "skim",
        "low",
        "fat",
        "plain",
        "greek",
        "raw",
        "cooked",
        "baked",
        "fried",
        "grilled",
        "steamed",
        "fresh",
        "frozen",
        "canned",
        "dried",
        "sliced",
        "diced",
        "ground",
    }
)

# Descriptors that read naturally before the main food in a display name.
PREFIX_DESCRIPTORS = frozenset(
    {
        "white",
        "brown",
        "black",
        "red",
        "green",
        "yellow",
        "wild",
        "whole",
        "skim",
        "low-fat",
        "nonfat",
        "fat-free",
        "plain",
        "greek",
        "light",
        "dark",
        "sweet",
    }
)

PREPARATION_METHODS = frozenset(
    {
        "raw",
        "cooked",
        "boiled",
        "steamed",
        "baked",
        "fried",
        "grilled",
        "roasted",
        "broiled",
        "sauteed",
        "dried",
        "canned",
        "frozen",
    }
)

NAME_NOISE = frozenset(
    {
        "nfs",
        "ns",
        "unenriched",
        "enriched",
        "fortified",
        "regular",
        "standard",
        "commercial",
        "retail",
        "all varieties",
        "various types",
    }
)

# Words ignored when deciding whether two display names are the same food.
SIMILARITY_STOP_WORDS = frozenset(
    {
        "cooked",
        "raw",
        "steamed",
        "boiled",
        "fried",
        "grilled",
        "baked",
        "roasted",
        "regular",
        "standard",
        "plain",
        "whole",
        "fresh",
    }
)

DERIVATIVE_INDICATORS = frozenset(
    {
        "flour",
        "oil",
        "milk",
        "butter",
        "powder",
        "extract",
        "syrup",
        "juice",
        "sauce",
    }
)

SPECIFICITY_INDICATORS = frozenset(
    {
        "infant",
        "baby",
        "formula",
        "supplement",
        "restaurant",
        "fast food",
        "brand",
        "homemade",
        "commercial",
        "industrial",
    }
)

TYPICALLY_COOKED_FOODS = frozenset(
    {
        "rice",
        "pasta",
        "chicken",
        "beef",
        "pork",
        "fish",
        "egg",
        "potato",
        "broccoli",
        "beans",
        "lentils",
        "oats",
        "quinoa",
    }
)

COOKED_SIGNALS = frozenset({"cooked", "boiled", "steamed"})

RAW_SIGNALS = frozenset({"raw", "uncooked"})
