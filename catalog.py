"""
Catalog normalization rules

Pure functions that look at one product document and return the partial
update it needs ({} when nothing changes). The task scripts and admin routes
apply these updates one document at a time.
"""
import random
from typing import Any, Dict, List, Optional, Tuple

# ----------------------- Categories -----------------------
CATEGORY_MAPPING: Dict[str, Tuple[str, str]] = {
    "Home Decor": ("Home & Living", "Decor"),
    "Wall Art": ("Home & Living", "Decor"),
    "Woodcraft": ("Home & Living", "Furniture"),
    "Metal Craft": ("Home & Living", "Decor"),
    "Textiles": ("Home & Living", "Furnishings"),
    "Beauty & Personal Care": ("Beauty", "Skincare"),
    "Clothing": ("Men's Fashion", "Apparel"),
    "Fashion": ("Men's Fashion", "Apparel"),
}

WOMENS_FASHION = "Women's Fashion"
MENS_FASHION = "Men's Fashion"

AMBIGUOUS_FASHION = (MENS_FASHION, WOMENS_FASHION)

WOMEN_KEYWORDS = ("women", "saree", "kurti", "dress", "top", "floral")


def _text(value) -> str:
    """Non-string field values read as empty text."""
    return value if isinstance(value, str) else ""


def is_womens_name(name: str) -> bool:
    lowered = _text(name).lower()
    return any(kw in lowered for kw in WOMEN_KEYWORDS)


def canonical_category(product: dict) -> Optional[Tuple[str, Optional[str]]]:
    """Return the canonical (category, sub_category) pair, or None when no rule applies."""
    category = product.get("category")
    if not isinstance(category, str):
        return None
    mapped = CATEGORY_MAPPING.get(category)
    if mapped:
        return mapped
    if category in AMBIGUOUS_FASHION:
        bucket = WOMENS_FASHION if is_womens_name(product.get("name", "")) else MENS_FASHION
        return bucket, product.get("sub_category")
    return None


def category_update(product: dict) -> Dict[str, Any]:
    pair = canonical_category(product)
    if pair is None:
        return {}
    category, sub_category = pair
    if category == product.get("category") and sub_category == product.get("sub_category"):
        return {}
    return {"category": category, "sub_category": sub_category}


# ----------------------- Sub-categories -----------------------
SUB_CATEGORY_KEYWORDS: List[Tuple[str, str]] = [
    ("saree", "Ethnic Wear"),
    ("scarf", "Apparel"),
]


def refined_sub_category(name: str) -> Optional[str]:
    lowered = _text(name).lower()
    for keyword, sub_category in SUB_CATEGORY_KEYWORDS:
        if keyword in lowered:
            return sub_category
    return None


def sub_category_update(product: dict) -> Dict[str, Any]:
    refined = refined_sub_category(product.get("name", ""))
    if refined and refined != product.get("sub_category"):
        return {"sub_category": refined}
    return {}


# ----------------------- Specifications -----------------------
MIN_SPECIFICATION_KEYS = 4

FASHION_SIZES = ["S", "M", "L", "XL", "XXL"]
BEAUTY_SIZES = ["50ml", "100ml", "200ml"]


def spec_template(product: dict) -> Tuple[Dict[str, str], Optional[List[str]]]:
    """Default specifications and sizes for the product's category."""
    category = _text(product.get("category"))
    name = _text(product.get("name"))

    if "Electronics" in category:
        return {
            "Brand": name.split(" ")[0],
            "Model": name,
            "Warranty": "1 Year Manufacturer Warranty",
            "Condition": "Brand New",
            "Shipping": "Express Delivery Available",
        }, None
    if "Fashion" in category:
        return {
            "Material": "Premium Hybrid Fabric",
            "Fit": "Standard Fit",
            "Care": "Machine Washable",
            "Occasion": "Casual/Formal",
            "Origin": "India",
        }, list(FASHION_SIZES)
    if "Home & Living" in category:
        return {
            "Material": "Eco-friendly Material",
            "Dimensions": "Standard Size",
            "Care": "Wipe with damp cloth",
            "Warranty": "6 Months",
        }, None
    if "Beauty" in category:
        return {
            "Skin Type": "All Skin Types",
            "Volume": "100ml",
            "Ingredients": "Natural Extracts",
            "Expiry": "24 Months from MFG",
        }, list(BEAUTY_SIZES)
    return {
        "Category": category,
        "Quality": "Premium",
        "Condition": "Brand New",
        "Support": "24/7 Customer Care",
    }, None


def needs_sizes(product: dict) -> bool:
    category = _text(product.get("category"))
    return ("Fashion" in category or "Beauty" in category) and not product.get("sizes")


def specification_update(product: dict) -> Dict[str, Any]:
    """Backfill thin specifications and missing sizes. Existing keys win over the template."""
    template, sizes = spec_template(product)
    existing = product.get("specifications")
    if not isinstance(existing, dict):
        existing = {}

    updates: Dict[str, Any] = {}
    if len(existing) < MIN_SPECIFICATION_KEYS:
        updates["specifications"] = {**template, **existing}
    if needs_sizes(product):
        updates["sizes"] = sizes
    return updates


# ----------------------- Electronics audit -----------------------
ELECTRONICS_KEYWORDS = [
    "laptop", "phone", "watch", "camera", "earbud", "headphone", "macbook",
    "iphone", "samsung", "canon", "sony", "tv", "television", "monitor",
    "keyboard", "mouse", "charger", "battery",
]


def is_misplaced_electronics(product: dict) -> bool:
    name = _text(product.get("name")).lower()
    looks_electronic = any(kw in name for kw in ELECTRONICS_KEYWORDS)
    return looks_electronic and product.get("category") != "Electronics"


# ----------------------- Colors -----------------------
EXPANDED_COLORS = [
    "Midnight Black", "Pearl White", "Silver Metallic", "Rose Gold",
    "Royal Blue", "Emerald Green", "Deep Crimson", "Space Gray",
    "Starlight", "Ocean Teal",
]

LEGACY_VARIANT_FIELDS = ("materials", "types")


def color_names(colors) -> List[str]:
    """Colors are stored either as plain strings or as {name, code} objects."""
    names = []
    for color in colors or []:
        if isinstance(color, dict):
            if color.get("name"):
                names.append(color["name"])
        elif color:
            names.append(str(color))
    return names


def color_refresh_update(rng: Optional[random.Random] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Returns ($set, $unset) for a product: 5 to 9 palette colors, legacy variant fields dropped."""
    rng = rng or random.Random()
    count = 5 + rng.randrange(5)
    return {"colors": EXPANDED_COLORS[:count]}, {field: "" for field in LEGACY_VARIANT_FIELDS}


# ----------------------- Applying rules -----------------------
def apply_rule(db, rule, dry_run: bool = False) -> List[Tuple[dict, Dict[str, Any]]]:
    """Run `rule` over every product, writing each non-empty update back one at a time."""
    changed = []
    for product in db["products"].find({}):
        update = rule(product)
        if not update:
            continue
        if not dry_run:
            db["products"].update_one({"_id": product["_id"]}, {"$set": update})
        changed.append((product, update))
    return changed
