from .color import hex_to_hsl, hsl_to_hex, normalize_color_to_hsl
from .contrast import check_contrast, generate_dark_theme, get_contrast_ratio, meets_wcag
from .domain import build_brand_url, extract_brand_slug, matches_brand_domain, parse_domain

__all__ = [
    "hex_to_hsl",
    "hsl_to_hex",
    "normalize_color_to_hsl",
    "check_contrast",
    "generate_dark_theme",
    "get_contrast_ratio",
    "meets_wcag",
    "build_brand_url",
    "extract_brand_slug",
    "matches_brand_domain",
    "parse_domain",
]
