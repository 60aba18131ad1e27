import math
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Tuple
from app.schema import SoilSample, CropRecommendation
from .crops import CROPS, FERTILITY

logger = logging.getLogger(__name__)

def _in_band(value: float, band: Tuple[float, float]) -> bool:
    lo, hi = band
    return lo <= value <= hi

def ph_factor(c: dict, ph: float) -> float:
    p = c["ph"]
    if _in_band(ph, p["ideal"]):
        return p["peak"]
    return max(0, p["peak"] - abs(ph - p["mid"]) * p["slope"])

def temperature_factor(c: dict, temperature: float) -> float:
    t = c["temp"]
    return 1 if _in_band(temperature, t["band"]) else t["penalty"]

def fourth_factor(c: dict, sample: SoilSample) -> float:
    f = c["fourth"]
    value = getattr(sample, f["field"])
    ok = _in_band(value, f["band"]) if "band" in f else value >= f["min"]
    return 1 if ok else f["penalty"]

def crop_score(c: dict, sample: SoilSample) -> float:
    s = (ph_factor(c, sample.ph) *
         FERTILITY[c["crop"]](sample) *
         temperature_factor(c, sample.temperature) *
         fourth_factor(c, sample))
    return max(0.0, min(100.0, s))

def status_for(score: float) -> str:
    if score >= 80:
        return "excellent"
    if score >= 60:
        return "good"
    if score >= 40:
        return "fair"
    return "poor"

def round_half_up(x: float) -> int:
    f = math.floor(x)
    return f + (1 if x - f >= 0.5 else 0)

def yield_estimate(score: float, base_yield: float) -> str:
    # quantize the exact binary value so 2.25 -> "2.3" and 4.05 (really 4.0499..) -> "4.0"
    tons = Decimal(base_yield * (score / 100)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{tons} tons/hectare"

def score(sample: SoilSample) -> List[Tuple[dict, float]]:
    out: List[Tuple[dict, float]] = []
    for c in CROPS:
        s = crop_score(c, sample)
        logger.debug("%s scored %.3f", c["crop"], s)
        out.append((c, s))
    return out

def to_items(scored: List[Tuple[dict, float]]) -> List[CropRecommendation]:
    items = [CropRecommendation(
        name=c["crop"],
        suitability=round_half_up(s),
        estimatedYield=yield_estimate(s, c["yield"]),
        status=status_for(s),
        notes=c["notes"][0] if s > 70 else c["notes"][1],
    ) for c, s in scored]
    # sorted() is stable, so ties stay in crop table order
    return sorted(items, key=lambda it: it.suitability, reverse=True)

def estimate(sample: SoilSample) -> List[CropRecommendation]:
    """Rank the four crops for a soil sample, best first. Never raises for numeric input."""
    return to_items(score(sample))
