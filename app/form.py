# app/form.py
import logging
from typing import Callable, Dict, List
from app.schema import SoilSample, SoilParameter, CropRecommendation
from app.engine.scorer import estimate

logger = logging.getLogger(__name__)

# ---------- slider definitions ----------
PARAMETERS: List[SoilParameter] = [
    SoilParameter(key="ph",            label="Soil pH",        unit="",      min=4.0, max=10.0, step=0.1, default=7.0),
    SoilParameter(key="nitrogen",      label="Nitrogen (N)",   unit="mg/kg", min=0,   max=200,  step=1,   default=50),
    SoilParameter(key="phosphorus",    label="Phosphorus (P)", unit="mg/kg", min=0,   max=100,  step=1,   default=30),
    SoilParameter(key="potassium",     label="Potassium (K)",  unit="mg/kg", min=0,   max=150,  step=1,   default=40),
    SoilParameter(key="moisture",      label="Soil Moisture",  unit="%",     min=0,   max=100,  step=1,   default=60),
    SoilParameter(key="temperature",   label="Temperature",    unit="°C",    min=0,   max=50,   step=1,   default=25),
    SoilParameter(key="organicMatter", label="Organic Matter", unit="%",     min=0,   max=10,   step=0.1, default=3.5),
]

PARAMS_BY_KEY: Dict[str, SoilParameter] = {p.key: p for p in PARAMETERS}

def default_sample() -> SoilSample:
    return SoilSample(**{p.key: p.default for p in PARAMETERS})

def with_field(sample: SoilSample, field: str, value: float) -> SoilSample:
    """Return a copy of ``sample`` with one field replaced."""
    p = PARAMS_BY_KEY.get(field)
    if p is None:
        logger.warning("rejected update of unknown field %r", field)
        raise ValueError(f"Unknown soil parameter: {field}")
    if not (p.min <= value <= p.max):
        logger.warning("rejected %s=%s outside [%s, %s]", field, value, p.min, p.max)
        raise ValueError(f"{p.label} must be between {p.min} and {p.max}")
    return sample.model_copy(update={field: value})

class SoilForm:
    """Holds the soil reading being edited and hands it to subscribers on submit."""

    def __init__(self, sample: SoilSample | None = None):
        self.sample = sample or default_sample()
        self._listeners: List[Callable[[SoilSample, List[CropRecommendation]], None]] = []

    def update(self, field: str, value: float) -> SoilSample:
        self.sample = with_field(self.sample, field, value)
        return self.sample

    def reset(self) -> SoilSample:
        self.sample = default_sample()
        return self.sample

    def on_submit(self, fn: Callable[[SoilSample, List[CropRecommendation]], None]):
        self._listeners.append(fn)
        return fn

    def submit(self) -> List[CropRecommendation]:
        sample = self.sample
        items = estimate(sample)
        for fn in self._listeners:
            fn(sample, items)
        return items
