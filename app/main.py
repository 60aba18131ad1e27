from asyncio import sleep
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import settings, setup_logging
from app.schema import (
    SoilSample, AnalysisRequest, AnalysisResponse, EstimateResponse,
    ParametersResponse, SoilSummary, Notice,
)
from app.engine.scorer import estimate
from app.form import PARAMETERS, default_sample

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_title, version="0.1.0")
app.state.settings = settings

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins, allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"]
)

ANALYSIS_NOTICE = Notice(
    title="Analysis Complete",
    description="Your soil analysis has been processed and crop recommendations are ready.",
)

@app.get("/health")
def health():
    return {"ok": True}

@app.get("/parameters", response_model=ParametersResponse)
def parameters():
    return {"parameters": PARAMETERS, "defaults": default_sample()}

@app.post("/estimate", response_model=EstimateResponse)
def raw_estimate(body: SoilSample):
    # no range checks here; out-of-range readings still get scored
    return {"items": estimate(body)}

@app.post("/analyze", response_model=AnalysisResponse)
async def analyze(body: AnalysisRequest):
    sample = body.to_sample()
    items = estimate(sample)

    delay = app.state.settings.analysis_delay_ms
    if delay > 0:
        await sleep(delay / 1000)

    best = items[0]
    logger.info("analysis done: best=%s suitability=%d status=%s", best.name, best.suitability, best.status)

    return {
        "soil": SoilSummary(
            ph=f"{sample.ph:.1f}",
            nitrogen=sample.nitrogen,
            moisture=sample.moisture,
            organicMatter=sample.organicMatter,
        ),
        "best": best,
        "items": items,
        "notice": ANALYSIS_NOTICE,
    }
