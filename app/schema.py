from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, List

CropName = Literal["Wheat","Corn","Carrots","Apples"]
Status = Literal["excellent","good","fair","poor"]

class SoilSample(BaseModel):
    """One soil reading. Any real values are accepted; ranges live on the form."""
    model_config = ConfigDict(frozen=True)

    ph: float = 7.0
    nitrogen: float = 50
    phosphorus: float = 30
    potassium: float = 40
    moisture: float = 60
    temperature: float = 25
    organicMatter: float = 3.5

class AnalysisRequest(BaseModel):
    # slider bounds from the analysis form
    ph: float = Field(default=7.0, ge=4.0, le=10.0)
    nitrogen: float = Field(default=50, ge=0, le=200)
    phosphorus: float = Field(default=30, ge=0, le=100)
    potassium: float = Field(default=40, ge=0, le=150)
    moisture: float = Field(default=60, ge=0, le=100)
    temperature: float = Field(default=25, ge=0, le=50)
    organicMatter: float = Field(default=3.5, ge=0, le=10)

    def to_sample(self) -> SoilSample:
        return SoilSample(**self.model_dump())

class SoilParameter(BaseModel):
    key: str
    label: str
    unit: str
    min: float
    max: float
    step: float
    default: float

class ParametersResponse(BaseModel):
    parameters: List[SoilParameter]
    defaults: SoilSample

class CropRecommendation(BaseModel):
    name: CropName
    suitability: int
    estimatedYield: str
    status: Status
    notes: str

class SoilSummary(BaseModel):
    ph: str
    nitrogen: float
    moisture: float
    organicMatter: float

class Notice(BaseModel):
    title: str
    description: str

class EstimateResponse(BaseModel):
    items: List[CropRecommendation]

class AnalysisResponse(BaseModel):
    soil: SoilSummary
    best: CropRecommendation
    items: List[CropRecommendation]
    notice: Notice
