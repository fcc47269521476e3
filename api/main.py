from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from algorithms.registry import PATTERN_REGISTRY, get_pattern, visualizers_for
from services.analyzer import analyze_problem, list_patterns
from utils.config import settings
from utils.inputs import finite_values
from utils.logging import get_logger, setup_logging

logger = get_logger("api")

Number = Union[int, float]


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Pattern Lab API starting")
    yield


app = FastAPI(title="Pattern Lab API", version="1.0", lifespan=lifespan)

# CORS for demos; set PATTERN_LAB_CORS_ORIGINS in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class AnalyzeRequest(BaseModel):
    text: str = Field(default="", max_length=settings.MAX_TEXT_LEN)


class RankedPatternOut(BaseModel):
    pattern_name: str
    raw_score: int
    confidence: int


class AnalyzeResponse(BaseModel):
    best_pattern_name: str
    best_pattern_id: Optional[str] = None
    confidence: int
    top_reasons: List[str]
    debug_top3: List[RankedPatternOut]
    visualizers: List[str] = []


class BinarySearchRequest(BaseModel):
    array: List[Number] = Field(default_factory=list, max_length=settings.MAX_ARRAY_LEN)
    target: Number = 0
    variant: str = Field(default="standard", pattern=r"^(standard|first|last|lower_bound|upper_bound)$")


class SlidingWindowRequest(BaseModel):
    array: List[Number] = Field(default_factory=list, max_length=settings.MAX_ARRAY_LEN)
    k: Number = 0


class SubstringWindowRequest(BaseModel):
    s: str = Field(default="", max_length=settings.MAX_STRING_LEN)
    k: Number = 0


class VisualizeResponse(BaseModel):
    pattern: str
    code_lines: List[str]
    steps: List[Dict[str, Any]]


def _visualize(key: str, *args) -> VisualizeResponse:
    p = get_pattern(key)
    steps = p.build_steps(*args)
    return VisualizeResponse(
        pattern=p.key,
        code_lines=list(p.code_lines),
        steps=[{**s.to_dict(), "active_line": p.active_line(s)} for s in steps],
    )


@app.get("/health")
def health():
    return {"ok": True}


@app.post("/api/analyze", response_model=AnalyzeResponse)
def analyze(req: AnalyzeRequest):
    res = analyze_problem(req.text)
    return AnalyzeResponse(**res.to_dict(), visualizers=list(visualizers_for(res.best_pattern_id)))


@app.get("/api/patterns")
def patterns():
    return [
        {"key": p.key, "name": p.name, "subtitle": p.subtitle, "code_lines": list(p.code_lines)}
        for p in PATTERN_REGISTRY.values()
    ]


@app.get("/api/rules")
def rules():
    return list_patterns()


@app.post("/api/visualize/binary-search", response_model=VisualizeResponse)
def visualize_binary_search(req: BinarySearchRequest):
    return _visualize("binary-search", finite_values(req.array), req.target, req.variant)


@app.post("/api/visualize/sliding-window", response_model=VisualizeResponse)
def visualize_sliding_window(req: SlidingWindowRequest):
    return _visualize("sliding-window", finite_values(req.array), req.k)


@app.post("/api/visualize/substring-window", response_model=VisualizeResponse)
def visualize_substring_window(req: SubstringWindowRequest):
    return _visualize("substring-window", req.s, req.k)

# Run with: uvicorn api.main:app --host 0.0.0.0 --port 8000
