import json
import logging
import time

from fastapi import FastAPI, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Any, Dict, List, Literal, Optional

from threerings.config import COLOR_SWATCHES, control_specs, default_configuration
from threerings.frame import configuration_from_payload, time_from_payload
from threerings.geometry import compute_frame
from threerings.logging_setup import setup_default_logging
from threerings.render import draw_list, render_png, status_line
from threerings.settings import load_settings

settings = load_settings()
setup_default_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Three Rings")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
logger.info(
    "three rings service ready (canvas=%d, cors=%s)",
    settings.canvas_size,
    ",".join(settings.cors_origins),
)


class ConfigPayload(BaseModel):
    minSize: Optional[float] = None
    maxSize: Optional[float] = None
    orbit: Optional[float] = None
    ringRatio: Optional[float] = None
    ringRatioPercent: Optional[float] = None
    showInnerRing: Optional[bool] = None
    activeColor: Optional[str] = None  # "#RRGGBB"


class TimePayload(BaseModel):
    hour: int  # 0-23; folded onto the 12-hour face
    minute: int
    second: int


class FrameRequest(BaseModel):
    canvasSize: Optional[float] = None
    config: Optional[ConfigPayload] = None
    time: Optional[TimePayload] = None
    includeDrawList: Optional[bool] = True
    profile: Optional[bool] = False


class MarkerOut(BaseModel):
    x: float
    y: float
    diameter: float
    isActive: bool


class InnerMarkerOut(BaseModel):
    x: float
    y: float
    diameter: float


class GuideRadiiOut(BaseModel):
    outer: float
    middle: float
    inner: Optional[float] = None


class GeometryOut(BaseModel):
    center: List[float]
    outerMarkers: List[MarkerOut]
    middleMarkers: List[MarkerOut]
    innerMarker: Optional[InnerMarkerOut] = None
    guideRadii: GuideRadiiOut


class TimeOut(BaseModel):
    hour12: int
    minute: int
    second: int
    hour24: Optional[int] = None


class ConfigOut(BaseModel):
    minSize: float
    maxSize: float
    orbit: float
    ringRatio: float
    showInnerRing: bool
    activeColor: str
    middleRingRadius: float
    innerRingRadius: float


class DrawCommand(BaseModel):
    op: Literal["background", "circle", "text"]
    layer: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None
    diameter: Optional[float] = None
    fill: Optional[str] = None
    stroke: Optional[str] = None
    strokeWeight: Optional[float] = None
    text: Optional[str] = None
    size: Optional[float] = None


class FrameResponse(BaseModel):
    time: TimeOut
    config: ConfigOut
    geometry: GeometryOut
    drawList: List[DrawCommand]
    status: str
    meta: Dict[str, Any]


class ControlOut(BaseModel):
    name: str
    min: float
    max: float
    step: float
    default: float


class ControlsResponse(BaseModel):
    canvasSize: float
    controls: List[ControlOut]
    swatches: List[str]
    defaults: ConfigOut


def _canvas_size(value: Optional[float]) -> float:
    return float(value) if value else float(settings.canvas_size)


def _build_inputs(req: FrameRequest, canvas_size: float):
    payload = req.model_dump()
    try:
        config = configuration_from_payload(payload.get("config"), canvas_size)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return time_from_payload(payload.get("time")), config


@app.get("/api/controls", response_model=ControlsResponse)
def controls(canvasSize: Optional[float] = Query(default=None)):
    canvas_size = _canvas_size(canvasSize)
    return {
        "canvasSize": canvas_size,
        "controls": [spec.as_dict() for spec in control_specs(canvas_size)],
        "swatches": list(COLOR_SWATCHES),
        "defaults": default_configuration(canvas_size).as_dict(),
    }


@app.post("/api/frame", response_model=FrameResponse)
def frame(req: FrameRequest):
    """
    Optionally profiles geometry, draw list construction and JSON
    serialization when `profile` is true.
    """
    canvas_size = _canvas_size(req.canvasSize)
    frame_time, config = _build_inputs(req, canvas_size)
    profile_enabled = bool(req.profile)
    profile_meta = {"timingsMs": {}} if profile_enabled else None

    geometry_start = time.perf_counter()
    geometry = compute_frame(frame_time, config, canvas_size)
    geometry_ms = (time.perf_counter() - geometry_start) * 1000.0

    draw_start = time.perf_counter()
    commands = draw_list(geometry, config, frame_time, canvas_size) if req.includeDrawList is not False else []
    draw_ms = (time.perf_counter() - draw_start) * 1000.0
    logger.debug("frame computed in %.3f ms (draw list %.3f ms)", geometry_ms, draw_ms)

    meta: Dict[str, Any] = {"canvasSize": canvas_size}
    response_payload = {
        "time": frame_time.as_dict(),
        "config": config.as_dict(),
        "geometry": geometry.as_dict(),
        "drawList": commands,
        "status": status_line(frame_time, config),
        "meta": meta,
    }

    if profile_enabled:
        profile_meta["timingsMs"]["compute_frame"] = geometry_ms
        profile_meta["timingsMs"]["draw_list"] = draw_ms
        profile_meta["serverTimestamp"] = time.time()
        meta["profile"] = profile_meta

        serialize_start = time.perf_counter()
        serialized = json.dumps(response_payload, separators=(",", ":")).encode("utf-8")
        profile_meta["timingsMs"]["serialize_response_json"] = (
            time.perf_counter() - serialize_start
        ) * 1000.0
        profile_meta["payloadBytes"] = len(serialized)

        serialized = json.dumps(response_payload, separators=(",", ":")).encode("utf-8")
        return Response(content=serialized, media_type="application/json")

    return response_payload


@app.post("/api/frame.png")
def frame_png(req: FrameRequest):
    canvas_size = _canvas_size(req.canvasSize)
    frame_time, config = _build_inputs(req, canvas_size)
    geometry = compute_frame(frame_time, config, canvas_size)
    png = render_png(draw_list(geometry, config, frame_time, canvas_size), int(canvas_size))
    return Response(content=png, media_type="image/png")
