"""FastAPI application serving hive layouts, groups and recommendations."""
from typing import Optional
from fastapi import FastAPI, Depends, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from sqlalchemy.orm import Session

from .config import settings
from .database import get_db, init_db
from .directory import load_users, load_events, seed_demo_directory
from .graph_export import hive_stats
from .hive_builder import build_hive_data
from .clustering import create_groups
from .recommendations import get_recommended_connections
from .serialization import hive_data_to_dict, group_to_dict, recommendation_to_dict
from .validation import HiveValidationError


app = FastAPI(
    title="Hive Engine API",
    description="Affinity, clustering and recommendation engine for the hive",
    version="0.1.0"
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:8081", "http://localhost:19006", "http://127.0.0.1:8081"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Startup
# =============================================================================

@app.on_event("startup")
async def startup():
    """Initialize database on startup."""
    init_db()


# =============================================================================
# Schemas
# =============================================================================

class SeedResponse(BaseModel):
    """Result of seeding the demo neighbourhood."""
    users_added: int
    events_added: int


class RecommendationsResponse(BaseModel):
    """Ranked suggestions for one user."""
    user_id: str
    recommendations: list[dict]


# =============================================================================
# Helpers
# =============================================================================

def _load_population(db: Session):
    """Load users and events, enforcing the population cap."""
    try:
        users = load_users(db)
        events = load_events(db)
    except HiveValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    if len(users) > settings.max_population:
        raise HTTPException(
            status_code=413,
            detail=f"Population of {len(users)} users exceeds limit of {settings.max_population}"
        )
    return users, events


def _build(db: Session, current_user_id: str, width: Optional[float], height: Optional[float]):
    users, events = _load_population(db)
    return build_hive_data(
        users,
        events,
        current_user_id,
        width or settings.default_viewport_width,
        height or settings.default_viewport_height,
    )


# =============================================================================
# Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {
        "service": "hive-engine",
        "status": "healthy",
        "version": "0.1.0"
    }


@app.get("/hive")
async def get_hive(
    current_user_id: str,
    width: Optional[float] = Query(default=None, gt=0),
    height: Optional[float] = Query(default=None, gt=0),
    db: Session = Depends(get_db)
):
    """
    Build the hive layout anchored on ``current_user_id``.

    An unknown current user is not an error: the layout simply has no
    center cell.
    """
    data = _build(db, current_user_id, width, height)
    return hive_data_to_dict(data)


@app.get("/hive/stats")
async def get_hive_stats(
    current_user_id: str,
    width: Optional[float] = Query(default=None, gt=0),
    height: Optional[float] = Query(default=None, gt=0),
    db: Session = Depends(get_db)
):
    """Graph statistics for the hive layout."""
    data = _build(db, current_user_id, width, height)
    return hive_stats(data)


@app.get("/groups")
async def list_groups(db: Session = Depends(get_db)):
    """Groups for the whole directory."""
    users, events = _load_population(db)
    return [group_to_dict(g) for g in create_groups(users, events)]


@app.get("/users/{user_id}/recommendations", response_model=RecommendationsResponse)
async def get_recommendations(
    user_id: str,
    limit: Optional[int] = Query(default=None, ge=0),
    db: Session = Depends(get_db)
):
    """Who to connect with, strongest first."""
    users, _ = _load_population(db)
    user = next((u for u in users if u.id == user_id), None)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    if limit is None:
        limit = settings.recommendation_limit

    recommendations = get_recommended_connections(user, users, limit=limit)
    return RecommendationsResponse(
        user_id=user_id,
        recommendations=[recommendation_to_dict(r) for r in recommendations],
    )


@app.post("/seed", response_model=SeedResponse)
async def seed_demo(db: Session = Depends(get_db)):
    """Seed the demo neighbourhood into the directory."""
    users_added, events_added = seed_demo_directory(db)
    return SeedResponse(users_added=users_added, events_added=events_added)
