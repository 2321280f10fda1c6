"""REST API for club ratings and squad formations."""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from pyscout.api.schemas import (
    FormationResponse,
    FormationSlotResponse,
    LineupRequest,
    LineupResponse,
    PlayerRatingRequest,
    PlayerRatingResponse,
    PositionResolveResponse,
    SquadRatingRequest,
    SquadRatingResponse,
    WeightsUpdateRequest,
)
from pyscout.config import (
    FormationRules,
    get_formation,
    is_known_position,
    iter_formations,
    normalize_position,
    resolve_position_key,
)
from pyscout.models import POSITION_LABELS, ClubRatingWeights
from pyscout.persistence import ScoutStore, StoreError
from pyscout.rating import (
    SquadRatingService,
    aggregate_squad_rating,
    compute_weighted_rating,
    format_rating,
    get_club_rating,
)
from pyscout.settings import Settings
from pyscout.squad import build_slot_assignments


logger = logging.getLogger("uvicorn.error")


def _formation_to_response(formation: FormationRules) -> FormationResponse:
    return FormationResponse(
        name=formation.name,
        slots=[
            FormationSlotResponse(slot=slot, eligible_positions=sorted(formation.eligible_positions(slot)))
            for slot in formation.slot_order
        ],
    )


def create_app(settings: Settings | None = None, store: ScoutStore | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    app = FastAPI(title="pyscout ratings")
    store = store or ScoutStore(settings.db_path)
    service = SquadRatingService(store, store, store)
    app.state.settings = settings
    app.state.store = store
    app.state.rating_service = service

    def _club(club_name: str | None) -> str:
        return club_name or settings.club_name

    def _formation_or_404(name: str) -> FormationRules:
        try:
            return get_formation(name)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"Unknown formation {name!r}") from exc

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.error("Store failure on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=503, content={"detail": "Rating store unavailable"})

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/positions/resolve", response_model=PositionResolveResponse)
    async def resolve_position(position: str | None = None) -> PositionResolveResponse:
        key = resolve_position_key(position)
        return PositionResolveResponse(
            position=position,
            normalized=normalize_position(position),
            position_key=key,
            label=POSITION_LABELS[key],
            known=is_known_position(position),
        )

    @app.get("/formations", response_model=List[FormationResponse])
    async def list_formations() -> List[FormationResponse]:
        return [_formation_to_response(formation) for formation in iter_formations()]

    @app.get("/formations/{name}", response_model=FormationResponse)
    async def get_formation_detail(name: str) -> FormationResponse:
        return _formation_to_response(_formation_or_404(name))

    @app.get("/clubs/{club_name}/weights", response_model=ClubRatingWeights)
    async def get_weights(club_name: str) -> ClubRatingWeights:
        return store.fetch_weights(club_name)

    @app.put("/clubs/{club_name}/weights", response_model=ClubRatingWeights)
    async def put_weights(club_name: str, payload: WeightsUpdateRequest) -> ClubRatingWeights:
        weights = ClubRatingWeights(
            club_name=club_name,
            weights=payload.weights,
            league_adjustments=payload.league_adjustments,
        )
        saved = store.save_weights(weights)
        logger.info("Saved rating weights for %s (%s positions)", club_name, len(payload.weights))
        return saved

    @app.post("/ratings/player", response_model=PlayerRatingResponse)
    async def rate_player(payload: PlayerRatingRequest) -> PlayerRatingResponse:
        position = payload.position if payload.position is not None else payload.player.primary_position
        key = resolve_position_key(position)
        if payload.weights is not None:
            rating = compute_weighted_rating(payload.player, payload.weights)
        else:
            club_weights = store.fetch_weights(_club(payload.club_name))
            rating = get_club_rating(payload.player, club_weights, position=position)
        return PlayerRatingResponse(
            player_id=payload.player.player_id,
            position_key=key,
            rating=rating,
            display=format_rating(rating),
        )

    @app.post("/squads/rating", response_model=SquadRatingResponse)
    async def rate_squad(payload: SquadRatingRequest) -> SquadRatingResponse:
        club_name = payload.weights.club_name if payload.weights else _club(payload.club_name)
        club_weights = payload.weights or store.fetch_weights(club_name)
        rating = aggregate_squad_rating(payload.assignments, payload.roster, club_weights)
        return SquadRatingResponse(club_name=club_name, rating=rating)

    @app.get("/clubs/{club_name}/squads/{squad_id}/rating", response_model=SquadRatingResponse)
    async def rate_saved_squad(club_name: str, squad_id: str) -> SquadRatingResponse:
        squad = store.get_squad(squad_id)
        if squad is None or squad.club_name != club_name:
            raise HTTPException(status_code=404, detail="Squad not found")
        rating = service.squad_rating(squad_id, club_name)
        return SquadRatingResponse(squad_id=squad_id, club_name=club_name, rating=rating)

    @app.post("/squads/lineup", response_model=LineupResponse)
    async def build_lineup(payload: LineupRequest) -> LineupResponse:
        formation = _formation_or_404(payload.formation or settings.formation)
        club_weights = store.fetch_weights(_club(payload.club_name))
        slots = build_slot_assignments(
            formation,
            payload.roster,
            payload.assignments,
            club_weights,
            excluded_player_ids=payload.excluded_player_ids,
            max_alternates=payload.max_alternates,
        )
        return LineupResponse(formation=formation.name, slots=slots)

    return app
