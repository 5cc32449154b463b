from __future__ import annotations

from typing import Dict
import logging
import uuid

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from backend.models import (
    ColorOut,
    GetStateResp,
    NewGameReq,
    PaletteResp,
    PickReq,
    RevealResp,
    SessionReq,
    StateEnvelope,
)
from mastermind import (
    CODE_LENGTH,
    DEFAULT_PALETTE,
    MAX_TURNS,
    GameConfig,
    GameSession,
)


logger = logging.getLogger("backend")

# In-memory session store
SESSIONS: Dict[str, GameSession] = {}


def _new_session_id() -> str:
    return uuid.uuid4().hex


def get_session(session_id: str) -> GameSession:
    session = SESSIONS.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def save_session(session_id: str, session: GameSession) -> None:
    SESSIONS[session_id] = session


app = FastAPI(title="Mastermind")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> Dict[str, bool]:
    return {"ok": True}


@app.get("/palette", response_model=PaletteResp)
def palette() -> PaletteResp:
    return PaletteResp(
        colors=[ColorOut(key=c.key, name=c.name) for c in DEFAULT_PALETTE],
        codeLength=CODE_LENGTH,
        maxTurns=MAX_TURNS,
    )


@app.post("/new-game", response_model=StateEnvelope)
def new_game_endpoint(req: NewGameReq) -> StateEnvelope:
    try:
        cfg = GameConfig(variant=req.variant, seed=req.seed)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    session = GameSession(cfg)
    sid = _new_session_id()
    save_session(sid, session)
    logger.info("session %s started (variant=%s)", sid, cfg.variant)
    return StateEnvelope(sessionId=sid, state=session.snapshot())


@app.get("/state/{sessionId}", response_model=GetStateResp)
def get_state_endpoint(sessionId: str) -> GetStateResp:
    session = get_session(sessionId)
    return GetStateResp(state=session.snapshot())


@app.post("/pick", response_model=GetStateResp)
def pick_endpoint(req: PickReq) -> GetStateResp:
    session = get_session(req.sessionId)
    if not session.pick_color(req.color):
        logger.debug(
            "session %s: pick %r ignored (%s)", req.sessionId, req.color, session.last_rejection
        )
    return GetStateResp(state=session.snapshot())


@app.post("/undo", response_model=GetStateResp)
def undo_endpoint(req: SessionReq) -> GetStateResp:
    session = get_session(req.sessionId)
    session.undo_color()
    return GetStateResp(state=session.snapshot())


@app.post("/submit", response_model=GetStateResp)
def submit_endpoint(req: SessionReq) -> GetStateResp:
    session = get_session(req.sessionId)
    reason = session.submit_guess()
    if reason is not None:
        logger.info("session %s: guess rejected (%s)", req.sessionId, reason)
    elif session.state.status != "playing":
        logger.info(
            "session %s: game %s after %d turns",
            req.sessionId,
            session.state.status,
            session.state.turns_used,
        )
    return GetStateResp(state=session.snapshot())


@app.post("/reset", response_model=GetStateResp)
def reset_endpoint(req: SessionReq) -> GetStateResp:
    session = get_session(req.sessionId)
    session.reset_game()
    logger.info("session %s reset", req.sessionId)
    return GetStateResp(state=session.snapshot())


@app.post("/toggle-sound", response_model=GetStateResp)
def toggle_sound_endpoint(req: SessionReq) -> GetStateResp:
    session = get_session(req.sessionId)
    session.toggle_sound()
    return GetStateResp(state=session.snapshot())


@app.post("/toggle-theme", response_model=GetStateResp)
def toggle_theme_endpoint(req: SessionReq) -> GetStateResp:
    session = get_session(req.sessionId)
    session.toggle_theme()
    return GetStateResp(state=session.snapshot())


@app.get("/reveal/{sessionId}", response_model=RevealResp)
def reveal_endpoint(sessionId: str) -> RevealResp:
    session = get_session(sessionId)
    secret = session.reveal_secret()
    return RevealResp(secret=[ColorOut(key=c.key, name=c.name) for c in secret])


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run("backend.app:app", host="0.0.0.0", port=8000, reload=True)
