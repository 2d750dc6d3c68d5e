from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, RedirectResponse
import logging
from pydantic import BaseModel, Field

from app.page import page_url, render_page
from config.settings import get_settings
from fifufa.core.sessions import SessionRegistry
from fifufa.view import FactView


settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="[%(asctime)s] %(levelname)s - %(message)s",
)
logger = logging.getLogger("fifufa")

app = FastAPI(title="FiFuFa Five Fun Facts", version="1.0.0")

# CORS: allow local frontend during development
if settings.app_env.lower() in {"dev", "development", "local"}:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

sessions = SessionRegistry()


class ClientRequest(BaseModel):
    client_id: str = Field(..., description="Unique identifier for user/session")


class TopicRequest(ClientRequest):
    topic: str = Field(..., description="Raw contents of the topic input")


class SubmitRequest(ClientRequest):
    topic: Optional[str] = Field(None, description="Replaces the current topic before submitting")


class KeyRequest(ClientRequest):
    key: str = Field(..., description="Key pressed in the topic input, e.g. 'Enter' or 'Escape'")


ACTIONS = {
    "submit": FactView.submit,
    "more": FactView.load_more,
    "random": FactView.random_topic,
}


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/ui/{client_id}")
def view_state(client_id: str) -> Dict[str, Any]:
    return sessions.peek(client_id).snapshot()


@app.post("/ui/topic")
def set_topic(req: TopicRequest) -> Dict[str, Any]:
    view = sessions.get(req.client_id)
    view.set_topic(req.topic)
    return view.snapshot()


@app.post("/ui/submit")
def submit(req: SubmitRequest) -> Dict[str, Any]:
    view = sessions.get(req.client_id)
    if req.topic is not None:
        view.set_topic(req.topic)
    logger.info("Submit: client_id=%s topic_len=%s", req.client_id, len(view.topic))
    view.submit()
    return view.snapshot()


@app.post("/ui/more")
def more(req: ClientRequest) -> Dict[str, Any]:
    view = sessions.get(req.client_id)
    logger.info("Load more: client_id=%s facts=%s", req.client_id, len(view.facts))
    view.load_more()
    return view.snapshot()


@app.post("/ui/random")
def random_topic(req: ClientRequest) -> Dict[str, Any]:
    view = sessions.get(req.client_id)
    view.random_topic()
    return view.snapshot()


@app.post("/ui/key")
def key_press(req: KeyRequest) -> Dict[str, Any]:
    view = sessions.get(req.client_id)
    view.handle_key(req.key)
    return view.snapshot()


@app.get("/", response_class=HTMLResponse)
def page(client_id: str = "default") -> str:
    return render_page(client_id, sessions.peek(client_id).snapshot())


@app.post("/page/{action}")
def page_action(action: str, client_id: str = Form(...), topic: Optional[str] = Form(None)):
    handler = ACTIONS.get(action)
    if handler is None:
        raise HTTPException(status_code=404, detail=f"Unknown action: {action}")
    view = sessions.get(client_id)
    if topic is not None:
        view.set_topic(topic)
    handler(view)
    return RedirectResponse(page_url(client_id), status_code=303)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="127.0.0.1", port=8000, reload=False)
