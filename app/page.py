from __future__ import annotations

from html import escape
from typing import Any, Dict
from urllib.parse import quote

from fifufa.decor import COLORS


def _floating(state: Dict[str, Any]) -> str:
    return "".join(
        '<div class="float" style="left:{left}%;top:{top}%;'
        'animation-duration:{duration}s;animation-delay:{delay}s"></div>'.format(**el)
        for el in state["floating_elements"]
    )


def _button(action: str, client_id: str, label: str, disabled: bool, extra: str = "") -> str:
    return (
        f'<form method="post" action="/page/{action}">'
        f'<input type="hidden" name="client_id" value="{escape(client_id)}">{extra}'
        f'<button type="submit"{" disabled" if disabled else ""}>{escape(label)}</button>'
        "</form>"
    )


def render_page(client_id: str, state: Dict[str, Any]) -> str:
    """Render the single page for one client's view state."""
    error = state["error"]
    error_html = f'<div class="error" role="alert" aria-live="polite">{escape(error)}</div>' if error else ""
    topic_field = (
        f'<input id="topic-input" name="topic" maxlength="50" '
        f'placeholder="Search ninja, batik, le sserafim, or else.." '
        f'value="{escape(state["topic"])}" aria-invalid="{"true" if error else "false"}">'
    )

    facts_html = ""
    if state["facts"]:
        items = "".join(
            f'<li class="fact fact-{fact["accent"]}"><span>{fact["number"]}</span>'
            f"<p>{escape(fact['text'])}</p></li>"
            for fact in state["facts"]
        )
        more = ""
        if state["can_load_more"]:
            more = _button("more", client_id, state["labels"]["more"], state["loading_more"])
        facts_html = (
            f'<section class="facts"><h2>Amazing Facts about "{escape(state["topic"])}"🎉</h2>'
            f"<ol>{items}</ol>{more}</section>"
        )

    return f"""<!doctype html>
<html>
<head>
<meta charset="utf-8">
<title>FiFuFaaaa</title>
<style>
body {{ background: linear-gradient(135deg, {COLORS["primary"]} 0%, #6366f1 50%, #7c3aed 100%); }}
.card, .facts {{ background: {COLORS["white"]}; }}
.fact-primary {{ border-left: 4px solid {COLORS["primary"]}; }}
.fact-yellow {{ border-left: 4px solid {COLORS["yellow"]}; }}
.float {{ position: absolute; animation: drift ease-in-out infinite; }}
.error {{ color: #ef4444; }}
@keyframes drift {{ 0%, 100% {{ transform: translate(-10px, -20px); opacity: .2; }} 50% {{ transform: translate(10px, 20px); opacity: .5; }} }}
</style>
</head>
<body>
{_floating(state)}
<header><h1>FiFuFaaaa🖐🏻</h1><div>Five Fun Facts Generator</div></header>
<main>
<div class="card">
<label for="topic-input">What's on your mind? 🤔</label>
{error_html}
{_button("random", client_id, "🎲", state["loading_random_word"])}
{_button("submit", client_id, state["labels"]["submit"], state["loading"], topic_field)}
<div class="count">{escape(state["char_count"])}</div>
</div>
{facts_html}
</main>
</body>
</html>
"""


def page_url(client_id: str) -> str:
    return f"/?client_id={quote(client_id)}"
