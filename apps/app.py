# -*- coding: utf-8 -*-
import asyncio
import html
import tempfile
from pathlib import Path
from typing import List, Optional, Tuple

import gradio as gr

from navietta.container import get_container
from navietta.dates import combine
from navietta.domain.errors import NaviettaError, SessionNotFoundError
from navietta.domain.models import JourneyInvalid, JourneyValid
from navietta.domain.schemas import FlightDetails, Preferences, TravelRecommendations
from navietta.monitoring import configure_logging
from navietta.ports.rendering import MapRendererPort
from navietta.services import JourneyValidatorService, TravelPlannerService

# ============================ CONFIG ============================
TRANSIT_STYLES: List[str] = ["fast-track", "scenic-route", "fewer-transfers"]
STYLE_LABELS = {
    "fast-track": "⚡ Fast track",
    "scenic-route": "🏞️ Scenic route",
    "fewer-transfers": "🧳 Fewer transfers",
}


def _map_iframe_from_html(document_html: str, *, height_px: int = 520) -> str:
    escaped = html.escape(document_html, quote=True)
    return (
        f'<iframe srcdoc="{escaped}" '
        f'style="width: 100%; height: {height_px}px; border: 0;" '
        f'loading="lazy"></iframe>'
    )


def _format_recommendations(recs: TravelRecommendations) -> str:
    lines: List[str] = []
    if recs.fallback_mode:
        lines.append("> ℹ️ Offline suggestions: the AI service is not available right now.\n")

    reasoning = recs.reasoning
    if isinstance(reasoning, str):
        lines.append(f"🧠 {reasoning}\n")
    else:
        lines.append(f"🧠 {reasoning.situation_assessment}\n")

    for opt in recs.options:
        star = " ⭐ Recommended" if opt.recommended else ""
        lines.append(f"## {opt.title}{star}")
        lines.append(opt.description)
        lines.append(
            f"💶 {opt.cost} | ⏱️ {opt.duration} | 🔋 {opt.energy_level} | "
            f"🛋️ {opt.comfort_level} | 😌 Stress: {opt.stress_level}"
        )
        for highlight in opt.highlights:
            lines.append(f"- {highlight}")
        if opt.timeline_items:
            lines.append("")
            for item in opt.timeline_items:
                lines.append(f"- **{item.time}** {item.title}: {item.description}")
        lines.append("")

    final = recs.final_recommendation
    chosen = recs.option(final.option_id)
    title = chosen.title if chosen else final.option_id
    lines.append(f"### 🏁 My pick: {title} ({final.confidence}% confident)")
    lines.append(final.reasoning)
    return "\n".join(lines)


def _format_conversation(turns: List[Tuple[str, str]]) -> str:
    return "\n\n".join(f"**🧑 You:** {q}\n\n**🧭 Navietta:** {a}" for q, a in turns)


async def validate_journey(
    origin: str,
    destination: str,
    departure_date: str,
    departure_time: str,
    arrival_date: str,
    arrival_time: str,
) -> Tuple[str, str]:
    try:
        departure = combine(departure_date, departure_time)
        arrival = combine(arrival_date, arrival_time)
    except ValueError as exc:
        return f"❌ {exc}", "<p></p>"

    validator = get_container().resolve(JourneyValidatorService)
    result = await validator.validate(origin, destination, departure, arrival)

    if isinstance(result, JourneyInvalid):
        text = f"❌ {result.error}"
        if result.distance_km is not None:
            text += f"\n\n📏 Distance: {result.distance_km:.0f} km"
        return text, "<p></p>"

    assert isinstance(result, JourneyValid)
    text = (
        f"✅ {result.origin.full_name} → {result.destination.full_name}\n\n"
        f"📏 Distance: {result.distance_km:.0f} km"
    )

    map_path = Path(tempfile.mkdtemp()) / "journey.html"
    renderer = get_container().resolve(MapRendererPort)
    try:
        await asyncio.to_thread(renderer.render, result.origin, result.destination, map_path)
        map_html = _map_iframe_from_html(map_path.read_text(encoding="utf-8"))
    except (NaviettaError, OSError) as exc:
        map_html = f"<pre>{html.escape(f'No map: {exc}')}</pre>"
    return text, map_html


def generate_recommendations(
    origin: str,
    destination: str,
    departure_date: str,
    departure_time: str,
    stop_location: str,
    stop_date: str,
    stop_time: str,
    adults: float,
    children: float,
    luggage: float,
    budget: float,
    activities: float,
    transit_style: str,
) -> Tuple[str, Optional[str], List[Tuple[str, str]], str]:
    stops = []
    if stop_location and stop_location.strip():
        stops.append(
            {
                "location": stop_location.strip(),
                "arrivalDate": stop_date or departure_date,
                "arrivalTime": stop_time,
            }
        )

    try:
        flight = FlightDetails.model_validate(
            {
                "from": origin,
                "to": destination or None,
                "departureDate": departure_date,
                "departureTime": departure_time,
                "adults": int(adults),
                "children": int(children),
                "luggageCount": int(luggage),
                "stops": stops,
            }
        )
        prefs = Preferences(
            budget=int(budget),
            activities=int(activities),
            transit_style=transit_style,
        )
    except ValueError as exc:
        return f"❌ {exc}", None, [], ""

    planner = get_container().resolve(TravelPlannerService)
    session_id, recs = planner.generate_recommendations(flight, prefs)
    return _format_recommendations(recs), session_id, [], ""


def ask_question(
    question: str,
    session_id: Optional[str],
    turns: List[Tuple[str, str]],
) -> Tuple[str, List[Tuple[str, str]], str]:
    if not question or not question.strip():
        return _format_conversation(turns), turns, ""
    if not session_id:
        return "❌ Generate recommendations first", turns, question

    planner = get_container().resolve(TravelPlannerService)
    try:
        answer = planner.answer_question(session_id, question.strip())
    except SessionNotFoundError:
        return "❌ Session expired, generate recommendations again", turns, question

    turns = turns + [(question.strip(), answer)]
    return _format_conversation(turns), turns, ""


# ============================ UI ============================
def build_app() -> gr.Blocks:
    with gr.Blocks(title="Navietta • Transit planner") as app:
        gr.Markdown(
            """
# 🧭 Navietta – Transit planner
✔ Location check with offline fallback
✔ Realistic travel time check
✔ Layover recommendations and follow-up questions
"""
        )

        session_state = gr.State(None)
        turns_state = gr.State([])

        with gr.Row():
            origin_tb = gr.Textbox(label="🛫 From", placeholder="London")
            destination_tb = gr.Textbox(label="🛬 To", placeholder="Paris")

        with gr.Row():
            dep_date_tb = gr.Textbox(label="📅 Departure date", placeholder="2025-09-02")
            dep_time_tb = gr.Textbox(label="🕗 Departure time", placeholder="08:00")
            arr_date_tb = gr.Textbox(label="📅 Arrival date", placeholder="2025-09-02")
            arr_time_tb = gr.Textbox(label="🕓 Arrival time", placeholder="11:30")

        btn_validate = gr.Button("✅ Check journey")
        with gr.Row():
            validation_md = gr.Markdown()
            map_view = gr.HTML(value="<p></p>")

        btn_validate.click(
            validate_journey,
            inputs=[
                origin_tb,
                destination_tb,
                dep_date_tb,
                dep_time_tb,
                arr_date_tb,
                arr_time_tb,
            ],
            outputs=[validation_md, map_view],
        )

        gr.Markdown("## 🧳 Layover")
        with gr.Row():
            stop_tb = gr.Textbox(label="📍 Stopover", placeholder="Dubai")
            stop_date_tb = gr.Textbox(label="📅 Stopover arrival date")
            stop_time_tb = gr.Textbox(label="🕓 Stopover arrival time")

        with gr.Row():
            adults_nb = gr.Slider(1, 10, value=1, step=1, label="🧑 Adults")
            children_nb = gr.Slider(0, 10, value=0, step=1, label="🧒 Children")
            luggage_nb = gr.Slider(0, 20, value=1, step=1, label="🧳 Luggage")

        with gr.Row():
            budget_sl = gr.Slider(1, 5, value=3, step=1, label="💶 Budget (1 frugal, 5 luxury)")
            activities_sl = gr.Slider(
                0, 5, value=3, step=1, label="🔋 Activities (0 resting, 5 energised)"
            )
            style_dd = gr.Dropdown(
                [(STYLE_LABELS[s], s) for s in TRANSIT_STYLES],
                value="fast-track",
                label="🚆 Transit style",
            )

        btn_generate = gr.Button("🚀 Get recommendations")
        recommendations_md = gr.Markdown()

        gr.Markdown("## 💬 Ask Navietta")
        conversation_md = gr.Markdown()
        with gr.Row():
            question_tb = gr.Textbox(
                label="❓ Question", lines=2, placeholder="Can I fit in lunch in the city?"
            )
            btn_ask = gr.Button("💬 Ask")

        btn_generate.click(
            generate_recommendations,
            inputs=[
                origin_tb,
                destination_tb,
                dep_date_tb,
                dep_time_tb,
                stop_tb,
                stop_date_tb,
                stop_time_tb,
                adults_nb,
                children_nb,
                luggage_nb,
                budget_sl,
                activities_sl,
                style_dd,
            ],
            outputs=[recommendations_md, session_state, turns_state, conversation_md],
        )

        btn_ask.click(
            ask_question,
            inputs=[question_tb, session_state, turns_state],
            outputs=[conversation_md, turns_state, question_tb],
        )

    return app


if __name__ == "__main__":
    configure_logging()
    build_app().launch()
