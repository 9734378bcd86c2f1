from __future__ import annotations

# Ensure the repository root is on sys.path so that absolute imports like `interval_timer.*` work
# when Streamlit runs this file from within the package directory on cloud runtimes.
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import time

import streamlit as st

from interval_timer.config import configure_logging, get_settings
from interval_timer.engine import ManualTicker, ProgramScheduler, RecordingCuePlayer, TONES
from interval_timer.errors import EmptyProgramError, IntervalTimerError
from interval_timer.models import PlaybackStatus, Program
from interval_timer.services import PRESETS, format_exercise_details, format_time, planned_program_seconds
from interval_timer.services.formatting import REST_COLOR, format_stopwatch
from interval_timer.services import program_editing as edit

st.set_page_config(page_title="Interval Timer", page_icon="⏱️", layout="centered")
settings = get_settings()
configure_logging()

st.markdown("""
<style>
.phase-card{ border-radius:14px; padding:1.2rem 1rem; color:#fff; text-align:center; }
.phase-label{ font-size:1.4rem; font-weight:700; }
.phase-sub{ font-size:.85rem; opacity:.9; }
.phase-time{ font-size:4.5rem; font-weight:700; font-family:monospace; }
</style>
""", unsafe_allow_html=True)


def _init_state() -> None:
    if "program" not in st.session_state:
        st.session_state["program"] = Program(name="My Program")
    if "ticker" not in st.session_state:
        ticker = ManualTicker(start=time.monotonic())
        cues = RecordingCuePlayer()
        st.session_state["ticker"] = ticker
        st.session_state["cues"] = cues
        st.session_state["scheduler"] = ProgramScheduler(ticker, cues, now=ticker.now, settings=settings)


def _catch_up() -> None:
    # Streamlit has no event loop of its own; move the ticker to wall-clock now
    ticker: ManualTicker = st.session_state["ticker"]
    ticker.advance(max(time.monotonic() - ticker.now(), 0.0))


_init_state()
scheduler: ProgramScheduler = st.session_state["scheduler"]

with st.sidebar:
    st.header("Program")
    program: Program = st.session_state["program"]
    name = st.text_input("Name", value=program.name)
    rest_items = st.number_input("Rest between items (s)", min_value=0, max_value=600,
                                 value=program.rest_between_items, step=5)
    program = program.model_copy(update={"name": name, "rest_between_items": int(rest_items)})

    preset = st.selectbox("Preset", list(PRESETS), format_func=lambda s: s.title())
    ex_name = st.text_input("Exercise name", value=preset.title())
    col_a, col_b = st.columns(2)
    if col_a.button("Add exercise", use_container_width=True):
        program = edit.add_standalone(program, PRESETS[preset](ex_name))
    if col_b.button("Add group", use_container_width=True):
        program = edit.add_group(program)

    groups = [i for i, it in enumerate(program.items) if it.type == "group"]
    if groups:
        target = st.selectbox("Group", groups, format_func=lambda i: f"Item {i + 1}")
        if st.button("Add exercise to group", use_container_width=True):
            program = edit.add_exercise_to_group(program, target, PRESETS[preset](ex_name))

    st.session_state["program"] = program

    for i, item in enumerate(program.items):
        with st.container(border=True):
            if item.type == "standalone":
                st.markdown(f"**{i + 1}. {item.exercise.name}** × {item.rounds}")
                st.caption(format_exercise_details(item.exercise))
            else:
                st.markdown(f"**{i + 1}. Group** × {item.rounds} · {item.rest_between_exercises}s rest")
                for ex in item.exercises:
                    st.caption(f"{ex.name}: {format_exercise_details(ex)}")
            up, down, rm = st.columns(3)
            if up.button("▲", key=f"up-{i}"):
                st.session_state["program"] = edit.move_item(program, i, "up")
                st.rerun()
            if down.button("▼", key=f"down-{i}"):
                st.session_state["program"] = edit.move_item(program, i, "down")
                st.rerun()
            if rm.button("🗑️", key=f"rm-{i}"):
                st.session_state["program"] = edit.remove_item(program, i)
                st.rerun()

    planned = planned_program_seconds(program)
    if planned is not None:
        st.caption(f"Planned duration: {format_time(planned)}")

    if st.button("▶️ Start program", type="primary", use_container_width=True):
        _catch_up()
        try:
            scheduler.start_program(program)
        except EmptyProgramError:
            st.error("Add at least one exercise before starting.")
        except IntervalTimerError as e:
            st.error(str(e))


def _toggle_pause(paused: bool) -> None:
    if paused:
        scheduler.resume_program()
    else:
        scheduler.pause_program()


@st.fragment(run_every=settings.TICK_SECONDS)
def player() -> None:
    _catch_up()
    for cue in st.session_state["cues"].drain():
        tone = TONES[cue]
        st.toast(f"🔔 {cue.value.replace('_', ' ')} ({tone.frequency} Hz)")

    snap = scheduler.snapshot()
    if snap.status == PlaybackStatus.IDLE:
        st.info("Build a program in the sidebar and press Start program.")
        return

    if snap.rest_between_exercises or snap.rest_between_items:
        label = "REST BETWEEN ITEMS" if snap.rest_between_items else "REST"
        nxt = f"Next: {snap.next_exercise_name}" if snap.next_exercise_name else ""
        st.markdown(
            f"<div class='phase-card' style='background:{REST_COLOR}'>"
            f"<div class='phase-label'>{label}</div>"
            f"<div class='phase-sub'>Item {snap.item_index + 1}/{snap.item_count} • Round {snap.item_round} · {nxt}</div>"
            f"<div class='phase-time'>{format_time(snap.rest_time_remaining)}</div></div>",
            unsafe_allow_html=True,
        )
        c1, c2 = st.columns(2)
        if c1.button("Resume" if snap.paused else "Pause", use_container_width=True):
            _toggle_pause(snap.paused)
            st.rerun(scope="fragment")
        if c2.button("Skip", use_container_width=True):
            scheduler.skip_rest()
            st.rerun(scope="fragment")
        return

    ex = snap.exercise
    if ex is None:
        return
    group = f" • Exercise {snap.exercise_index_in_group + 1}/{snap.group_size}" if snap.group_size else ""
    cycle = f" • Cycle {ex.current_cycle}/{ex.cycles}" if ex.cycles > 1 else ""
    manual_work = ex.mode == "manual" and ex.phase.value == "work"
    big = format_stopwatch(ex.exercise_duration) if manual_work else ex.formatted_time
    st.markdown(
        f"<div class='phase-card' style='background:{ex.phase_color}'>"
        f"<div class='phase-sub'>{ex.exercise_name} · {ex.mode} • Item {snap.item_index + 1}/{snap.item_count}{group}"
        f" • Round {snap.item_round}/{snap.item_rounds}</div>"
        f"<div class='phase-label'>{ex.phase_label}</div>"
        f"<div class='phase-sub'>Round {ex.current_round}/{ex.rounds}{cycle}</div>"
        f"<div class='phase-time'>{big}</div></div>",
        unsafe_allow_html=True,
    )
    if snap.finished:
        st.success("Program complete.")
        return
    c1, c2 = st.columns(2)
    if c1.button("Resume" if snap.paused else "Pause", use_container_width=True):
        _toggle_pause(snap.paused)
        st.rerun(scope="fragment")
    label = "Set complete" if manual_work else "Skip"
    if c2.button(label, use_container_width=True, type="primary" if manual_work else "secondary"):
        scheduler.advance()
        st.rerun(scope="fragment")


player()
