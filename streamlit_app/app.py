"""Gains Engine — Streamlit dashboard.

Run with:
    streamlit run streamlit_app/app.py
"""

from __future__ import annotations

import logging

import streamlit as st

from gains_engine.config import LOG_LEVEL
from gains_engine.event_bus import EventBus
from gains_engine.exceptions import GainsEngineError
from gains_engine.inventory import EquipmentInventory
from gains_engine.math.training_volume import (
    current_streak,
    most_worked_muscle_group,
    volume_trend,
    weekly_volume,
    workout_date,
)
from gains_engine.models.enums import (
    EQUIPMENT_CATEGORY_DISPLAY_NAMES,
    TIER_DISPLAY_NAMES,
    WORKOUT_DAY_DISPLAY_NAMES,
    WORKOUT_DAY_FOCUS,
    EquipmentCategory,
    FitnessLevel,
    WorkoutDay,
)
from gains_engine.models.events import Event
from gains_engine.persistence import JsonHistoryStore
from gains_engine.progression import ProgressionEngine
from gains_engine.records import PersonalRecordBook
from gains_engine.serialization import to_json_string, workout_to_dict
from gains_engine.session import WorkoutSession
from gains_engine.workout_builder import WorkoutGenerator

from helpers import (
    DAY_COLORS,
    TIER_COLORS,
    character_store,
    format_muscle_groups,
    format_rest,
    format_target,
    format_weight,
    history_frame,
    history_store,
    level_progress,
    weekly_volume_frame,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Gains Engine",
    page_icon="💪",
    layout="wide",
)


# ---------------------------------------------------------------------------
# Per-browser-session objects
# ---------------------------------------------------------------------------


def _on_event(event: Event) -> None:
    st.session_state.setdefault("pending_events", []).append(event)


def _init_state() -> None:
    """Create the bus, engine, session tracker, records and inventory once per session."""
    if "engine" in st.session_state:
        return
    bus = EventBus()
    bus.subscribe_all(_on_event)
    engine = ProgressionEngine(store=character_store(), bus=bus)
    try:
        engine.load()
    except GainsEngineError as e:
        st.session_state["load_error"] = str(e)
    store = history_store()
    try:
        history, saved_records = store.load()
    except GainsEngineError as e:
        history, saved_records = [], []
        st.session_state["history_error"] = str(e)
    st.session_state["bus"] = bus
    st.session_state["engine"] = engine
    st.session_state["history_store"] = store
    st.session_state["session"] = WorkoutSession(bus=bus, progression=engine, history=history)
    st.session_state["records"] = PersonalRecordBook(bus=bus, records=saved_records)
    st.session_state["inventory"] = EquipmentInventory()


_init_state()
engine: ProgressionEngine = st.session_state["engine"]
session: WorkoutSession = st.session_state["session"]
records: PersonalRecordBook = st.session_state["records"]
inventory: EquipmentInventory = st.session_state["inventory"]
history_file: JsonHistoryStore = st.session_state["history_store"]

if st.session_state.get("load_error"):
    st.error(f"Could not load saved character: {st.session_state['load_error']}")
if st.session_state.get("history_error"):
    st.error(f"Could not load workout history: {st.session_state['history_error']}")


def _save_history() -> None:
    if not history_file.save(session.history, records.records):
        st.warning("Workout history could not be saved to disk.")


def _show_pending_events() -> None:
    for event in st.session_state.pop("pending_events", []):
        payload = event.payload()
        if event.name == "level_up":
            st.toast(f"Level up! Now level {payload['level']}")
        elif event.name == "tier_changed":
            st.balloons()
            st.toast(f"New rank: {payload['tier_name']}")
        elif event.name == "personal_record_broken":
            st.toast(f"New PR on {payload['exercise']}: {payload['one_rep_max']:.1f} kg 1RM")


# ---------------------------------------------------------------------------
# Sidebar — Equipment and fitness level
# ---------------------------------------------------------------------------

st.sidebar.title("Training Setup")

fitness_level = st.sidebar.selectbox(
    "Fitness Level",
    options=list(FitnessLevel),
    format_func=lambda lvl: lvl.name.title(),
)

st.sidebar.subheader("Equipment")
search = st.sidebar.text_input("Search equipment", value="")
for category in EquipmentCategory:
    items = inventory.by_category(category, search)
    if not items:
        continue
    with st.sidebar.expander(EQUIPMENT_CATEGORY_DISPLAY_NAMES[category], expanded=False):
        for item in items:
            checked = st.checkbox(item.name, value=item.is_available, key=f"eq_{item.name}")
            if checked != item.is_available:
                inventory.toggle(item.name)

with st.sidebar.expander("Add custom equipment"):
    custom_name = st.text_input("Name", key="custom_name")
    custom_category = st.selectbox(
        "Category",
        options=list(EquipmentCategory),
        format_func=lambda c: EQUIPMENT_CATEGORY_DISPLAY_NAMES[c],
        key="custom_category",
    )
    if st.button("Add"):
        try:
            inventory.add_custom(custom_name, custom_category)
            st.rerun()
        except GainsEngineError as e:
            st.error(str(e))

# ---------------------------------------------------------------------------
# Character card
# ---------------------------------------------------------------------------

state = engine.state
tier_color = TIER_COLORS[state.tier]
st.markdown(
    f'<div style="background:{tier_color};padding:12px 18px;border-radius:8px;color:white;">'
    f'<strong style="font-size:1.4em;">{TIER_DISPLAY_NAMES[state.tier]}</strong>'
    f' &nbsp; Level {state.level}</div>',
    unsafe_allow_html=True,
)
st.progress(level_progress(state), text=f"{state.experience_to_next_level} XP to next level")
c1, c2, c3, c4 = st.columns(4)
c1.metric("Experience", f"{state.experience:,}")
c2.metric("Strength", state.strength)
c3.metric("Endurance", state.endurance)
c4.metric("Total Lifted", format_weight(state.total_weight_lifted))

_show_pending_events()

# ---------------------------------------------------------------------------
# Tabs
# ---------------------------------------------------------------------------

tab_workout, tab_progress, tab_records = st.tabs(["Workout", "Progress", "Records"])

with tab_workout:
    day = st.radio(
        "Workout Day",
        options=list(WorkoutDay),
        format_func=lambda d: WORKOUT_DAY_DISPLAY_NAMES[d],
        horizontal=True,
        disabled=session.is_active,
    )
    st.caption(WORKOUT_DAY_FOCUS[day])

    if not session.is_active:
        if st.button("Generate Workout", type="primary"):
            workout = WorkoutGenerator().generate_workout(day, inventory.available(), fitness_level)
            session.start(workout)
            st.rerun()
        last = st.session_state.get("last_summary")
        if last is not None:
            st.success(
                f"Workout complete: {last.exercise_count} exercises, "
                f"{format_weight(last.total_weight)} lifted"
            )
            st.info(last.coaching_feedback)
    else:
        workout = session.workout
        st.markdown(
            f'<div style="background:{DAY_COLORS[workout.day]};padding:6px 12px;'
            f'border-radius:4px;">{WORKOUT_DAY_DISPLAY_NAMES[workout.day]}</div>',
            unsafe_allow_html=True,
        )
        for i, exercise in enumerate(workout.exercises):
            with st.expander(
                f"{exercise.name} ({exercise.completed_sets}/{len(exercise.sets)} sets)",
                expanded=exercise.completed_sets < len(exercise.sets),
            ):
                st.caption(f"{format_muscle_groups(exercise)} | {exercise.instructions}")
                for j, exercise_set in enumerate(exercise.sets):
                    cols = st.columns([3, 2, 2, 1])
                    cols[0].write(
                        f"Set {j + 1}: {format_target(exercise, exercise_set)} "
                        f"({format_rest(exercise_set.rest_seconds)})"
                    )
                    if exercise_set.is_completed:
                        cols[3].write("✅")
                        continue
                    weight = cols[1].number_input(
                        "Weight", min_value=0.0,
                        value=float(exercise_set.target_weight or 0.0),
                        key=f"w_{i}_{j}", label_visibility="collapsed",
                    )
                    reps = cols[2].number_input(
                        "Reps", min_value=0, value=exercise_set.target_reps,
                        key=f"r_{i}_{j}", label_visibility="collapsed",
                    )
                    if cols[3].button("Log", key=f"log_{i}_{j}"):
                        session.complete_set(i, j, float(weight), int(reps))
                        if weight > 0 and not exercise.is_timed:
                            records.update(exercise.name, float(weight), int(reps))
                            _save_history()
                        st.rerun()

        dl_col, done_col, cancel_col = st.columns(3)
        with dl_col:
            st.download_button(
                "Download Workout (.json)",
                data=to_json_string(workout_to_dict(workout)),
                file_name=f"{workout.day.name.lower()}.json",
                mime="application/json",
            )
        with done_col:
            if st.button("Complete Workout", type="primary"):
                st.session_state["last_summary"] = session.complete()
                if not engine.save():
                    st.warning("Progress could not be saved to disk.")
                _save_history()
                st.rerun()
        with cancel_col:
            if st.button("Cancel Workout"):
                session.cancel()
                st.rerun()

with tab_progress:
    history = session.history
    if not history:
        st.info("Complete a workout to see your training volume.")
    else:
        weekly = weekly_volume(history)
        focus = most_worked_muscle_group(history)
        mc1, mc2, mc3 = st.columns(3)
        mc1.metric("Streak", f"{current_streak(workout_date(w) for w in history)} days")
        mc2.metric("Volume Trend", volume_trend(weekly).title())
        mc3.metric("Most Worked", focus.name.title() if focus else "--")
        st.subheader("Weekly Volume")
        st.bar_chart(weekly_volume_frame(history))
        st.subheader("History")
        st.dataframe(history_frame(history), use_container_width=True)

with tab_records:
    if not records.records:
        st.info("Log a weighted set to start tracking personal records.")
    else:
        st.metric("Average Strength Gain", f"{records.strength_gain_pct():.1f}%")
        for record in sorted(records.records, key=lambda r: r.exercise_name):
            st.markdown(
                f"**{record.exercise_name}**: {record.one_rep_max:.1f} kg est. 1RM "
                f"(best {format_weight(record.max_weight)} x {record.max_reps}, "
                f"{record.date_achieved.isoformat()})"
            )

with st.sidebar.expander("Danger zone"):
    if st.button("Reset character"):
        engine.reset()
        engine.save()
        st.rerun()
