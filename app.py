"""Fitness Pro - Streamlit App."""

import logging
from typing import Optional

import streamlit as st

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

from src.core import guidance, health_metrics
from src.core.planner import build_plan
from src.core.schedule_generator import day_template
from src.core.session_controller import SessionController
from src.memory.gdrive_memory import GoogleDriveStorage
from src.memory.kv_store import InMemoryKeyValueStore
from src.memory.plan_store import PlanStore
from src.models.exercise import ExerciseRecord
from src.models.session_state import Phase
from src.models.user_profile import ProfileForm
from src.models.workout_log import CompletedExercises
from src.models.workout_plan import PlanResult
from src.utils.google_auth import (
    GUEST_USER_ID,
    GoogleAuthService,
    guest_session,
    resolve_session,
)
from src.utils.tones import StreamlitToneEmitter

# Page config
st.set_page_config(
    page_title="Fitness Pro",
    page_icon="🏋️",
    layout="wide",
    initial_sidebar_state="expanded",
)

TOTAL_STEPS = 3
STEP_NAMES = ["Personal info", "Fitness profile", "Health check"]

GENDER_OPTS = {"male": "Male", "female": "Female"}
ACTIVITY_OPTS = {"sedentary": "Sedentary", "active": "Active", "athlete": "Athlete"}
GOAL_OPTS = {"lose": "Lose weight", "gain": "Build muscle", "endurance": "Improve endurance", "maintain": "Maintain"}
LOCATION_OPTS = {"gym": "Gym", "home": "Home"}
INJURY_OPTS = {"None": "No injury", "Knee": "Knee", "Back": "Back", "Shoulder": "Shoulder"}
DAYS_OPTS = [3, 4, 5, 6]

PHASE_LABELS = {
    Phase.READY: "Get ready...",
    Phase.WORK: "Work!",
    Phase.REST: "Rest",
    Phase.FINISHED: "Workout complete!",
}


def initialize_session_state() -> None:
    """Initialize all session state variables."""
    # Authentication state
    if "auth" not in st.session_state:
        st.session_state.auth = None
    if "credentials" not in st.session_state:
        st.session_state.credentials = None

    # Application state
    if "plan_store" not in st.session_state:
        st.session_state.plan_store = None
    if "form" not in st.session_state:
        st.session_state.form = ProfileForm()
    if "plan" not in st.session_state:
        st.session_state.plan = None
    if "completed" not in st.session_state:
        st.session_state.completed = CompletedExercises()
    if "active_day" not in st.session_state:
        st.session_state.active_day = 0
    if "form_errors" not in st.session_state:
        st.session_state.form_errors = {}
    if "session_controller" not in st.session_state:
        st.session_state.session_controller = SessionController(emitter_factory=create_tone_emitter)
    if "tone_emitter" not in st.session_state:
        st.session_state.tone_emitter = None
    st.session_state.full_run = True


def create_tone_emitter() -> StreamlitToneEmitter:
    emitter = StreamlitToneEmitter()
    st.session_state.tone_emitter = emitter
    return emitter


def get_auth_service() -> Optional[GoogleAuthService]:
    """Google OAuth from secrets, or None to run in guest mode."""
    try:
        oauth = st.secrets["google_oauth"]
        redirect_uri = st.secrets.get("redirect_uri", "http://localhost:8501")
        return GoogleAuthService(oauth["client_id"], oauth["client_secret"], redirect_uri)
    except Exception:
        return None


def handle_oauth_callback(auth_service: GoogleAuthService) -> None:
    """Handle OAuth callback with authorization code."""
    if "code" not in st.query_params or st.session_state.auth:
        return

    code = st.query_params["code"]
    st.query_params.clear()
    try:
        credentials = auth_service.exchange_code(code)
        st.session_state.credentials = auth_service.to_dict(credentials)
        user_info = auth_service.user_info(credentials)
        logger.info(f"Signed in {user_info.get('email')}")
        start_user_session(user_info, GoogleDriveStorage(credentials))
        st.rerun()
    except Exception as e:
        logger.error(f"OAuth error: {str(e)}", exc_info=True)
        st.error(f"Sign-in failed: {str(e)}")


def start_user_session(user_info: dict, store) -> None:
    """Load the user's saved questionnaire, plan and progress."""
    user_id = user_info.get("email") or user_info.get("id", GUEST_USER_ID)
    plan_store = PlanStore(store, user_id)
    form = plan_store.load_form()
    profile_blob = form.model_dump(mode="json") if form and form.step >= TOTAL_STEPS else None
    auth = resolve_session(user_info, profile_blob)

    st.session_state.auth = auth
    st.session_state.plan_store = plan_store
    st.session_state.form = form or ProfileForm()
    st.session_state.plan = st.session_state.plan_store.load_plan()
    st.session_state.completed = st.session_state.plan_store.load_completed()
    logger.info(f"Loaded data for {auth.user_id} (onboarding complete: {auth.onboarding_complete})")


def start_guest_session() -> None:
    guest = guest_session()
    st.session_state.auth = guest
    st.session_state.plan_store = PlanStore(InMemoryKeyValueStore(), guest.user_id)


def save_form() -> None:
    if st.session_state.plan_store:
        st.session_state.plan_store.save_form(st.session_state.form)


def update_form(**changes) -> None:
    st.session_state.form = st.session_state.form.model_copy(update=changes)
    save_form()


def logout(auth_service: Optional[GoogleAuthService]) -> None:
    """Clear authentication and session state."""
    st.session_state.session_controller.close()
    if auth_service and st.session_state.credentials:
        auth_service.revoke(auth_service.from_dict(st.session_state.credentials))
    for key in list(st.session_state.keys()):
        del st.session_state[key]
    logger.info("User logged out")
    st.rerun()


def login_page(auth_service: Optional[GoogleAuthService]) -> None:
    """Display login page."""
    st.title("🏋️ Fitness Pro")
    st.markdown("### Your body, your data, your plan")
    st.markdown("""
    Answer a short questionnaire and get:
    - Your BMI, daily calories and water intake
    - A weekly training schedule that avoids exercises unsafe for your injuries
    - A guided, timed workout for every day of the plan
    """)

    col1, col2, col3 = st.columns([1, 2, 1])
    with col2:
        if auth_service and st.button("🔐 Sign in with Google", type="primary", use_container_width=True):
            st.markdown(
                f'<meta http-equiv="refresh" content="0;url={auth_service.authorization_url()}">',
                unsafe_allow_html=True,
            )
        if st.button("Continue as guest", use_container_width=True):
            start_guest_session()
            st.rerun()

    st.markdown("---")
    st.info("ℹ️ Signed-in users keep their plan in a 'FitnessPro' folder on their own Google Drive.")


def generate_plan() -> None:
    form: ProfileForm = st.session_state.form
    errors = form.field_errors()
    st.session_state.form_errors = errors
    if errors:
        return

    plan = build_plan(form.to_profile())
    st.session_state.session_controller.close()
    st.session_state.plan = plan
    st.session_state.completed = CompletedExercises()
    st.session_state.active_day = 0
    update_form(step=TOTAL_STEPS)
    if st.session_state.plan_store:
        st.session_state.plan_store.save_plan(plan)
        st.session_state.plan_store.save_completed(st.session_state.completed)


def reset_plan() -> None:
    st.session_state.session_controller.close()
    if st.session_state.plan_store:
        st.session_state.plan_store.clear()
    st.session_state.plan = None
    st.session_state.form = ProfileForm()
    st.session_state.completed = CompletedExercises()
    st.session_state.active_day = 0
    st.session_state.form_errors = {}


def wizard() -> None:
    form: ProfileForm = st.session_state.form
    step = min(form.step, TOTAL_STEPS - 1)
    errors = st.session_state.form_errors

    st.progress((step + 1) / TOTAL_STEPS, text=f"Step {step + 1} of {TOTAL_STEPS}: {STEP_NAMES[step]}")

    if step == 0:
        name = st.text_input("Your name (optional)", value=form.user_name)
        gender = st.radio("Gender", list(GENDER_OPTS), format_func=GENDER_OPTS.get,
                          index=list(GENDER_OPTS).index(form.gender), horizontal=True)
        col1, col2, col3 = st.columns(3)
        age = col1.number_input("Age", min_value=0, max_value=120, value=form.age, step=1)
        height = col2.number_input("Height (cm)", min_value=0.0, max_value=300.0, value=form.height_cm)
        weight = col3.number_input("Weight (kg)", min_value=0.0, max_value=300.0, value=form.weight_kg)
        for field, column in (("age", col1), ("height_cm", col2), ("weight_kg", col3)):
            if field in errors:
                column.error(errors[field])
        changes = dict(user_name=name, gender=gender, age=age, height_cm=height, weight_kg=weight)
        if changes != {k: getattr(form, k) for k in changes}:
            update_form(**changes)

    elif step == 1:
        activity = st.radio("Daily activity", list(ACTIVITY_OPTS), format_func=ACTIVITY_OPTS.get,
                            index=list(ACTIVITY_OPTS).index(form.activity_level), horizontal=True)
        goal = st.radio("Main goal", list(GOAL_OPTS), format_func=GOAL_OPTS.get,
                        index=list(GOAL_OPTS).index(form.goal), horizontal=True)
        location = st.radio("Where do you train?", list(LOCATION_OPTS), format_func=LOCATION_OPTS.get,
                            index=list(LOCATION_OPTS).index(form.location), horizontal=True)
        days = st.radio("Training days per week", DAYS_OPTS, format_func=lambda d: f"{d} days",
                        index=DAYS_OPTS.index(form.training_days_per_week), horizontal=True)
        changes = dict(activity_level=activity, goal=goal, location=location, training_days_per_week=days)
        if changes != {k: getattr(form, k) for k in changes}:
            update_form(**changes)

        with st.container(border=True):
            st.markdown("**✨ Your split**")
            for slot in day_template(days):
                icon = guidance.split_display(slot.split_type).icon
                st.write(f"{icon} **{slot.day}:** {slot.label}")

    else:
        injury = st.radio("Any injuries?", list(INJURY_OPTS), format_func=INJURY_OPTS.get,
                          index=list(INJURY_OPTS).index(form.injury), horizontal=True)
        if injury != form.injury:
            update_form(injury=injury)
        if injury != "None":
            st.warning(f"Every exercise that could aggravate your {INJURY_OPTS[injury].lower()} will be left out.")

    col_prev, _, col_next = st.columns([1, 2, 1])
    if step > 0 and col_prev.button("← Back", use_container_width=True):
        update_form(step=step - 1)
        st.rerun()
    if step < TOTAL_STEPS - 1:
        if col_next.button("Next →", type="primary", use_container_width=True):
            st.session_state.form_errors = st.session_state.form.field_errors() if step == 0 else {}
            if not st.session_state.form_errors:
                update_form(step=step + 1)
            st.rerun()
    elif col_next.button("✨ Generate my plan", type="primary", use_container_width=True):
        generate_plan()
        st.rerun()


def render_routine(title: str, steps) -> None:
    with st.expander(title):
        for i, step in enumerate(steps, 1):
            st.markdown(f"{i}. **{step.name}** ({step.duration}) - {step.description}")


def toggle_done(day_index: int, exercise_id: str) -> None:
    st.session_state.completed.toggle(day_index, exercise_id)
    if st.session_state.plan_store:
        st.session_state.plan_store.save_completed(st.session_state.completed)


@st.dialog("Exercise")
def show_exercise(exercise: ExerciseRecord) -> None:
    demo = guidance.exercise_demo(exercise)
    st.subheader(exercise.name)
    if demo.gif_url:
        st.image(demo.gif_url, use_container_width=True)
    else:
        st.info(f"🎬 {demo.placeholder}")
    st.markdown(" ".join(f"`{badge}`" for badge in demo.badges))
    st.write(f"🏋️ {demo.prescription}")
    st.write(exercise.instructions)
    st.progress(demo.intensity / 10, text=f"Difficulty {demo.intensity}/10 ({demo.intensity_band})")


def select_day(day_index: int) -> None:
    if day_index != st.session_state.active_day:
        # A running session belongs to the day it was started for.
        st.session_state.session_controller.close()
        st.session_state.active_day = day_index


def dashboard() -> None:
    plan: PlanResult = st.session_state.plan
    form: ProfileForm = st.session_state.form
    band = guidance.bmi_band(plan)

    col_title, col_reset = st.columns([4, 1])
    with col_title:
        if form.user_name:
            st.subheader(f"Ready, {form.user_name}? 💪")
    with col_reset:
        if st.button("New plan", use_container_width=True):
            reset_plan()
            st.rerun()

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("BMI", f"{plan.bmi:.1f}", f"{band.emoji} {band.label}", delta_color="off")
    c2.metric("Health score", f"{plan.health_score}/100",
              health_metrics.health_score_label(plan.health_score), delta_color="off")
    c3.metric("Daily calories", plan.calorie_target,
              health_metrics.calorie_adjustment_note(plan.goal), delta_color="off")
    c4.metric("Water per day", f"{plan.water_intake_liters} L",
              f"~{health_metrics.water_glasses(plan.water_intake_liters)} glasses", delta_color="off")

    st.markdown("### 📅 Weekly schedule")
    if not plan.schedule:
        st.info("No schedule for this number of training days.")
        return

    labels = [f"{guidance.split_display(s.split_type).icon} {s.day}: {s.label}" for s in plan.schedule]
    day_index = st.radio("Day", range(len(labels)), format_func=lambda i: labels[i],
                         index=min(st.session_state.active_day, len(labels) - 1),
                         horizontal=True, label_visibility="collapsed")
    select_day(day_index)
    slot = plan.schedule[day_index]

    controller: SessionController = st.session_state.session_controller
    if slot.exercises and not controller.active:
        if st.button("🔥 Start guided workout", type="primary"):
            controller.start(slot.exercises, slot.title)
            st.rerun()

    if controller.active:
        session_panel()

    render_routine("🔥 Warm-up (7 min)", guidance.WARMUP)

    completed: CompletedExercises = st.session_state.completed
    done_count = min(completed.count_for_day(day_index), len(slot.exercises))
    st.progress(done_count / len(slot.exercises) if slot.exercises else 0.0,
                text=f"{done_count} of {len(slot.exercises)} done")

    columns = st.columns(3)
    for i, ex in enumerate(slot.exercises):
        with columns[i % 3].container(border=True):
            st.markdown(f"**{ex.name}**")
            st.caption(f"{ex.level_label} · {ex.muscle_label} · intensity {ex.intensity}/10 "
                       f"({guidance.intensity_band(ex.intensity)})")
            st.write(ex.instructions)
            st.write(f"🏋️ {ex.sets} × {ex.reps}")
            st.progress(ex.intensity / 10)
            st.checkbox("Done", value=completed.is_done(day_index, ex.id),
                        key=f"done_{day_index}_{ex.id}",
                        on_change=toggle_done, args=(day_index, ex.id))
            if st.button("View exercise", key=f"demo_{day_index}_{ex.id}"):
                show_exercise(ex)

    render_routine("❄️ Cool-down (7 min)", guidance.COOLDOWN)

    st.markdown("### 💡 Tips")
    for tip in guidance.build_tips(plan):
        st.info(f"{tip.icon} **{tip.title}** - {tip.text}")


def session_panel() -> None:
    """Controls plus the ticking timer of the active guided session."""
    controller: SessionController = st.session_state.session_controller
    timer = controller.timer
    token = controller.token

    with st.container(border=True):
        col_label, col_sound, col_close = st.columns([4, 1, 1])
        col_label.markdown(f"#### {controller.day_label}")
        if col_sound.button("🔊" if timer.state.sound_enabled else "🔇", use_container_width=True):
            controller.toggle_sound()
            st.rerun()
        if col_close.button("✖", use_container_width=True):
            controller.close()
            st.rerun()

        @st.fragment(run_every=controller.tick_interval)
        def countdown() -> None:
            if st.session_state.full_run:
                st.session_state.full_run = False
            elif controller.tick(token) and controller.tick_interval is None:
                # Finished: rerun the whole app so the recurring tick stops.
                st.rerun()
            render_timer(controller)

        countdown()

        col_skip, col_pause, col_restart = st.columns(3)
        if not timer.is_finished:
            if col_skip.button("⏭ Skip", use_container_width=True):
                controller.skip()
                st.rerun()
            if col_pause.button("▶ Resume" if timer.state.paused else "⏸ Pause", use_container_width=True):
                controller.toggle_pause()
                st.rerun()
        if col_restart.button("↺ Restart", use_container_width=True):
            controller.restart()
            st.rerun()


def render_timer(controller: SessionController) -> None:
    timer = controller.timer
    if timer is None:
        return
    state = timer.state

    st.markdown(f"**{PHASE_LABELS[state.phase]}**")
    st.progress(timer.elapsed_fraction)
    total = len(timer.exercises)
    if timer.is_finished:
        st.success(f"Great job! You finished all {total} exercises 🎉")
    else:
        st.markdown(f"## {state.seconds_remaining} s")
        current = timer.current_exercise
        st.markdown(f"### {current.name}")
        st.caption(f"{current.sets} × {current.reps} | intensity {current.intensity}/10")
        st.write(current.instructions)
        if timer.next_exercise:
            st.caption(f"Next: {timer.next_exercise.name}")
        st.caption(f"Exercise {state.current_exercise_index + 1} of {total}")

    emitter = st.session_state.tone_emitter
    if emitter is not None and not emitter.closed:
        for clip in emitter.drain():
            st.audio(clip, format="audio/wav", autoplay=True)


def main_app(auth_service: Optional[GoogleAuthService]) -> None:
    """Main application UI."""
    col1, col2 = st.columns([4, 1])
    with col1:
        st.title("🏋️ Fitness Pro")
    with col2:
        if st.button("Sign out", use_container_width=True):
            logout(auth_service)

    with st.sidebar:
        auth = st.session_state.auth
        if auth.picture:
            st.image(auth.picture, width=80)
        st.write(f"**{auth.name or auth.user_id}**")
        if auth.email:
            st.write(auth.email)

    if st.session_state.plan is None:
        wizard()
    else:
        dashboard()


def main() -> None:
    """Main app entry point."""
    initialize_session_state()
    auth_service = get_auth_service()

    if auth_service:
        handle_oauth_callback(auth_service)

    if st.session_state.auth:
        main_app(auth_service)
        return

    login_page(auth_service)


if __name__ == "__main__":
    main()
