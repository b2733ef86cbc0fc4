"""
Page Replacement Visualizer — FIFO, LRU & Optimal

This application runs a page reference string against the classic page
replacement algorithms and visualizes the outcome:
    - First-In First-Out (FIFO)
    - Least Recently Used (LRU)
    - Optimal (Belady's algorithm)

The simulations themselves live in engine.py; this module only collects
input, renders results and exports the plain-text report.

Built with Streamlit for the web interface and Plotly for visualizations.
"""

# =============================================================================
# IMPORTS
# =============================================================================

from datetime import datetime                # Timestamp for export file names
from typing import List                      # Type hints for better code clarity

import streamlit as st                       # Web application framework
import plotly.graph_objects as go            # Interactive plotting library

from engine import (
    ALGORITHMS,
    AlgorithmRun,
    MAX_FRAME_COUNT,
    ReplacementPolicy,
    SimulationError,
    run_simulations,
)
from report import build_report, report_filename
from utils import (
    DEFAULT_FRAME_COUNT,
    DEFAULT_REFERENCE_STRING,
    EXAMPLES,
    format_frames,
    get_badge_color,
    parse_frame_count,
    parse_reference_string,
    select_algorithms,
)


# =============================================================================
# RENDERING HELPERS
# =============================================================================

def render_summaries(runs: List[AlgorithmRun]):
    """
    Render one metric card per algorithm (name, page faults, hit ratio).

    Args:
        runs (List[AlgorithmRun]): Results in the order they were requested
    """
    columns = st.columns(len(runs))
    for col, run in zip(columns, runs):
        with col:
            st.metric(
                run.name,
                run.result.page_faults,
                delta=f"Hit ratio {run.result.hit_ratio:.1f}%",
                delta_color="off",
            )


def render_comparison_table(runs: List[AlgorithmRun], reference_count: int, frame_count: int):
    """
    Render the side-by-side comparison table and a hits vs faults chart.

    Args:
        runs (List[AlgorithmRun]): Results to compare
        reference_count (int): Length of the reference string
        frame_count (int): Number of frames used for every run
    """
    st.caption(
        f"{reference_count} reference{'' if reference_count == 1 else 's'} · "
        f"{frame_count} frame{'' if frame_count == 1 else 's'}"
    )

    rows = []
    for run in runs:
        rows.append({
            "algorithm": run.name,
            "page faults": run.result.page_faults,
            "hit ratio": f"{run.result.hit_ratio:.1f}%",
            "performance": run.result.performance,
        })
    st.table(rows)

    names = [run.name for run in runs]
    fig = go.Figure()
    fig.add_trace(go.Bar(name="Hits", x=names, y=[run.result.hits for run in runs],
                         marker_color="lightgreen"))
    fig.add_trace(go.Bar(name="Faults", x=names, y=[run.result.page_faults for run in runs],
                         marker_color=[get_badge_color(run.result.performance) for run in runs]))
    fig.update_layout(height=300, barmode="group", title="Hits vs Faults")
    st.plotly_chart(fig, use_container_width=True)


def frame_timeline_figure(run: AlgorithmRun, frame_count: int) -> go.Figure:
    """
    Build a heatmap with one column per step and one row per frame.

    Cells hold the page in that frame after the step; empty frames are
    left blank. Columns of faulting steps are labelled with an asterisk.
    """
    steps = run.result.steps
    z, text = [], []
    for slot in range(frame_count):
        z_row, text_row = [], []
        for step in steps:
            value = step.frames[slot] if slot < len(step.frames) else None
            z_row.append(value)
            text_row.append("" if value is None else str(value))
        z.append(z_row)
        text.append(text_row)

    x = [f"{i}{'*' if step.fault else ''}" for i, step in enumerate(steps, start=1)]
    y = [f"F{slot}" for slot in range(frame_count)]

    fig = go.Figure(go.Heatmap(
        z=z, x=x, y=y, text=text, texttemplate="%{text}",
        colorscale="Blues", showscale=False, hoverinfo="text",
    ))
    fig.update_layout(
        height=80 + 30 * frame_count,
        margin=dict(l=20, r=20, t=20, b=20),
        yaxis=dict(autorange="reversed"),
    )
    return fig


def render_detailed_results(runs: List[AlgorithmRun], frame_count: int):
    """Render the per-algorithm stats, frame timeline, step table and event log."""
    for run in runs:
        result = run.result
        with st.expander(f"{run.name} — {result.performance}", expanded=len(runs) == 1):
            st.markdown(
                f"<span style='background:{get_badge_color(result.performance)};"
                f"color:white;padding:2px 8px;border-radius:8px'>{result.performance}</span> "
                f"{result.reference_count} references · {frame_count} frames",
                unsafe_allow_html=True,
            )

            c1, c2, c3 = st.columns(3)
            c1.metric("Page Faults", result.page_faults)
            c2.metric("Hit Ratio", f"{result.hit_ratio:.1f}%")
            c3.metric("Fault Ratio", f"{result.fault_ratio:.1f}%")

            st.plotly_chart(frame_timeline_figure(run, frame_count), use_container_width=True)

            st.table([
                {
                    "#": index,
                    "page": step.page,
                    "frames": format_frames(step.frames, frame_count),
                    "result": "FAULT" if step.fault else "HIT",
                }
                for index, step in enumerate(result.steps, start=1)
            ])

            st.subheader("Event Log")
            st.text("\n".join(result.events))


# =============================================================================
# STREAMLIT UI - Web Application Interface
# =============================================================================

st.set_page_config(page_title="Page Replacement Visualizer", layout="wide")

# Page selector for switching between Simulator and Concepts views
page = st.sidebar.radio("Choose View", ["Simulator", "Concepts"])

st.title("Page Replacement Visualizer — FIFO, LRU & Optimal")

# =============================================================================
# CONCEPTS PAGE - Educational Content
# =============================================================================

if page == "Concepts":
    st.header("Operating System Concepts Used in This Project")
    st.markdown(
        """
        ### **1. Page Fault**
        - Occurs when a referenced page is not held in any frame.
        - The page must be loaded, evicting another page if every frame is in use.

        ### **2. FIFO (First In First Out)**
        - Replace the page that was loaded earliest.
        - A hit does not change the eviction order.
        - Can suffer from **Belady's anomaly**: more frames may cause more faults.

        ### **3. LRU (Least Recently Used)**
        - Replace the page that has not been referenced for the longest time.
        - Every hit moves the page to the most recent position.

        ### **4. Optimal (Belady's algorithm)**
        - Replace the page whose next use lies furthest in the future.
        - A page that is never used again is evicted first.
        - Needs the whole reference string up front, so it serves as a lower bound.

        ### **5. Performance Rating**
        - Fault ratio ≤ 30% → Excellent, ≤ 50% → Good, ≤ 70% → Average, otherwise Poor.
        """
    )
    st.stop()

# -----------------------------------------------------------------------------
# SESSION STATE - Input and Results Persistence
# -----------------------------------------------------------------------------

if "reference_input" not in st.session_state:
    st.session_state.reference_input = DEFAULT_REFERENCE_STRING
if "frame_input" not in st.session_state:
    st.session_state.frame_input = DEFAULT_FRAME_COUNT
if "last_results" not in st.session_state:
    st.session_state.last_results = None

# -----------------------------------------------------------------------------
# SIDEBAR - Examples
# -----------------------------------------------------------------------------

st.sidebar.header("Examples")
for label, example_reference, example_frames in EXAMPLES:
    if st.sidebar.button(label):
        st.session_state.reference_input = example_reference
        st.session_state.frame_input = example_frames

st.sidebar.markdown("---")

# -----------------------------------------------------------------------------
# SIDEBAR - Simulation Settings
# -----------------------------------------------------------------------------

st.sidebar.header("Simulation Settings")

reference_input = st.sidebar.text_area(
    "Reference string (comma or space separated page numbers)",
    key="reference_input",
)

frame_input = st.sidebar.number_input(
    "Frame count",
    min_value=1,
    max_value=MAX_FRAME_COUNT,
    step=1,
    key="frame_input",
)

algorithm_options = [ReplacementPolicy.ALL] + list(ALGORITHMS)
selection = st.sidebar.selectbox(
    "Algorithm",
    options=algorithm_options,
    format_func=lambda key: "All algorithms" if key == ReplacementPolicy.ALL else ALGORITHMS[key].name,
)

run_clicked = st.sidebar.button("Run Simulation")
if st.sidebar.button("Clear"):
    st.session_state.last_results = None

# -----------------------------------------------------------------------------
# RUN - Validate input and simulate
# -----------------------------------------------------------------------------

if run_clicked:
    try:
        reference = parse_reference_string(reference_input)
        frame_count = parse_frame_count(frame_input)
        runs = run_simulations(reference, frame_count, select_algorithms(selection))
        st.session_state.last_results = {
            "reference": reference,
            "frame_count": frame_count,
            "runs": runs,
        }
        st.success("Simulation complete")
    except SimulationError as e:
        st.session_state.last_results = None
        st.error(str(e))

# =============================================================================
# MAIN CONTENT AREA - Results
# =============================================================================

last = st.session_state.last_results

if last is None:
    st.info("Enter a reference string and click **Run Simulation**.")
else:
    st.subheader("Summary")
    render_summaries(last["runs"])

    st.subheader("Comparison")
    render_comparison_table(last["runs"], len(last["reference"]), last["frame_count"])

    st.subheader("Step Timeline")
    render_detailed_results(last["runs"], last["frame_count"])

    st.download_button(
        "Export Results",
        data=build_report(last["reference"], last["frame_count"], last["runs"]),
        file_name=report_filename(datetime.now()),
        mime="text/plain",
    )

# =============================================================================
# FOOTER - Usage Tips
# =============================================================================

st.markdown("---")
st.markdown(
    "**Usage tips**:\n"
    "- Enter a reference string and a frame count, then click **Run Simulation**.\n"
    "- Choose *All algorithms* to compare FIFO, LRU and Optimal side by side.\n"
    "- Try the *Belady's anomaly* example with 3 and then 4 frames under FIFO."
)
