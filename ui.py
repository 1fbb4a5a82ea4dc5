"""
UI components and visualization helpers.
"""

from typing import Dict, Optional

import pandas as pd
import plotly.express as px
import streamlit as st

from config import COLOR_MAP, FINISH_SLOT, ROLL_VALUES
from models import RACING_COLORS, CamelColor, Track


def print_round_rules() -> None:
    """Display how a round is set up and scored."""
    st.markdown("### Round rules")
    st.write("Camels: Red, Green, Yellow, Blue, Purple (Black and White never roll)")
    st.write(f"Each die rolls one of {', '.join(str(v) for v in ROLL_VALUES)}.")
    st.write("- Setup: every die is drawn once; the camel is placed on space 1, 2 or 3 as rolled.")
    st.write("- Play: a drawn camel moves forward by its roll, carrying every camel stacked on it.")
    st.write(f"- A move past space {FINISH_SLOT + 1} stops on that last space.")
    st.info(
        "The camel in last place is the rearmost one; "
        "if several share that space, the one at the bottom of the stack is last."
    )


def track_to_frame(track: Track) -> pd.DataFrame:
    rows = []
    for slot, stack in enumerate(track.spaces):
        for h, camel in enumerate(stack):
            rows.append({"position": slot, "height": h, "camel": str(camel)})
    return pd.DataFrame(rows, columns=["position", "height", "camel"])


def render_board(track: Track) -> None:
    """Plot the track using Plotly: x-axis is slot, stacked markers by height."""
    df = track_to_frame(track)
    if df.empty:
        st.info("No camels on the track.")
        return

    fig = px.scatter(
        df,
        x="position",
        y="height",
        color="camel",
        color_discrete_map=COLOR_MAP,
        hover_name="camel",
    )
    fig.update_traces(marker=dict(size=18, line=dict(width=1, color="black")))
    fig.update_layout(
        xaxis=dict(
            dtick=1,
            range=[-0.5, FINISH_SLOT + 0.5],
            title="Track slot",
        ),
        yaxis=dict(visible=False),
        height=400,
        margin=dict(l=10, r=10, t=30, b=10),
        legend_title_text="Camel",
    )
    st.plotly_chart(fig, use_container_width=True)


def loss_table(
    tallies: Dict[CamelColor, int],
    mc_probs: Optional[Dict[CamelColor, float]] = None,
) -> pd.DataFrame:
    total = sum(tallies.values())
    data = []
    for p in RACING_COLORS:
        row = {
            "Camel": str(p),
            "Times last": tallies[p],
            "P(last)": tallies[p] / total if total else 0.0,
        }
        if mc_probs is not None:
            row["P(last), Monte Carlo"] = mc_probs.get(p, 0.0)
        data.append(row)
    return pd.DataFrame(data)


def render_loss_table(
    tallies: Dict[CamelColor, int],
    mc_probs: Optional[Dict[CamelColor, float]] = None,
) -> None:
    st.markdown("#### Probability of finishing the round last")
    st.dataframe(loss_table(tallies, mc_probs), use_container_width=True, hide_index=True)
    st.caption(f"Exact over {sum(tallies.values())} equally likely outcomes.")


def render_pyramid_status(remaining) -> None:
    """Render list of drawn and undrawn dice for the current round."""
    st.markdown("#### Pyramid")
    col_drawn, col_undrawn = st.columns(2)

    with col_drawn:
        st.write("**Drawn:**")
        drawn = [p for p in RACING_COLORS if p not in remaining]
        if drawn:
            for camel in drawn:
                st.write(f"✓ {camel}")
        else:
            st.write("*None yet*")

    with col_undrawn:
        st.write("**Undrawn:**")
        if remaining:
            for camel in remaining:
                st.write(f"○ {camel}")
        else:
            st.write("*All drawn*")
