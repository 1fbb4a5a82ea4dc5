"""
Main Streamlit application.
"""

import streamlit as st

from analytics import enumerate_loser_tallies
from config import MONTE_CARLO_SIMULATIONS
from game_logic import Game, draw_once, new_game
from log_config import configure_logging
from simulation import simulate_loser_from_track
from ui import print_round_rules, render_board, render_loss_table, render_pyramid_status


def run_app() -> None:
    """Run the main Streamlit application."""
    st.set_page_config(page_title="Camel Round Loser Odds", layout="wide")
    st.title("Camel Round Loser Odds")

    if "game" not in st.session_state:
        configure_logging()
        st.session_state["game"] = new_game()
        st.session_state["last_roll"] = None

    game: Game = st.session_state["game"]

    with st.expander("Round rules", expanded=False):
        print_round_rules()

    col_draw, col_reset, col_mc = st.columns([1, 1, 1])

    with col_draw:
        if st.button("🎲 Draw next"):
            roll = draw_once(game)
            if roll is None:
                st.warning("Round is over: every die has been drawn.")
            else:
                st.session_state["last_roll"] = roll

    with col_reset:
        if st.button("🔁 New round"):
            st.session_state["game"] = new_game()
            st.session_state["last_roll"] = None
            game = st.session_state["game"]

    with col_mc:
        show_mc = st.checkbox("Compare with Monte Carlo", value=False)

    roll = st.session_state["last_roll"]
    if roll is not None:
        st.markdown(f"Last roll: **{roll.color}** moved **{roll.number}**")

    board_col, metrics_col = st.columns([1.2, 1.8])

    with board_col:
        st.subheader("Track")
        render_board(game.track)
        render_pyramid_status(game.pyramid.remaining)
        leader = game.track.leading()
        if leader is not None:
            st.write(f"Leading: **{leader}**")

    with metrics_col:
        st.subheader("Last place")
        tallies = enumerate_loser_tallies(game.track, game.pyramid.remaining)
        mc_probs = None
        if show_mc:
            mc_probs = simulate_loser_from_track(
                game.track, game.pyramid.remaining, n_games=MONTE_CARLO_SIMULATIONS
            )
        render_loss_table(tallies, mc_probs)


if __name__ == "__main__":
    run_app()
