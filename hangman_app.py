from __future__ import annotations

import logging

import streamlit as st

from hangman.config import Settings, configure_logging

settings = Settings.from_env()  # also loads .env into the process env
configure_logging(settings)

# --- Core game imports ---
from hangman import MAX_TURNS, Game, GameState, InvalidGuess, make_move, mask, new_game, resign, tally
from hangman.services.llm_picker import pick_word

logger = logging.getLogger(__name__)


# =======================================
# Session-state helpers & game management
# =======================================

def _init_stats() -> None:
    """Ensure a stats dict exists in session state."""
    st.session_state.setdefault("stats", {"games": 0, "wins": 0, "losses": 0})


def _start_new_game(difficulty: str) -> None:
    """
    Start a new game. Prefer an LLM-picked word; fall back to the local word list.
    Records a 'word_source' tag and resets per-round flags.
    """
    word, source = pick_word(difficulty, settings=settings)
    st.session_state["game"] = new_game(word)
    st.session_state["word_source"] = source
    st.session_state["round_counted"] = False
    st.session_state["move_error"] = None
    logger.info("Started game %r (%s word)", st.session_state["game"].name, source)


def _ensure_game(difficulty: str) -> Game:
    """Ensure there is a Game in session state; create one if missing."""
    if not isinstance(st.session_state.get("game"), Game):
        _start_new_game(difficulty)
    st.session_state.setdefault("word_source", "unknown")
    st.session_state.setdefault("round_counted", False)
    st.session_state.setdefault("move_error", None)
    _init_stats()
    return st.session_state["game"]


def _resign() -> None:
    st.session_state["game"] = resign(
        st.session_state["game"], override_won=settings.resign_overrides_won
    )


_STATE_MESSAGES = {
    GameState.INITIALIZING: "Guess a letter to start.",
    GameState.GOOD_GUESS: "Good guess!",
    GameState.BAD_GUESS: "Sorry, that letter isn't in the word.",
    GameState.ALREADY_USED: "You already guessed that letter.",
}


# =========
# The App
# =========

def main() -> None:
    st.set_page_config(page_title="Hangman", page_icon="🪢", layout="centered")
    st.title("🪢 Hangman")

    # ---- Sidebar ----
    with st.sidebar:
        st.header("Settings")
        difficulty = st.selectbox("Difficulty", ["easy", "medium", "hard"], index=1)
        if st.button("🔁 New Game", use_container_width=True):
            _start_new_game(difficulty)
            st.rerun()

        _init_stats()
        with st.expander("📊 Stats", expanded=True):
            s = st.session_state["stats"]
            games = s["games"]
            winrate = (s["wins"] / games * 100.0) if games else 0.0
            st.metric("Games", games)
            c1, c2, c3 = st.columns(3)
            c1.metric("Wins", s["wins"])
            c2.metric("Losses", s["losses"])
            c3.metric("Win rate", f"{winrate:.1f}%")
            if st.button("♻️ Reset stats"):
                st.session_state["stats"] = {"games": 0, "wins": 0, "losses": 0}
                st.success("Stats reset.")

    game = _ensure_game(difficulty)
    view = tally(game)  # the only view of the game the page ever shows

    # ---- Board ----
    st.subheader("Board")
    st.markdown(f"**Word**: `{mask(view)}`")
    st.caption(f"Name: {game.name} · Turns left: {view.turns_left}")
    st.progress(view.turns_left / MAX_TURNS)
    st.caption(f"Guessed letters: {', '.join(view.guesses) or '(none)'}")
    source = st.session_state["word_source"]
    st.caption({"llm": "Source: 🧠 LLM-picked", "local": "Source: 📚 Local wordlist"}.get(source, "Source: ❔ Unknown"))

    # ---- Move input ----
    if not view.state.is_terminal:
        st.subheader("Your move")
        with st.form("guess_form", clear_on_submit=True):
            guess_inp = st.text_input("Enter a single letter (a–z):", max_chars=1)
            submitted = st.form_submit_button("Guess")
        if submitted:
            try:
                st.session_state["game"] = make_move(game, (guess_inp or "").strip().lower())
                st.session_state["move_error"] = None
            except InvalidGuess as exc:
                st.session_state["move_error"] = str(exc)
            st.rerun()

        if st.session_state["move_error"]:
            st.warning(st.session_state["move_error"])
        elif view.state in _STATE_MESSAGES:
            st.info(_STATE_MESSAGES[view.state])

        st.button("🏳️ Resign", on_click=_resign)

    # ---- Outcome banner + stats update ----
    if view.state.is_terminal and not st.session_state["round_counted"]:
        st.session_state["stats"]["games"] += 1
        key = "wins" if view.state is GameState.WON else "losses"
        st.session_state["stats"][key] += 1
        st.session_state["round_counted"] = True

    if view.state is GameState.WON:
        st.success("🎉 You won! Great job.")
    elif view.state is GameState.LOST:
        st.error(f"💀 You lost. Letters in brackets were never guessed: `{mask(view)}`")

    if view.state.is_terminal:
        st.button("Play again", on_click=_start_new_game, args=(difficulty,))


if __name__ == "__main__":
    main()
