"""
Interactive REPL for Cell Escape.

Provides a text-based interface for playing the game: the main menu,
the command loop, and the save/load points (continue, quit, win).
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from src.content.narrative import NarrativeLibrary
from src.content.npcs import create_npc_roster
from src.db.codec import SaveFormatError
from src.db.interfaces import SaveRepository
from src.db.savefile import FileSaveRepository
from src.engine import EngineConfig, GameEngine, TurnResult
from src.models import NPC, GameState

logger = logging.getLogger(__name__)


MENU_TEXT = """
  ===================================
             CELL ESCAPE
  ===================================

    new       - Start a new game
    continue  - Resume your saved game
    quit      - Leave
"""

INTRO_TEXT = (
    "You wake on a cold stone floor. Your head aches, and you have no idea how "
    "long you've been here. One thing is certain: you need to get out.\n"
    "Type 'help' for a list of commands."
)


@dataclass
class Session:
    """The state the command loop owns between commands."""

    state: GameState
    npcs: list[NPC] = field(default_factory=list)
    running: bool = True
    won: bool = False


class GameREPL:
    """
    Interactive REPL for playing Cell Escape.

    Handles user input, menu choices, persistence points, and output.
    Input and output functions can be swapped out for testing.
    """

    def __init__(
        self,
        *,
        saves: SaveRepository,
        engine: GameEngine | None = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.saves = saves
        self.engine = engine or GameEngine()
        self.input = input_fn
        self.output = output_fn

    # =========================================================================
    # Main Menu
    # =========================================================================

    def main_menu(self) -> Session | None:
        """
        Show the main menu until the player picks something valid.

        Returns:
            A Session to play, or None if the player chose to quit
        """
        while True:
            self.output(MENU_TEXT)
            try:
                choice = self.input("\n> ").strip().lower()
            except (KeyboardInterrupt, EOFError):
                return None

            if choice == "new":
                self.output(INTRO_TEXT)
                return Session(state=GameState.new(), npcs=create_npc_roster())
            if choice == "continue":
                session = self._load_session()
                if session is not None:
                    return session
            elif choice in ("quit", "exit"):
                return None
            else:
                self.output("\nInvalid choice!")

    def _load_session(self) -> Session | None:
        if not self.saves.exists():
            self.output("\nThere is no saved game to continue.")
            return None
        try:
            state, npcs = self.saves.load()
        except SaveFormatError as e:
            logger.warning("Saved game could not be loaded: %s", e)
            self.output(f"\nYour saved game is damaged and cannot be loaded: {e}")
            return None

        self.output("Welcome back!")
        return Session(state=state, npcs=npcs)

    # =========================================================================
    # Command Loop
    # =========================================================================

    def process_input(self, text: str, session: Session) -> str:
        """Process one line of player input and return the response."""
        text = text.strip()
        if not text:
            return ""

        result = self.engine.process_turn(text, session.state, session.npcs)
        session.state = result.state
        session.npcs = result.npcs

        if result.won:
            return self._finish_win(result, session)

        if result.save_requested:
            self.saves.save(session.state, session.npcs)

        if result.quit:
            session.running = False

        return self._format_turn_result(result)

    def _finish_win(self, result: TurnResult, session: Session) -> str:
        """The escape is final: reset the save and stop the loop."""
        self.saves.reset()
        self.output(f"\n\n{result.narrative}\n")
        self.wait_for_player()
        session.running = False
        session.won = True
        return ""

    def wait_for_player(self) -> None:
        """Pause until the player presses RETURN."""
        self.output("\n\n > Press RETURN to continue <")
        try:
            self.input("")
        except (KeyboardInterrupt, EOFError):
            self.output("")

    def _format_turn_result(self, result: TurnResult) -> str:
        parts = [result.narrative]
        if result.state_changes:
            parts.append("")
            for change in result.state_changes:
                parts.append(f"* {change}")
        return "\n".join(parts)

    def run(self) -> int:
        """
        Run the menu and the game loop.

        Returns:
            Process exit status
        """
        session = self.main_menu()
        if session is None:
            self.output("\n\nExiting!")
            return 0

        self.output("")
        self.output(self.engine.look(session.state))

        while session.running:
            try:
                user_input = self.input("\n> ")
            except (KeyboardInterrupt, EOFError):
                self.output("\n")
                user_input = "quit"

            response = self.process_input(user_input, session)
            if response:
                self.output(f"\n{response}")

        return 0


# =============================================================================
# Entry Points
# =============================================================================


def run_game(config: EngineConfig) -> int:
    """
    Run Cell Escape with the given configuration.

    Args:
        config: Save location and narrative settings

    Returns:
        Process exit status
    """
    if config.narrative_dir is not None:
        narrative = NarrativeLibrary.from_directory(config.narrative_dir)
    else:
        narrative = NarrativeLibrary()

    repl = GameREPL(
        saves=FileSaveRepository(config.save_path),
        engine=GameEngine(narrative=narrative, config=config),
    )
    return repl.run()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Cell Escape - a text adventure")
    parser.add_argument("--save", type=Path, default=None, help="Save file path")
    parser.add_argument(
        "--narrative-dir",
        type=Path,
        default=None,
        help="Directory of <key>.txt files overriding game text",
    )
    parser.add_argument(
        "--no-exits",
        action="store_true",
        help="Don't list open exits after moving",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = EngineConfig.from_env(
        save_path=args.save,
        narrative_dir=args.narrative_dir,
        show_exits=False if args.no_exits else None,
    )
    sys.exit(run_game(config))


if __name__ == "__main__":
    main()
