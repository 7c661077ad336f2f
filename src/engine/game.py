"""
Game Engine for Cell Escape.

The orchestration layer that processes player commands. It holds no
game state of its own: every call takes the current state and roster
and returns new ones in a TurnResult.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.content.narrative import NarrativeLibrary
from src.engine.intent import CommandParser, parse_direction
from src.engine.models import Command, EngineConfig, TurnResult, Verb
from src.models import ESCAPE_DIRECTION, FINAL_ROOM, NPC, Direction, GameState
from src.skills import describe, examine, exits_from, move, talk

logger = logging.getLogger(__name__)


HELP_TEXT = """Available Commands:
----------------------------------------
  go <direction> (move) - Walk north, south, east or west
  <direction> (n, s, e, w) - Shortcut for go
  examine <thing> (x, inspect) - Take a closer look at something
  talk (speak) - Talk to whoever is in the room
  look (l) - Describe the room again
  exits - List the ways out of this room
  save - Save your progress
  help (?) - Show this list
  quit (exit, q) - Save and leave the game"""


@dataclass
class GameEngine:
    """
    Main game engine.

    Coordinates:
    - Command parsing (understanding player input)
    - Skill execution (movement, examine, dialogue)
    - Narrative assembly (responding to player)

    Persistence is left to the caller: the engine only signals when a
    save, quit, or win has been requested.
    """

    narrative: NarrativeLibrary = field(default_factory=NarrativeLibrary)
    config: EngineConfig = field(default_factory=EngineConfig)

    parser: CommandParser = field(init=False)

    def __post_init__(self) -> None:
        self.parser = CommandParser()

    def process_turn(self, player_input: str, state: GameState, npcs: list[NPC]) -> TurnResult:
        """Parse raw input and process it."""
        return self.process_command(self.parser.parse(player_input), state, npcs)

    def process_command(self, command: Command, state: GameState, npcs: list[NPC]) -> TurnResult:
        """
        Apply one command.

        Args:
            command: Parsed command
            state: Current game state
            npcs: Current NPC roster

        Returns:
            TurnResult with the new state and roster. Unrecognised
            commands return the inputs unchanged with an explanation.
        """
        handlers = {
            Verb.GO: self._handle_go,
            Verb.EXAMINE: self._handle_examine,
            Verb.TALK: self._handle_talk,
            Verb.LOOK: self._handle_look,
            Verb.EXITS: self._handle_exits,
        }

        if command.verb in handlers:
            return handlers[command.verb](command, state, npcs)

        if command.verb == Verb.HELP:
            return TurnResult(state=state, npcs=npcs, narrative=HELP_TEXT)
        if command.verb == Verb.SAVE:
            return TurnResult(state=state, npcs=npcs, narrative="Game saved.", save_requested=True)
        if command.verb == Verb.QUIT:
            return TurnResult(
                state=state, npcs=npcs, narrative="Exiting!", save_requested=True, quit=True
            )

        if not command.raw_verb:
            return TurnResult(state=state, npcs=npcs, narrative=self.narrative.get("game.what_now"))

        return TurnResult(
            state=state,
            npcs=npcs,
            narrative=self.narrative.get("game.unknown_command", command=command.raw_verb),
        )

    def look(self, state: GameState) -> str:
        """Describe the current room, with exits if configured."""
        text = describe(state.curr_room, state.active_flags(), self.narrative)
        if self.config.show_exits:
            text += "\n" + self._format_exits(state)
        return text

    # =========================================================================
    # Handlers
    # =========================================================================

    def _handle_go(self, command: Command, state: GameState, npcs: list[NPC]) -> TurnResult:
        if not command.argument:
            which_way = self.narrative.get("move.which_way")
            return TurnResult(state=state, npcs=npcs, narrative=which_way)

        direction = parse_direction(command.argument)
        if direction is None:
            return TurnResult(
                state=state,
                npcs=npcs,
                narrative=self.narrative.get("move.invalid_direction", direction=command.argument),
            )

        outcome = move(state, direction, self.narrative)
        if outcome.won:
            return TurnResult(state=outcome.state, npcs=npcs, narrative=outcome.narrative, won=True)

        parts = [outcome.narrative]
        changes = []
        if outcome.state.curr_room != state.curr_room:
            parts.append("")
            parts.append(self.look(outcome.state))
            changes.append(f"room: {state.curr_room.name} -> {outcome.state.curr_room.name}")

        return TurnResult(
            state=outcome.state, npcs=npcs, narrative="\n".join(parts), state_changes=changes
        )

    def _handle_examine(self, command: Command, state: GameState, npcs: list[NPC]) -> TurnResult:
        outcome = examine(state, command.argument, self.narrative)
        return TurnResult(
            state=outcome.state,
            npcs=npcs,
            narrative=outcome.narrative,
            state_changes=_flag_changes(state, outcome.state),
        )

    def _handle_talk(self, command: Command, state: GameState, npcs: list[NPC]) -> TurnResult:
        outcome = talk(npcs, state, self.narrative)
        text = outcome.narrative
        if outcome.npc_name:
            text = f"{outcome.npc_name}:\n{text}"
        return TurnResult(
            state=outcome.state,
            npcs=outcome.npcs,
            narrative=text,
            state_changes=_flag_changes(state, outcome.state),
        )

    def _handle_look(self, command: Command, state: GameState, npcs: list[NPC]) -> TurnResult:
        return TurnResult(state=state, npcs=npcs, narrative=self.look(state))

    def _handle_exits(self, command: Command, state: GameState, npcs: list[NPC]) -> TurnResult:
        return TurnResult(state=state, npcs=npcs, narrative=self._format_exits(state))

    def _format_exits(self, state: GameState) -> str:
        open_exits = set(exits_from(state.curr_room, state.active_flags()))
        if state.curr_room == FINAL_ROOM:
            open_exits.add(ESCAPE_DIRECTION)
        exits = [d for d in Direction if d in open_exits]
        if not exits:
            return "There are no open exits."
        return "Exits: " + ", ".join(d.value for d in exits)


def _flag_changes(before: GameState, after: GameState) -> list[str]:
    return sorted(f.value for f in after.active_flags() - before.active_flags())
