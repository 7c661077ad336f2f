"""
Narrative text for Cell Escape.

Everything the game says is looked up by logical key, so the
game logic never deals with raw prose or file paths. The built-in
text below can be overridden from a directory of ``<key>.txt`` files.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


# =============================================================================
# Built-in Text
# =============================================================================

NARRATIVE: dict[str, str] = {
    # Rooms
    "room.cell": (
        "A cramped stone cell. A heavy iron door stands to the north. "
        "The south wall is badly cracked."
    ),
    "room.cell.opened": (
        "A cramped stone cell. A heavy iron door stands to the north. "
        "A section of the south wall has crumbled away, revealing a narrow passage."
    ),
    "room.secret_room": (
        "A forgotten alcove barely wide enough to turn around in. "
        "A rickety table leans against the far wall."
    ),
    "room.corridor": (
        "A damp corridor lined with empty cells. Doors lead east and west, "
        "and a brighter passage runs north."
    ),
    "room.storeroom": "Crates and sacks are piled to the ceiling. A narrow closet stands in the corner.",
    "room.laundry": "Vats of grey water and lines of drying uniforms. It smells of lye.",
    "room.guard_room": (
        "A cluttered guard room. Dice and playing cards litter a table. "
        "Passages lead in every direction."
    ),
    "room.mess_hall": "Long benches and longer tables. Someone left half a loaf behind.",
    "room.kitchen": "A cold hearth and a row of copper pots. Nothing here is worth stealing.",
    "room.chapel": "A tiny chapel with a single candle guttering on the altar.",
    "room.courtyard": (
        "An open courtyard under a grey sky. The gatehouse looms to the north; "
        "a heavy door marked with crossed swords lies to the west."
    ),
    "room.gatehouse": (
        "The gatehouse. A portcullis blocks the way north. "
        "A winch sits beside it, chained and padlocked."
    ),
    "room.armory": "Racks of dull spears and dented helmets line the walls.",
    "room.outer_gate": (
        "The outer gate. Beyond the raised portcullis, a road leads north "
        "into open country."
    ),
    # Movement
    "move.moved": "You head {direction}.",
    "move.no_exit": "You can't go that way.",
    "move.locked": "The way is blocked.",
    "move.cell_door_locked": "The cell door is locked. You'll need a key.",
    "move.cell_wall_solid": "The south wall is cracked, but solid. Perhaps a closer look would help.",
    "move.cell_door_unlocked": "The key turns with a grinding click and the door swings open.",
    "move.crawl_through": "You squeeze through the gap in the wall.",
    "move.armory_barred": "The armory door is barred. Perhaps someone at the gatehouse has the say-so.",
    "move.portcullis_down": "The portcullis is down. The winch is still chained.",
    "move.invalid_direction": "{direction} is not a valid direction.",
    "move.which_way": "Go where? Try north, south, east or west.",
    # Examine
    "examine.wall.discovery": (
        "You run your hands along the cracks. A loose stone gives way, and then "
        "another. There's a passage behind the south wall!"
    ),
    "examine.wall.nothing_new": "The hole in the wall is just as you left it.",
    "examine.table.discovery": "A rusty key lies on the table. You take the key.",
    "examine.table.nothing_new": "The table is empty.",
    "examine.closet.discovery": "Behind a mop bucket stands a sturdy broom. You take the broom.",
    "examine.closet.nothing_new": "The closet holds nothing but a mop bucket now.",
    "examine.rack.discovery": (
        "A long iron nail is wedged behind one of the racks. You work it loose "
        "and pocket it."
    ),
    "examine.rack.nothing_new": "Nothing on the racks but spears too dull to bother with.",
    "examine.unknown": "You can't examine {target}.",
    "examine.what": "Examine what?",
    # Dialogue
    "talk.nobody": "There's nobody here to talk to.",
    "npc.carl.intro": (
        'A wiry guard looks up from his cards. "Carl. Don\'t tell anyone you saw me '
        'slacking. This place is filthy, though. If I had a broom I might even '
        'tidy up."'
    ),
    "npc.carl.neutral": '"Still no broom, huh?" Carl shuffles his deck.',
    "npc.carl.ending": (
        '"A broom! You\'re a lifesaver." Carl sweeps with real enthusiasm. '
        '"Word of advice: Blimpo at the gatehouse can\'t resist shiny metal."'
    ),
    "npc.carl.done": "Carl is too busy sweeping to chat.",
    "npc.blimpo.intro": (
        'An enormous gatekeeper blocks the winch. "Name\'s Blimpo. Nobody leaves. '
        'Unless... my lucky nail fell through the floorboards. Find me a nail and '
        'maybe the winch slips. Armory\'s open to you now, take a look."'
    ),
    "npc.blimpo.neutral": '"No nail, no winch," Blimpo grunts.',
    "npc.blimpo.ending": (
        'Blimpo turns the nail over in his fingers and grins. "Lovely. Oops, there '
        'goes the chain." The winch spins and the portcullis rattles upward.'
    ),
    "npc.blimpo.done": '"Go on, before I change my mind."',
    # Outcomes
    "game.victory": "Congratulations!\n\nYou escaped!",
    "game.unknown_command": "{command} is not a valid command.",
    "game.what_now": "What would you like to do?",
}


# =============================================================================
# Lookup
# =============================================================================


class NarrativeLibrary:
    """
    Resolves narrative keys to display text.

    Unknown keys raise KeyError: a missing key is a content bug,
    never something a player can trigger.
    """

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        self._text: dict[str, str] = dict(NARRATIVE)
        if overrides:
            self._text.update(overrides)

    @classmethod
    def from_directory(cls, directory: Path) -> NarrativeLibrary:
        """
        Build a library with overrides loaded from ``<key>.txt`` files.

        Args:
            directory: Folder containing text files named after keys,
                e.g. ``npc.carl.intro.txt``

        Returns:
            A NarrativeLibrary with file contents taking precedence
        """
        overrides: dict[str, str] = {}
        for path in sorted(Path(directory).glob("*.txt")):
            overrides[path.stem] = path.read_text(encoding="utf-8").rstrip("\n")
        logger.info("Loaded %d narrative overrides from %s", len(overrides), directory)
        return cls(overrides)

    def __contains__(self, key: object) -> bool:
        return key in self._text

    def get(self, key: str, **fields: object) -> str:
        """
        Return the text for a key, filling any ``{placeholders}``.

        Placeholders with no matching field are left as written, and
        text that is not a valid format string is returned unchanged,
        so override files can contain braces.
        """
        text = self._text[key]
        if not fields:
            return text
        try:
            return text.format_map(_KeepMissing(fields))
        except (ValueError, IndexError, AttributeError) as e:
            logger.warning("Narrative %r could not be formatted: %s", key, e)
            return text


class _KeepMissing(dict):
    """Format mapping that leaves unknown ``{placeholders}`` in place."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"
