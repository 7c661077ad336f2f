"""
NPC Models for Cell Escape.

Each NPC carries its own dialogue/quest progression:

    UNMET -> MET -> ITEM_GIVEN -> QUEST_DONE

The three booleans stored on disk are kept for the save format, but
all changes go through the stage transitions below, which return
new NPC values rather than mutating in place.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, model_validator

from src.models.world import RoomId


class DialogueStage(str, Enum):
    """Where an NPC is in its conversation arc."""

    UNMET = "unmet"
    MET = "met"
    ITEM_GIVEN = "item_given"
    QUEST_DONE = "quest_done"


# Booleans (has_been_met, given_quest_item, quest_done) for each stage
_STAGE_FLAGS: dict[DialogueStage, tuple[bool, bool, bool]] = {
    DialogueStage.UNMET: (False, False, False),
    DialogueStage.MET: (True, False, False),
    DialogueStage.ITEM_GIVEN: (True, True, False),
    DialogueStage.QUEST_DONE: (True, True, True),
}

# Speaking moves an NPC along by one step. MET stays MET; only
# receiving the quest item can move it on.
_NEXT_STAGE: dict[DialogueStage, DialogueStage] = {
    DialogueStage.UNMET: DialogueStage.MET,
    DialogueStage.MET: DialogueStage.MET,
    DialogueStage.ITEM_GIVEN: DialogueStage.QUEST_DONE,
    DialogueStage.QUEST_DONE: DialogueStage.QUEST_DONE,
}


class NPC(BaseModel):
    """
    A non-player character.

    The monologue fields hold narrative keys, not text. Location,
    not name, decides where the NPC can be talked to.
    """

    model_config = {"frozen": True}

    name: str
    has_been_met: bool = False
    given_quest_item: bool = False
    quest_done: bool = False
    monologue_intro: str
    monologue_neutral: str
    monologue_ending: str
    monologue_done: str
    location: RoomId

    @model_validator(mode="after")
    def validate_progression(self) -> NPC:
        """Quest progress must follow met -> given item -> done."""
        if self.given_quest_item and not self.has_been_met:
            raise ValueError(f"{self.name} was given an item before being met")
        if self.quest_done and not self.given_quest_item:
            raise ValueError(f"{self.name} finished a quest without its item")
        return self

    @property
    def stage(self) -> DialogueStage:
        if self.quest_done:
            return DialogueStage.QUEST_DONE
        if self.given_quest_item:
            return DialogueStage.ITEM_GIVEN
        if self.has_been_met:
            return DialogueStage.MET
        return DialogueStage.UNMET

    @property
    def current_monologue(self) -> str:
        """Narrative key for the NPC's current stage."""
        return {
            DialogueStage.UNMET: self.monologue_intro,
            DialogueStage.MET: self.monologue_neutral,
            DialogueStage.ITEM_GIVEN: self.monologue_ending,
            DialogueStage.QUEST_DONE: self.monologue_done,
        }[self.stage]

    def with_stage(self, stage: DialogueStage) -> NPC:
        """Return a copy at the given stage."""
        met, given, done = _STAGE_FLAGS[stage]
        return self.model_copy(
            update={"has_been_met": met, "given_quest_item": given, "quest_done": done}
        )

    def meet(self) -> NPC:
        if self.has_been_met:
            return self
        return self.with_stage(DialogueStage.MET)

    def receive_item(self) -> NPC:
        """Hand over the quest item. Implies the NPC has been met."""
        if self.given_quest_item:
            return self
        return self.with_stage(DialogueStage.ITEM_GIVEN)

    def advance(self) -> NPC:
        """The transition applied after the NPC has spoken."""
        next_stage = _NEXT_STAGE[self.stage]
        if next_stage == self.stage:
            return self
        return self.with_stage(next_stage)


def create_npc(
    name: str,
    *,
    key_prefix: str,
    location: RoomId,
) -> NPC:
    """
    Create an unmet NPC whose monologues follow the standard key layout.

    Args:
        name: Display name
        key_prefix: Narrative key prefix, e.g. "npc.carl"
        location: Room the NPC stands in

    Returns:
        NPC at the UNMET stage
    """
    return NPC(
        name=name,
        monologue_intro=f"{key_prefix}.intro",
        monologue_neutral=f"{key_prefix}.neutral",
        monologue_ending=f"{key_prefix}.ending",
        monologue_done=f"{key_prefix}.done",
        location=location,
    )
