import pytest

from clipsel.items import TagMetadata
from clipsel.tagflow import (
    ApplyTag,
    Normal,
    PromptingTagColor,
    PromptingTagEmoji,
    PromptingTagName,
    RemoveTag,
    RemovingTag,
    backspace,
    begin_tagging,
    begin_untagging,
    cycle_selection,
    submit,
    type_char,
)

TAGGED = "42\ttext/plain\thello\twork,home"
UNTAGGED = "7\timage/png\tpicture"


def test_begin_tagging_starts_empty():
    mode = begin_tagging(TAGGED, ["work", "home"])
    assert mode == PromptingTagName(
        input="", selected_item=TAGGED, available_tags=("work", "home"), selected_tag=None
    )


def test_begin_untagging_proposes_first_tag():
    mode = begin_untagging(TAGGED)
    assert mode.input == "work"
    assert mode.tags == ("work", "home")
    assert mode.selected == 0
    assert mode.selected_item == TAGGED


def test_begin_untagging_without_tags():
    mode = begin_untagging(UNTAGGED)
    assert mode == RemovingTag(input="", tags=(), selected=None, selected_item=UNTAGGED)


def test_begin_untagging_rejects_bad_line():
    with pytest.raises(ValueError):
        begin_untagging("no tabs here")


def test_typing_and_backspace_edit_input():
    mode = begin_tagging(UNTAGGED, [])
    for ch in "abc":
        mode = type_char(mode, ch)
    assert mode.input == "abc"
    assert backspace(mode).input == "ab"
    assert backspace(PromptingTagName()).input == ""


def test_normal_mode_ignores_typing():
    assert type_char(Normal(), "x") == Normal()
    assert backspace(Normal()) == Normal()


def test_blank_name_goes_to_emoji_prompt():
    step = submit(PromptingTagName(input="   ", selected_item=UNTAGGED), {})
    assert step.mode == PromptingTagEmoji(tag_name="", input="", selected_item=UNTAGGED)
    assert step.action is None


def test_new_name_goes_to_empty_emoji_prompt():
    step = submit(PromptingTagName(input=" urgent ", selected_item=UNTAGGED), {})
    assert step.mode == PromptingTagEmoji(tag_name="urgent", input="", selected_item=UNTAGGED)
    assert step.message is None


def test_known_name_on_item_reports_editing_and_loads_emoji():
    metadata = {"work": TagMetadata("work", emoji="*")}
    step = submit(PromptingTagName(input="work", selected_item=TAGGED), metadata)
    assert step.mode.input == "*"
    assert step.message == "Tag 'work' already applied (editing)"


def test_known_name_not_on_item_has_no_message():
    metadata = {"work": TagMetadata("work", emoji="*")}
    step = submit(PromptingTagName(input="work", selected_item=UNTAGGED), metadata)
    assert step.mode.input == "*"
    assert step.message is None


def test_emoji_without_name_is_rejected():
    step = submit(PromptingTagEmoji(tag_name="", input=" ", selected_item=UNTAGGED), {})
    assert step.mode == Normal()
    assert step.message == "Tag requires either a name or an emoji"


def test_emoji_only_tag_uses_emoji_as_name():
    step = submit(PromptingTagEmoji(tag_name="", input=" * ", selected_item=UNTAGGED), {})
    assert step.mode == PromptingTagColor(
        tag_name="*", emoji="*", input="", selected_item=UNTAGGED
    )


def test_emoji_prompt_loads_existing_color():
    metadata = {"work": TagMetadata("work", color="red")}
    step = submit(PromptingTagEmoji(tag_name="work", input="", selected_item=TAGGED), metadata)
    assert step.mode.input == "red"
    assert step.mode.emoji is None


def test_color_submit_applies_new_tag():
    mode = PromptingTagColor(tag_name="urgent", emoji="!", input=" blue ", selected_item=UNTAGGED)
    step = submit(mode, {})
    assert step.mode == Normal()
    assert step.action == ApplyTag(
        rowid="7",
        tag_name="urgent",
        metadata=TagMetadata("urgent", color="blue", emoji="!"),
        already_applied=False,
    )


def test_color_submit_on_existing_tag_only_updates_metadata():
    mode = PromptingTagColor(tag_name="home", emoji=None, input="", selected_item=TAGGED)
    step = submit(mode, {})
    assert step.action.already_applied is True
    assert step.action.rowid == "42"
    assert step.action.metadata == TagMetadata("home")


def test_color_submit_without_item_does_nothing():
    step = submit(PromptingTagColor(tag_name="x", input="red"), {})
    assert step.mode == Normal()
    assert step.action is None


def test_removal_of_named_tag():
    mode = type_char(begin_untagging(TAGGED), " ")
    step = submit(mode)
    assert step.mode == Normal()
    assert step.action == RemoveTag(rowid="42", tag="work")


def test_blank_removal_removes_all():
    step = submit(begin_untagging(UNTAGGED))
    assert step.action == RemoveTag(rowid="7", tag=None)


def test_submit_in_normal_mode_keeps_mode():
    step = submit(Normal(), {})
    assert step.mode == Normal()
    assert step.action is None


def test_full_tagging_flow():
    mode = begin_tagging(UNTAGGED, [])
    for ch in "notes":
        mode = type_char(mode, ch)
    mode = submit(mode, {}).mode
    mode = type_char(mode, "+")
    mode = submit(mode, {}).mode
    step = submit(mode, {})
    assert step.action.metadata == TagMetadata("notes", color=None, emoji="+")
    assert step.action.rowid == "7"


def test_cycle_tag_creation_wraps():
    mode = begin_tagging(UNTAGGED, ["a", "b", "c"])
    forward = cycle_selection(mode, 1)
    assert (forward.selected_tag, forward.input) == (0, "a")
    backward = cycle_selection(mode, -1)
    assert (backward.selected_tag, backward.input) == (2, "c")
    assert cycle_selection(backward, 1).input == "a"


def test_cycle_removal_wraps():
    mode = begin_untagging(TAGGED)
    nxt = cycle_selection(mode, 1)
    assert (nxt.selected, nxt.input) == (1, "home")
    assert cycle_selection(nxt, 1).input == "work"
    assert cycle_selection(mode, -1).input == "home"


def test_cycle_without_choices_is_unchanged():
    empty_name = begin_tagging(UNTAGGED, [])
    assert cycle_selection(empty_name, 1) == empty_name
    empty_removal = begin_untagging(UNTAGGED)
    assert cycle_selection(empty_removal, -1) == empty_removal
    emoji = PromptingTagEmoji(tag_name="x")
    assert cycle_selection(emoji, 1) == emoji