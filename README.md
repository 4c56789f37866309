# clipsel

Building blocks for a terminal browser of the clipboard history kept by
`cclip`: parsing its list output, labelling entries and their tags,
storing tag emoji and colours, laying out the screen, moving the
selection, and driving the prompts that add and remove tags.

## Modules

- `clipsel.items` — `CclipItem.from_line()` parses a
  `rowid<TAB>mime_type<TAB>preview[<TAB>tags]` line (tags comma separated)
  and raises `ValueError` on fewer than three fields. `display_name()` and
  `numbered_display_name()` give a one-line label: text entries show up to
  80 characters of preview, others up to 50 followed by the MIME type, with
  tags in brackets in front. `TagMetadata` holds a tag's optional colour
  and emoji; `TagMetadataFormatter` renders tag names with them.
  `rowid_of_line()` returns the first field of a list line.
- `clipsel.store` — `TagMetadataStore` keeps tag metadata in a JSON file,
  by default `$XDG_DATA_HOME/clipsel/tag_metadata.json` (falling back to
  `~/.local/share`), with `load()`, `save()` and `clear()`. A missing or
  unreadable file loads as empty.
- `clipsel.layout` — `compute_layout()` splits the screen into preview,
  history and filter panels, with the preview at the top, middle or bottom
  (`PanelPosition`). `PanelLayout` tells how many rows of history fit, which
  entry lies under a screen row, and the area inside the preview borders.
- `clipsel.navigation` — `ListCursor` moves the selection up and down
  (wrapping unless a hard stop is asked for), jumps to either end, scrolls,
  and re-finds an entry by rowid after the list is reloaded.
- `clipsel.tagflow` — immutable prompt modes (`PromptingTagName`,
  `PromptingTagEmoji`, `PromptingTagColor`, `RemovingTag`, `Normal`).
  `submit()` returns a `Step` with the next mode, an optional `ApplyTag` or
  `RemoveTag` action for the caller to carry out, and an optional message.
  A tag may have only an emoji, which then becomes its name; a blank answer
  when removing means all tags.
- `clipsel.render` — the segments and title of the input panel for each
  mode, the visible slice of the list, the selected row within it, the
  highlight colour from an entry's first tag, and the labels of a list of
  entries.

## What this package does not do

It has no command to run and draws nothing on the terminal itself. It
does not call `cclip` to list, fetch, tag or untag entries, and does not
copy anything to the clipboard: an `ApplyTag` or `RemoveTag` action must be
carried out by the code that uses it, and list lines must be obtained from
`cclip` by that code too.

## Running the tests

```
pip install .[test]
pytest
```