"""Static capability catalog and reserved priority bands.

The kit always carries the capabilities defined here. Their priorities are
part of the public contract: plugin authors pick priorities for their own
extension factories relative to these bands, so the numbers must not change.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .base import Capability, KitEntry

# =====================================================================
# Reserved priority bands
# =====================================================================
PRIORITY_TABLE = 10
PRIORITY_TABLE_ROW = 20
PRIORITY_TABLE_HEADER = 30
PRIORITY_TABLE_CELL = 40
PRIORITY_BASE = 100
PRIORITY_CODE_BLOCK = 200
PRIORITY_CODE = 210
PRIORITY_HARD_BREAK = 220
PRIORITY_SUBMIT = 300
PRIORITY_PARAGRAPH = 400
PRIORITY_LIST_KEYMAP = 500
PRIORITY_NODE_UUID = 600
PRIORITY_FILE = 700
PRIORITY_IMAGE = 800

# =====================================================================
# Capabilities
# =====================================================================
Table = Capability("table")
TableRow = Capability("tableRow")
TableHeader = Capability("tableHeader")
TableCell = Capability("tableCell")
BaseKit = Capability("baseKit")
CodeBlockExtension = Capability("codeBlock")
CodeExtension = Capability("code")
HardBreakExtension = Capability("hardBreak")
SubmitExtension = Capability("submit")
ParagraphExtension = Capability("paragraph")
ListKeymap = Capability("listKeymap")
NodeUuidExtension = Capability("nodeUuid")
FileExtension = Capability("file")
ImageExtension = Capability("image")

# =====================================================================
# Fixed options
# =====================================================================
HEADING_LEVELS: Tuple[int, ...] = (1, 2, 3)

CODE_BLOCK_OPTIONS: Dict[str, object] = {
    "language_class_prefix": "language-",
    "exit_on_arrow_down": True,
    "exit_on_triple_enter": True,
    "html_attributes": {"class": "proseCodeBlock"},
}

CODE_OPTIONS: Dict[str, object] = {
    "html_attributes": {"class": "proseCode", "spellcheck": False},
}

# itemName -> wrapperNames; ordered and bullet lists share ``listItem``.
LIST_TYPES: List[Dict[str, object]] = [
    {"item_name": "listItem", "wrapper_names": ["bulletList", "orderedList"]},
    {"item_name": "taskItem", "wrapper_names": ["taskList"]},
    {"item_name": "todoItem", "wrapper_names": ["todoList"]},
]

LOADING_IMG_SRC = (
    "data:image/svg+xml;base64,PD94bWwgdmVyc2lvbj0iMS4wIiBlbmNvZGluZz0iVVRGLTgiPz4NCjxzdmcgd2lkdGg9IjMycHgiIGhlaWdodD0i"
    "MzJweCIgdmlld0JveD0iMCAwIDE2IDE2IiB4bWxucz0iaHR0cDovL3d3dy53My5vcmcvMjAwMC9zdmciPg0KICAgIDxwYXRoIGQ9Im0gNCAxIGMgLTEu"
    "NjQ0NTMxIDAgLTMgMS4zNTU0NjkgLTMgMyB2IDEgaCAxIHYgLTEgYyAwIC0xLjEwOTM3NSAwLjg5MDYyNSAtMiAyIC0yIGggMSB2IC0xIHogbSAyIDAg"
    "diAxIGggNCB2IC0xIHogbSA1IDAgdiAxIGggMSBjIDEuMTA5Mzc1IDAgMiAwLjg5MDYyNSAyIDIgdiAxIGggMSB2IC0xIGMgMCAtMS42NDQ1MzEgLTEu"
    "MzU1NDY5IC0zIC0zIC0zIHogbSAtNSA0IGMgLTAuNTUwNzgxIDAgLTEgMC40NDkyMTkgLTEgMSBzIDAuNDQ5MjE5IDEgMSAxIHMgMSAtMC40NDkyMTkg"
    "MSAtMSBzIC0wLjQ0OTIxOSAtMSAtMSAtMSB6IG0gLTUgMSB2IDQgaCAxIHYgLTQgeiBtIDEzIDAgdiA0IGggMSB2IC00IHogbSAtNC41IDIgbCAtMiAy"
    "IGwgLTEuNSAtMSBsIC0yIDIgdiAwLjUgYyAwIDAuNSAwLjUgMC41IDAuNSAwLjUgaCA3IHMgMC40NzI2NTYgLTAuMDM1MTU2IDAuNSAtMC41IHYgLTEg"
    "eiBtIC04LjUgMyB2IDEgYyAwIDEuNjQ0NTMxIDEuMzU1NDY5IDMgMyAzIGggMSB2IC0xIGggLTEgYyAtMS4xMDkzNzUgMCAtMiAtMC44OTA2MjUgLTIg"
    "LTIgdiAtMSB6IG0gMTMgMCB2IDEgYyAwIDEuMTA5Mzc1IC0wLjg5MDYyNSAyIC0yIDIgaCAtMSB2IDEgaCAxIGMgMS42NDQ1MzEgMCAzIC0xLjM1NTQ2"
    "OSAzIC0zIHYgLTEgeiBtIC04IDMgdiAxIGggNCB2IC0xIHogbSAwIDAiIGZpbGw9IiMyZTM0MzQiIGZpbGwtb3BhY2l0eT0iMC4zNDkwMiIvPg0KPC9z"
    "dmc+DQo="
)

TABLE_KIT_EXTENSIONS: Tuple[KitEntry, ...] = (
    (PRIORITY_TABLE, Table.configure(resizable=False, html_attributes={"class": "proseTable"})),
    (PRIORITY_TABLE_ROW, TableRow.configure()),
    (PRIORITY_TABLE_HEADER, TableHeader.configure()),
    (PRIORITY_TABLE_CELL, TableCell.configure()),
)
