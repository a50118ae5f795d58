"""
Vocabulary - Fixed lookup tables shared by the rule checks.
"""

# WAI-ARIA 1.1 roles accepted as valid. Abstract roles are not listed.
VALID_ARIA_ROLES = frozenset({
    "alert", "alertdialog", "application", "article", "banner", "button",
    "cell", "checkbox", "columnheader", "combobox", "complementary",
    "contentinfo", "definition", "dialog", "directory", "document", "feed",
    "figure", "form", "grid", "gridcell", "group", "heading", "img", "link",
    "list", "listbox", "listitem", "log", "main", "marquee", "math", "menu",
    "menubar", "menuitem", "menuitemcheckbox", "menuitemradio", "navigation",
    "none", "note", "option", "presentation", "progressbar", "radio",
    "radiogroup", "region", "row", "rowgroup", "rowheader", "scrollbar",
    "search", "searchbox", "separator", "slider", "spinbutton", "status",
    "switch", "tab", "table", "tablist", "tabpanel", "term", "textbox",
    "timer", "toolbar", "tooltip", "tree", "treegrid", "treeitem",
})

# Roles whose required state attributes are verified
STATEFUL_ARIA_ROLES = ("checkbox", "combobox", "slider", "spinbutton")

RANGE_ARIA_ROLES = frozenset({"slider", "spinbutton"})

# Link texts that say nothing about the destination (compared lower-cased)
AMBIGUOUS_LINK_TEXTS = frozenset({
    "click here", "read more", "more", "link", "here", "this page",
    "learn more",
})

# Form control types that never need a visible label
UNLABELLED_INPUT_TYPES = frozenset({"hidden", "submit", "button"})

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")

# Placeholder texts inserted by fixes
PLACEHOLDER_ALT = "Descriptive text about this image"
PLACEHOLDER_LINK_TEXT = "Specific description of link destination"
PLACEHOLDER_LINK_LABEL = "Description of link purpose"
PLACEHOLDER_CONTROL_ID = "unique-id"
DEFAULT_LANGUAGE = "en"

KEYBOARD_ACTIVATION_ATTRS = (
    'role="button" tabindex="0" '
    "onkeydown=\"if(event.key === 'Enter') this.click()\""
)
