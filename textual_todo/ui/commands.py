from __future__ import annotations

from functools import partial

from textual.command import Hit, Hits, Provider as CommandProvider

COMMANDS = [
    (
        "add todo",
        "Add Todo",
        "action_focus_input",
        "Focus the new todo input (Ctrl+N)",
    ),
    (
        "help",
        "Show Help",
        "action_help_panel",
        "Show keyboard shortcuts (F1)",
    ),
    (
        "theme toggle",
        "Toggle Theme",
        "action_toggle_dark",
        "Switch between light and dark theme",
    ),
    (
        "quit",
        "Quit Application",
        "action_quit",
        "Exit the application (Ctrl+Q)",
    ),
]


class TodoCommands(CommandProvider):
    """Command palette entries for the todo app."""

    async def search(self, query: str) -> Hits:
        matcher = self.matcher(query)
        for command_text, title, action_name, help_text in COMMANDS:
            score = matcher.match(command_text)
            if score > 0:
                action = getattr(self.app, action_name, None)
                if action and callable(action):
                    yield Hit(
                        score, matcher.highlight(title), partial(action), help=help_text
                    )
