"""Keyboard-driven terminal widgets and display-width text helpers."""

__version__ = "0.4.0"

__all__ = [
    "action_menu",
    "filter_overlay",
    "keys",
    "multi_select",
    "select_list",
    "text_input",
    "ui",
]