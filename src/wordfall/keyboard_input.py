"""Translate pygame keyboard events into the key names the engine understands."""

from __future__ import annotations

import pygame

_NAMED_KEYS: dict[int, str] = {
    pygame.K_ESCAPE: "Escape",
    pygame.K_LSHIFT: "Shift", pygame.K_RSHIFT: "Shift",
    pygame.K_LCTRL: "Control", pygame.K_RCTRL: "Control",
    pygame.K_LALT: "Alt", pygame.K_RALT: "Alt", pygame.K_MODE: "AltGraph",
    pygame.K_LMETA: "Meta", pygame.K_RMETA: "Meta",
    pygame.K_LSUPER: "Super", pygame.K_RSUPER: "Super",
    pygame.K_CAPSLOCK: "CapsLock", pygame.K_NUMLOCK: "NumLock",
    pygame.K_UP: "ArrowUp", pygame.K_DOWN: "ArrowDown",
    pygame.K_LEFT: "ArrowLeft", pygame.K_RIGHT: "ArrowRight",
    pygame.K_HOME: "Home", pygame.K_END: "End",
    pygame.K_PAGEUP: "PageUp", pygame.K_PAGEDOWN: "PageDown",
    pygame.K_TAB: "Tab", pygame.K_INSERT: "Insert", pygame.K_DELETE: "Delete",
    pygame.K_BACKSPACE: "Backspace", pygame.K_RETURN: "Enter", pygame.K_KP_ENTER: "Enter",
    pygame.K_MENU: "ContextMenu", pygame.K_PRINT: "PrintScreen", pygame.K_PAUSE: "Pause",
    pygame.K_SPACE: " ",
}
_NAMED_KEYS.update({getattr(pygame, f"K_F{i}"): f"F{i}" for i in range(1, 13)})


def key_name(event: pygame.event.Event) -> str | None:
    """Key name for a KEYDOWN event, or None for events the game has no use for."""
    if event.type != pygame.KEYDOWN:
        return None
    if event.key in _NAMED_KEYS:
        return _NAMED_KEYS[event.key]
    text = getattr(event, "unicode", "")
    if len(text) == 1 and text.isprintable():
        return text
    return None
