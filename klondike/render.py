"""
Text rendering of a game state for terminals and logs.
"""

from __future__ import annotations

from .engine_core.state import GameState, Card, SUITS


def card_label(card: Card) -> str:
    """Short label such as H1 or S13."""
    return f"{card.suit.value[0].upper()}{card.rank}"


def render_card(card: Card) -> str:
    face = "↑" if card.face_up else "↓"
    return f"{face}{card_label(card)}"


def render_state(state: GameState) -> str:
    """Render stock, waste, foundations and tableau as plain text."""
    lines = ["--- STOCK & WASTE ---"]
    lines.append(f"Stock: {len(state.stock)}")
    lines.append(f"Waste: {', '.join(card_label(c) for c in state.waste) or 'empty'}")

    lines.append("")
    lines.append("--- FOUNDATION ---")
    for i, suit in enumerate(SUITS):
        pile = state.foundation_for(suit)
        top = card_label(pile[-1]) if pile else "empty"
        lines.append(f"Foundation {i + 1} ({suit.value}): {top}")

    lines.append("")
    lines.append("--- TABLEAU ---")
    for i, column in enumerate(state.tableau):
        lines.append(f"Pile {i + 1}: {', '.join(render_card(c) for c in column)}")

    return "\n".join(lines)
