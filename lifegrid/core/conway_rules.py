"""
Conway's Game of Life Transition Rule

The single fixed rule set applied to every cell: birth on exactly 3 live
neighbors, survival on 2 or 3, death otherwise.
"""

UNDERPOPULATION_LIMIT = 2  # fewer live neighbors than this: dies
OVERPOPULATION_LIMIT = 3   # more live neighbors than this: dies
BIRTH_COUNT = 3            # exactly this many: alive


def next_state(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rule to one cell.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of in-bounds live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if live_neighbors < UNDERPOPULATION_LIMIT or live_neighbors > OVERPOPULATION_LIMIT:
        return False
    if live_neighbors == BIRTH_COUNT:
        return True
    # Exactly 2: state carries over
    return alive


def rule_table() -> dict:
    """Get the rule outcome for every (alive, live_neighbors) pair.

    Returns:
        Dictionary mapping (current_state, neighbor_count) to next_state
    """
    return {(alive, n): next_state(alive, n)
            for alive in (False, True)
            for n in range(9)}
