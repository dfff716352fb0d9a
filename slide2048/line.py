from typing import List, Sequence, Tuple


def trace_line(line: Sequence[int]) -> Tuple[List[int], int, List[Tuple[int, ...]]]:
    """
    Slide a line towards index 0 and merge equal neighbours.

    Returns (values, gained, sources): the reduced line padded with zeros,
    the score gained from merges, and for every non-empty output slot the
    input indices of the tile(s) that ended up there.
    """
    tiles = [(i, int(v)) for i, v in enumerate(line) if v != 0]
    values: List[int] = []
    sources: List[Tuple[int, ...]] = []
    gained = 0

    k = 0
    while k < len(tiles):
        idx, value = tiles[k]
        if k + 1 < len(tiles) and tiles[k + 1][1] == value:
            values.append(value * 2)
            sources.append((idx, tiles[k + 1][0]))
            gained += value * 2
            # Both tiles are consumed, so the new tile is not compared again.
            k += 2
        else:
            values.append(value)
            sources.append((idx,))
            k += 1

    values.extend([0] * (len(line) - len(values)))
    return values, gained, sources


def merge_line(line: Sequence[int]) -> Tuple[List[int], int]:
    """Reduce one line in slide order and return (values, gained score)."""
    values, gained, _ = trace_line(line)
    return values, gained
