"""Screen decoding, hotspots, locks and tile-collision checks."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

SCREEN_W = 15
SCREEN_H = 10
SCREEN_TILES = SCREEN_W * SCREEN_H
PACKED_SCREEN_BYTES = SCREEN_TILES // 2
HIDING_BEHAVIOUR = 2
WALL_BEHAVIOUR = 8
HOTSPOT_TILE_BASE = 16
REFILL_HOTSPOT = 3

AttrFunc = Callable[[int, int], int]


@dataclass(frozen=True)
class Hotspot:
    """A screen's hotspot: packed tile position, type and whether it is active."""

    xy: int
    type: int
    act: int


@dataclass
class Lock:
    """A bolt on screen ``np`` at tile (x, y); ``st`` is 1 while it is closed."""

    np: int
    x: int
    y: int
    st: int = 1


@dataclass
class ScreenBuffers:
    """Tile numbers and behaviours of the 150 tiles of one screen."""

    map_buff: list[int]
    map_attr: list[int]

    def tile(self, x: int, y: int) -> int:
        """Tile number at tile coordinates (x, y)."""
        return self.map_buff[_coords(x, y)]

    def attr(self, x: int, y: int) -> int:
        """Behaviour at tile coordinates (x, y)."""
        return self.map_attr[_coords(x, y)]


def _coords(x: int, y: int) -> int:
    return y * SCREEN_W + x


def tile_positions(viewport_x: int, viewport_y: int) -> Iterator[tuple[int, int]]:
    """Yield the character position of each screen tile, row by row."""
    x, y = viewport_x, viewport_y
    for _ in range(SCREEN_TILES):
        yield x, y
        x += 2
        if x >= viewport_x + 2 * SCREEN_W:
            x = viewport_x
            y += 2


def _screen_slice(mapa: Sequence[int], n_pant: int, size: int) -> Sequence[int]:
    start = n_pant * size
    if n_pant < 0 or start + size > len(mapa):
        raise IndexError(f"screen {n_pant} is not in the map")
    return mapa[start:start + size]


def decode_packed_screen(
    mapa: Sequence[int],
    n_pant: int,
    behs: Sequence[int],
    rand: Callable[[], int] | None = None,
    alt_tile: int | None = None,
) -> ScreenBuffers:
    """Decode a screen stored as two 4-bit tiles per byte.

    When ``alt_tile`` and ``rand`` are given, an empty tile becomes
    ``alt_tile`` whenever ``rand() & 15`` is 1; its behaviour stays that of 0.
    """
    buff: list[int] = []
    attrs: list[int] = []
    for byte in _screen_slice(mapa, n_pant, PACKED_SCREEN_BYTES):
        for tile in (byte >> 4, byte & 15):
            attrs.append(behs[tile])
            if tile == 0 and alt_tile is not None and rand is not None and (rand() & 15) == 1:
                tile = alt_tile
            buff.append(tile)
    return ScreenBuffers(buff, attrs)


def decode_unpacked_screen(mapa: Sequence[int], n_pant: int, behs: Sequence[int]) -> ScreenBuffers:
    """Decode a screen stored as one tile number per byte."""
    tiles = list(_screen_slice(mapa, n_pant, SCREEN_TILES))
    return ScreenBuffers(tiles, [behs[tile] for tile in tiles])


def hotspot_tile(hotspot: Hotspot, map_buff: Sequence[int]) -> tuple[int, int, int, int] | None:
    """Return (pixel x, pixel y, tile to draw, tile underneath) for an active hotspot.

    Inactive or empty hotspots give None.
    """
    if not hotspot.type or not hotspot.act:
        return None
    x = (hotspot.xy >> 4) & 15
    y = hotspot.xy & 15
    orig_tile = map_buff[_coords(x, y)]
    kind = hotspot.type if hotspot.type != REFILL_HOTSPOT else 0
    return (x << 4) & 0xFF, (y << 4) & 0xFF, HOTSPOT_TILE_BASE + kind, orig_tile


def clear_lock(locks: Sequence[Lock], n_pant: int, x: int, y: int) -> bool:
    """Open the first lock at (x, y) on screen ``n_pant``; return whether one was found."""
    for lock in locks:
        if lock.np == n_pant and lock.x == x and lock.y == y:
            lock.st = 0
            return True
    return False


def open_locks_for(locks: Sequence[Lock], n_pant: int, compressed: bool = False) -> list[tuple[int, int]]:
    """Return the positions of opened locks on screen ``n_pant``.

    With compressed levels, unused entries (all zeros) are skipped.
    """
    return [
        (lock.x, lock.y)
        for lock in locks
        if not lock.st
        and lock.np == n_pant
        and not (compressed and lock.np == 0 and lock.x == 0 and lock.y == 0)
    ]


def player_hidden(gpx: int, gpy: int, p_vx: int, attr: AttrFunc) -> bool:
    """Whether a still, tile-aligned player stands on a hiding tile."""
    if (gpy & 15) or p_vx:
        return False
    tx = gpx >> 4
    ty = gpy >> 4
    if attr(tx, ty) == HIDING_BEHAVIOUR:
        return True
    return bool(gpx & 15) and attr(tx + 1, ty) == HIDING_BEHAVIOUR


def _box(centered: bool) -> tuple[int, int, int, int]:
    # left, right, top, bottom offsets inside the 16x16 cell
    return (2, 13, 7, 8) if centered else (0, 15, 0, 15)


def _blocked(at1: int, at2: int, everything_is_wall: bool) -> bool:
    if everything_is_wall:
        return bool(at1 or at2)
    return bool((at1 & WALL_BEHAVIOUR) or (at2 & WALL_BEHAVIOUR))


def wall_collision_x(
    en_x: int,
    en_y: int,
    en_mx: int,
    attr: AttrFunc,
    centered: bool = False,
    everything_is_wall: bool = False,
) -> bool:
    """Whether an enemy moving horizontally by ``en_mx`` runs into a wall."""
    left, right, top, bottom = _box(centered)
    cx = ((en_x + (left if en_mx & 0x80 else right)) & 0xFF) >> 4
    cy1 = ((en_y + top) & 0xFF) >> 4
    cy2 = ((en_y + bottom) & 0xFF) >> 4
    at1 = attr(cx, cy1) & 0x7F
    at2 = attr(cx, cy2) & 0x7F
    return _blocked(at1, at2, everything_is_wall)


def wall_collision_y(
    en_x: int,
    en_y: int,
    en_my: int,
    attr: AttrFunc,
    centered: bool = False,
    everything_is_wall: bool = False,
) -> bool:
    """Whether an enemy moving vertically by ``en_my`` runs into a wall."""
    left, right, top, bottom = _box(centered)
    cy = ((en_y + (top if en_my & 0x80 else bottom)) & 0xFF) >> 4
    cx1 = ((en_x + left) & 0xFF) >> 4
    cx2 = ((en_x + right) & 0xFF) >> 4
    return _blocked(attr(cx1, cy), attr(cx2, cy), everything_is_wall)