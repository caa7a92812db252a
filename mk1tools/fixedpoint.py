"""Fixed-point helpers, derived engine constants and small arithmetic routines."""

from __future__ import annotations

from dataclasses import dataclass

FIXBITS = 6
SP_PLAYER = 0
SP_ENEMS_BASE = 1


def hl_shr6(value: int) -> int:
    """Shift a 16-bit fixed-point value right by 6 and keep the low 8 bits."""
    return ((value & 0xFFFF) >> FIXBITS) & 0xFF


def a_shl6(value: int) -> int:
    """Shift an 8-bit value left by 6 into an unsigned 16-bit result."""
    return (value & 0xFF) << FIXBITS


def with_sign(a: int, hl: int) -> int:
    """Sign-extend the result of :func:`a_shl6` using bit 7 of the original byte."""
    hl &= 0xFFFF
    if a & 0x80:
        return hl | 0xC000
    return hl


def black_colour_byte(black_pen: int, gfx_mode: int = 0) -> int:
    """Return the screen byte whose pixels all show ``black_pen``.

    Mode 0 packs two pixels per byte; the other modes pack four.
    """
    p = black_pen
    if gfx_mode == 0:
        if not 0 <= p <= 15:
            raise ValueError(f"pen {p} out of range for mode 0")
        b3 = (p >> 3) & 1
        b1 = (p >> 1) & 1
        b2 = (p >> 2) & 1
        b0 = p & 1
        return (
            b3 | (b3 << 1)
            | (b1 << 2) | (b1 << 3)
            | (b2 << 4) | (b2 << 5)
            | (b0 << 6) | (b0 << 7)
        )
    if not 0 <= p <= 3:
        raise ValueError(f"pen {p} out of range for mode {gfx_mode}")
    hi = p >> 1
    lo = p & 1
    return (
        hi | (hi << 1) | (hi << 2) | (hi << 3)
        | (lo << 4) | (lo << 5) | (lo << 6) | (lo << 7)
    )


@dataclass(frozen=True)
class SpriteLayout:
    """Indices of each sprite group in the software sprite pool."""

    total: int
    player: int
    enems_base: int
    bullets_base: int
    cocos_base: int
    extra_base: int


def sprite_layout(
    max_enems: int,
    max_bullets: int = 0,
    max_cocos: int = 0,
    extra_sprites: int = 0,
) -> SpriteLayout:
    """Lay out the sprite pool: player, then enemies, bullets, cocos and extras."""
    if min(max_enems, max_bullets, max_cocos, extra_sprites) < 0:
        raise ValueError("sprite counts must not be negative")
    bullets_base = SP_ENEMS_BASE + max_enems
    cocos_base = bullets_base + max_bullets
    extra_base = cocos_base + max_cocos
    return SpriteLayout(
        total=1 + max_enems + max_bullets + max_cocos + extra_sprites,
        player=SP_PLAYER,
        enems_base=SP_ENEMS_BASE,
        bullets_base=bullets_base,
        cocos_base=cocos_base,
        extra_base=extra_base,
    )


def addsign(n: int, value: int) -> int:
    """Return ``value`` with the sign of ``n`` (zero counts as positive)."""
    return value if n >= 0 else -value


def limit(val: int, low: int, high: int) -> int:
    """Clamp ``val`` to the range [low, high]."""
    if val < low:
        return low
    if val > high:
        return high
    return val


def distance(x1: int, y1: int, x2: int, y2: int) -> int:
    """Approximate the Euclidean distance between two points, as an 8-bit value."""
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    dn = min(dx, dy)
    return (dx + dy - (dn >> 1) - (dn >> 2) + (dn >> 4)) & 0xFF