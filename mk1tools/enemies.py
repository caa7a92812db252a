"""Enemy state, sprite set-up and the per-screen enemy engine."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass, field

GENERAL_ENEMS_BASE_CELL = 8
MAX_ENEMS = 3
NO_FRAME = 0xFF
STILL_FRAME = 99
TYPE_MASK = 0x1F
DEAD_BIT = 0x10
PURSUER_TYPE = 7
IDLE = 0
GENERAL_DYING = 4
DYING_FRAMES = 12
INITIAL_COUNT = 3
ANIM_PERIOD = 4
BOX_SIZE = 15
SMALL_BOX_SIZE = 12


@dataclass
class Enemy:
    """One enemy as stored in the level data: position, path, speed, type and life."""

    x: int
    y: int
    x1: int
    y1: int
    x2: int
    y2: int
    mx: int
    my: int
    t: int
    life: int = 0


@dataclass
class EnemyAnim:
    """Animation state of an on-screen enemy slot.

    ``next_frame`` is the sprite cell to show, or None for the empty sprite.
    """

    frame: int = 0
    state: int = IDLE
    count: int = INITIAL_COUNT
    base_frame: int = NO_FRAME
    next_frame: int | None = None


def base_frame(t: int, general_base: int = GENERAL_ENEMS_BASE_CELL) -> int:
    """Return the first sprite cell for an enemy of type byte ``t``.

    Linear enemies (types 1 to 4) use two cells each from ``general_base``;
    anything else has no sprite (0xFF).
    """
    if 1 <= (t & TYPE_MASK) <= 4:
        return (general_base + ((t - 1) << 1)) & 0xFF
    return NO_FRAME


def enems_init(enemies: Sequence[Enemy], life: int | None = None) -> None:
    """Bring every enemy back to life, resetting its life gauge when ``life`` is given."""
    for enemy in enemies:
        enemy.t &= 0xFF & ~DEAD_BIT
        if life is not None:
            enemy.life = life


def pregotten(gpx: int, en_x: int, small_box: bool = False) -> bool:
    """Whether the player and an enemy overlap horizontally (8-bit arithmetic)."""
    width = SMALL_BOX_SIZE if small_box else BOX_SIZE
    return ((gpx + width) & 0xFF) >= en_x and ((en_x + width) & 0xFF) >= gpx


def bullet_hits(blx: int, bly: int, en_x: int, en_y: int) -> bool:
    """Whether a bullet's centre point (blx, bly) lies inside an enemy's 16x16 cell."""
    return (
        blx >= en_x
        and ((en_x + BOX_SIZE) & 0xFF) >= blx
        and bly >= en_y
        and ((en_y + BOX_SIZE) & 0xFF) >= bly
    )


def sprite_position(
    en_x: int,
    en_y: int,
    cox: int = 0,
    coy: int = 0,
    viewport_x: int = 1,
    viewport_y: int = 2,
    pixelperfect: bool = True,
    gfx_mode: int = 0,
) -> tuple[int, int]:
    """Return the sprite's screen (cx, cy) for an enemy at pixel (en_x, en_y)."""
    cx = (en_x + viewport_x * 8 + cox) & 0xFF
    if pixelperfect:
        if gfx_mode == 0:
            cx >>= 1
    else:
        cx >>= 2
    cy = (en_y + viewport_y * 8 + coy) & 0xFF
    return cx, cy


@dataclass
class EnemyEngine:
    """Loads the enemies of a screen and keeps their animation state."""

    enemies: MutableSequence[Enemy]
    max_enems: int = MAX_ENEMS
    general_base: int = GENERAL_ENEMS_BASE_CELL
    respawn_on_enter: bool = True
    life_gauge: int | None = None
    enoffs: int = 0
    killed: int = 0
    anims: list[EnemyAnim] = field(init=False)

    def __post_init__(self) -> None:
        if self.max_enems <= 0:
            raise ValueError("max_enems must be positive")
        self.anims = [EnemyAnim() for _ in range(self.max_enems)]

    def load(self, n_pant: int) -> list[Enemy]:
        """Set up the enemies of screen ``n_pant``; return them in slot order."""
        start = n_pant * self.max_enems
        if n_pant < 0 or start + self.max_enems > len(self.enemies):
            raise IndexError(f"screen {n_pant} has no enemies in the data")
        self.enoffs = start
        on_screen = list(self.enemies[start:start + self.max_enems])
        for index, enemy in enumerate(on_screen):
            anim = EnemyAnim()
            if self.respawn_on_enter:
                enemy.t &= 0xFF & ~DEAD_BIT
                if self.life_gauge is not None:
                    enemy.life = self.life_gauge
            anim.base_frame = base_frame(enemy.t, self.general_base)
            anim.next_frame = None if anim.base_frame == NO_FRAME else anim.base_frame
            self.anims[index] = anim
        return on_screen

    def kill(self, enemy: Enemy) -> int:
        """Mark ``enemy`` as dead (pursuers excepted) and return the kill count."""
        if enemy.t != PURSUER_TYPE:
            enemy.t = (enemy.t | DEAD_BIT) & 0xFF
        self.killed = (self.killed + 1) & 0xFF
        return self.killed

    def animate(self, index: int) -> None:
        """Advance the walk animation of slot ``index``; it flips every fourth call."""
        anim = self.anims[index]
        if anim.base_frame == STILL_FRAME:
            return
        anim.count = (anim.count + 1) & 0xFF
        if anim.count != ANIM_PERIOD:
            return
        anim.count = 0
        anim.frame ^= 1
        anim.next_frame = (anim.base_frame + anim.frame) & 0xFF

    def tick_dying(self, index: int) -> bool:
        """Count down a dying enemy; return True once it has vanished this frame."""
        anim = self.anims[index]
        if anim.state != GENERAL_DYING:
            return False
        anim.count = (anim.count - 1) & 0xFF
        if anim.count:
            return False
        anim.state = IDLE
        anim.next_frame = None
        return True