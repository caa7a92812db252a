# mk1tools

This package holds helpers for an Amstrad CPC side-scrolling platform game. It has two parts:

- **Tape blocks.** Functions that build TZX/CDT data blocks in the formats that the CPC and Spectrum firmware load.
- **Engine logic.** Plain-Python models of parts of the game engine: screen decoding, hotspots, locks, wall collisions, enemies, the script interpreter and fixed-point arithmetic.

## Installation

```
pip install .
```

To install with the test suite and run it:

```
pip install .[test]
pytest
```

## Tape blocks

`mk1tools.tzx` has the low-level pieces:

- `TZX_SIGNATURE` is the 10-byte signature at the start of a tape file.
- `open_tape(path, signature)` opens a tape file for writing. If the file already exists, it is opened for appending. If it does not exist, it is created and `signature` is written at its start. Failure raises `TapeError`.
- `u16le(value)` and `u24le(value)` return little-endian bytes.

`mk1tools.blocks` builds the blocks:

- `standard_block(data, flag, pause)` returns a standard-speed block (ID `0x10`). The block starts with `flag` and ends with an XOR checksum.
- `turbo_block(data, flag, pause, baud_pulse, pilot_pulses=4096, trailer=4)` returns a turbo-speed block (ID `0x11`) in CPC firmware format:
  - the data is split into 256-byte chunks;
  - each chunk is padded with zeros and followed by its CRC, high byte first;
  - the block ends with `trailer` bytes of `0xFF`.
- `amstrad_crc16(chunk)` returns the CRC-16 of one chunk of up to 256 bytes. Shorter chunks are padded with zeros.

Example:

```python
from mk1tools.blocks import turbo_block
from mk1tools.tzx import TZX_SIGNATURE, open_tape

data = open("game.bin", "rb").read()
with open_tape("game.cdt", TZX_SIGNATURE) as tape:
    tape.write(turbo_block(data, flag=0x16, pause=10240, baud_pulse=1167))
```

## Engine logic

| Module | Contents |
| --- | --- |
| `mk1tools.room` | Screen decoding and screen-level checks; see below. |
| `mk1tools.enemies` | Enemy data and the enemy engine; see below. |
| `mk1tools.script` | `ScriptRunner`, which walks compiled script bytecode. |
| `mk1tools.fixedpoint` | Fixed-point and small arithmetic helpers; see below. |

### `mk1tools.room`

- `decode_packed_screen` and `decode_unpacked_screen` turn map data into `ScreenBuffers`, which hold the 150 tile numbers and tile behaviours of one screen.
- `tile_positions` yields the character position at which each tile is drawn.
- `hotspot_tile` resolves a `Hotspot` to its position and the tile to draw.
- `clear_lock` and `open_locks_for` handle `Lock` entries.
- `player_hidden` checks whether the player is on a hiding tile.
- `wall_collision_x` and `wall_collision_y` check enemy collisions with walls.

### `mk1tools.enemies`

- `Enemy` and `EnemyAnim` hold an enemy's data and its animation state.
- `base_frame` and `enems_init` set sprite cells and bring enemies back to life.
- `pregotten` and `bullet_hits` are the overlap tests.
- `sprite_position` computes screen sprite coordinates.
- `EnemyEngine` loads a screen's enemies (`load`), kills them (`kill`), animates them (`animate`) and counts down dying enemies (`tick_dying`).

### `mk1tools.script`

`ScriptRunner.run_script(which)` runs one script from the level's script table. It returns how many clauses had their actions run.

The runner knows a single condition opcode: `0xFF`, which ends a clause's condition list. It also provides the readers `read_byte`, `read_vbyte`, `read_xy` and `read_flag_pair`. A byte with bit 7 set refers to a flag.

### `mk1tools.fixedpoint`

- `hl_shr6`, `a_shl6` and `with_sign` are 6-bit fixed-point shifts.
- `black_colour_byte` returns the screen byte for a solid pen.
- `sprite_layout` lays out the software sprite pool.
- `addsign`, `limit` and `distance` are small arithmetic helpers.

## What this package does not do

The package has no command-line tools. It does not provide:

- conversion of whole files to tapes, including detection of AMSDOS or PLUS3DOS headers;
- the compact "tiny tape" pulse encodings;
- building SNA memory snapshots;
- the game's level table, configuration or item and level-change rules.

To make a tape, build its blocks with `mk1tools.blocks` and write them with `mk1tools.tzx.open_tape`.