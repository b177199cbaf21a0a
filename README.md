# melo

An emulator for the Melo fantasy console's CPU. It is a small 8-bit
processor with sixteen byte registers. Registers 0–1 hold a 16-bit program
counter, 2–3 a 16-bit stack pointer, 4 the flags, and 5–7 the instruction
arguments. Registers 8–15 are general purpose.

## Installing

```
pip install .
```

## Running the demo

```
melo
```

This puts a short built-in program in a byte buffer. It then starts a CPU
whose registers are random, except that the program counter is zeroed and
the halt flag is cleared. Before each instruction the command prints the
register state and waits for a line of input. Press Enter to run the next
instruction. When the program sets the halt flag, the command prints the
final state and exits.

The command takes no options other than `--help`.

## Using the library

```python
from melo.cpu import MeloCpu
from melo.memory import Ram

ram = Ram(bytes([
    0x88, 0x86, 0x20,  # mov(r8, $20)
    0x88, 0x96, 0x69,  # mov(r9, $69)
    0x48, 0xA8,        # mov(r10, r8)
    0x5F, 0x01,        # clear(carry)
    0x54, 0xA9,        # add(r10, r9)
    0x5E, 0x40,        # set(halt)
]))

cpu = MeloCpu()
while not cpu.is_halted():
    cpu.tick(ram)
print(cpu)
print(cpu.registers[10])  # 0x89
```

### Instruction encoding

The opcode's two top bits give the number of argument bytes (0–3). Those
bytes are fetched into A0, A1 and A2. Bit 5 marks the instruction as
conditional: a conditional instruction runs only when the COND flag is set.
The low five bits select one of 32 operations.

Most operations split A0 into a destination nibble (high) and a source
nibble (low), and both name registers. Some operations use A0 whole, as a
flag mask:

- `any` and `all` set COND from the FLAG register.
- `set` and `clear` set or clear flags.

### Modules

- `melo.addressing`: `Addressable` is the bus interface. Subclasses supply
  `read_byte` and `write_byte`. In return they get `read_le_word`,
  `write_le_word`, `read_be_word` and `write_be_word`, whose second-byte
  address wraps at 16 bits. `ByteBus` wraps a caller-owned mutable byte
  sequence and writes straight into it. Reads outside the sequence return 0,
  and writes outside it are ignored.
- `melo.memory`: `Ram` is writable memory. Build it from bytes, or with
  `Ram.zero(size)` or `Ram.rand(size)`. `Rom` is read-only memory that
  ignores writes. Both expose a `data` property and `len()`. Reads past the
  end return 0.
- `melo.cpu`: `MeloCpu` has the following:
  - `MeloCpu()` and `MeloCpu.zero()` give all-zero registers.
  - `MeloCpu.rand()` gives random registers, then resets them.
  - `reset`, `halt`, `clear_halt` and `is_halted`.
  - `tick(bus)` runs one instruction and does nothing while halted.
  - `registers` is a snapshot of all sixteen registers.
  - `str(cpu)` shows the register state.

  `Reg` gives the register indices and `Flag` gives the flag bit masks.
- `melo.cli`: `main(argv=None)` is the demo that the `melo` command starts.

## What it does not do

Only the CPU and plain memory banks are emulated. There is no display,
sound, input device or memory map of a full console. There is no assembler,
and there is no way to load a program from a file. The `melo` command only
steps through its built-in demo.

## Testing

```
pip install .[test]
pytest
```