"""Step through a small demonstration program, one instruction per line of input."""

from __future__ import annotations

import argparse
import sys

from melo.addressing import ByteBus
from melo.cpu import MeloCpu

DEMO_PROGRAM = bytes(
    [
        0x88, 0x86, 0x20,  # mov r8, $20
        0x88, 0x96, 0x69,  # mov r9, $69
        0x48, 0xA8,  # mov r10, r8
        0x5F, 0x01,  # clear carry
        0x54, 0xA9,  # add r10, r9
        0x5E, 0x40,  # set halt
    ]
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="melo",
        description="Run the demonstration program, pressing Enter to advance each step.",
    )
    parser.parse_args(argv)

    bus = ByteBus(bytearray(DEMO_PROGRAM))
    cpu = MeloCpu.rand()
    while not cpu.is_halted():
        print(cpu)
        cpu.tick(bus)
        sys.stdin.readline()
    print(cpu)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())