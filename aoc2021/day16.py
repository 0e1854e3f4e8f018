"""Packet decoder: parse and evaluate a hierarchy of transmission packets."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

LITERAL = 4
_OPERATORS = {0: "+", 1: "*", 2: "min", 3: "max", 5: ">", 6: "<", 7: "=="}


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


@dataclass
class Packet:
    """A literal value or an operator applied to sub-packets."""

    version: int
    type_id: int
    value: int = 0
    children: list[Packet] = field(default_factory=list)

    @property
    def is_literal(self) -> bool:
        return self.type_id == LITERAL

    def version_sum(self) -> int:
        """Sum of the versions of this packet and all packets inside it."""
        return self.version + sum(child.version_sum() for child in self.children)

    def evaluate(self) -> int:
        """Compute the value the packet expression stands for."""
        if self.is_literal:
            return self.value
        values = [child.evaluate() for child in self.children]
        kind = self.type_id
        if kind == 0:
            return sum(values)
        if kind == 1:
            return math.prod(values)
        if kind in (2, 3):
            if not values:
                raise ValueError("min and max need at least one sub-packet")
            return min(values) if kind == 2 else max(values)
        if kind in (5, 6, 7):
            if len(values) != 2:
                raise ValueError("comparison packets need exactly two sub-packets")
            first, second = values
            if kind == 5:
                return int(first > second)
            if kind == 6:
                return int(first < second)
            return int(first == second)
        raise ValueError(f"unknown packet type {kind}")

    def _lines(self, indent: str) -> Iterator[str]:
        label = str(self.value) if self.is_literal else _OPERATORS.get(self.type_id, "?")
        yield indent + label
        for child in self.children:
            yield from child._lines(indent + "  ")

    def render(self) -> str:
        """Draw the expression tree, children indented under their operator."""
        return "\n".join(self._lines(""))


class _BitReader:
    def __init__(self, bits: str) -> None:
        self.bits = bits
        self.pos = 0

    def take(self, count: int) -> int:
        end = self.pos + count
        if end > len(self.bits):
            raise ValueError("packet is truncated")
        chunk = self.bits[self.pos : end]
        self.pos = end
        return int(chunk, 2)


def _read_packet(reader: _BitReader) -> Packet:
    version = reader.take(3)
    type_id = reader.take(3)
    packet = Packet(version, type_id)
    if type_id == LITERAL:
        while True:
            group = reader.take(5)
            packet.value = (packet.value << 4) | (group & 0b1111)
            if not group & 0b10000:
                break
    elif reader.take(1) == 0:
        length = reader.take(15)
        end = reader.pos + length
        while reader.pos < end:
            packet.children.append(_read_packet(reader))
        if reader.pos > end:
            raise ValueError("sub-packets overrun their declared length")
    else:
        for _ in range(reader.take(11)):
            packet.children.append(_read_packet(reader))
    return packet


def hex_to_bits(text: str) -> str:
    """Expand hexadecimal text into a string of binary digits."""
    return "".join(f"{int(ch, 16):04b}" for ch in text.strip())


def parse_packet(bits: str) -> Packet:
    """Parse the outermost packet of a binary string; trailing bits are ignored."""
    if not set(bits) <= {"0", "1"}:
        raise ValueError("bits must consist of 0 and 1 only")
    return _read_packet(_BitReader(bits))


def decode(text: str) -> Packet:
    """Parse a packet from its hexadecimal transmission."""
    return parse_packet(hex_to_bits(text))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day16", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    parser.add_argument("--tree", action="store_true", help="print the expression tree")
    args = parser.parse_args(argv)
    packet = decode(_read_text(args.input))
    if args.tree:
        print(packet.render())
    print(packet.version_sum())
    print(packet.evaluate())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())