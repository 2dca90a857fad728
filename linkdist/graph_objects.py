from dataclasses import dataclass
from enum import IntEnum


class Orientation(IntEnum):
    HH = 0
    HT = 1
    TH = 2
    TT = 3

    @classmethod
    def from_heads(cls, head_a: bool, head_b: bool) -> 'Orientation':
        return cls(2 * (not head_a) + (not head_b))

    @property
    def heads(self):
        """(is_head, is_head) for the first and second contig"""
        return self in (Orientation.HH, Orientation.HT), self in (Orientation.HH, Orientation.TH)


@dataclass(frozen=True)
class ContigEnd:
    contig_id: str
    is_head: bool

    def other_end(self):
        return self.__class__(self.contig_id, not self.is_head)


@dataclass(frozen=True)
class ContigEndPair:
    end_a: ContigEnd
    end_b: ContigEnd

    @property
    def contig_pair(self):
        return self.end_a.contig_id, self.end_b.contig_id

    @property
    def orientation(self) -> Orientation:
        return Orientation.from_heads(self.end_a.is_head, self.end_b.is_head)

    def reverse(self):
        return self.__class__(self.end_b, self.end_a)

    def canonical(self):
        """The same pair with the lexicographically smaller contig id first"""
        if self.end_a.contig_id > self.end_b.contig_id:
            return self.reverse()
        return self

    @classmethod
    def from_orientation(cls, contig_pair, orientation: Orientation):
        head_a, head_b = orientation.heads
        return cls(ContigEnd(contig_pair[0], head_a), ContigEnd(contig_pair[1], head_b))
