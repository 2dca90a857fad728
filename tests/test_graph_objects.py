import pytest

from linkdist.graph_objects import ContigEnd, ContigEndPair, Orientation


@pytest.mark.parametrize('head_a, head_b, orientation', [(True, True, Orientation.HH),
                                                         (True, False, Orientation.HT),
                                                         (False, True, Orientation.TH),
                                                         (False, False, Orientation.TT)])
def test_orientation_from_heads(head_a, head_b, orientation):
    assert Orientation.from_heads(head_a, head_b) == orientation
    assert orientation.heads == (head_a, head_b)


def test_canonical():
    pair = ContigEndPair(ContigEnd('B', False), ContigEnd('A', True))
    canonical = pair.canonical()
    assert canonical == ContigEndPair(ContigEnd('A', True), ContigEnd('B', False))
    assert canonical.orientation == Orientation.HT
    assert canonical.canonical() == canonical


def test_from_orientation():
    pair = ContigEndPair.from_orientation(('A', 'B'), Orientation.TH)
    assert pair == ContigEndPair(ContigEnd('A', False), ContigEnd('B', True))


def test_other_end():
    assert ContigEnd('A', True).other_end() == ContigEnd('A', False)

