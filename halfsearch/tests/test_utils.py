from halfsearch.utils import ProbeCounter


def test_probe_counter_records_reads():
    seq = ProbeCounter([3, 6, 9])
    assert len(seq) == 3
    assert seq[2] == 9
    assert seq[0] == 3
    assert seq.indices == [2, 0]
    assert seq.probes == 2


def test_probe_counter_slices_not_counted():
    seq = ProbeCounter([3, 6, 9])
    assert seq[1:] == [6, 9]
    assert seq.probes == 0


def test_probe_counter_reset():
    seq = ProbeCounter([1])
    seq[0]
    seq.reset()
    assert seq.indices == []
