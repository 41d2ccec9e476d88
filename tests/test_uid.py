from eits.uid import UIDGenerator, global_uid_generator


def test_monotonic_increase():
    gen = UIDGenerator(1)
    prev = gen.next()
    for _ in range(1000):
        nxt = gen.next()
        assert nxt > prev
        prev = nxt


def test_no_duplicates():
    gen = UIDGenerator(2)
    ids = set()
    for _ in range(4096):
        uid = gen.next()
        assert uid not in ids
        ids.add(uid)
    assert len(ids) == 4096


def test_machine_id_encoding():
    gen = UIDGenerator(0x123)
    uid = gen.next()
    assert (uid >> 12) & 0x3FF == 0x123 & 0x3FF


def test_machine_id_is_masked():
    gen = UIDGenerator(0x7FF)
    assert gen.machine_id == 0x3FF
    assert (gen.next() >> 12) & 0x3FF == 0x3FF


def test_next_hex_format():
    text = UIDGenerator(5).next_hex()
    assert text.startswith("0x")
    digits = text[2:]
    assert digits == digits.upper()
    assert (int(digits, 16) >> 12) & 0x3FF == 5


def test_global_generator_increases():
    first = int(global_uid_generator.next_hex(), 16)
    second = int(global_uid_generator.next_hex(), 16)
    assert second > first