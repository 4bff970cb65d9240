from embedgen.embedding import compute_placeholder_embedding


def test_placeholder_length_matches_character_count():
    text = "Hola, mundo"
    vec = compute_placeholder_embedding(text)
    assert len(vec) == len(text)


def test_placeholder_divides_code_points_by_255():
    vec = compute_placeholder_embedding("A z")
    assert vec == [65 / 255, 32 / 255, 122 / 255]


def test_placeholder_values_stay_in_unit_interval():
    """
    Latin-1, CJK and astral characters all have to land in [0, 1];
    anything above code point 255 is clamped.
    """
    text = "ñé\x00\xff中文😀"
    vec = compute_placeholder_embedding(text)

    assert len(vec) == len(text)
    assert all(0.0 <= v <= 1.0 for v in vec)
    assert vec[2] == 0.0
    assert vec[3] == 1.0
    assert vec[-1] == 1.0


def test_placeholder_is_deterministic():
    assert compute_placeholder_embedding("same") == compute_placeholder_embedding("same")


def test_placeholder_empty_input_yields_empty_vector():
    assert compute_placeholder_embedding("") == []
