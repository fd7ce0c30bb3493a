from checkdigit.normalizer import normalize, digits_to_string


def test_strips_separators():
    assert normalize("0-201-53992-6") == [0, 2, 0, 1, 5, 3, 9, 9, 2, 6]
    assert normalize("978 1 61262 294 1") == [9, 7, 8, 1, 6, 1, 2, 6, 2, 2, 9, 4, 1]

def test_drops_check_character_x():
    assert normalize("91-85668-01-X") == [9, 1, 8, 5, 6, 6, 8, 0, 1]

def test_no_digits_gives_empty_list():
    assert normalize("") == []
    assert normalize("ISBN --- ") == []
    assert normalize(None) == []

def test_non_ascii_digits_are_discarded():
    # Arabic-Indic and full-width digits are not ASCII decimal digits
    assert normalize("١٢٣4５6") == [4, 6]
    assert normalize("Ünïcödé 7") == [7]

def test_normalization_is_idempotent():
    raw = "ISBN: 978-0-06-280218-7 (paperback)"
    once = normalize(raw)
    assert normalize(digits_to_string(once)) == once
    assert digits_to_string(once) == "9780062802187"
