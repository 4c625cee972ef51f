import pytest

from pack_search.models import PackIntent
from pack_search.normalize import find_pack_phrase, interpret


def test_digit_pack_of_batteries():
    q = interpret("16 pack of AA batteries")
    assert q.pack_intent == PackIntent(present=True, quantity=16)
    assert q.api_query == "AA batteries"
    assert q.original_phrase == "16 pack of AA batteries"


def test_spelled_number_matches_digit_path():
    spelled = interpret("sixteen pack batteries")
    digits = interpret("16 pack batteries")
    assert spelled.pack_intent.quantity == 16
    assert spelled.api_query == digits.api_query == "batteries"


def test_bare_pack_size_falls_back_to_original():
    q = interpret("24 pack")
    assert not q.pack_intent.present
    assert q.pack_intent.quantity is None
    assert q.api_query == "24 pack"


def test_bare_pack_size_with_connectives_falls_back():
    q = interpret("a 24 pack of")
    assert not q.pack_intent.present
    assert q.api_query == "a 24 pack of"


def test_package_is_not_a_pack():
    q = interpret("package of cookies")
    assert not q.pack_intent.present
    assert q.api_query == "package of cookies"


def test_pack_word_inside_longer_token_after_digits():
    q = interpret("12 packages of tape")
    assert not q.pack_intent.present
    assert q.api_query == "12 packages of tape"


@pytest.mark.parametrize(
    "phrase",
    [
        "Paper Towels",
        "organic honey",
        "Wireless Mouse for Laptop",
        "",
    ],
)
def test_no_numbers_passes_through_unchanged(phrase):
    q = interpret(phrase)
    assert not q.pack_intent.present
    assert q.api_query == phrase


def test_no_pack_keeps_digits_and_words_as_is():
    # Model numbers and spelled numbers are not rewritten without a pack phrase.
    q = interpret("iPhone 15 case for two phones")
    assert not q.pack_intent.present
    assert q.api_query == "iPhone 15 case for two phones"


@pytest.mark.parametrize(
    "phrase, quantity, query",
    [
        ("24 ct paper plates", 24, "paper plates"),
        ("paper plates 24ct", 24, "paper plates"),
        ("trash bags 30 counts", 30, "trash bags"),
        ("12pk sparkling water", 12, "sparkling water"),
        ("6 pcs kitchen towels", 6, "kitchen towels"),
        ("3 pieces luggage set", 3, "luggage set"),
        ("4 units smart plug", 4, "smart plug"),
        ("dish sponges 8x", 8, "dish sponges"),
        ("Twelve Pack Of Soda", 12, "Soda"),
        ("a forty count box of gloves", 40, "box of gloves"),
        ("I need a 6 pack of socks", 6, "I need a socks"),
        ("vitamin a 100 count", 100, "vitamin a"),
        ("usb type a 3 pack cables", 3, "usb type a cables"),
        ("the 12 pack of soda", 12, "soda"),
        ("batteries, 16 pack", 16, "batteries"),
    ],
)
def test_pack_detection_table(phrase, quantity, query):
    q = interpret(phrase)
    assert q.pack_intent == PackIntent.of(quantity)
    assert q.api_query == query


def test_first_pack_phrase_wins():
    q = interpret("6 pack of 12 count juice boxes")
    assert q.pack_intent.quantity == 6
    assert q.api_query == "12 count juice boxes"


def test_case_insensitive_indicator():
    assert interpret("16 PACK AA BATTERIES").pack_intent.quantity == 16
    assert interpret("SIXTEEN pack aa batteries").pack_intent.quantity == 16


def test_zero_pack_is_ignored():
    q = interpret("0 pack batteries")
    assert not q.pack_intent.present
    assert q.api_query == "0 pack batteries"


def test_battery_hook_runs_on_bare_batteries():
    # The hook only fires when the base phrase is exactly "batteries".
    calls = []

    def spy(base, original):
        calls.append((base, original))
        return None

    q = interpret("sixteen pack batteries", hooks=(spy,))
    assert calls == [("batteries", "sixteen pack batteries")]
    assert q.api_query == "batteries"


def test_custom_hook_rewrites_base_phrase():
    def socks(base, original):
        return "crew socks" if base == "socks" else None

    q = interpret("6 pack of socks", hooks=(socks,))
    assert q.api_query == "crew socks"
    assert q.pack_intent.quantity == 6


def test_interpret_is_deterministic():
    assert interpret("sixteen pack of AA batteries") == interpret("sixteen pack of AA batteries")


def test_find_pack_phrase_requires_word_boundary():
    assert find_pack_phrase("16 package") is None
    assert find_pack_phrase("a16 pack") is None
    m = find_pack_phrase("16 packs")
    assert m is not None and m.group(1) == "16"


def test_overlong_digit_run_passes_through():
    phrase = "9" * 5000 + " pack batteries"
    q = interpret(phrase)
    assert not q.pack_intent.present
    assert q.api_query == phrase


def test_nine_digit_pack_size_is_accepted():
    assert interpret("123456789 pack stickers").pack_intent.quantity == 123456789
    assert not interpret("1234567890 pack stickers").pack_intent.present
