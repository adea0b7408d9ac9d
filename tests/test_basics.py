from crabdrill.drills.basics import (
    describe_ten,
    greeting,
    intro_text,
    is_even,
    ring,
    sale_price,
    shadowing_lines,
    square,
)


def test_intro_text_points_at_source():
    text = intro_text()
    assert text.startswith("Hello and")
    assert "exercises/00_intro/intro1.rs" in text
    assert text.endswith("before continuing.")


def test_greeting():
    assert greeting() == "Hello there!"


def test_describe_ten():
    assert describe_ten(10) == "x is ten!"
    assert describe_ten(9) == "x is not ten!"


def test_shadowing_lines():
    lines = shadowing_lines()
    assert len(lines) == 2
    assert lines[0] == "Spell a Number : T-H-R-E-E"
    assert lines[1].startswith("Number plus two is : ")


def test_ring_counts_calls():
    lines = ring(3)
    assert len(lines) == 3
    assert all(line.startswith("Ring! Call number ") for line in lines)
    assert lines[0].endswith(" 1")
    assert lines[-1].endswith(" 3")


def test_ring_zero_or_negative():
    assert ring(0) == []
    assert ring(-2) == []


def test_is_even():
    assert is_even(4) is True
    assert is_even(5) is False
    assert is_even(0) is True


def test_sale_price():
    assert sale_price(51) == 48
    assert sale_price(50) == 40


def test_square():
    assert square(3) == 9
    assert square(-7) == square(7)
    assert square(0) == 0