import pytest

from handrank.cards import WILDCARD, Real
from handrank.evaluator import categorize, compare_hands, group_values, hand_groups, hand_strength
from handrank.models import Category

from .helpers import hand


def test_categorize_identifies_all_categories():
    cases = [
        (Category.FIVE_OF_A_KIND, "AAAAA"),
        (Category.FOUR_OF_A_KIND, "AA8AA"),
        (Category.FULL_HOUSE, "23332"),
        (Category.THREE_OF_A_KIND, "TTT98"),
        (Category.TWO_PAIR, "23432"),
        (Category.ONE_PAIR, "A23A4"),
        (Category.HIGH_CARD, "23456"),
    ]

    for expected, label in cases:
        assert categorize(hand(label)) == expected, f"hand={label}"


def test_category_order_is_weakest_to_strongest():
    assert list(Category) == sorted(Category)
    assert Category.HIGH_CARD < Category.ONE_PAIR < Category.FIVE_OF_A_KIND
    assert Category.FULL_HOUSE.label == "full_house"


@pytest.mark.parametrize(
    "label, expected",
    [
        ("QJJQ2", Category.FOUR_OF_A_KIND),
        ("JJJJJ", Category.FIVE_OF_A_KIND),
        ("23456", Category.HIGH_CARD),
        ("T55J5", Category.FOUR_OF_A_KIND),
        ("KTJJT", Category.FOUR_OF_A_KIND),
        ("QQQJA", Category.FOUR_OF_A_KIND),
        ("2345J", Category.ONE_PAIR),
        ("2233J", Category.FULL_HOUSE),
        ("J2J3J", Category.FOUR_OF_A_KIND),
        ("JJJJ2", Category.FIVE_OF_A_KIND),
    ],
)
def test_wildcard_categories(label, expected):
    assert categorize(hand(label), wildcard=True) == expected


def test_jacks_are_plain_cards_without_wildcard_mode():
    assert categorize(hand("QJJQ2")) == Category.TWO_PAIR
    assert categorize(hand("JJJJJ")) == Category.FIVE_OF_A_KIND
    assert categorize(hand("KTJJT")) == Category.TWO_PAIR


def test_group_values_orders_by_count_then_value():
    groups = group_values([Real(3), Real(13), Real(3), Real(13), Real(2)])
    assert groups == [(Real(13), 2), (Real(3), 2), (Real(2), 1)]


def test_group_values_drops_wildcard_when_real_cards_exist():
    groups = group_values([WILDCARD, WILDCARD, Real(12), Real(12), Real(2)])
    assert groups == [(Real(12), 2), (Real(2), 1)]
    assert group_values([WILDCARD] * 5) == [(WILDCARD, 5)]


def test_wildcards_join_highest_value_on_count_tie():
    # K and 3 both appear twice; the joker sides with the kings.
    assert hand_groups(hand("K3K3J"), wildcard=True) == [(Real(13), 3), (Real(3), 2)]


def test_tiebreak_uses_dealt_order_not_sorted_order():
    assert compare_hands(hand("33332"), hand("2AAAA")) > 0
    assert compare_hands(hand("77888"), hand("77788")) > 0
    assert compare_hands(hand("KK677"), hand("KTJJT")) > 0


def test_wildcard_is_weakest_in_tiebreak():
    # Both are four of a kind under wildcards; J loses the first-card comparison to 2.
    assert compare_hands(hand("JKKK2"), hand("QQQQ2"), wildcard=True) < 0
    assert compare_hands(hand("J2222"), hand("2J222"), wildcard=True) < 0
    assert compare_hands(hand("JJJJJ"), hand("22222"), wildcard=True) < 0
    assert compare_hands(hand("JJJJJ"), hand("22222")) > 0


def test_category_beats_card_values():
    assert compare_hands(hand("22223"), hand("AAAKK")) > 0
    assert compare_hands(hand("AAAA2"), hand("23456")) > 0
    assert compare_hands(hand("23456"), hand("AKQT9")) < 0


def test_identical_hands_compare_equal():
    assert compare_hands(hand("T55J5"), hand("T55J5")) == 0
    assert compare_hands(hand("T55J5"), hand("T55J5"), wildcard=True) == 0


def test_hand_strength_starts_with_category():
    category, tiebreak = hand_strength(hand("QJJQ2"), wildcard=True)
    assert category == Category.FOUR_OF_A_KIND
    assert tiebreak[1] == WILDCARD.order_key
    assert len(tiebreak) == 5
