"""Tests for relevance scoring."""

from food_search.services.scoring import is_derivative, quality_adjustment, score_name
from tests.conftest import candidate


def test_score_is_deterministic() -> None:
    first = score_name("Rice, white, long-grain, regular, cooked", "rice")
    second = score_name("Rice, white, long-grain, regular, cooked", "rice")

    assert first == second


def test_exact_match_beats_partial_matches() -> None:
    exact = score_name("Rice, white", "Rice,  White ")
    partials = [
        score_name(name, "rice, white")
        for name in (
            "Rice, white, cooked",
            "Rice, white, long-grain, regular, cooked",
            "Rice, brown",
            "Flour, rice, white",
        )
    ]

    assert all(exact > partial for partial in partials)


def test_derivative_products_rank_below_plain_food() -> None:
    assert score_name("Rice flour", "rice") < score_name("Rice, white, cooked", "rice")
    assert score_name("Rice flour", "rice flour") > score_name(
        "Rice, white", "rice flour"
    )


def test_boiled_is_not_mistaken_for_oil() -> None:
    assert score_name("Rice, white, boiled", "rice") == score_name(
        "Rice, white, cooked", "rice"
    )


def test_position_bonus_prefers_leading_match() -> None:
    assert score_name("Rice, white", "rice") > score_name("Flour, rice, white", "rice")


def test_specificity_penalty() -> None:
    plain = score_name("Cereal, oats", "oats")
    infant = score_name("Cereal, oats, infant", "oats")

    assert plain - infant > 0


def test_cooked_preference_for_typically_cooked_foods() -> None:
    cooked = score_name("Chicken, breast, cooked", "chicken breast")
    raw = score_name("Chicken, breast, raw", "chicken breast")
    uncooked = score_name("Chicken, breast, uncooked", "chicken breast")

    assert cooked - raw == 60
    assert uncooked == raw


def test_cooked_preference_ignored_for_other_foods() -> None:
    assert score_name("Apple, raw", "apple") == score_name("Apple, gala", "apple")


def test_empty_query_still_scores() -> None:
    assert isinstance(score_name("Rice", ""), int)


def test_quality_adjustment() -> None:
    assert quality_adjustment(candidate("Granola bar", popular=True)) == 50
    assert quality_adjustment(candidate("Cola", protein_g=0, fat_g=0)) == 0
    assert quality_adjustment(candidate("x" * 61, popular=False)) == 0


def test_compound_derivatives_are_penalized() -> None:
    assert is_derivative("Applesauce, canned")
    assert is_derivative("Soymilk, original")
    assert is_derivative("Buttermilk, lowfat")
    assert not is_derivative("Rice, boil-in-bag")
    assert not is_derivative("Beef, broiled")
    assert score_name("Applesauce", "apple") < score_name("Apple, gala", "apple")


def test_hyphenated_and_parenthesized_preparation() -> None:
    plain = score_name("Egg, whole", "egg")

    assert score_name("Egg, whole, hard-boiled", "egg") > plain
    assert score_name("Egg (cooked)", "egg") > score_name("Egg (raw)", "egg")
