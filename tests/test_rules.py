import pytest

from falling_block_rl.game import ScoringRules


@pytest.mark.parametrize("lines", [0, 1, 2, 3, 4])
@pytest.mark.parametrize("level", [1, 2, 5])
def test_score_for_lines(lines, level):
    assert ScoringRules().score_for_lines(lines, level) == lines * lines * 100 * level


def test_level_formula_boundaries():
    rules = ScoringRules()
    assert rules.level_for_lines(0) == 1
    assert rules.level_for_lines(9) == 1
    assert rules.level_for_lines(10) == 2
    assert rules.level_for_lines(19) == 2
    assert rules.level_for_lines(20) == 3
    for total in range(200):
        assert rules.level_for_lines(total) == total // 10 + 1


def test_gravity_interval_speeds_up_with_floor():
    rules = ScoringRules()
    assert rules.gravity_interval_ms(1) == 800
    assert rules.gravity_interval_ms(2) == 720
    assert rules.gravity_interval_ms(9) == 160
    assert rules.gravity_interval_ms(10) == 100
    assert rules.gravity_interval_ms(30) == 100
